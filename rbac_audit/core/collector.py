"""
Role collection along ancestry paths.
"""

import logging
from typing import Iterable, Mapping, MutableSet

from .types import AncestryPath, GrantKey, Group, RoleHit, dedup_key

logger = logging.getLogger(__name__)

DEFAULT_PATH_SEPARATOR = " → "


def format_path(path: AncestryPath, separator: str = DEFAULT_PATH_SEPARATOR) -> str:
    """Render a path top ancestor first, direct group last."""
    return separator.join(reversed(path))


def collect_role_hits(
    paths: Iterable[AncestryPath],
    context_label: str,
    groups_by_name: Mapping[str, Group],
    seen_keys: MutableSet[GrantKey],
    path_separator: str = DEFAULT_PATH_SEPARATOR,
) -> list[RoleHit]:
    """
    Collect the roles attached to every group on every path.

    Each path is walked from its topmost ancestor down to the direct group.
    A role is emitted once per (role, context, group); ``seen_keys`` is
    updated in place and is meant to be shared by a whole scan.
    """
    hits: list[RoleHit] = []
    for path in paths:
        display = format_path(path, path_separator)
        for group_name in reversed(path):
            group = groups_by_name.get(group_name)
            if group is None:
                logger.debug(
                    "Group '%s' referenced at '%s' is not defined", group_name, context_label
                )
                continue
            for role_name in group.roles:
                key = dedup_key(role_name, context_label, group_name)
                if key in seen_keys:
                    continue
                seen_keys.add(key)
                hits.append(
                    RoleHit(
                        role_name=role_name,
                        group_name=group_name,
                        path=path,
                        path_display=display,
                        context_label=context_label,
                    )
                )
    return hits


__all__ = ["collect_role_hits", "format_path", "DEFAULT_PATH_SEPARATOR"]
