"""
Snapshot directory backend.

Loads the RBAC configuration exported from a CI server into a JSON document:

    {
      "root_label": "<root>",
      "roles": {"Admin": [{"category": "Overall", "name": "Administer"}]},
      "contexts": {
        "": {"groups": [{"name": "admins", "members": ["alice"],
                         "groups": ["ops"], "roles": ["Admin"]}]},
        "team-a/deploy": null
      }
    }

A context mapped to ``null`` exists but has no group container. A group
without a ``members`` key has no member capability. Malformed entries are
logged and skipped.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from ..core.exceptions import SnapshotError
from ..core.types import Group, GroupContainer, PermissionDescriptor
from .base import DEFAULT_ITEM_SEPARATOR, DEFAULT_ROOT_LABEL
from .memory import InMemoryDirectory

logger = logging.getLogger(__name__)


class SnapshotDirectory(InMemoryDirectory):
    """Directory backed by a JSON snapshot."""

    source: Optional[str] = None

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        root_label: Optional[str] = None,
        separator: str = DEFAULT_ITEM_SEPARATOR,
    ) -> "SnapshotDirectory":
        snapshot_path = Path(path)
        try:
            content = snapshot_path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            raise SnapshotError(
                f"Could not read snapshot {snapshot_path}: {exc}", str(snapshot_path)
            ) from exc
        if not content:
            raise SnapshotError(f"Snapshot {snapshot_path} is empty", str(snapshot_path))
        try:
            payload = json.loads(content)
        except json.JSONDecodeError as exc:
            raise SnapshotError(
                f"Invalid JSON in snapshot {snapshot_path}: {exc}", str(snapshot_path)
            ) from exc

        directory = cls.from_dict(
            payload, root_label=root_label, separator=separator, source=str(snapshot_path)
        )
        return directory

    @classmethod
    def from_dict(
        cls,
        payload: Any,
        root_label: Optional[str] = None,
        separator: str = DEFAULT_ITEM_SEPARATOR,
        source: Optional[str] = None,
    ) -> "SnapshotDirectory":
        origin = source or "<snapshot>"
        if not isinstance(payload, dict):
            raise SnapshotError(f"Snapshot {origin} must be a JSON object", source)

        label = root_label or str(payload.get("root_label") or DEFAULT_ROOT_LABEL)
        directory = cls(root_label=label, separator=separator)
        directory.source = source

        for name, permissions in _extract_roles(payload.get("roles"), origin).items():
            directory.add_role(name, permissions)

        contexts = payload.get("contexts") or {}
        if not isinstance(contexts, dict):
            raise SnapshotError(f"Snapshot {origin} must map 'contexts' to an object", source)
        for path, entry in contexts.items():
            directory.add_context(path, _build_container(entry, path, origin))

        logger.debug(
            "Loaded snapshot %s: %d context(s), %d role(s)",
            origin,
            len(directory.item_paths),
            len(directory.role_names),
        )
        return directory


def _extract_roles(value: Any, origin: str) -> dict[str, list[PermissionDescriptor]]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.warning("Snapshot %s must map 'roles' to an object", origin)
        return {}
    roles: dict[str, list[PermissionDescriptor]] = {}
    for name, entries in value.items():
        if not isinstance(entries, list):
            logger.warning("Role '%s' in %s must define a list of permissions", name, origin)
            continue
        permissions = []
        for entry in entries:
            permission = _build_permission(entry)
            if permission is None:
                logger.warning("Invalid permission for role '%s' in %s: %r", name, origin, entry)
                continue
            permissions.append(permission)
        roles[str(name)] = permissions
    return roles


def _build_permission(entry: Any) -> Optional[PermissionDescriptor]:
    if isinstance(entry, dict):
        category = entry.get("category")
        name = entry.get("name")
    elif isinstance(entry, str) and "/" in entry:
        # "Job / Read" shorthand
        category, _, name = entry.partition("/")
    else:
        return None
    if not category or not name:
        return None
    return PermissionDescriptor(category=str(category).strip(), name=str(name).strip())


def _build_container(entry: Any, path: str, origin: str) -> Optional[GroupContainer]:
    if entry is None:
        return None
    if isinstance(entry, dict):
        groups = entry.get("groups")
    else:
        groups = entry
    if groups is None:
        return None
    if not isinstance(groups, list):
        logger.warning("Context '%s' in %s must define a list of groups", path, origin)
        return None

    built = []
    for group_data in groups:
        group = _build_group(group_data, path, origin)
        if group is not None:
            built.append(group)
    return GroupContainer(built)


def _build_group(group_data: Any, path: str, origin: str) -> Optional[Group]:
    if not isinstance(group_data, dict):
        logger.warning("Group entry at '%s' in %s must be an object", path, origin)
        return None
    name = group_data.get("name")
    if not name or not isinstance(name, str):
        logger.warning("Group entry missing name at '%s' in %s", path, origin)
        return None

    members = group_data.get("members")
    return Group(
        name=name,
        members=None if members is None else frozenset(_coerce_list(members)),
        groups=tuple(_coerce_list(group_data.get("groups"))),
        roles=tuple(_coerce_list(group_data.get("roles"))),
    )


def _coerce_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


__all__ = ["SnapshotDirectory"]
