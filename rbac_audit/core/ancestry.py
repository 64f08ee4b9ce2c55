"""
Group ancestry expansion.

A group that lists another group among its nested groups is that group's
parent. Starting from the groups a user belongs to directly, every simple path
up to a topmost ancestor is enumerated.
"""

import logging
from typing import Iterable, Mapping

from .types import AncestryPath, Group

logger = logging.getLogger(__name__)


def build_parent_map(groups: Iterable[Group]) -> dict[str, list[str]]:
    """Map each nested group name to the names of the groups containing it."""
    parents: dict[str, list[str]] = {}
    for group in groups:
        for nested in group.groups:
            owners = parents.setdefault(nested, [])
            if group.name not in owners:
                owners.append(group.name)
    return parents


def expand_ancestry_paths(
    start_groups: Iterable[str], parents_of: Mapping[str, Iterable[str]]
) -> list[AncestryPath]:
    """
    Enumerate the simple paths from each start group up to its ancestors.

    Paths are tuples ordered from the start group to the topmost ancestor. A
    parent already present in a path is never appended again, so cycles in
    ``parents_of`` end the path instead of looping; only cycle-free chains are
    reported.

    Args:
        start_groups: Names of the groups the user is a direct member of
        parents_of: Group name to parent group names

    Returns:
        Completed paths, in start-group order then parent declaration order
    """
    results: list[AncestryPath] = []
    seen: set[AncestryPath] = set()

    for start in start_groups:
        stack: list[AncestryPath] = [(start,)]
        while stack:
            path = stack.pop()
            unvisited = [
                parent for parent in parents_of.get(path[-1], ()) if parent not in path
            ]
            if not unvisited:
                if path not in seen:
                    seen.add(path)
                    results.append(path)
                continue
            # reversed so the first declared parent is popped first
            for parent in reversed(unvisited):
                stack.append(path + (parent,))

    logger.debug("Expanded %d ancestry path(s)", len(results))
    return results


__all__ = ["build_parent_map", "expand_ancestry_paths"]
