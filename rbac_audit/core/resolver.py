"""
Role-to-permission resolution with per-scan memoization.
"""

import logging
from typing import Callable, Iterable, Optional

from .exceptions import RoleResolutionFailed
from .types import PermissionDescriptor

logger = logging.getLogger(__name__)

PermissionLookup = Callable[[str], Iterable[PermissionDescriptor]]


class PermissionResolver:
    """
    Resolves role names to permission tuples, at most once per role name.

    A lookup that raises is recorded as a RoleResolutionFailed, logged once
    and remembered, so a broken role never aborts a scan and is never looked
    up twice.
    """

    def __init__(self, lookup: PermissionLookup):
        self._lookup = lookup
        self._cache: dict[str, tuple[PermissionDescriptor, ...]] = {}
        self._failures: dict[str, RoleResolutionFailed] = {}

    def resolve(self, role_name: str) -> Optional[tuple[PermissionDescriptor, ...]]:
        """Return the role's permissions, or None if the role cannot be resolved."""
        if role_name in self._cache:
            return self._cache[role_name]
        if role_name in self._failures:
            return None

        try:
            permissions = tuple(self._lookup(role_name))
        except Exception as exc:
            failure = RoleResolutionFailed(role_name, exc)
            self._failures[role_name] = failure
            logger.warning("%s", failure)
            return None

        self._cache[role_name] = permissions
        return permissions

    @property
    def failures(self) -> dict[str, RoleResolutionFailed]:
        return dict(self._failures)

    def is_resolved(self, role_name: str) -> bool:
        return role_name in self._cache


__all__ = ["PermissionResolver", "PermissionLookup"]
