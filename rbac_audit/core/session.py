"""
AuditSession - state owned by a single scan.

The session holds the dedup keys, the permission cache and the records
collected so far. One session spans every context of a scan, so a grant
found at two levels is still collapsed by its (role, context, group) key,
and a role resolved once is never looked up again.
"""

import logging
from typing import Optional

from .ancestry import build_parent_map, expand_ancestry_paths
from .collector import DEFAULT_PATH_SEPARATOR, collect_role_hits
from .resolver import PermissionLookup, PermissionResolver
from .types import AuditOutcome, GrantKey, GroupContainer, RoleAssignment, RoleHit

logger = logging.getLogger(__name__)


class AuditSession:
    """Accumulates role assignments for one user across one or more containers."""

    def __init__(
        self,
        username: str,
        lookup: PermissionLookup,
        path_separator: str = DEFAULT_PATH_SEPARATOR,
    ):
        self.username = username
        self.path_separator = path_separator
        self.resolver = PermissionResolver(lookup)
        self.seen_keys: set[GrantKey] = set()
        self.records: list[RoleAssignment] = []
        self._attributed_roles: set[str] = set()
        self._direct_group_count = 0

    def scan_container(
        self, container: GroupContainer, context_label: str
    ) -> list[RoleAssignment]:
        """
        Audit one group container and add its records to the session.

        Returns:
            The records contributed by this container
        """
        direct_groups = container.direct_groups_for(self.username)
        if not direct_groups:
            logger.debug(
                "User '%s' is not a direct member of any group at '%s'",
                self.username,
                context_label,
            )
            return []
        self._direct_group_count += len(direct_groups)

        paths = expand_ancestry_paths(
            [group.name for group in direct_groups], build_parent_map(container)
        )
        hits = collect_role_hits(
            paths,
            context_label,
            container.groups_by_name(),
            self.seen_keys,
            path_separator=self.path_separator,
        )

        added = []
        for hit in hits:
            record = self._attribute(hit)
            if record is not None:
                added.append(record)
        self.records.extend(added)
        logger.debug(
            "Context '%s': %d path(s), %d hit(s), %d new record(s)",
            context_label,
            len(paths),
            len(hits),
            len(added),
        )
        return added

    def _attribute(self, hit: RoleHit) -> Optional[RoleAssignment]:
        # first context/group to reach a role keeps it
        if hit.role_name in self._attributed_roles:
            return None
        permissions = self.resolver.resolve(hit.role_name)
        if permissions is None:
            return None
        self._attributed_roles.add(hit.role_name)
        return RoleAssignment.from_hit(hit, permissions)

    @property
    def failures(self):
        return self.resolver.failures

    @property
    def outcome(self) -> AuditOutcome:
        if self.records:
            return AuditOutcome.FOUND
        if self._direct_group_count == 0:
            return AuditOutcome.NO_GROUPS
        return AuditOutcome.NO_ROLES


__all__ = ["AuditSession"]
