"""
Host-independent RBAC audit engine.

Exports:
    - expand_ancestry_paths / build_parent_map: group ancestry expansion
    - collect_role_hits: role collection with (role, context, group) dedup
    - PermissionResolver: memoized role-to-permission resolution
    - AuditSession: state owned by one scan
    - audit_user_roles / audit_root_roles: scan entry points
"""

from .types import (
    AncestryPath,
    AuditOutcome,
    GrantKey,
    Context,
    Group,
    GroupContainer,
    PermissionDescriptor,
    Role,
    RoleAssignment,
    RoleHit,
    dedup_key,
)
from .exceptions import (
    ContextNotFound,
    GroupContainerUnavailable,
    RbacAuditError,
    RoleNotFound,
    RoleResolutionFailed,
    SnapshotError,
)
from .ancestry import build_parent_map, expand_ancestry_paths
from .collector import collect_role_hits, format_path
from .resolver import PermissionResolver
from .session import AuditSession
from .walker import (
    audit_container_roles,
    audit_root_roles,
    audit_user_roles,
    run_root_audit,
    run_user_audit,
)

__all__ = [
    # Types
    "AncestryPath",
    "AuditOutcome",
    "GrantKey",
    "Context",
    "Group",
    "GroupContainer",
    "PermissionDescriptor",
    "Role",
    "RoleAssignment",
    "RoleHit",
    "dedup_key",
    # Exceptions
    "RbacAuditError",
    "ContextNotFound",
    "GroupContainerUnavailable",
    "RoleNotFound",
    "RoleResolutionFailed",
    "SnapshotError",
    # Engine
    "build_parent_map",
    "expand_ancestry_paths",
    "collect_role_hits",
    "format_path",
    "PermissionResolver",
    "AuditSession",
    "run_user_audit",
    "run_root_audit",
    "audit_user_roles",
    "audit_container_roles",
    "audit_root_roles",
]
