"""
rbac-audit: trace a user's effective RBAC roles and permissions on an item,
following group nesting and every inherited context up to the root.

Quick Start:
    >>> from rbac_audit import audit_user_roles, SnapshotDirectory
    >>>
    >>> directory = SnapshotDirectory.from_file("rbac-snapshot.json")
    >>> for record in audit_user_roles("alice", "team-a/deploy", directory):
    ...     print(record.role_name, record.path_display, record.context_label)
"""

from .core import (
    AuditOutcome,
    AuditSession,
    Context,
    ContextNotFound,
    Group,
    GroupContainer,
    GroupContainerUnavailable,
    PermissionDescriptor,
    RbacAuditError,
    Role,
    RoleAssignment,
    RoleNotFound,
    RoleResolutionFailed,
    SnapshotError,
    audit_container_roles,
    audit_root_roles,
    audit_user_roles,
    run_root_audit,
    run_user_audit,
)
from .defaults import LIBRARY_VERSION as __version__
from .directory import DirectoryBackend, InMemoryDirectory, SnapshotDirectory

__all__ = [
    "__version__",
    "AuditOutcome",
    "AuditSession",
    "Context",
    "Group",
    "GroupContainer",
    "PermissionDescriptor",
    "Role",
    "RoleAssignment",
    "RbacAuditError",
    "ContextNotFound",
    "GroupContainerUnavailable",
    "RoleNotFound",
    "RoleResolutionFailed",
    "SnapshotError",
    "audit_user_roles",
    "audit_root_roles",
    "audit_container_roles",
    "run_user_audit",
    "run_root_audit",
    "DirectoryBackend",
    "InMemoryDirectory",
    "SnapshotDirectory",
]
