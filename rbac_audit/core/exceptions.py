"""
Custom exceptions for the RBAC audit engine.

Only ContextNotFound aborts a scan. The other errors are recovered where they
occur (per context level, per role) and logged.
"""

from typing import Optional


class RbacAuditError(Exception):
    """Base exception for RBAC audit errors."""


class ContextNotFound(RbacAuditError):
    """Raised when the item a scan starts from does not exist."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"Item not found: '{path}'")


class GroupContainerUnavailable(RbacAuditError):
    """Raised when a context has no resolvable group container."""

    def __init__(self, context_label: str, message: Optional[str] = None):
        self.context_label = context_label
        super().__init__(message or f"No group container found at '{context_label}'")


class RoleNotFound(RbacAuditError):
    """Raised by a directory when a role name does not resolve."""

    def __init__(self, role_name: str, message: Optional[str] = None):
        self.role_name = role_name
        super().__init__(message or f"Role not found: '{role_name}'")


class RoleResolutionFailed(RbacAuditError):
    """Records that a role could not be resolved to its permissions."""

    def __init__(self, role_name: str, cause: Optional[BaseException] = None):
        self.role_name = role_name
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Could not resolve role '{role_name}'{detail}")


class SnapshotError(RbacAuditError):
    """Raised when a directory snapshot cannot be read or parsed."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        super().__init__(message)


__all__ = [
    "RbacAuditError",
    "ContextNotFound",
    "GroupContainerUnavailable",
    "RoleNotFound",
    "RoleResolutionFailed",
    "SnapshotError",
]
