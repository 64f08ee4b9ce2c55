"""
Context walker.

Drives an AuditSession from an item up through every enclosing folder to the
root, and provides the root-only check over a single container.
"""

import logging
from typing import TYPE_CHECKING, Optional, Union

from .collector import DEFAULT_PATH_SEPARATOR
from .exceptions import ContextNotFound, GroupContainerUnavailable
from .session import AuditSession
from .types import AuditOutcome, Context, GroupContainer, RoleAssignment

if TYPE_CHECKING:
    from ..directory.base import DirectoryBackend

logger = logging.getLogger(__name__)


def run_user_audit(
    username: str,
    start_context: Union[str, Context, None],
    directory: "DirectoryBackend",
    path_separator: str = DEFAULT_PATH_SEPARATOR,
) -> AuditSession:
    """
    Walk from ``start_context`` to the root and return the finished session.

    Raises:
        ContextNotFound: If the start item does not exist
    """
    context = _resolve_start(start_context, directory)
    session = AuditSession(username, directory.resolve_permissions, path_separator)

    current: Optional[Context] = context
    while current is not None:
        container = _fetch_container(directory, current)
        if container is None:
            logger.warning("No group container found at '%s'", current.label)
        else:
            session.scan_container(container, current.label)
        if current.is_root:
            break
        current = directory.get_parent_context(current)

    _log_outcome(session, context.label)
    return session


def audit_user_roles(
    username: str,
    start_context: Union[str, Context, None],
    directory: "DirectoryBackend",
    path_separator: str = DEFAULT_PATH_SEPARATOR,
) -> list[RoleAssignment]:
    """
    Audit the roles ``username`` holds on an item, including inherited scopes.

    Args:
        username: User to audit
        start_context: Item path (``"/"`` or ``""`` for the root) or a Context
        directory: Directory backend supplying containers and roles
        path_separator: Separator used for the displayed group path

    Returns:
        One RoleAssignment per role, in discovery order
    """
    return list(run_user_audit(username, start_context, directory, path_separator).records)


def audit_container_roles(
    username: str,
    container: GroupContainer,
    context_label: str,
    directory: "DirectoryBackend",
    path_separator: str = DEFAULT_PATH_SEPARATOR,
) -> AuditSession:
    """Audit a single flat group container without walking the hierarchy."""
    session = AuditSession(username, directory.resolve_permissions, path_separator)
    session.scan_container(container, context_label)
    _log_outcome(session, context_label)
    return session


def run_root_audit(
    username: str,
    directory: "DirectoryBackend",
    path_separator: str = DEFAULT_PATH_SEPARATOR,
) -> AuditSession:
    """Run the root-only check and return the finished session."""
    root = directory.get_root_context()
    container = _fetch_container(directory, root)
    if container is None:
        logger.warning("No group container found at '%s'", root.label)
        container = GroupContainer()
    return audit_container_roles(username, container, root.label, directory, path_separator)


def audit_root_roles(
    username: str,
    directory: "DirectoryBackend",
    path_separator: str = DEFAULT_PATH_SEPARATOR,
) -> list[RoleAssignment]:
    """Audit the roles ``username`` holds through the root container only."""
    return list(run_root_audit(username, directory, path_separator).records)


def _resolve_start(
    start_context: Union[str, Context, None], directory: "DirectoryBackend"
) -> Context:
    if isinstance(start_context, Context):
        return start_context
    context = directory.get_context(start_context)
    if context is None:
        raise ContextNotFound(str(start_context))
    return context


def _fetch_container(
    directory: "DirectoryBackend", context: Context
) -> Optional[GroupContainer]:
    try:
        return directory.get_group_container(context)
    except GroupContainerUnavailable as exc:
        logger.debug("%s", exc)
        return None


def _log_outcome(session: AuditSession, scope_label: str) -> None:
    outcome = session.outcome
    if outcome is AuditOutcome.NO_GROUPS:
        logger.info(
            "User '%s' is not a member of any configured group in '%s'",
            session.username,
            scope_label,
        )
    elif outcome is AuditOutcome.NO_ROLES:
        logger.info(
            "No roles found for user '%s' in '%s' or inherited contexts",
            session.username,
            scope_label,
        )
    else:
        logger.info(
            "Found %d role(s) for user '%s' in '%s'",
            len(session.records),
            session.username,
            scope_label,
        )


__all__ = [
    "run_user_audit",
    "audit_user_roles",
    "audit_container_roles",
    "run_root_audit",
    "audit_root_roles",
]
