"""
Directory backend contract.

A directory is the external collaborator that knows the item hierarchy, the
group container configured at each level and the permissions of each role.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..core.types import Context, Group, GroupContainer, PermissionDescriptor

ROOT_PATH = ""
DEFAULT_ROOT_LABEL = "<root>"
DEFAULT_ITEM_SEPARATOR = "/"


def normalize_item_path(path: Optional[str], separator: str = DEFAULT_ITEM_SEPARATOR) -> str:
    """Strip surrounding separators and blanks. ``None``, ``""`` and ``"/"`` are the root."""
    if not path:
        return ROOT_PATH
    parts = [part.strip() for part in str(path).split(separator)]
    return separator.join(part for part in parts if part)


class DirectoryBackend(ABC):
    """Read-only view over an item hierarchy and its RBAC configuration."""

    @abstractmethod
    def get_root_context(self) -> Context:
        """Return the root context."""

    @abstractmethod
    def get_context(self, path: Optional[str]) -> Optional[Context]:
        """Return the context for an item path, or None if the item does not exist."""

    @abstractmethod
    def get_parent_context(self, context: Context) -> Optional[Context]:
        """Return the enclosing context, or None for the root."""

    @abstractmethod
    def get_group_container(self, context: Context) -> Optional[GroupContainer]:
        """Return the group container configured at a context, if any."""

    @abstractmethod
    def resolve_permissions(self, role_name: str) -> Sequence[PermissionDescriptor]:
        """Return a role's permissions. Raises RoleNotFound for unknown roles."""

    def list_groups(self, context: Context) -> list[Group]:
        container = self.get_group_container(context)
        if container is None:
            return []
        return container.groups


__all__ = [
    "DirectoryBackend",
    "normalize_item_path",
    "ROOT_PATH",
    "DEFAULT_ROOT_LABEL",
    "DEFAULT_ITEM_SEPARATOR",
]
