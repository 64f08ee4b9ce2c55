"""
In-memory directory backend.

Contexts are keyed by item path, the root being the empty path. The parent of
``a/b/c`` is ``a/b``, then ``a``, then the root. Enclosing folders that were
never registered still exist, they simply have no group container.
"""

from typing import Iterable, Mapping, Optional, Sequence, Union

from ..core.exceptions import RoleNotFound
from ..core.types import Context, Group, GroupContainer, PermissionDescriptor, Role
from .base import (
    DEFAULT_ITEM_SEPARATOR,
    DEFAULT_ROOT_LABEL,
    ROOT_PATH,
    DirectoryBackend,
    normalize_item_path,
)

ContainerSpec = Optional[Union[GroupContainer, Iterable[Group]]]
RoleSpec = Union[Role, Iterable[PermissionDescriptor]]


class InMemoryDirectory(DirectoryBackend):
    """Directory backed by plain mappings."""

    def __init__(
        self,
        contexts: Optional[Mapping[str, ContainerSpec]] = None,
        roles: Optional[Mapping[str, RoleSpec]] = None,
        root_label: str = DEFAULT_ROOT_LABEL,
        separator: str = DEFAULT_ITEM_SEPARATOR,
    ):
        self.root_label = root_label
        self.separator = separator
        self._containers: dict[str, Optional[GroupContainer]] = {}
        self._roles: dict[str, tuple[PermissionDescriptor, ...]] = {}

        for path, spec in (contexts or {}).items():
            self.add_context(path, spec)
        for name, spec in (roles or {}).items():
            self.add_role(name, spec)

    # --- Registration ---

    def add_context(self, path: Optional[str], container: ContainerSpec = None) -> Context:
        """Register an item. ``container=None`` registers it without a group container."""
        key = normalize_item_path(path, self.separator)
        if container is not None and not isinstance(container, GroupContainer):
            container = GroupContainer(container)
        self._containers[key] = container
        return self._make_context(key)

    def add_role(self, name: str, spec: RoleSpec) -> None:
        permissions = spec.permissions if isinstance(spec, Role) else tuple(spec)
        self._roles[name] = tuple(permissions)

    # --- DirectoryBackend ---

    def get_root_context(self) -> Context:
        return self._make_context(ROOT_PATH)

    def get_context(self, path: Optional[str]) -> Optional[Context]:
        key = normalize_item_path(path, self.separator)
        if key == ROOT_PATH or key in self._containers:
            return self._make_context(key)
        return None

    def get_parent_context(self, context: Context) -> Optional[Context]:
        if context.is_root:
            return None
        parent_path, _, _ = context.path.rpartition(self.separator)
        return self._make_context(parent_path)

    def get_group_container(self, context: Context) -> Optional[GroupContainer]:
        return self._containers.get(context.path)

    def resolve_permissions(self, role_name: str) -> Sequence[PermissionDescriptor]:
        try:
            return self._roles[role_name]
        except KeyError:
            raise RoleNotFound(role_name) from None

    @property
    def role_names(self) -> list[str]:
        return list(self._roles)

    @property
    def item_paths(self) -> list[str]:
        return list(self._containers)

    def _make_context(self, path: str) -> Context:
        return Context(path=path, label=self.root_label if path == ROOT_PATH else path)


__all__ = ["InMemoryDirectory"]
