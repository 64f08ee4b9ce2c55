"""
Type definitions for the RBAC audit engine.

This module contains the immutable snapshot types the engine works on:
- PermissionDescriptor: A (category, name) permission pair
- Role: A named bundle of permission descriptors
- Group: A named set of members, nested groups and attached roles
- GroupContainer: The groups configured at one context level
- Context: One level of the item/root containment hierarchy
- RoleHit: A role discovered on an ancestry path, before resolution
- RoleAssignment: The final audit record
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

AncestryPath = tuple[str, ...]
GrantKey = tuple[str, str, str]


class AuditOutcome(Enum):
    """Informational result of a scan."""

    FOUND = "found"
    NO_GROUPS = "no_groups"  # user is a direct member of no group
    NO_ROLES = "no_roles"  # groups found but nothing resolved


@dataclass(frozen=True)
class PermissionDescriptor:
    """A single permission, e.g. ``Job / Read``."""

    category: str
    name: str

    def display(self, template: str = "{category} / {name}") -> str:
        return template.format(category=self.category, name=self.name)


@dataclass(frozen=True)
class Role:
    """A named bundle of permissions."""

    name: str
    permissions: tuple[PermissionDescriptor, ...] = ()


@dataclass(frozen=True)
class Group:
    """
    A group inside one context's container.

    ``members`` is ``None`` when the group has no member capability at all,
    which is different from a group that supports members but has none.
    ``groups`` lists the nested groups that belong to this group, so this
    group is a parent of each of them.
    """

    name: str
    members: Optional[frozenset[str]] = None
    groups: tuple[str, ...] = ()
    roles: tuple[str, ...] = ()

    @property
    def supports_members(self) -> bool:
        return self.members is not None

    def has_member(self, username: str) -> bool:
        return self.members is not None and username in self.members


class GroupContainer:
    """Ordered, name-indexed collection of the groups of one context."""

    def __init__(self, groups: Iterable[Group] = ()):
        self._groups: list[Group] = []
        self._by_name: dict[str, Group] = {}
        for group in groups:
            # first declaration of a name wins
            if group.name in self._by_name:
                continue
            self._groups.append(group)
            self._by_name[group.name] = group

    def __iter__(self):
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def groups(self) -> list[Group]:
        return list(self._groups)

    def get(self, name: str) -> Optional[Group]:
        return self._by_name.get(name)

    def groups_by_name(self) -> dict[str, Group]:
        return dict(self._by_name)

    def direct_groups_for(self, username: str) -> list[Group]:
        """Groups that list ``username`` as a direct member."""
        return [group for group in self._groups if group.has_member(username)]


@dataclass(frozen=True)
class Context:
    """One level of the containment hierarchy. The root has an empty path."""

    path: str
    label: str

    @property
    def is_root(self) -> bool:
        return self.path == ""


@dataclass(frozen=True)
class RoleHit:
    """A role found on an ancestry path, not yet resolved to permissions."""

    role_name: str
    group_name: str
    path: AncestryPath
    path_display: str
    context_label: str

    @property
    def dedup_key(self) -> GrantKey:
        return dedup_key(self.role_name, self.context_label, self.group_name)


@dataclass(frozen=True)
class RoleAssignment:
    """A role that applies to the audited user, and where it comes from."""

    role_name: str
    group_name: str
    path: AncestryPath
    path_display: str
    context_label: str
    permissions: tuple[PermissionDescriptor, ...] = field(default_factory=tuple)

    @classmethod
    def from_hit(
        cls, hit: RoleHit, permissions: Iterable[PermissionDescriptor]
    ) -> "RoleAssignment":
        return cls(
            role_name=hit.role_name,
            group_name=hit.group_name,
            path=hit.path,
            path_display=hit.path_display,
            context_label=hit.context_label,
            permissions=tuple(permissions),
        )


def dedup_key(role_name: str, context_label: str, group_name: str) -> GrantKey:
    """Key used to collapse repeated discoveries of the same grant."""
    return (role_name, context_label, group_name)


__all__ = [
    "AncestryPath",
    "GrantKey",
    "AuditOutcome",
    "PermissionDescriptor",
    "Role",
    "Group",
    "GroupContainer",
    "Context",
    "RoleHit",
    "RoleAssignment",
    "dedup_key",
]
