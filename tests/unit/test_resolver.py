"""
Unit tests for memoized role resolution.
"""

import logging

import pytest

from rbac_audit.core import PermissionDescriptor, PermissionResolver, RoleNotFound

pytestmark = pytest.mark.unit


class _CountingLookup:
    def __init__(self, roles):
        self.roles = roles
        self.calls = []

    def __call__(self, role_name):
        self.calls.append(role_name)
        if role_name not in self.roles:
            raise RoleNotFound(role_name)
        return self.roles[role_name]


def test_role_is_resolved_once():
    lookup = _CountingLookup({"Admin": [PermissionDescriptor("Overall", "Administer")]})
    resolver = PermissionResolver(lookup)

    first = resolver.resolve("Admin")
    second = resolver.resolve("Admin")

    assert first == (PermissionDescriptor("Overall", "Administer"),)
    assert second is first
    assert lookup.calls == ["Admin"]
    assert resolver.is_resolved("Admin")


def test_failed_role_is_logged_once_and_skipped(caplog):
    lookup = _CountingLookup({})
    resolver = PermissionResolver(lookup)

    with caplog.at_level(logging.WARNING, logger="rbac_audit"):
        assert resolver.resolve("Broken") is None
        assert resolver.resolve("Broken") is None

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Broken" in warnings[0].getMessage()
    assert lookup.calls == ["Broken"]
    assert isinstance(resolver.failures["Broken"].cause, RoleNotFound)


def test_unexpected_lookup_error_is_contained():
    def lookup(role_name):
        raise RuntimeError("plugin exploded")

    resolver = PermissionResolver(lookup)

    assert resolver.resolve("Admin") is None
    assert "plugin exploded" in str(resolver.failures["Admin"])
