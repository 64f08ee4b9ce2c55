"""
Unit tests for the settings proxy.
"""

import pytest
from django.test import override_settings

from rbac_audit.config_proxy import get_setting, get_settings_proxy
from rbac_audit.defaults import LIBRARY_DEFAULTS

pytestmark = pytest.mark.unit


def test_library_defaults_are_used():
    assert get_setting("audit_settings.root_label") is None
    assert get_setting("audit_settings.path_separator") == " → "
    assert (
        get_setting("directory_settings.backend")
        == LIBRARY_DEFAULTS["directory_settings"]["backend"]
    )


def test_caller_default_for_unknown_key():
    assert get_setting("audit_settings.unknown", "fallback") == "fallback"
    assert get_setting("audit_settings.unknown") is None


def test_project_settings_override_defaults():
    with override_settings(RBAC_AUDIT={"audit_settings": {"root_label": "Jenkins"}}):
        assert get_setting("audit_settings.root_label") == "Jenkins"
        assert get_setting("audit_settings.item_separator") == "/"
    assert get_setting("audit_settings.root_label") is None


def test_validate_accepts_defaults():
    results = get_settings_proxy().validate()

    assert results["valid"] is True
    assert results["errors"] == []


def test_validate_reports_problems():
    overrides = {
        "audit_settings": {"permission_format": "{missing}"},
        "extra_settings": {},
    }
    with override_settings(RBAC_AUDIT=overrides):
        results = get_settings_proxy().validate()

    assert results["valid"] is False
    assert any("permission_format" in error for error in results["errors"])
    assert any("extra_settings" in warning for warning in results["warnings"])
