"""
Configuration management for rbac-audit.

This module provides a settings proxy that resolves dot-notation keys from the
project's ``RBAC_AUDIT`` Django setting, then from the library defaults.
"""

from typing import Any

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver

from .defaults import LIBRARY_DEFAULTS, SETTINGS_NAME


class SettingsProxy:
    """
    Proxy for accessing rbac-audit settings with hierarchical resolution.

    Settings are resolved in the following order:
    1. Django settings (RBAC_AUDIT)
    2. Library defaults (LIBRARY_DEFAULTS)
    3. The caller's default
    """

    def __init__(self):
        self._cache: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value with hierarchical resolution and caching.

        Args:
            key: Setting key to retrieve, e.g. ``audit_settings.root_label``
            default: Default value if setting is not found

        Returns:
            The setting value from the highest priority source
        """
        if key in self._cache:
            return self._cache[key]

        django_value = self._get_nested_value(getattr(settings, SETTINGS_NAME, {}), key)
        if django_value is not None:
            self._cache[key] = django_value
            return django_value

        library_value = self._get_nested_value(LIBRARY_DEFAULTS, key)
        if library_value is not None:
            self._cache[key] = library_value
            return library_value

        # not cached, a later override of the caller default must win
        return default

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        """
        Get nested value from dictionary using dot notation.

        Args:
            data: Dictionary to search in
            key: Key to retrieve (supports dot notation for nested access)

        Returns:
            The value or None if not found
        """
        if not isinstance(data, dict):
            return None

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return None
            current = current[k]
        return current

    def clear_cache(self) -> None:
        """Clear the settings cache."""
        self._cache.clear()

    def validate(self) -> dict[str, Any]:
        """
        Validate current settings configuration.

        Returns:
            Dictionary with validation results
        """
        validation_results = {"valid": True, "errors": [], "warnings": []}

        configured = getattr(settings, SETTINGS_NAME, {})
        if not isinstance(configured, dict):
            validation_results["errors"].append(f"{SETTINGS_NAME} must be a dict")
            validation_results["valid"] = False
            return validation_results

        for section in configured:
            if section not in LIBRARY_DEFAULTS:
                validation_results["warnings"].append(
                    f"Unknown {SETTINGS_NAME} section '{section}'"
                )

        critical_settings = [
            "audit_settings.path_separator",
            "audit_settings.item_separator",
            "directory_settings.backend",
        ]
        for setting in critical_settings:
            value = self.get(setting)
            if not value:
                validation_results["errors"].append(f"Critical setting '{setting}' is empty")
                validation_results["valid"] = False

        permission_format = self.get("audit_settings.permission_format")
        try:
            str(permission_format).format(category="", name="")
        except (KeyError, IndexError, ValueError) as exc:
            validation_results["errors"].append(
                f"Invalid audit_settings.permission_format: {exc}"
            )
            validation_results["valid"] = False

        return validation_results


# Global settings proxy instance
settings_proxy = SettingsProxy()


@receiver(setting_changed)
def _reset_settings_cache(sender, setting, **kwargs):
    if setting == SETTINGS_NAME:
        settings_proxy.clear_cache()


def get_settings_proxy() -> SettingsProxy:
    return settings_proxy


def get_setting(key: str, default: Any = None) -> Any:
    """
    Get a setting value using the hierarchical settings system.

    Args:
        key: Setting key to retrieve
        default: Default value if setting is not found

    Returns:
        The setting value from the highest priority source
    """
    return settings_proxy.get(key, default)


__all__ = ["SettingsProxy", "settings_proxy", "get_settings_proxy", "get_setting"]
