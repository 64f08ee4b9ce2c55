"""
Django app configuration for the rbac-audit library.

Registering ``rbac_audit`` in INSTALLED_APPS makes the ``audit_user_roles``
management command available and validates the ``RBAC_AUDIT`` settings at
startup.
"""

import logging

from django.apps import AppConfig as BaseAppConfig

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for rbac-audit."""

    name = "rbac_audit"
    verbose_name = "RBAC Audit"
    label = "rbac_audit"

    def ready(self):
        """Validate the library configuration once Django has loaded."""
        from .config_proxy import get_settings_proxy

        results = get_settings_proxy().validate()
        for warning in results["warnings"]:
            logger.warning(warning)
        if results["valid"]:
            logger.debug("rbac-audit configuration validated")
            return

        for error in results["errors"]:
            logger.error(error)
        if self._is_debug_mode():
            from django.core.exceptions import ImproperlyConfigured

            raise ImproperlyConfigured("; ".join(results["errors"]))

    def _is_debug_mode(self):
        """Check if we're in debug mode."""
        from django.conf import settings as django_settings

        return getattr(django_settings, "DEBUG", False)
