"""
Standalone settings for running rbac-audit outside a Django project.

Used by the ``rbac-audit`` console script. Projects that already run Django
add ``"rbac_audit"`` to INSTALLED_APPS and configure ``RBAC_AUDIT`` instead.
"""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "rbac-audit-standalone-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "False").lower() == "true"

INSTALLED_APPS = [
    "rbac_audit",
]

DATABASES = {}

USE_TZ = True

RBAC_AUDIT = {
    "directory_settings": {
        "snapshot_path": os.environ.get("RBAC_AUDIT_SNAPSHOT") or None,
    },
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "rbac_audit": {
            "handlers": ["console"],
            "level": os.environ.get("RBAC_AUDIT_LOG_LEVEL", "WARNING"),
            "propagate": False,
        },
    },
}
