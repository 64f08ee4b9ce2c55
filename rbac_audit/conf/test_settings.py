from .settings import *  # noqa: F403

DEBUG = False

RBAC_AUDIT = {}  # noqa: F405

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "loggers": {
        "rbac_audit": {"level": "DEBUG", "propagate": True},
    },
}
