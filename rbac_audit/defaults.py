"""
Default configuration for the rbac-audit library.

Every setting the library consumes is listed here. Projects override any of
them through the ``RBAC_AUDIT`` dict in their Django settings.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "rbac-audit"
SETTINGS_NAME = "RBAC_AUDIT"


# --------------------------------------------------------------------------- #
# Library-wide defaults (grouped by feature area)
# --------------------------------------------------------------------------- #
LIBRARY_DEFAULTS: dict[str, Any] = {
    "audit_settings": {
        # Root context label; None keeps the snapshot's own label (or "<root>")
        "root_label": None,
        # Separator for the displayed group path (top ancestor first)
        "path_separator": " → ",
        # Separator between the segments of an item path
        "item_separator": "/",
        "permission_format": "{category} / {name}",
        # Also run the root-only check after an item walk
        "include_root_check": False,
    },
    "directory_settings": {
        "backend": "rbac_audit.directory.snapshot.SnapshotDirectory",
        "snapshot_path": None,
    },
}

__all__ = ["LIBRARY_DEFAULTS", "LIBRARY_NAME", "LIBRARY_VERSION", "SETTINGS_NAME"]
