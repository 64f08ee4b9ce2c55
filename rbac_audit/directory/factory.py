"""
Directory backend construction from settings.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from django.utils.module_loading import import_string

from ..config_proxy import get_setting
from .base import DirectoryBackend

logger = logging.getLogger(__name__)


def get_directory_backend(
    snapshot_path: Optional[Union[str, Path]] = None,
) -> DirectoryBackend:
    """
    Build the configured directory backend.

    Backends exposing ``from_file`` are loaded from ``snapshot_path`` (or
    ``directory_settings.snapshot_path``); other backends are instantiated
    without arguments. ``audit_settings.root_label`` overrides the snapshot's
    own root label only when the project sets it.

    Raises:
        ImportError: If the configured backend cannot be imported
        ValueError: If a file-based backend has no snapshot path
        SnapshotError: If the snapshot cannot be read
    """
    backend_path = get_setting("directory_settings.backend")
    backend_class = import_string(backend_path)
    root_label = get_setting("audit_settings.root_label")
    separator = get_setting("audit_settings.item_separator")

    if hasattr(backend_class, "from_file"):
        path = snapshot_path or get_setting("directory_settings.snapshot_path")
        if not path:
            raise ValueError(
                f"{backend_path} needs a snapshot path "
                "(directory_settings.snapshot_path or --snapshot)"
            )
        logger.debug("Loading %s from %s", backend_path, path)
        return backend_class.from_file(path, root_label=root_label, separator=separator)

    logger.debug("Instantiating %s", backend_path)
    return backend_class()


__all__ = ["get_directory_backend"]
