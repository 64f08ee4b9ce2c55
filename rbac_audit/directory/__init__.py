"""
Directory backends supplying contexts, group containers and roles.
"""

from .base import DirectoryBackend, normalize_item_path
from .memory import InMemoryDirectory
from .snapshot import SnapshotDirectory

__all__ = [
    "DirectoryBackend",
    "normalize_item_path",
    "InMemoryDirectory",
    "SnapshotDirectory",
]
