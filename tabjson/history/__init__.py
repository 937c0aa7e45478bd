"""
Conversion history

The history is a small list of recent conversions persisted through an
injected key-value store:

- MemoryHistoryStore: process-local, the library default and used in tests
- DiskHistoryStore: diskcache directory, survives restarts (the CLI default)
"""

from pathlib import Path
from typing import Optional

from .base import BaseHistoryStore
from .memory import MemoryHistoryStore
from .disk import DiskHistoryStore
from .manager import HistoryManager, DEFAULT_HISTORY_KEY, DEFAULT_MAX_ITEMS

__all__ = [
    "BaseHistoryStore",
    "MemoryHistoryStore",
    "DiskHistoryStore",
    "HistoryManager",
    "DEFAULT_HISTORY_KEY",
    "DEFAULT_MAX_ITEMS",
    "create_history_store",
]


def create_history_store(settings, default_dir: Optional[Path] = None) -> BaseHistoryStore:
    """
    Create the store described by settings

    settings.history_dir wins, then default_dir. With neither, history is
    kept in memory for the life of the process.
    """
    directory = settings.history_dir or default_dir
    if directory is not None:
        return DiskHistoryStore(directory)
    return MemoryHistoryStore()
