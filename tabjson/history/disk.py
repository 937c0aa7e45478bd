"""
On-disk history store backed by diskcache
"""

from pathlib import Path
from typing import Optional

from diskcache import Cache

from .base import BaseHistoryStore
from ..exceptions import ResourceError


class DiskHistoryStore(BaseHistoryStore):
    """
    Persistent store using a diskcache.Cache directory

    Usage:
        >>> with DiskHistoryStore("~/.cache/tabjson") as store:
        ...     history = HistoryManager(store)
        ...     history.load()

    Args:
        directory: Cache directory (created if missing)
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory).expanduser()
        try:
            self._cache = Cache(str(self.directory))
        except OSError as e:
            raise ResourceError(f"Cannot open history directory {self.directory}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        return self._cache.get(key)

    def set(self, key: str, value: str) -> None:
        try:
            self._cache.set(key, value)
        except OSError as e:
            raise ResourceError(f"Cannot write history to {self.directory}: {e}") from e

    def delete(self, key: str) -> None:
        self._cache.delete(key)

    def close(self) -> None:
        self._cache.close()
