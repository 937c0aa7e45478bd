"""
Base key-value store for conversion history
"""

from abc import ABC, abstractmethod
from typing import Optional


class BaseHistoryStore(ABC):
    """
    Minimal blob store used by HistoryManager

    Values are opaque strings (the manager stores a JSON document per key).
    Implementations decide where the blobs live: memory, disk, ...
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the blob stored under key, or None if absent"""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a blob under key, replacing any previous value"""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key; missing keys are ignored"""
        pass

    def close(self) -> None:
        """Release resources held by the store"""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
