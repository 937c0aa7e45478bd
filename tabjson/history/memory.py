"""
In-memory history store
"""

from typing import Optional

from .base import BaseHistoryStore


class MemoryHistoryStore(BaseHistoryStore):
    """Dict-backed store; history lives as long as the instance"""

    def __init__(self):
        self._data: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
