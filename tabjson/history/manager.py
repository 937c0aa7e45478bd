"""
Conversion history kept in an injected key-value store
"""

import json
import logging
from datetime import datetime
from typing import Callable, Optional

from pydantic import TypeAdapter, ValidationError

from .base import BaseHistoryStore
from ..schemas import HistoryItem

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_KEY = "tabjson:history"
DEFAULT_MAX_ITEMS = 8

_ITEMS_ADAPTER = TypeAdapter(list[HistoryItem])


class HistoryManager:
    """
    Most-recent-first list of conversions, persisted as one JSON blob

    Rules:
    - Saving an input that is already remembered moves it to the front
      (entries are unique by raw input)
    - Only the newest max_items entries are kept
    - An unreadable blob is treated as empty history (logged, not raised)

    Args:
        store: Blob store the history is persisted in
        key: Store key holding the history document
        max_items: Maximum number of entries kept
        clock: Callable returning "now" (injectable for tests)

    Example:
        >>> history = HistoryManager(MemoryHistoryStore())
        >>> history.record(raw=text, formatted=output, name="2 rows")
        >>> history.load()[0].name
        '2 rows'
    """

    def __init__(
        self,
        store: BaseHistoryStore,
        key: str = DEFAULT_HISTORY_KEY,
        max_items: int = DEFAULT_MAX_ITEMS,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if max_items < 1:
            raise ValueError("max_items must be at least 1")

        self.store = store
        self.key = key
        self.max_items = max_items
        self.clock = clock or datetime.now

    def load(self) -> list[HistoryItem]:
        """Return remembered entries, newest first"""
        blob = self.store.get(self.key)
        if not blob:
            return []

        try:
            return _ITEMS_ADAPTER.validate_json(blob)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable history under '{self.key}': {e.error_count()} error(s)")
            return []

    def save(self, item: HistoryItem) -> list[HistoryItem]:
        """
        Insert an entry at the front and persist

        Returns:
            The updated history, newest first
        """
        items = [existing for existing in self.load() if existing.raw != item.raw]
        items.insert(0, item)
        items = items[: self.max_items]

        payload = json.dumps([entry.model_dump() for entry in items], ensure_ascii=False)
        self.store.set(self.key, payload)
        return items

    def record(self, raw: str, formatted: str, name: str) -> HistoryItem:
        """
        Build an entry stamped with the current time and save it

        Args:
            raw: Input text (stored trimmed)
            formatted: Output produced for the input
            name: Label; " (YYYY-MM-DD HH:MM)" is appended

        Returns:
            The saved HistoryItem
        """
        now = self.clock()
        item = HistoryItem(
            name=f"{name} ({now:%Y-%m-%d %H:%M})",
            raw=raw.strip(),
            formatted=formatted,
            time=int(now.timestamp() * 1000),
        )
        self.save(item)
        return item

    def get(self, index: int) -> HistoryItem:
        """Return the entry at index (0 = newest); raises IndexError"""
        items = self.load()
        if index < 0 or index >= len(items):
            raise IndexError(f"No history entry #{index} ({len(items)} stored)")
        return items[index]

    def clear(self) -> None:
        """Forget all entries"""
        self.store.delete(self.key)
