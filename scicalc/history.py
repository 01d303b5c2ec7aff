from __future__ import annotations

import itertools
import logging
import threading
from collections import deque
from dataclasses import dataclass
from typing import Deque, List

logger = logging.getLogger(__name__)

SEPARATOR = " = "


@dataclass(frozen=True)
class HistoryEntry:
    expression: str
    result: str
    sequence: int

    @property
    def label(self) -> str: return f"{self.expression}{SEPARATOR}{self.result}"


class HistoryStore:
    """Most-recent-first list of successful evaluations, capped at `limit`."""

    def __init__(self, limit: int = 10) -> None:
        if limit < 1: raise ValueError("limit must be >= 1")
        self.limit = limit
        self._entries: Deque[HistoryEntry] = deque(maxlen=limit)
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def record(self, expression: str, result: str) -> HistoryEntry:
        # the "lhs = rhs" label is split on '=' when an entry is recalled
        if "=" in expression: raise ValueError("expression must not contain '='")
        with self._lock:
            entry = HistoryEntry(expression, result, next(self._counter))
            self._entries.appendleft(entry)
        logger.debug("history #%d: %s", entry.sequence, entry.label)
        return entry

    def all(self) -> List[HistoryEntry]:
        with self._lock:
            return list(self._entries)

    def recall(self, index: int) -> str:
        """Expression text of the entry at `index` (0 is the most recent)."""
        with self._lock:
            if not 0 <= index < len(self._entries):
                raise IndexError(f"no history entry at {index}")
            return self._entries[index].expression

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int: return len(self._entries)
