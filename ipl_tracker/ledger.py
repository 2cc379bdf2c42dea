# ipl_tracker/ledger.py
from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List, Optional

from ipl_tracker.config import HISTORY_DEFAULT_LIMIT
from ipl_tracker.models import MatchRecord

Fixture = Dict[str, Any]


class MatchLedger:
    """Append-only match history, read most recent first."""

    def __init__(self) -> None:
        self._items: List[MatchRecord] = []

    def __len__(self) -> int:
        return len(self._items)

    def record(self, match: MatchRecord) -> None:
        self._items.append(match)

    def peek(self) -> Optional[MatchRecord]:
        return self._items[-1] if self._items else None

    def size(self) -> int:
        return len(self._items)

    def recent(self, limit: int = HISTORY_DEFAULT_LIMIT) -> List[MatchRecord]:
        if limit <= 0:
            return []
        return self._items[::-1][:limit]


class FixtureQueue:
    """Upcoming matches, first scheduled first out."""

    def __init__(self) -> None:
        self._items: Deque[Fixture] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, fixture: Fixture) -> None:
        self._items.append(fixture)

    def dequeue(self) -> Optional[Fixture]:
        return self._items.popleft() if self._items else None

    def front(self) -> Optional[Fixture]:
        return self._items[0] if self._items else None

    def size(self) -> int:
        return len(self._items)

    def all(self) -> List[Fixture]:
        return list(self._items)
