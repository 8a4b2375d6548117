"""
leaderboard.py: In-memory top-N table of session totals.
"""

from typing import Iterator, List

from .constants import LEADERBOARD_SIZE
from .data_models import LeaderboardEntry


class Leaderboard:
    """Keeps at most `size` entries, highest score first; ties keep insertion order."""

    def __init__(self, size: int = LEADERBOARD_SIZE):
        self.size = size
        self._entries: List[LeaderboardEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LeaderboardEntry]:
        return self.top_n()

    def qualifies(self, score: int) -> bool:
        """A score qualifies while the table has room, or if it beats any current entry."""
        if len(self._entries) < self.size:
            return True
        return any(score > entry.score for entry in self._entries)

    def insert(self, score: int, name: str = "") -> LeaderboardEntry:
        entry = LeaderboardEntry(score=int(score), name=name)
        self._entries.append(entry)
        # sorted() is stable with reverse=True, so equal scores stay in arrival order
        self._entries = sorted(self._entries, key=lambda e: e.score, reverse=True)[:self.size]
        return entry

    def top_n(self) -> Iterator[LeaderboardEntry]:
        """Yields the current entries in rank order. Each call starts from the top."""
        for entry in tuple(self._entries):
            yield entry

    def format_rows(self) -> List[str]:
        """Display lines such as '#1: 90 - Ann'."""
        rows = []
        for rank, entry in enumerate(self.top_n(), start=1):
            suffix = f" - {entry.name}" if entry.name else ""
            rows.append(f"#{rank}: {entry.score}{suffix}")
        return rows

    def clear(self):
        self._entries = []
