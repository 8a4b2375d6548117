"""
session.py: Attempts and scores of the current player, and the hand-off of a
finished session to the leaderboard.
"""

from typing import List, Optional

from .constants import ATTEMPT_LIMIT, PLACEHOLDER_NAME
from .data_models import LeaderboardEntry
from .leaderboard import Leaderboard


def sanitize_name(name) -> str:
    """Trims a prompt answer; missing or blank answers become the placeholder."""
    if name is None:
        return PLACEHOLDER_NAME
    name = str(name).strip()
    return name or PLACEHOLDER_NAME


class SessionTracker:
    """
    Tracks one player's attempts. When the last attempt is recorded, a total
    that makes the leaderboard is held in `pending_total` until a name arrives
    through `complete_qualifying_entry`.
    """

    def __init__(self, leaderboard: Leaderboard, attempt_limit: int = ATTEMPT_LIMIT):
        self.leaderboard = leaderboard
        self.attempt_limit = attempt_limit
        self.attempts_used = 0
        self.scores: List[int] = []
        self.pending_total: Optional[int] = None

    @property
    def attempts_left(self) -> int:
        return self.attempt_limit - self.attempts_used

    def record_attempt(self, score: int):
        """Stores a finished attempt. Ignored once the session is over."""
        if self.is_session_over():
            return
        self.scores.append(int(score))
        self.attempts_used += 1
        if self.is_session_over():
            self._finish_session()

    def is_session_over(self) -> bool:
        return self.attempts_used >= self.attempt_limit

    def total_score(self) -> int:
        return sum(self.scores)

    def _finish_session(self):
        total = self.total_score()
        if self.leaderboard.qualifies(total):
            self.begin_qualifying_entry(total)

    def begin_qualifying_entry(self, total: int):
        self.pending_total = total

    def complete_qualifying_entry(self, name: Optional[str] = None) -> Optional[LeaderboardEntry]:
        """Inserts the pending total under `name`. Returns None if nothing was pending."""
        if self.pending_total is None:
            return None
        total, self.pending_total = self.pending_total, None
        return self.leaderboard.insert(total, sanitize_name(name))

    def reset_session(self):
        """Starts over for the next player. A pending entry is filed under the placeholder name."""
        if self.pending_total is not None:
            self.complete_qualifying_entry(None)
        self.attempts_used = 0
        self.scores = []
