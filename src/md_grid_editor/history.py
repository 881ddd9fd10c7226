import logging
from dataclasses import dataclass
from typing import List, Optional

from .models import Grid

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 50


@dataclass(frozen=True)
class HistoryEntry:
    """A retained grid plus how the edit next to it treated column metadata.

    ``restore_metadata`` is set for edits that replaced widths and alignments
    wholesale (``set_data``, imports). Undoing or redoing across such an edit
    must bring back the snapshot's own metadata.
    """

    grid: Grid
    restore_metadata: bool = False


class History:
    """Snapshot-based undo/redo with two bounded stacks.

    ``past`` is ordered oldest first; ``future`` is ordered next-redo first.
    """

    def __init__(self, limit: int = HISTORY_LIMIT):
        self.limit = max(1, limit)
        self.past: List[HistoryEntry] = []
        self.future: List[HistoryEntry] = []

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def push(self, snapshot: Grid, restore_metadata: bool = False) -> None:
        """Record the pre-mutation grid. Any new mutation invalidates redo."""
        self.past.append(HistoryEntry(snapshot, restore_metadata))
        if len(self.past) > self.limit:
            del self.past[: len(self.past) - self.limit]
        self.future = []

    def undo(self, current: Grid) -> Optional[HistoryEntry]:
        if not self.past:
            return None
        previous = self.past.pop()
        entry = HistoryEntry(current, previous.restore_metadata)
        self.future = ([entry] + self.future)[: self.limit]
        logger.debug("undo: %d past, %d future", len(self.past), len(self.future))
        return previous

    def redo(self, current: Grid) -> Optional[HistoryEntry]:
        if not self.future:
            return None
        upcoming = self.future[0]
        self.future = self.future[1:]
        entry = HistoryEntry(current, upcoming.restore_metadata)
        self.past = (self.past + [entry])[-self.limit :]
        logger.debug("redo: %d past, %d future", len(self.past), len(self.future))
        return upcoming

    def clear(self) -> None:
        self.past = []
        self.future = []
