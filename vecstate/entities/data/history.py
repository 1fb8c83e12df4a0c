import logging
from collections import deque
from typing import Deque, Iterator, List, Optional

import numpy as np

logger = logging.getLogger(__name__)


class SnapshotHistory:
    """Bounded, most-recent-first log of coordinate snapshots.

    Every pushed buffer is copied, so entries never alias the caller's array. Once ``capacity``
    entries are stored the oldest one is dropped on each push.
    """

    __slots__ = ("_snapshots",)

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._snapshots: Deque[np.ndarray] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._snapshots.maxlen

    @property
    def latest(self) -> Optional[np.ndarray]:
        """Copy of the most recent snapshot, or None when empty."""
        if not self._snapshots:
            return None
        return self._snapshots[0].copy()

    def push(self, coords: np.ndarray) -> None:
        if self.capacity == 0:
            return
        if len(self._snapshots) == self.capacity:
            logger.debug("History full (%d), evicting %s", self.capacity, self._snapshots[-1])
        # appendleft on a bounded deque discards from the right end
        self._snapshots.appendleft(np.array(coords, copy=True))

    def clear(self) -> None:
        self._snapshots.clear()

    def snapshots(self) -> List[np.ndarray]:
        return [s.copy() for s in self._snapshots]

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[np.ndarray]:
        return (s.copy() for s in self._snapshots)

    def __getitem__(self, index: int) -> np.ndarray:
        return self._snapshots[index].copy()

    def __repr__(self):
        return f"SnapshotHistory(capacity={self.capacity}, size={len(self)})"
