"""
WHATDO - Draw Engine
====================
A de-duplicated set of tasks plus a shuffled draw queue.

Every member is picked exactly once per cycle before anything repeats.
When the queue runs dry the next pick reshuffles the whole membership
into a fresh queue.

Usage:
    dolist = DoList()
    dolist.add("read")
    dolist.add("run")
    dolist.pick()      # "run" or "read", then the other one
"""

import logging
import random
from collections import deque
from enum import Enum
from typing import Deque, Iterable, List, Optional, Tuple

from .errors import DuplicateTaskError, TaskNotFoundError, WhatdoError

logger = logging.getLogger("whatdo.dolist")


class DrawState(str, Enum):
    """Engine lifecycle states"""
    EMPTY = "empty"                           # No members
    LOADED_WITH_QUEUE = "loaded_with_queue"   # Members left to draw this cycle
    LOADED_EXHAUSTED = "loaded_exhausted"     # Cycle done, next pick reshuffles


class DoList:
    """
    Membership set + draw queue.

    Invariants (hold after every public call):
    - no task appears twice in the membership list
    - every queued task is a member, and the queue has no duplicates

    Both containers are private; callers only see tuple snapshots.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._tasks: List[str] = []
        self._queue: Deque[str] = deque()
        self._rng = rng or random.Random()

    # ========================================
    # MUTATIONS
    # ========================================

    def add(self, task: str) -> None:
        """Add a task and schedule it at the tail of the current cycle"""
        if task in self._tasks:
            raise DuplicateTaskError(task)

        self._tasks.append(task)
        self._queue.append(task)
        logger.debug(f"Added task: {task!r} (queue: {len(self._queue)})")

    def drop(self, task: str) -> str:
        """Remove a task from the list and from the pending queue"""
        try:
            index = self._tasks.index(task)
        except ValueError:
            raise TaskNotFoundError(task) from None

        removed = self._tasks.pop(index)
        try:
            self._queue.remove(task)
        except ValueError:
            # Already drawn this cycle
            pass

        logger.debug(f"Dropped task: {removed!r}")
        return removed

    def add_many(self, tasks: Iterable[str]) -> Tuple[List[str], List[WhatdoError]]:
        """Add each task independently; returns (added, errors)"""
        added: List[str] = []
        errors: List[WhatdoError] = []
        for task in tasks:
            try:
                self.add(task)
            except DuplicateTaskError as e:
                errors.append(e)
            else:
                added.append(task)
        return added, errors

    def drop_many(self, tasks: Iterable[str]) -> Tuple[List[str], List[WhatdoError]]:
        """Drop each task independently; returns (removed, errors)"""
        removed: List[str] = []
        errors: List[WhatdoError] = []
        for task in tasks:
            try:
                removed.append(self.drop(task))
            except TaskNotFoundError as e:
                errors.append(e)
        return removed, errors

    def clear(self) -> None:
        """Remove every task"""
        self._tasks.clear()
        self._queue.clear()
        logger.debug("Cleared all tasks")

    # ========================================
    # DRAWING
    # ========================================

    def shuffle(self) -> None:
        """Replace the queue with a fresh uniform permutation of all members"""
        snapshot = list(self._tasks)
        self._rng.shuffle(snapshot)
        self._queue = deque(snapshot)
        logger.debug(f"Reshuffled queue ({len(self._queue)} tasks)")

    def pick(self) -> Optional[str]:
        """
        Draw the next task, or None when the list is empty.

        Starts a new cycle (implicit shuffle) when the queue is exhausted.
        """
        if not self._tasks:
            return None

        if not self._queue:
            logger.debug("Cycle exhausted, reshuffling")
            self.shuffle()

        return self._queue.popleft()

    # ========================================
    # SNAPSHOTS
    # ========================================

    def snapshot(self) -> Tuple[List[str], List[str]]:
        """(membership, queue) copies for persistence"""
        return list(self._tasks), list(self._queue)

    @classmethod
    def from_snapshot(
        cls,
        tasks: Iterable[str],
        queue: Iterable[str],
        rng: Optional[random.Random] = None
    ) -> "DoList":
        """
        Restore an engine from a persisted (membership, queue) pair.

        Snapshots that break the invariants are repaired: repeated members
        keep their first position, and queue entries that are unknown or
        repeated are discarded.
        """
        dolist = cls(rng=rng)

        for task in tasks:
            if task in dolist._tasks:
                logger.warning(f"Ignoring duplicate task in saved list: {task!r}")
                continue
            dolist._tasks.append(task)

        members = set(dolist._tasks)
        seen = set()
        for task in queue:
            if task not in members or task in seen:
                logger.warning(f"Ignoring stray queue entry in saved list: {task!r}")
                continue
            seen.add(task)
            dolist._queue.append(task)

        return dolist

    # ========================================
    # READ-ONLY VIEWS
    # ========================================

    @property
    def tasks(self) -> Tuple[str, ...]:
        return tuple(self._tasks)

    @property
    def queue(self) -> Tuple[str, ...]:
        return tuple(self._queue)

    @property
    def state(self) -> DrawState:
        if not self._tasks:
            return DrawState.EMPTY
        if not self._queue:
            return DrawState.LOADED_EXHAUSTED
        return DrawState.LOADED_WITH_QUEUE

    def render(self) -> str:
        """Members in insertion order, one per line"""
        return "\n".join(self._tasks)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task: object) -> bool:
        return task in self._tasks

    def __repr__(self) -> str:
        return f"DoList(tasks={len(self._tasks)}, queued={len(self._queue)})"
