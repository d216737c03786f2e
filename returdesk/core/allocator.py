# -*- coding: utf-8 -*-
import logging

from .stack import Stack

logger = logging.getLogger(__name__)


class IdAllocator:
    """
    Hands out ids for new returns.

    Ids freed by deletion are reused first, most recently freed first. When
    nothing has been freed the next id is one past the highest live id, or 1
    for an empty store. The allocator is not locked on its own: callers share
    the lock of the lifecycle manager that owns it.
    """

    def __init__(self, repository):
        self.repository = repository
        self._released = Stack[int]()

    def next_id(self):
        """
        Return the id the next creation will receive, without consuming it.

        A pooled id that is live again, because an undo restored its record,
        is not free: it is dropped from the pool and the next candidate used.
        """
        while not self._released.is_empty():
            candidate = self._released.peek()
            if self.repository.find_by_id(candidate) is None:
                return candidate
            self._released.pop()
            logger.warning(f"Dropped released id {candidate}: it belongs to a restored return")

        max_id = self.repository.max_id()
        if max_id is None:
            return 1
        return max_id + 1

    def claim(self, record_id):
        # Only a pooled id needs consuming; max+1 ids are implied by the store.
        if not self._released.is_empty() and self._released.peek() == record_id:
            self._released.pop()
            logger.debug(f"Reused released id {record_id}")

    def release(self, record_id):
        self._released.push(record_id)
        logger.debug(f"Released id {record_id}, pool size {len(self._released)}")

    def released_ids(self):
        """Pooled ids, oldest first."""
        return self._released.items()
