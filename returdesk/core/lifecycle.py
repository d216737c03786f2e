# -*- coding: utf-8 -*-
"""
Return lifecycle manager.

Owns the process-wide state of the returns service (repository handle, id
allocator and undo stack) behind a single lock. Every operation validates its
input, writes to the repository, and only after the write succeeds touches the
undo stack or the release pool, so a failed write leaves both unchanged.

Known limitation: undoing a delete does not take the restored id back out of
the release pool. If a return is created between a delete and its undo, the
new return receives the deleted id and the undo then collides with it. The
collision is reported as ``StorageFailure`` and the snapshot stays on the
stack.

Without an intervening create, the restored id is still in the pool while its
record is live again. The allocator drops such an id when it reaches the top
of the pool, so later creates get the next free id instead of a duplicate.
"""
import logging
import re
import threading

from .allocator import IdAllocator
from .errors import NotFound, InvalidArgument, EmptyUndo, StorageFailure
from .records import (
    ReturnRecord, RESOLUTIONS, STATUS_PENDING, STATUS_APPROVED, STATUS_REJECTED
)
from .stack import Stack

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"[+-]?[0-9]+\Z")


def parse_id(raw):
    """Turn a path or payload id into an int, or raise InvalidArgument."""
    if isinstance(raw, bool):
        raise InvalidArgument("Invalid ID format")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _ID_PATTERN.match(raw.strip()):
        return int(raw.strip())
    raise InvalidArgument("Invalid ID format")


def _text_field(value):
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidArgument("Invalid input")
    return value


class ReturnLifecycle:

    def __init__(self, repository, allocator=None, undo_stack=None):
        self.repository = repository
        self.allocator = allocator or IdAllocator(repository)
        self.undo_stack = undo_stack if undo_stack is not None else Stack[ReturnRecord]()
        self._lock = threading.RLock()

    def _get_live(self, record_id):
        record = self.repository.find_by_id(record_id)
        if record is None:
            logger.warning(f"Return not found: id={record_id}")
            raise NotFound("Return not found")
        return record

    def list_all(self):
        with self._lock:
            return self.repository.find_all()

    def create(self, item, reason):
        """
        Create a pending return.

        Status and resolution are always normalised to Pending and "" here,
        whatever the caller sent.
        """
        item = _text_field(item)
        reason = _text_field(reason)

        with self._lock:
            record = ReturnRecord(
                id=self.allocator.next_id(),
                item=item,
                reason=reason,
                status=STATUS_PENDING,
                resolution=""
            )
            self.repository.insert(record)
            self.allocator.claim(record.id)

        logger.info(f"Created return {record.id}")
        return record

    def approve(self, record_id, resolution):
        record_id = parse_id(record_id)
        if resolution not in RESOLUTIONS:
            raise InvalidArgument("Resolution must be 'item' or 'money'")

        with self._lock:
            record = self._get_live(record_id).replace(
                status=STATUS_APPROVED, resolution=resolution
            )
            self.repository.update(record)

        logger.info(f"Approved return {record_id} with resolution {resolution}")
        return record

    def disapprove(self, record_id):
        record_id = parse_id(record_id)

        with self._lock:
            # resolution is left as it was
            record = self._get_live(record_id).replace(status=STATUS_REJECTED)
            self.repository.update(record)

        logger.info(f"Rejected return {record_id}")
        return record

    def delete(self, record_id):
        record_id = parse_id(record_id)

        with self._lock:
            snapshot = self._get_live(record_id)
            self.repository.delete(record_id)
            self.undo_stack.push(snapshot)
            self.allocator.release(record_id)

        logger.info(f"Deleted return {record_id}, undo depth {len(self.undo_stack)}")
        return record_id

    def undo_delete(self):
        with self._lock:
            snapshot = self.undo_stack.peek()
            if snapshot is None:
                raise EmptyUndo("No returns to undo")

            if self.repository.find_by_id(snapshot.id) is not None:
                logger.warning(
                    f"Cannot restore return {snapshot.id}: its id was reused by a newer return"
                )
                raise StorageFailure(f"Return ID {snapshot.id} is already in use")

            self.repository.insert(snapshot)
            self.undo_stack.pop()

        logger.info(f"Restored return {snapshot.id}")
        return snapshot

    def can_undo(self):
        with self._lock:
            return not self.undo_stack.is_empty()

    def undo_depth(self):
        with self._lock:
            return len(self.undo_stack)

    def next_id(self):
        with self._lock:
            return self.allocator.next_id()

    def released_ids(self):
        with self._lock:
            return self.allocator.released_ids()
