# -*- coding: utf-8 -*-
"""
Storage adapters for return records.

The lifecycle manager only talks to the ``ReturnRepository`` interface. Each
call is atomic on its own and reports any backend problem as
``StorageFailure``.
"""
import abc
import logging

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from .errors import StorageFailure

logger = logging.getLogger(__name__)


class ReturnRepository(abc.ABC):

    @abc.abstractmethod
    def find_all(self):
        """All live records, ordered by id."""

    @abc.abstractmethod
    def find_by_id(self, record_id):
        """The live record with this id, or None."""

    @abc.abstractmethod
    def insert(self, record):
        pass

    @abc.abstractmethod
    def update(self, record):
        pass

    @abc.abstractmethod
    def delete(self, record_id):
        pass

    @abc.abstractmethod
    def max_id(self):
        """Highest live id, or None when the store is empty."""


class InMemoryReturnRepository(ReturnRepository):

    def __init__(self, records=None):
        self._records = {}
        for record in records or []:
            self._records[record.id] = record

    def find_all(self):
        return [self._records[key] for key in sorted(self._records)]

    def find_by_id(self, record_id):
        return self._records.get(record_id)

    def insert(self, record):
        if record.id in self._records:
            raise StorageFailure(f"Duplicate return id {record.id}")
        self._records[record.id] = record

    def update(self, record):
        if record.id not in self._records:
            raise StorageFailure(f"Return {record.id} does not exist")
        self._records[record.id] = record

    def delete(self, record_id):
        if record_id not in self._records:
            raise StorageFailure(f"Return {record_id} does not exist")
        del self._records[record_id]

    def max_id(self):
        return max(self._records) if self._records else None


class SqlAlchemyReturnRepository(ReturnRepository):
    """Flask-SQLAlchemy backed store, one commit per call."""

    def __init__(self, db):
        self.db = db

    def _fail(self, action, error):
        self.db.session.rollback()
        logger.error(f"Database error while trying to {action}: {error}")
        return StorageFailure(f"Failed to {action}")

    def find_all(self):
        from ..models.retur import Retur
        try:
            rows = Retur.query.order_by(Retur.id.asc()).all()
            return [row.to_record() for row in rows]
        except SQLAlchemyError as e:
            raise self._fail("retrieve returns", e) from e

    def find_by_id(self, record_id):
        from ..models.retur import Retur
        try:
            row = self.db.session.get(Retur, record_id)
            return row.to_record() if row else None
        except SQLAlchemyError as e:
            raise self._fail("retrieve return", e) from e

    def insert(self, record):
        from ..models.retur import Retur
        try:
            self.db.session.add(Retur.from_record(record))
            self.db.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("create return", e) from e

    def update(self, record):
        from ..models.retur import Retur
        try:
            row = self.db.session.get(Retur, record.id)
            if row is None:
                raise StorageFailure("Failed to update return")
            row.item = record.item
            row.reason = record.reason
            row.status = record.status
            row.resolution = record.resolution
            self.db.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("update return", e) from e

    def delete(self, record_id):
        from ..models.retur import Retur
        try:
            row = self.db.session.get(Retur, record_id)
            if row is None:
                raise StorageFailure("Failed to delete return")
            self.db.session.delete(row)
            self.db.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete return", e) from e

    def max_id(self):
        from ..models.retur import Retur
        try:
            return self.db.session.query(func.max(Retur.id)).scalar()
        except SQLAlchemyError as e:
            raise self._fail("read the highest return id", e) from e
