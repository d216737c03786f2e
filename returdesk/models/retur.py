# -*- coding: utf-8 -*-
from .. import db
from ..core.records import ReturnRecord, STATUS_PENDING

class Retur(db.Model):
    __tablename__ = 'returs'

    # Ids come from the IdAllocator, never from the database
    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    item = db.Column(db.String(100), nullable=True)
    reason = db.Column(db.String(100), nullable=True)
    status = db.Column(db.String(255), nullable=False, default=STATUS_PENDING)  # Pending|Approved|Rejected
    resolution = db.Column(db.String(255), nullable=False, default="")          # ""|item|money

    @classmethod
    def from_record(cls, record):
        return cls(
            id=record.id,
            item=record.item,
            reason=record.reason,
            status=record.status,
            resolution=record.resolution
        )

    def to_record(self):
        return ReturnRecord(
            id=self.id,
            item=self.item or "",
            reason=self.reason or "",
            status=self.status,
            resolution=self.resolution or ""
        )
