# -*- coding: utf-8 -*-
from dataclasses import dataclass, asdict, replace as _replace

STATUS_PENDING = "Pending"
STATUS_APPROVED = "Approved"
STATUS_REJECTED = "Rejected"

RESOLUTION_ITEM = "item"
RESOLUTION_MONEY = "money"
RESOLUTIONS = (RESOLUTION_ITEM, RESOLUTION_MONEY)


@dataclass(frozen=True)
class ReturnRecord:
    id: int
    item: str = ""
    reason: str = ""
    status: str = STATUS_PENDING
    resolution: str = ""

    def replace(self, **changes):
        return _replace(self, **changes)

    def to_dict(self):
        return asdict(self)
