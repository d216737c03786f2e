# -*- coding: utf-8 -*-
from .errors import ReturnError, NotFound, InvalidArgument, EmptyUndo, StorageFailure
from .records import ReturnRecord
from .stack import Stack
from .allocator import IdAllocator
from .repository import ReturnRepository, InMemoryReturnRepository, SqlAlchemyReturnRepository
from .lifecycle import ReturnLifecycle, parse_id
