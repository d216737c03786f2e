# -*- coding: utf-8 -*-
from typing import Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in-first-out sequence, pushed and popped at the same end."""

    def __init__(self):
        self._items: List[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> Tuple[Optional[T], bool]:
        # (None, False) when there is nothing to pop
        if not self._items:
            return None, False
        return self._items.pop(), True

    def peek(self) -> Optional[T]:
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def items(self) -> List[T]:
        return list(self._items)

    def __len__(self):
        return len(self._items)
