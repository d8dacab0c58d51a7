from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence


class Stack[S]:
    """
    Pushdown memory of an automaton. The last element of the backing list is
    the top of the stack.
    """

    def __init__(self, initial: Iterable[S] = ()) -> None:
        self._items: List[S] = list(initial)

    @property
    def top(self) -> Optional[S]:
        if not self._items:
            return None
        return self._items[-1]

    def push(self, symbol: S) -> None:
        self._items.append(symbol)

    def push_all(self, symbols: Sequence[S]) -> None:
        # the first symbol of a replacement ends up on top
        for symbol in reversed(symbols):
            self._items.append(symbol)

    def pop(self) -> Optional[S]:
        if not self._items:
            return None
        return self._items.pop()

    def copy(self) -> Stack[S]:
        return Stack(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[S]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
