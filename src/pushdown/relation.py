from __future__ import annotations

from collections.abc import Mapping
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    Optional,
    Protocol,
    Tuple,
    runtime_checkable,
)

from pydantic import BaseModel, ConfigDict

from pushdown.error import DuplicateRuleError, InvalidRelationError
from pushdown.types import Key, Move


@runtime_checkable
class ITransitionRelation[Q, V, S](Protocol):
    def lookup(self, state: Q, symbol: V | None, top: S) -> Optional[Move[Q, S]]:
        """Return the move for the key, or None if no rule applies."""
        ...


class Rule(BaseModel):
    """
    A single transition rule. A rule without a `symbol` fires on the stack
    top alone and does not need an input symbol to match.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    state: Any
    symbol: Any = None
    top: Any
    next_state: Any
    replacement: Tuple[Any, ...] = ()

    @property
    def key(self) -> Key[Any, Any, Any]:
        return (self.state, self.symbol, self.top)

    @property
    def move(self) -> Move[Any, Any]:
        return (self.next_state, self.replacement)


class RuleTable[Q, V, S](Mapping):
    def __init__(self, rules: Mapping[Key[Q, V, S], Move[Q, S]] | None = None) -> None:
        self._rules: Dict[Key[Q, V, S], Tuple[Q, Tuple[S, ...]]] = {}
        for key, (next_state, replacement) in (rules or {}).items():
            self._rules[key] = (next_state, tuple(replacement))

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> RuleTable[Any, Any, Any]:
        table: Dict[Key[Any, Any, Any], Move[Any, Any]] = {}
        for rule in rules:
            existing = table.get(rule.key)
            if existing is not None and existing != rule.move:
                raise DuplicateRuleError(key=rule.key, existing=existing, new=rule.move)
            table[rule.key] = rule.move
        return cls(table)

    def lookup(self, state: Q, symbol: V | None, top: S) -> Optional[Move[Q, S]]:
        return self._rules.get((state, symbol, top))

    def __getitem__(self, key: Key[Q, V, S]) -> Move[Q, S]:
        return self._rules[key]

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Key[Q, V, S]]:
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable({self._rules!r})"


class FunctionRelation[Q, V, S]:
    def __init__(self, fn: Callable[[Q, V | None, S], Optional[Move[Q, S]]]) -> None:
        self._fn = fn

    def lookup(self, state: Q, symbol: V | None, top: S) -> Optional[Move[Q, S]]:
        return self._fn(state, symbol, top)


def as_relation(obj: Any) -> ITransitionRelation[Any, Any, Any]:
    if isinstance(obj, ITransitionRelation):
        return obj
    if isinstance(obj, Mapping):
        return RuleTable(obj)
    if callable(obj):
        return FunctionRelation(obj)
    raise InvalidRelationError(obj)
