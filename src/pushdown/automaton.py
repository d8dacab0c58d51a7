from __future__ import annotations

import logging
from typing import Any, Generator, Iterable, Iterator

from pushdown.error import AutomatonConsumedError
from pushdown.relation import ITransitionRelation, as_relation
from pushdown.stack import Stack
from pushdown.types import Verdict

logger = logging.getLogger(__name__)


class AutomataBuilder[Q, V, S]:
    """
    Holds the static configuration of an automaton and builds a fresh
    `Automaton` for every word to evaluate.

    The relation may be an `ITransitionRelation`, a mapping keyed by
    `(state, symbol, top)` or a plain callable with the `lookup` signature.
    It is shared between all automata built here and must not be mutated.
    """

    def __init__(
        self,
        initial_state: Q,
        initial_stack: Iterable[S],
        relation: ITransitionRelation[Q, V, S] | Any,
    ) -> None:
        self._state: Q = initial_state
        self._stack: Stack[S] = (
            initial_stack.copy()
            if isinstance(initial_stack, Stack)
            else Stack(initial_stack)
        )
        self._relation: ITransitionRelation[Q, V, S] = as_relation(relation)

    @property
    def initial_state(self) -> Q:
        return self._state

    @property
    def initial_stack(self) -> Stack[S]:
        return self._stack.copy()

    @property
    def relation(self) -> ITransitionRelation[Q, V, S]:
        return self._relation

    def build(self, word: Iterable[V]) -> Automaton[Q, V, S]:
        return Automaton(
            word=word,
            initial_state=self._state,
            initial_stack=self._stack.copy(),
            relation=self._relation,
        )

    def accepts(self, word: Iterable[V]) -> bool:
        return self.build(word).complete()


class Automaton[Q, V, S]:
    def __init__(
        self,
        word: Iterable[V],
        initial_state: Q,
        initial_stack: Stack[S],
        relation: ITransitionRelation[Q, V, S],
    ) -> None:
        self._word: Iterator[V] = iter(word)
        self._state: Q = initial_state
        self._stack: Stack[S] = initial_stack
        self._relation = relation
        self._verdict = Verdict.PROCESSING
        self._steps = 0
        self._consumed = False

    @property
    def state(self) -> Q:
        return self._state

    @property
    def stack(self) -> Stack[S]:
        return self._stack

    @property
    def verdict(self) -> Verdict:
        return self._verdict

    @property
    def steps_taken(self) -> int:
        return self._steps

    def run(self) -> Verdict:
        """
        Perform a single step. The next input symbol is always taken from the
        word, also when the matching rule turns out to be an epsilon rule.
        Once a terminal verdict is reached it is returned again on every call.
        """
        if self._consumed:
            raise AutomatonConsumedError("run() called after complete()")
        if self._verdict.is_terminal:
            return self._verdict

        symbol = next(self._word, None)
        top = self._stack.pop()
        self._steps += 1

        if top is None:
            # empty stack: accept only if the word is exhausted as well
            self._verdict = (
                Verdict.ACCEPT if symbol is None else Verdict.NOT_ACCEPTING
            )
        else:
            move = self._relation.lookup(self._state, symbol, top)
            if move is None:
                self._verdict = Verdict.NOT_ACCEPTING
            else:
                next_state, replacement = move
                self._state = next_state
                self._stack.push_all(replacement)

        logger.debug(
            "step %d: symbol=%r top=%r -> state=%r verdict=%s",
            self._steps,
            symbol,
            top,
            self._state,
            self._verdict.value,
        )
        return self._verdict

    def steps(self) -> Generator[Verdict, None, None]:
        if self._consumed:
            raise AutomatonConsumedError("steps() called after complete()")
        while True:
            verdict = self.run()
            yield verdict
            if verdict.is_terminal:
                return

    def complete(self) -> bool:
        if self._consumed:
            raise AutomatonConsumedError("complete() called twice")
        verdict = self._verdict
        while verdict is Verdict.PROCESSING:
            verdict = self.run()
        self._consumed = True
        logger.debug(
            "automaton finished after %d steps: %s", self._steps, verdict.value
        )
        return verdict is Verdict.ACCEPT
