from enum import Enum
from typing import Sequence, Tuple


class Verdict(Enum):
    PROCESSING = "processing"
    # terminal
    ACCEPT = "accept"
    NOT_ACCEPTING = "not_accepting"

    @property
    def is_terminal(self) -> bool:
        return self is not Verdict.PROCESSING


# (state, input symbol or None for epsilon, stack top)
type Key[Q, V, S] = Tuple[Q, V | None, S]
# (next state, replacement symbols; the first one becomes the new top)
type Move[Q, S] = Tuple[Q, Sequence[S]]
