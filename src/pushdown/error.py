from typing import Any


class AutomatonConsumedError(Exception):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            "Automaton has already been completed and cannot be stepped again"
            + (f": {message}" if message else "")
        )


class DuplicateRuleError(Exception):
    def __init__(self, key: Any, existing: Any, new: Any) -> None:
        super().__init__(
            f"Conflicting rules for key {key}: {existing} is already registered, got {new}"
        )
        self.key = key
        self.existing = existing
        self.new = new


class InvalidRelationError(Exception):
    def __init__(self, obj: Any) -> None:
        super().__init__(
            f"Cannot use object of type '{type(obj).__name__}' as a transition relation. "
            "Expected an ITransitionRelation, a mapping or a callable."
        )
        self.obj = obj
