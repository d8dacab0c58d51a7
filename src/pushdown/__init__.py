from pushdown.automaton import AutomataBuilder, Automaton
from pushdown.relation import (
    FunctionRelation,
    ITransitionRelation,
    Rule,
    RuleTable,
    as_relation,
)
from pushdown.stack import Stack
from pushdown.types import Verdict

__all__ = [
    "AutomataBuilder",
    "Automaton",
    "FunctionRelation",
    "ITransitionRelation",
    "Rule",
    "RuleTable",
    "Stack",
    "Verdict",
    "as_relation",
]
