# evaluator.py
"""
Evaluates a parsed expression against one row's assignment.

The walk reads only its two arguments, so one AST can be evaluated any number
of times, from any number of callers, with the same result for the same row.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from parser import Expr, Literal, Variable, Not, And, Or


class UnboundVariableError(Exception):
    """Raised when an expression references a name that is not a declared input."""
    def __init__(self, unbound: Iterable[Tuple[Optional[str], Iterable[str]]]):
        self.unbound: List[Tuple[Optional[str], List[str]]] = [
            (src, sorted(names)) for src, names in unbound
        ]
        parts = [f"{src!r} uses {', '.join(names)}" if src is not None else ", ".join(names)
                 for src, names in self.unbound]
        super().__init__("Undeclared variable(s): " + "; ".join(parts))

    @property
    def names(self) -> List[str]:
        seen: Dict[str, None] = {}
        for _, names in self.unbound:
            for n in names:
                seen.setdefault(n)
        return list(seen)


def evaluate(expr: Expr, assignment: Mapping[str, bool]) -> bool:
    # Post-order walk with an explicit stack: long chains nest deeply.
    values: List[bool] = []
    stack: List[Tuple[Expr, bool]] = [(expr, False)]
    while stack:
        e, done = stack.pop()
        if isinstance(e, Literal):
            values.append(e.value)
        elif isinstance(e, Variable):
            try:
                values.append(assignment[e.name])
            except KeyError as ex:
                raise UnboundVariableError([(None, [e.name])]) from ex
        elif isinstance(e, Not):
            if done:
                values.append(not values.pop())
            else:
                stack += [(e, True), (e.expr, False)]
        elif isinstance(e, (And, Or)):
            if done:
                right = values.pop()
                left = values.pop()
                values.append(left and right if isinstance(e, And) else left or right)
            else:
                stack += [(e, True), (e.right, False), (e.left, False)]
        else:
            raise TypeError(f"Unsupported expression type: {type(e)}")
    return values.pop()


__all__ = ["UnboundVariableError", "evaluate"]
