# semantic.py
from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from evaluator import UnboundVariableError
from lexer import is_name_char, is_name_start
from parser import Expr, Literal, Variable, Not, And, Or


class InputError(Exception):
    """Raised when the declared input list is unusable."""
    pass


def check_inputs(inputs: Sequence[str]) -> None:
    """
    Enforce the rules on declared input names, in declaration order.

    Rules enforced:
      1) A name must not be empty.
      2) A name must lex as a single variable: it starts with a letter or one
         of  \\ _ ^ { }  and continues with those or digits.
      3) A name must not be declared twice.

    An empty list is not an error here; the table builder reports it.
    """
    seen: Set[str] = set()
    for pos, name in enumerate(inputs, start=1):
        if not name:
            raise InputError(f"Input {pos}: empty variable name.")
        bad = _first_bad_char(name)
        if bad is not None:
            raise InputError(f"Input {pos}: '{name}' is not a valid variable name (bad character '{bad}').")
        if name in seen:
            raise InputError(f"Input {pos}: '{name}' declared more than once.")
        seen.add(name)


def check_bound(outputs: Iterable[Tuple[str, Expr]], inputs: Iterable[str]) -> None:
    """
    Every variable an output mentions must be a declared input.
    Reports every offending output at once, each source only once.
    """
    declared = set(inputs)
    unbound: List[Tuple[Optional[str], Set[str]]] = []
    reported: Set[str] = set()
    for source, expr in outputs:
        if source in reported:
            continue
        missing = free_variables(expr) - declared
        if missing:
            unbound.append((source, missing))
            reported.add(source)
    if unbound:
        raise UnboundVariableError(unbound)


def free_variables(expr: Expr) -> Set[str]:
    """Traverse an expression and return the names it references."""
    names: Set[str] = set()
    pending: List[Expr] = [expr]
    while pending:
        e = pending.pop()
        if isinstance(e, Variable):
            names.add(e.name)
        elif isinstance(e, Not):
            pending.append(e.expr)
        elif isinstance(e, (And, Or)):
            pending += [e.left, e.right]
        elif not isinstance(e, Literal):
            raise TypeError(f"Unsupported expression type: {type(e)}")
    return names


def _first_bad_char(name: str) -> Optional[str]:
    if not is_name_start(name[0]):
        return name[0]
    for ch in name[1:]:
        if not is_name_char(ch):
            return ch
    return None


__all__ = ["InputError", "check_inputs", "check_bound", "free_variables"]
