# truthtable.py
"""
Truth Table Enumeration
-----------------------
Evaluates every output expression under every assignment of the declared inputs.

Row order is binary counting with the leftmost input as the most significant
bit: row r gives input i the value of bit (n-1-i) of r, so the table starts
all-false and ends all-true.

Outputs must already be parsed. Input names and the variables each output
uses are checked before the first row is built. Each AST is shared by every row.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence, Tuple

from evaluator import evaluate
from parser import Expr
from semantic import check_bound, check_inputs

# Upper bound on declared inputs (2**16 rows).
MAX_INPUTS = 16

Assignment = Dict[str, bool]


class EnumerationError(Exception):
    """Raised when the input list cannot be enumerated."""
    pass


class NoInputsError(EnumerationError):
    def __init__(self) -> None:
        super().__init__("Must have at least one input!")


class TooManyInputsError(EnumerationError):
    def __init__(self, count: int, limit: int) -> None:
        super().__init__(f"Too many inputs: {count} declared, at most {limit} allowed ({2 ** limit} rows).")
        self.count = count
        self.limit = limit


@dataclass(frozen=True)
class Row:
    assignment: Assignment
    results: Tuple[bool, ...]    # one per output, in output order

    def values(self, inputs: Sequence[str]) -> List[bool]:
        """Input values in column order followed by the output results."""
        return [self.assignment[name] for name in inputs] + list(self.results)


@dataclass(frozen=True)
class TruthTable:
    inputs: Tuple[str, ...]
    outputs: Tuple[Tuple[str, Expr], ...]   # (source text, AST)
    rows: Tuple[Row, ...]

    @property
    def labels(self) -> List[str]:
        return [src for src, _ in self.outputs]


def assignments(inputs: Sequence[str]) -> Iterator[Assignment]:
    """Yield the 2**n assignments in canonical order."""
    n = len(inputs)
    for r in range(2 ** n):
        yield {name: bool((r >> (n - 1 - i)) & 1) for i, name in enumerate(inputs)}


def build_truth_table(
    inputs: Sequence[str],
    outputs: Sequence[Tuple[str, Expr]],
    max_inputs: int = MAX_INPUTS,
) -> TruthTable:
    if len(inputs) < 1:
        raise NoInputsError()
    if len(inputs) > max_inputs:
        raise TooManyInputsError(len(inputs), max_inputs)
    check_inputs(inputs)
    check_bound(outputs, inputs)

    exprs = [expr for _, expr in outputs]
    rows: List[Row] = []
    for assignment in assignments(inputs):
        results = tuple(evaluate(expr, assignment) for expr in exprs)
        rows.append(Row(assignment, results))

    return TruthTable(inputs=tuple(inputs), outputs=tuple(outputs), rows=tuple(rows))


__all__ = [
    "MAX_INPUTS", "Assignment", "EnumerationError", "NoInputsError", "TooManyInputsError",
    "Row", "TruthTable", "assignments", "build_truth_table",
]
