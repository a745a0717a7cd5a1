#!/usr/bin/env python3
"""
maketable.py – build a Markdown truth table from boolean expressions.

Reads a comma separated list of input variables and a comma separated list of
output expressions, evaluates every output under every assignment of the
inputs and prints the table (or writes it to a .md file).

Expression syntax:

  term      ::= operand ( operator term )?
  operand   ::= '!' primary | primary
  primary   ::= '(' term ')' | '0' | '1' | variable
  operator  ::= '.' | '&' | '&&' | '*'        (and)
              | '+' | '|' | '||'              (or)

AND and OR have the same precedence and group to the right, so a+b.c means
a+(b.c) and a.b+c means a.(b+c).  Use parentheses when in doubt.  Variables are
letters, digits and the LaTeX markup characters \\ _ ^ { }, starting with a
non-digit, e.g. p, q_1, x_{10}, \\alpha.

Usage:
  python3 maketable.py -i "p, q" -o "!p+q, !(p.q)" -s T/F
  python3 maketable.py -f request.txt -w table.md
"""

from __future__ import annotations

import argparse
import sys
import traceback
from typing import Dict, List, Optional, Sequence, Tuple

from evaluator import UnboundVariableError
from io_utils import RequestError, read_request, write_table
from parser import Expr, ParseError, parse, expr_to_str
from render import DEFAULT_STYLE, STYLE_LABELS, ValueStyle, render_table, style_choices
from semantic import InputError
from truthtable import MAX_INPUTS, EnumerationError, TruthTable, build_truth_table


class OutputSyntaxError(Exception):
    """One or more output expressions failed to parse."""
    def __init__(self, errors: List[ParseError]) -> None:
        super().__init__("Syntax error in outputs!")
        self.errors = errors

    @property
    def sources(self) -> List[str]:
        return [e.source for e in self.errors]


TABLE_ERRORS = (OutputSyntaxError, InputError, UnboundVariableError, EnumerationError)


def split_list(text: Optional[str]) -> List[str]:
    """Split 'a, b ,c' into ['a', 'b', 'c']. Blank text means an empty list."""
    if text is None or not text.strip():
        return []
    return [item.strip() for item in text.split(",")]


def parse_outputs(sources: Sequence[str]) -> List[Tuple[str, Expr]]:
    """Parse every output once per distinct source; report all failures together."""
    parsed: Dict[str, Expr] = {}
    errors: List[ParseError] = []
    failed = set()
    for src in sources:
        if src in parsed or src in failed:
            continue
        try:
            parsed[src] = parse(src)
        except ParseError as e:
            errors.append(e)
            failed.add(src)
    if errors:
        raise OutputSyntaxError(errors)
    return [(src, parsed[src]) for src in sources]


def build_table(inputs: Sequence[str], sources: Sequence[str], max_inputs: int = MAX_INPUTS) -> TruthTable:
    """Validate everything, then enumerate. Nothing is evaluated if any check fails."""
    outputs = parse_outputs(sources)
    return build_truth_table(inputs, outputs, max_inputs=max_inputs)


def make_table(
    inputs_text: Optional[str],
    outputs_text: Optional[str],
    style: ValueStyle = DEFAULT_STYLE,
    max_inputs: int = MAX_INPUTS,
) -> str:
    table = build_table(split_list(inputs_text), split_list(outputs_text), max_inputs=max_inputs)
    return render_table(table, style)


def describe_error(e: Exception) -> List[str]:
    """Short user-facing lines for a table error."""
    if isinstance(e, OutputSyntaxError):
        return [str(e)] + [f"  {err}" for err in e.errors]
    if isinstance(e, UnboundVariableError):
        return ["Undeclared variable in outputs!"] + [
            f"  {src!r}: {', '.join(names)}" for src, names in e.unbound
        ]
    return [str(e)]


def _build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Insert a truth table for boolean expressions (Markdown).")
    ap.add_argument("-i", "--inputs", help="Comma separated list of input variables, e.g. 'p, q, r'")
    ap.add_argument("-o", "--outputs", help="Comma separated list of output expressions, e.g. '!p+q, !(p.q)'")
    ap.add_argument("-s", "--style", choices=STYLE_LABELS, help=f"Style of values (default {DEFAULT_STYLE.label})")
    ap.add_argument("-f", "--file", help="Request file with 'inputs:', 'outputs:' and 'style:' lines")
    ap.add_argument("-w", "--write", metavar="OUT.md", help="Write the table to this file instead of stdout")
    ap.add_argument("--max-inputs", type=int, default=MAX_INPUTS,
                    help=f"Refuse more inputs than this (default {MAX_INPUTS})")
    ap.add_argument("--list-styles", action="store_true", help="Show the available value styles and exit")
    ap.add_argument("--verbose", action="store_true", help="Show parsed expressions and tracebacks")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    if args.list_styles:
        for label, example in style_choices():
            print(f"{label:<12} {example}")
        return 0

    request: Dict[str, str] = {}
    if args.file:
        try:
            request = read_request(args.file)
        except RequestError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    inputs_text = args.inputs if args.inputs is not None else request.get("inputs")
    outputs_text = args.outputs if args.outputs is not None else request.get("outputs")
    label = args.style or request.get("style") or DEFAULT_STYLE.label
    try:
        style = ValueStyle.from_label(label)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        table = build_table(split_list(inputs_text), split_list(outputs_text), max_inputs=args.max_inputs)
    except TABLE_ERRORS as e:
        for line in describe_error(e):
            print(line, file=sys.stderr)
        if args.verbose: traceback.print_exc()
        return 1

    if args.verbose:
        print(f"[INFO] {len(table.inputs)} input(s), {len(table.rows)} row(s)", file=sys.stderr)
        for src, expr in table.outputs:
            print(f"[INFO]   {src} => {expr_to_str(expr)}", file=sys.stderr)

    text = render_table(table, style)
    if args.write:
        try:
            write_table(args.write, text)
        except RequestError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"[OK] Wrote table to {args.write}", file=sys.stderr)
    else:
        sys.stdout.write(text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
