from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from lexer import Token, LexError, tokenize

@dataclass(frozen=True)
class Literal: value: bool
@dataclass(frozen=True)
class Variable: name: str

Expr = Union["Not","And","Or",Literal,Variable]

@dataclass(frozen=True)
class Not: expr: Expr
@dataclass(frozen=True)
class And: left: Expr; right: Expr
@dataclass(frozen=True)
class Or: left: Expr; right: Expr

class ParseError(Exception):
    """A single expression failed to parse. `offset` is the furthest position reached."""
    def __init__(self, source: str, offset: Optional[int], message: str):
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"{source!r}: {message}{where}")
        self.source = source; self.offset = offset; self.message = message

class Parser:
    """
    Recursive descent over

        term     ::= operand ( operator term )?
        operand  ::= '!' primary | primary
        primary  ::= '(' term ')' | literal | variable

    AND and OR share one precedence level and chains group to the right:
    a+b.c is Or(a, And(b, c)).
    """
    def __init__(self, source: str, tokens: List[Token]):
        self.source = source; self.toks = tokens; self.i = 0

    def _peek(self)->Token:
        return self.toks[self.i] if self.i < len(self.toks) else self.toks[-1]
    def _advance(self)->Token:
        t = self._peek(); self.i += 1; return t
    def _error(self, msg:str)->None:
        raise ParseError(self.source, self._peek().offset, msg)

    def parse_term(self)->Expr:
        # Chains are read in a loop and folded from the right, so long
        # chains cost no stack depth.
        operands = [self.parse_operand()]; ops: List[str] = []
        while self._peek().kind in ("AND","OR"):
            ops.append(self._advance().kind); operands.append(self.parse_operand())
        expr = operands.pop()
        while ops:
            node = And if ops.pop()=="AND" else Or
            expr = node(operands.pop(), expr)
        return expr

    def parse_operand(self)->Expr:
        if self._peek().kind=="NOT":
            self._advance()
            if self._peek().kind=="NOT": self._error("'!' applies to a group, variable or literal; write !(!x)")
            return Not(self.parse_primary())
        return self.parse_primary()

    def parse_primary(self)->Expr:
        t = self._peek()
        if t.kind=="LPAREN":
            self._advance(); e = self.parse_term()
            if self._peek().kind!="RPAREN": self._error("missing ')' to close '('")
            self._advance(); return e
        if t.kind=="LITERAL": self._advance(); return Literal(t.value=="1")
        if t.kind=="VAR": self._advance(); return Variable(t.value)
        if t.kind=="EOF": self._error("unexpected end of expression")
        self._error(f"expected a variable, literal or '(', got {t.kind}")

def parse(source: str)->Expr:
    try:
        toks = list(tokenize(source))
    except LexError as e:
        raise ParseError(source, e.offset, str(e)) from e
    p = Parser(source, toks)
    if p._peek().kind=="EOF": raise ParseError(source, 0, "empty expression")
    try:
        expr = p.parse_term()
    except RecursionError as e:
        raise ParseError(source, None, "expression nested too deeply") from e
    if p._peek().kind!="EOF": p._error(f"unexpected {p._peek().kind} after complete expression")
    return expr

def expr_to_str(e: Expr)->str:
    # Post-order walk with an explicit stack; right-grouped chains can be
    # thousands of nodes deep.
    out: List[str] = []
    stack: List[Tuple[Expr, bool]] = [(e, False)]
    while stack:
        node, done = stack.pop()
        if isinstance(node, Literal): out.append("1" if node.value else "0")
        elif isinstance(node, Variable): out.append(node.name)
        elif isinstance(node, Not):
            if not done: stack += [(node, True), (node.expr, False)]; continue
            sub = out.pop()
            out.append(f"!{sub}" if isinstance(node.expr,(Literal,Variable)) else f"!({sub})")
        elif isinstance(node, (And, Or)):
            if not done: stack += [(node, True), (node.right, False), (node.left, False)]; continue
            right = out.pop(); left = out.pop()
            op = "." if isinstance(node, And) else "+"
            out.append(f"{_maybe_paren(node.left, left)}{op}{_maybe_paren(node.right, right)}")
        else:
            raise TypeError(f"unknown expr {node}")
    return out.pop()

def _maybe_paren(e: Expr, text: str)->str:
    return text if isinstance(e,(Literal,Variable,Not)) else f"({text})"

__all__ = ["Literal","Variable","Not","And","Or","Expr","ParseError","Parser","parse","expr_to_str"]
