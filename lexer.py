from dataclasses import dataclass
from typing import Iterator, Optional

# Longest spelling first so "&&" is not read as "&" followed by "&".
OPERATORS = [
    ("&&", "AND"), ("||", "OR"),
    (".", "AND"), ("&", "AND"), ("*", "AND"),
    ("+", "OR"), ("|", "OR"),
]
MARKUP = "\\_^{}"
DIGITS = "0123456789"

@dataclass
class Token:
    kind: str
    value: Optional[str]
    offset: int

class LexError(Exception):
    def __init__(self, message: str, offset: int):
        super().__init__(message)
        self.offset = offset

def is_name_start(ch: str) -> bool:
    return ch.isalpha() or (ch != "" and ch in MARKUP)

def is_name_char(ch: str) -> bool:
    return is_name_start(ch) or (ch != "" and ch in DIGITS)

def tokenize(source: str) -> Iterator[Token]:
    i, n = 0, len(source)

    def peek() -> str:
        return source[i] if i < n else ""

    while i < n:
        ch = peek()

        # Whitespace
        if ch.isspace():
            i += 1
            continue

        if ch in "()!":
            kind = {"(": "LPAREN", ")": "RPAREN", "!": "NOT"}[ch]
            yield Token(kind, None, i)
            i += 1
            continue

        op = next(((s, k) for s, k in OPERATORS if source.startswith(s, i)), None)
        if op is not None:
            spelling, kind = op
            yield Token(kind, spelling, i)
            i += len(spelling)
            continue

        # Literals win over names: a token starting with 0/1 is always a literal
        if ch in "01":
            yield Token("LITERAL", ch, i)
            i += 1
            continue

        if is_name_start(ch):
            start = i
            while i < n and is_name_char(peek()):
                i += 1
            yield Token("VAR", source[start:i], start)
            continue

        if ch in DIGITS:
            raise LexError(f"Invalid literal '{ch}' (only 0 and 1 are allowed)", i)
        raise LexError(f"Invalid character '{ch}'", i)

    yield Token("EOF", None, n)
