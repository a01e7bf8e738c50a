"""Token types and Token dataclass for the dicestats scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every distinct token the dicestats scanner can produce."""

    # Structure
    EOF = auto()

    # Literals
    INT = auto()            # value: int
    DIE = auto()            # value: True for "die", False for "d"
    KEEP = auto()           # value: True for "keep", False for "k"
    DROP = auto()
    EXPLODE = auto()
    EMPHASIS = auto()
    UNRECOGNIZED = auto()   # value: the identifier text

    # Grouping
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Arithmetic / punctuation
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    DOT = auto()
    BANG = auto()

    # Comparison
    LESS_THAN = auto()
    LESS_EQUAL = auto()     # <=
    GREATER_THAN = auto()
    GREATER_EQUAL = auto()  # >=
    EQUALS = auto()         # ==


# Map keyword strings to (token type, payload). Matching is exact, so "die"
# never resolves through its "d" prefix.
KEYWORDS: dict[str, tuple[TokenType, bool | None]] = {
    "d": (TokenType.DIE, False),
    "die": (TokenType.DIE, True),
    "k": (TokenType.KEEP, False),
    "keep": (TokenType.KEEP, True),
    "drop": (TokenType.DROP, None),
    "explode": (TokenType.EXPLODE, None),
    "emphasis": (TokenType.EMPHASIS, None),
}


# First character -> (kind when it stands alone, {follow char: extended kind}).
# A None standalone kind means the character is only valid as a prefix.
OPERATORS: dict[str, tuple[TokenType | None, dict[str, TokenType]]] = {
    "(": (TokenType.LPAREN, {}),
    ")": (TokenType.RPAREN, {}),
    "{": (TokenType.LBRACE, {}),
    "}": (TokenType.RBRACE, {}),
    "+": (TokenType.PLUS, {}),
    "-": (TokenType.MINUS, {}),
    "*": (TokenType.STAR, {}),
    "/": (TokenType.SLASH, {}),
    ".": (TokenType.DOT, {}),
    "!": (TokenType.BANG, {}),
    "<": (TokenType.LESS_THAN, {"=": TokenType.LESS_EQUAL}),
    ">": (TokenType.GREATER_THAN, {"=": TokenType.GREATER_EQUAL}),
    "=": (None, {"=": TokenType.EQUALS}),
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the scanner.

    ``value`` carries the payload of literal kinds (the integer for INT, the
    long-form flag for DIE and KEEP, the raw text for UNRECOGNIZED) and is
    None for every other kind. ``column`` is the position of the lexeme's
    first character.
    """

    type: TokenType
    value: int | bool | str | None
    line: int
    column: int
    file: str = "<unknown>"

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
