"""dicestats lexer — character-driven scanner for dice notation."""

from dicestats.lexer.tokens import Token, TokenType
from dicestats.lexer.scanner import (
    InvalidNumberLiteralError,
    ScanError,
    Scanner,
    UnsupportedCharacterError,
)

__all__ = [
    "Token",
    "TokenType",
    "Scanner",
    "ScanError",
    "UnsupportedCharacterError",
    "InvalidNumberLiteralError",
]
