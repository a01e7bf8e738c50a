"""dicestats scanner — hand-written, character-driven tokenizer.

Design decisions:
- One token per `read_token()` call; the caller drains the stream.
- Only the space character and newlines are whitespace.
- Integer literals never absorb a leading '-'; negation is the parser's job.
- Multi-character operators share one maximal-munch table (`OPERATORS`).
- Errors are raised after the offending input has been consumed.
"""

from __future__ import annotations

from collections.abc import Iterator

from dicestats.lexer.tokens import KEYWORDS, OPERATORS, Token, TokenType

INT_MAX = 2**31 - 1

ASCII_DIGITS = frozenset("0123456789")
ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")


class ScanError(Exception):
    """Raised on lexical errors with source location."""

    def __init__(self, message: str, line: int, column: int, file: str = "<unknown>"):
        self.line = line
        self.column = column
        self.file = file
        super().__init__(f"{file}:{line}:{column}: {message}")


class UnsupportedCharacterError(ScanError):
    """The character is outside the language's lexical alphabet."""

    def __init__(self, text: str, line: int, column: int, file: str = "<unknown>"):
        self.text = text
        super().__init__(f"Unsupported character: {text!r}", line, column, file)


class InvalidNumberLiteralError(ScanError):
    """The digit run does not fit a signed 32-bit integer."""

    def __init__(self, text: str, line: int, column: int, file: str = "<unknown>"):
        self.text = text
        super().__init__(
            f"Invalid number literal: {text} exceeds {INT_MAX}",
            line, column, file,
        )


class Scanner:
    """Tokenizes dice notation into `Token` objects, one per call.

    Usage::

        scanner = Scanner("4d6k3 + 2")
        tokens = scanner.tokenize()

    or, pulling tokens one at a time::

        scanner = Scanner("2d20 explode")
        while (token := scanner.read_token()).type is not TokenType.EOF:
            ...
    """

    def __init__(self, source: str, filename: str = "<unknown>") -> None:
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def read_token(self) -> Token:
        """Consume input up to and including the next token and return it.

        Returns an EOF token once the input is exhausted, on this and every
        later call.
        """
        while not self.at_end():
            ch = self._peek()

            if ch == " " or ch == "\n":
                self._advance()
                continue

            if ch in ASCII_DIGITS:
                return self._scan_number()

            if ch in ASCII_LETTERS:
                return self._scan_identifier()

            if ch in OPERATORS:
                return self._scan_operator()

            line, column = self.line, self.column
            self._advance()
            raise UnsupportedCharacterError(ch, line, column, self.filename)

        return self._make_token(TokenType.EOF)

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source and return the token list."""
        self.pos = 0
        self.line = 1
        self.column = 1
        return list(self)

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens from the current position through a single EOF."""
        while True:
            token = self.read_token()
            yield token
            if token.type is TokenType.EOF:
                return

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_operator(self) -> Token:
        """Scan punctuation, preferring the longest operator in `OPERATORS`."""
        line, column = self.line, self.column
        ch = self._advance()
        single, follows = OPERATORS[ch]

        if not self.at_end() and self._peek() in follows:
            follow = self._advance()
            return Token(follows[follow], None, line, column, self.filename)

        if single is None:
            raise UnsupportedCharacterError(ch, line, column, self.filename)
        return Token(single, None, line, column, self.filename)

    def _scan_number(self) -> Token:
        """Scan an unsigned decimal integer literal."""
        start_col = self.column
        digits: list[str] = []

        while not self.at_end() and self._peek() in ASCII_DIGITS:
            digits.append(self._advance())

        text = "".join(digits)
        # Bound the width first; int() rejects very long strings outright.
        significant = text.lstrip("0") or "0"
        if len(significant) > len(str(INT_MAX)):
            raise InvalidNumberLiteralError(text, self.line, start_col, self.filename)

        value = int(significant)
        if value > INT_MAX:
            raise InvalidNumberLiteralError(text, self.line, start_col, self.filename)

        return Token(TokenType.INT, value, self.line, start_col, self.filename)

    def _scan_identifier(self) -> Token:
        """Scan a keyword, or an unrecognized word the parser may reject."""
        start_col = self.column
        chars: list[str] = []

        while not self.at_end() and (self._peek() in ASCII_LETTERS or self._peek() == "_"):
            chars.append(self._advance())

        word = "".join(chars)
        if word in KEYWORDS:
            token_type, value = KEYWORDS[word]
            return Token(token_type, value, self.line, start_col, self.filename)
        return Token(TokenType.UNRECOGNIZED, word, self.line, start_col, self.filename)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character without consuming it."""
        return self.source[self.pos]

    def _advance(self) -> str:
        """Consume and return the current character."""
        ch = self.source[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def _make_token(self, token_type: TokenType) -> Token:
        return Token(token_type, None, self.line, self.column, self.filename)
