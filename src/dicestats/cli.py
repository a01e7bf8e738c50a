"""dicestats CLI entry point.

Usage:
    dicestats tokenize <file>          Display the token stream of a file
    dicestats scan <expression>        Display the token stream of an expression
"""

from __future__ import annotations

import sys
from pathlib import Path

from dicestats.lexer.scanner import ScanError, Scanner


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]

    if len(args) < 1:
        print(__doc__.strip())
        return 1

    command = args[0]

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from dicestats import __version__
        print(f"dicestats {__version__}")
        return 0

    if command == "scan":
        if len(args) < 2:
            print("Error: command 'scan' requires an expression argument")
            return 1
        return _cmd_tokenize(" ".join(args[1:]), "<expr>")

    if command == "tokenize":
        if len(args) != 2:
            print("Error: command 'tokenize' requires exactly one file argument")
            return 1

        filepath = Path(args[1])
        if not filepath.is_file():
            print(f"Error: file not found: {filepath}")
            return 1

        try:
            source = filepath.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            print(f"Error: file is not valid UTF-8: {filepath}")
            return 1

        return _cmd_tokenize(source, str(filepath))

    print(f"Error: unknown command '{command}'")
    print(__doc__.strip())
    return 1


def _cmd_tokenize(source: str, filename: str) -> int:
    """Print tokens until EOF, stopping at the first scan error."""
    scanner = Scanner(source, filename)
    try:
        for tok in scanner:
            print(tok)
    except ScanError as e:
        print(f"Scan error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
