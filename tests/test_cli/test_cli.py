"""Tests for the dicestats command-line driver."""

from dicestats import __version__
from dicestats.cli import main


class TestCommands:
    def test_no_arguments_prints_usage(self, capsys):
        assert main([]) == 1
        assert "Usage:" in capsys.readouterr().out

    def test_help(self, capsys):
        assert main(["--help"]) == 0
        assert "dicestats tokenize" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == f"dicestats {__version__}"

    def test_unknown_command(self, capsys):
        assert main(["roll", "2d6"]) == 1
        assert "unknown command 'roll'" in capsys.readouterr().out


class TestScan:
    def test_scan_expression(self, capsys):
        assert main(["scan", "4d6k3"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "Token(INT, 4, 1:1)",
            "Token(DIE, False, 1:2)",
            "Token(INT, 6, 1:3)",
            "Token(KEEP, False, 1:4)",
            "Token(INT, 3, 1:5)",
            "Token(EOF, 1:6)",
        ]

    def test_scan_joins_arguments(self, capsys):
        assert main(["scan", "2d6", "+", "1"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[-2] == "Token(INT, 1, 1:7)"

    def test_scan_requires_expression(self, capsys):
        assert main(["scan"]) == 1
        assert "requires an expression" in capsys.readouterr().out

    def test_scan_stops_at_first_error(self, capsys):
        assert main(["scan", "1 @ 2"]) == 1
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "Token(INT, 1, 1:1)",
            "Scan error: <expr>:1:3: Unsupported character: '@'",
        ]


class TestTokenizeFile:
    def test_tokenize_file(self, tmp_path, capsys):
        path = tmp_path / "roll.dice"
        path.write_text("2d20 explode\n", encoding="utf-8")
        assert main(["tokenize", str(path)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[3] == "Token(EXPLODE, 1:6)"
        assert lines[-1] == "Token(EOF, 2:1)"

    def test_missing_file(self, tmp_path, capsys):
        assert main(["tokenize", str(tmp_path / "absent.dice")]) == 1
        assert "file not found" in capsys.readouterr().out

    def test_tokenize_requires_file(self, capsys):
        assert main(["tokenize"]) == 1
        assert "requires exactly one file argument" in capsys.readouterr().out

    def test_tokenize_rejects_extra_arguments(self, tmp_path, capsys):
        path = tmp_path / "roll.dice"
        path.write_text("1d6", encoding="utf-8")
        assert main(["tokenize", str(path), "extra"]) == 1
        assert "requires exactly one file argument" in capsys.readouterr().out

    def test_directory_is_not_a_file(self, tmp_path, capsys):
        assert main(["tokenize", str(tmp_path)]) == 1
        assert "file not found" in capsys.readouterr().out

    def test_invalid_utf8(self, tmp_path, capsys):
        path = tmp_path / "bad.dice"
        path.write_bytes(b"1d6 \xff\xfe")
        assert main(["tokenize", str(path)]) == 1
        assert "not valid UTF-8" in capsys.readouterr().out

    def test_overflow_reported(self, tmp_path, capsys):
        path = tmp_path / "big.dice"
        path.write_text("99999999999d6", encoding="utf-8")
        assert main(["tokenize", str(path)]) == 1
        out = capsys.readouterr().out
        assert out.startswith(f"Scan error: {path}:1:1: Invalid number literal: 99999999999")

    def test_huge_number_reported(self, capsys):
        assert main(["scan", "1" * 5000]) == 1
        assert capsys.readouterr().out.startswith("Scan error: <expr>:1:1: Invalid number literal: 111")
