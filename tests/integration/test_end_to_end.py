"""
End-to-end tests: source text in, AST and errors out.
"""

import logging

import pytest

from monkey import ParseResult, parse_file, parse_source
from monkey.compiler.ast_nodes import LetStatement, ReturnStatement
from monkey.utils.errors import ParserError

PROGRAM = """
let five = 5;
let ten = 10;

let add = fn(x, y) {
  x + y;
};

let result = add(five, ten);
return result;
"""


class TestParseSource:
    """Tests for the parse_source convenience function."""

    def test_well_formed_program(self):
        result = parse_source(PROGRAM)
        assert isinstance(result, ParseResult)
        assert result.success
        assert result.errors == []
        names = [s.name.value for s in result.program.statements if isinstance(s, LetStatement)]
        assert names == ["five", "ten", "add", "result"]
        assert isinstance(result.program.statements[-1], ReturnStatement)

    def test_function_body_is_skipped(self):
        """The x + y; inside the function body ends the add binding early."""
        result = parse_source(PROGRAM)
        # '};' leaves a stray '}' and ';' which start no statement
        assert len(result.program.statements) == 5

    def test_errors_and_diagnostics(self):
        result = parse_source("let = 5;\nlet y = 1;", filename="bad.mk")
        assert not result.success
        assert result.errors == ["expected next token to be IDENT, got = instead"]
        assert len(result.diagnostics) == 1
        assert [s.name.value for s in result.program.statements] == ["y"]
        rendered = result.render_diagnostics(use_color=False)
        assert "--> bad.mk:1:5" in rendered

    def test_locations_use_filename(self):
        result = parse_source("let x = 1;", filename="loc.mk")
        stmt = result.program.statements[0]
        assert str(stmt.name.location) == "loc.mk:1:5"

    def test_strict_raises(self):
        with pytest.raises(ParserError) as exc_info:
            parse_source("let x 5;", filename="bad.mk", strict=True)
        err = exc_info.value
        assert err.errors == ["expected next token to be =, got INT instead"]
        assert err.location.line == 1
        assert err.location.column == 7
        assert "let x 5;" in str(err)

    def test_strict_passes_clean_source(self):
        result = parse_source("return 1;", strict=True)
        assert result.success

    def test_debug_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="monkey"):
            parse_source("let = 5;", filename="log.mk")
        messages = [r.getMessage() for r in caplog.records]
        assert any("expected next token to be IDENT" in m for m in messages)
        assert any("parsed log.mk: 0 statement(s), 1 error(s)" in m for m in messages)


class TestParseFile:
    """Tests for parse_file."""

    def test_parse_file(self, tmp_path):
        path = tmp_path / "prog.mk"
        path.write_text("let a = 1;\nreturn a;\n", encoding="utf-8")
        result = parse_file(path)
        assert result.success
        assert result.filename == str(path)
        assert len(result.program.statements) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            parse_file(tmp_path / "nope.mk")
