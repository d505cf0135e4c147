"""
Tests for output formatting and the decaf-scan driver.

Author: xwest
"""

import io
import json
import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from decaf.cli import main
from decaf.lexer.lexer import scan
from decaf.lexer.emitter import format_token, format_tokens, format_error, format_result


class TestEmitter(unittest.TestCase):
    """Test token and error formatting."""

    def test_end_to_end_token_lines(self):
        result = scan("int x = 5 + 3;")
        self.assertEqual(format_result(result), (
            '1 RESERVED "int"\n'
            '1 IDENTIFIER "x"\n'
            '1 ASSIGNOP "="\n'
            '1 INTLITERAL "5"\n'
            '1 ARITHOP "+"\n'
            '1 INTLITERAL "3"\n'
            '1 SEMICOLON ";"\n'
            '\n'
        ))

    def test_token_labels(self):
        result = scan("{ } [ ] ( ) , 0x1 true 'a' \"s\" && == <")
        self.assertEqual([format_token(t) for t in result.tokens], [
            '1 OPENCURLY "{"',
            '1 CLOSECURLY "}"',
            '1 OPENSQUARE "["',
            '1 CLOSESQUARE "]"',
            '1 OPENPAREN "("',
            '1 CLOSEPAREN ")"',
            '1 COMMA ","',
            '1 HEXLITERAL "0x1"',
            '1 BOOLLITERAL "1"',
            '1 CHARLITERAL "a"',
            '1 STRINGLITERAL "s"',
            '1 CONDOP "&&"',
            '1 EQOP "=="',
            '1 RELOP "<"',
        ])

    def test_empty_unit_is_a_blank_line(self):
        self.assertEqual(format_tokens([]), "\n")

    def test_caret_report(self):
        result = scan('x = "abc', "prog.dcf")
        self.assertEqual(format_error(result.error), (
            "Parse Error at file prog.dcf line: 1 column: 5\n"
            ' x = "abc\n'
            "     ^- here\n"
        ))

    def test_caret_report_without_filename(self):
        result = scan("a\nb ? c")
        self.assertEqual(format_result(result), (
            "Parse Error at file  line: 2 column: 3\n"
            " b ? c\n"
            "   ^- here\n"
        ))


class TestDriver(unittest.TestCase):
    """Test the command line driver in both modes."""

    def _run(self, argv, stdin_text=""):
        stdout = io.StringIO()
        code = main(argv, stdin=io.StringIO(stdin_text), stdout=stdout)
        return code, stdout.getvalue()

    def _write_source(self, text: str) -> str:
        handle = tempfile.NamedTemporaryFile("w", suffix=".dcf", delete=False, encoding="utf-8")
        with handle:
            handle.write(text)
        self.addCleanup(os.unlink, handle.name)
        return handle.name

    def test_interactive_mode_scans_each_line(self):
        code, output = self._run([], "a = 1;\nb\n")
        self.assertEqual(code, 0)
        self.assertEqual(output, (
            '1 IDENTIFIER "a"\n1 ASSIGNOP "="\n1 INTLITERAL "1"\n1 SEMICOLON ";"\n\n'
            '1 IDENTIFIER "b"\n\n'
        ))

    def test_interactive_mode_continues_after_error(self):
        code, output = self._run([], '"open\nok\n')
        self.assertEqual(code, 1)
        self.assertEqual(output, (
            "Parse Error at file  line: 1 column: 1\n"
            ' "open\n'
            " ^- here\n"
            '1 IDENTIFIER "ok"\n\n'
        ))

    def test_interactive_lines_are_independent(self):
        """A comment opened on one line is not continued on the next."""
        code, output = self._run([], "/* start\nend */\n")
        self.assertEqual(code, 1)
        self.assertTrue(output.startswith("Parse Error at file  line: 1 column: 1\n"))
        self.assertTrue(output.endswith('1 IDENTIFIER "end"\n1 ARITHOP "*"\n1 ARITHOP "/"\n\n'))

    def test_file_mode(self):
        path = self._write_source("int x;\n// comment\nx = 0x1F;\n")
        code, output = self._run([path])
        self.assertEqual(code, 0)
        self.assertEqual(output.splitlines(), [
            '1 RESERVED "int"',
            '1 IDENTIFIER "x"',
            '1 SEMICOLON ";"',
            '3 IDENTIFIER "x"',
            '3 ASSIGNOP "="',
            '3 HEXLITERAL "0x1F"',
            '3 SEMICOLON ";"',
            '',
        ])

    def test_file_mode_error(self):
        path = self._write_source("int x;\nx = 'ab';\n")
        code, output = self._run([path])
        self.assertEqual(code, 1)
        self.assertEqual(output, (
            f"Parse Error at file {path} line: 2 column: 5\n"
            " x = 'ab';\n"
            "     ^- here\n"
        ))

    def test_missing_file(self):
        code, output = self._run([os.path.join(tempfile.gettempdir(), "no-such-file.dcf")])
        self.assertEqual(code, 2)
        self.assertEqual(output, "")

    def test_json_format(self):
        code, output = self._run(["--format", "json"], "x 1\n\\\n")
        self.assertEqual(code, 1)
        first, second = [json.loads(line) for line in output.splitlines()]
        self.assertTrue(first["ok"])
        self.assertEqual([t["kind"] for t in first["tokens"]], ["IDENTIFIER", "INTLITERAL"])
        self.assertFalse(second["ok"])
        self.assertEqual(second["error"]["code"], "L001")
        self.assertEqual(second["error"]["column"], 1)


if __name__ == '__main__':
    unittest.main()
