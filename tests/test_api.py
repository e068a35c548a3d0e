"""
Tests for the package-level tokenize/parse functions.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

import clita
from clita.parser.ast_nodes import BinaryExpr, NumericLiteral, Program


class TestPublicAPI(unittest.TestCase):

    def test_tokenize(self):
        tokens = clita.tokenize("5 <= 10")
        self.assertEqual([t.kind for t in tokens],
                         [clita.TokenType.NUMERIC, clita.TokenType.LTE,
                          clita.TokenType.NUMERIC, clita.TokenType.EOF])

    def test_parse_defaults_to_program(self):
        self.assertIsInstance(clita.parse("x := 5."), Program)

    def test_parse_entry(self):
        self.assertEqual(clita.parse("20 + 5", entry="binary_expr"),
                         BinaryExpr(NumericLiteral(20), "+", NumericLiteral(5)))

    def test_errors_are_exported(self):
        with self.assertRaises(clita.LexerError):
            clita.tokenize("@")
        with self.assertRaises(clita.ParseError):
            clita.parse("x :=", filename="api.clita")

    def test_version(self):
        self.assertTrue(clita.__version__)


if __name__ == "__main__":
    unittest.main()
