"""
Test suite for the Clita lexer.

Tests cover:
- Whitespace, symbols, numerals and punctuation
- The >= / <= rule
- Source spans and locations
- Lexical errors (unknown characters, numeric overflow)

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from clita.lexer.lexer import Lexer, next_token, tokenize_string, tokenize_file
from clita.lexer.tokens import TokenType, PUNCTUATION_TOKENS, MAX_NUMERIC_VALUE
from clita.lexer.errors import (
    ErrorKind, LexerError, UnknownCharacterError, NumericOverflowError
)


def kinds(source: str):
    return [t.kind for t in tokenize_string(source)]


class TestLexer(unittest.TestCase):
    """Test cases for tokenizing well-formed input."""

    def test_empty_source(self):
        tokens = tokenize_string("")
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].kind, TokenType.EOF)
        self.assertEqual((tokens[0].pos, tokens[0].end), (0, 0))
        self.assertEqual(tokens[0].text, "")

    def test_whitespace_only_yields_single_eof_at_end(self):
        for source in [" ", "\t\t", "\n", " \r\n \t ", "\v\f  \n"]:
            with self.subTest(source=source):
                tokens = tokenize_string(source)
                self.assertEqual(len(tokens), 1)
                self.assertEqual(tokens[0].kind, TokenType.EOF)
                self.assertEqual(tokens[0].pos, len(source))
                self.assertEqual(tokens[0].end, len(source))

    def test_symbol_spans_whole_input(self):
        for source in ["x", "abc", "total_2", "_tmp", "_", "__init__", "X9_y"]:
            with self.subTest(source=source):
                tokens = tokenize_string(source)
                self.assertEqual(len(tokens), 2)
                symbol = tokens[0]
                self.assertEqual(symbol.kind, TokenType.SYMBOL)
                self.assertEqual(symbol.text, source)
                self.assertEqual((symbol.pos, symbol.end), (0, len(source)))
                self.assertIsNone(symbol.value)

    def test_numeric_value(self):
        for source, value in [("0", 0), ("5", 5), ("20", 20), ("007", 7),
                              (str(MAX_NUMERIC_VALUE), MAX_NUMERIC_VALUE)]:
            with self.subTest(source=source):
                tokens = tokenize_string(source)
                self.assertEqual(len(tokens), 2)
                self.assertEqual(tokens[0].kind, TokenType.NUMERIC)
                self.assertEqual(tokens[0].value, value)
                self.assertEqual(tokens[0].text, source)

    def test_digits_then_letters_split(self):
        tokens = tokenize_string("12ab")
        self.assertEqual([t.kind for t in tokens],
                         [TokenType.NUMERIC, TokenType.SYMBOL, TokenType.EOF])
        self.assertEqual(tokens[0].value, 12)
        self.assertEqual(tokens[1].text, "ab")

    def test_every_punctuation_character(self):
        for char, kind in PUNCTUATION_TOKENS:
            if char == "_":
                continue
            with self.subTest(char=char):
                tokens = tokenize_string(char)
                self.assertEqual(tokens[0].kind, kind)
                self.assertEqual(tokens[0].text, char)
                self.assertEqual((tokens[0].pos, tokens[0].end), (0, 1))

    def test_underscore_starts_a_symbol(self):
        self.assertEqual(kinds("_ x"), [TokenType.SYMBOL, TokenType.SYMBOL, TokenType.EOF])

    def test_compound_comparisons(self):
        self.assertEqual(kinds(">="), [TokenType.GTE, TokenType.EOF])
        self.assertEqual(kinds("<="), [TokenType.LTE, TokenType.EOF])
        tokens = tokenize_string("5 <= 10")
        self.assertEqual(tokens[1].text, "<=")
        self.assertEqual((tokens[1].pos, tokens[1].end), (2, 4))

    def test_separated_comparison_is_two_tokens(self):
        self.assertEqual(kinds("> ="), [TokenType.GT, TokenType.EQUALS, TokenType.EOF])
        self.assertEqual(kinds("< ="), [TokenType.LT, TokenType.EQUALS, TokenType.EOF])

    def test_only_gt_and_lt_combine(self):
        self.assertEqual(kinds("=="), [TokenType.EQUALS, TokenType.EQUALS, TokenType.EOF])
        self.assertEqual(kinds("=>"), [TokenType.EQUALS, TokenType.GT, TokenType.EOF])
        self.assertEqual(kinds(">=="), [TokenType.GTE, TokenType.EQUALS, TokenType.EOF])
        self.assertEqual(kinds("--"), [TokenType.MINUS, TokenType.MINUS, TokenType.EOF])

    def test_declaration_tokens(self):
        self.assertEqual(
            kinds("x := 5."),
            [TokenType.SYMBOL, TokenType.COLON, TokenType.EQUALS,
             TokenType.NUMERIC, TokenType.DOT, TokenType.EOF]
        )

    def test_pragma_tokens(self):
        self.assertEqual(
            kinds("`opt[2]`"),
            [TokenType.BACKTICK, TokenType.SYMBOL, TokenType.BRACKET_LEFT,
             TokenType.NUMERIC, TokenType.BRACKET_RIGHT, TokenType.BACKTICK,
             TokenType.EOF]
        )

    def test_token_text_matches_source_slice(self):
        source = "  total := 20 + 5.\n  `opt[3]`\r\n flag = 5 >= 1 .\t'\"*/<"
        for token in tokenize_string(source):
            self.assertEqual(source[token.pos:token.end], token.text)
            self.assertLessEqual(token.pos, token.end)
            self.assertLessEqual(token.end, len(source))
            self.assertEqual(token.location.offset, token.pos)

    def test_line_and_column_tracking(self):
        tokens = tokenize_string("x\n  y := 1.", filename="main.clita")
        y = tokens[1]
        self.assertEqual(y.text, "y")
        self.assertEqual((y.location.line, y.location.column), (2, 3))
        self.assertEqual(str(y.location), "main.clita:2:3")

    def test_reserved_words_become_keywords(self):
        tokens = Lexer("let x", reserved_words={"let"}).tokenize()
        self.assertEqual(tokens[0].kind, TokenType.KEYWORD)
        self.assertEqual(tokens[0].text, "let")
        self.assertEqual(tokens[1].kind, TokenType.SYMBOL)

    def test_no_keywords_by_default(self):
        self.assertEqual(kinds("true false let"),
                         [TokenType.SYMBOL] * 3 + [TokenType.EOF])

    def test_iteration_is_lazy_and_stops_at_eof(self):
        lexer = Lexer("a b")
        iterator = iter(lexer)
        first = next(iterator)
        self.assertEqual(first.text, "a")
        self.assertEqual(lexer.pos, 1)
        rest = list(iterator)
        self.assertEqual([t.kind for t in rest], [TokenType.SYMBOL, TokenType.EOF])

    def test_tokenize_restarts_from_beginning(self):
        lexer = Lexer("a b")
        lexer.next_token()
        tokens = lexer.tokenize()
        self.assertEqual([t.text for t in tokens], ["a", "b", ""])

    def test_next_token_function(self):
        token, position = next_token("x := 5.", 1)
        self.assertEqual(token.kind, TokenType.COLON)
        self.assertEqual(position, 3)
        token, position = next_token("x := 5.", 7)
        self.assertEqual(token.kind, TokenType.EOF)
        self.assertEqual((token.pos, position), (7, 7))

    def test_next_token_recomputes_location(self):
        token, _ = next_token("a\nbc d", 5)
        self.assertEqual((token.location.line, token.location.column), (2, 4))

    def test_reset_rejects_out_of_range(self):
        with self.assertRaises(ValueError):
            Lexer("abc").reset(4)

    def test_token_display(self):
        token = tokenize_string(">=")[0]
        self.assertEqual(str(token), ">= = (Greater than or Equal)")
        self.assertEqual(TokenType.EOF.display_name, "End of file")

    def test_literal_start_classification(self):
        tokens = Lexer("5 x true let false +", reserved_words={"let", "false"}).tokenize()
        self.assertEqual([t.is_literal for t in tokens],
                         [True, True, True, False, True, False, False])
        self.assertEqual([t.is_boolean_word for t in tokens[:5]],
                         [False, False, True, False, True])

    def test_tokenize_file(self):
        import tempfile
        with tempfile.NamedTemporaryFile("w", suffix=".clita", delete=False) as f:
            f.write("x = 7.\n")
            path = f.name
        try:
            tokens = tokenize_file(path)
        finally:
            os.unlink(path)
        self.assertEqual(len(tokens), 5)
        self.assertEqual(tokens[0].location.filename, path)


class TestLexerErrors(unittest.TestCase):
    """Test cases for lexical errors."""

    def test_unknown_character(self):
        with self.assertRaises(UnknownCharacterError) as ctx:
            tokenize_string("@")
        error = ctx.exception
        self.assertEqual(error.character, "@")
        self.assertEqual(error.position, 0)
        self.assertEqual(error.kind, ErrorKind.UNKNOWN_CHARACTER)
        self.assertEqual(error.diagnostic.code, "L001")

    def test_unknown_character_position(self):
        with self.assertRaises(UnknownCharacterError) as ctx:
            tokenize_string("x := 5 ! 3.")
        self.assertEqual(ctx.exception.character, "!")
        self.assertEqual(ctx.exception.position, 7)

    def test_unsupported_punctuation(self):
        for char in "!#$%&(),;?@\\^{|}~":
            with self.subTest(char=char):
                with self.assertRaises(UnknownCharacterError):
                    tokenize_string(char)

    def test_non_ascii_is_rejected(self):
        for source in ["é", "x := α.", "\u00a0", "\x00"]:
            with self.subTest(source=source):
                with self.assertRaises(UnknownCharacterError):
                    tokenize_string(source)

    def test_numeric_overflow(self):
        with self.assertRaises(NumericOverflowError) as ctx:
            tokenize_string("x := 2147483648.")
        error = ctx.exception
        self.assertEqual(error.position, 5)
        self.assertEqual(error.text, "2147483648")
        self.assertEqual(error.kind, ErrorKind.NUMERIC_OVERFLOW)
        self.assertEqual(error.diagnostic.code, "L007")

    def test_huge_numeral_overflows_without_conversion(self):
        source = "9" * 5000
        with self.assertRaises(NumericOverflowError) as ctx:
            tokenize_string(source)
        self.assertEqual(ctx.exception.position, 0)
        self.assertEqual(ctx.exception.text, source)

    def test_long_run_of_leading_zeros(self):
        tokens = tokenize_string("0" * 5000 + "1")
        self.assertEqual(tokens[0].kind, TokenType.NUMERIC)
        self.assertEqual(tokens[0].value, 1)
        self.assertEqual(tokenize_string("0" * 5000)[0].value, 0)

    def test_custom_numeric_limit(self):
        self.assertEqual(Lexer("255", max_numeric=255).tokenize()[0].value, 255)
        with self.assertRaises(NumericOverflowError):
            Lexer("256", max_numeric=255).tokenize()

    def test_errors_share_base_class(self):
        for source in ["@", "99999999999"]:
            with self.subTest(source=source):
                with self.assertRaises(LexerError):
                    tokenize_string(source)

    def test_diagnostic_rendering(self):
        with self.assertRaises(UnknownCharacterError) as ctx:
            tokenize_string("a\n @", filename="demo.clita")
        rendered = str(ctx.exception)
        self.assertTrue(rendered.startswith("ERROR: Unknown character: '@'"))
        self.assertIn("--> demo.clita:2:2", rendered)
        self.assertIn("help:", rendered)


if __name__ == "__main__":
    unittest.main()
