"""
Clita Lexer - turns source text into tokens

Scans left to right, one token per call. Whitespace is skipped, symbols and
numbers are maximal runs, punctuation comes from a fixed table. The only
two-character tokens are >= and <=.

xwest
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from .tokens import (
    Token, TokenType, SourceLocation, PUNCTUATION, COMPOUND_COMPARISONS,
    WHITESPACE, DIGITS, SYMBOL_START, SYMBOL_PART, PUNCTUATION_CHARS,
    RESERVED_WORDS, MAX_NUMERIC_VALUE
)
from .errors import create_unknown_character_error, create_numeric_overflow_error


class Lexer:
    """
    Clita lexical analyzer.

    Produces tokens on demand through `next_token()`, or all at once through
    `tokenize()`. Iterating a lexer yields tokens up to and including EOF.
    The only state is the current position and its line/column.
    """

    def __init__(
        self,
        source: str,
        filename: str = "<unknown>",
        reserved_words: Optional[Iterable[str]] = None,
        max_numeric: int = MAX_NUMERIC_VALUE,
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
            reserved_words: Words lexed as KEYWORD instead of SYMBOL
            max_numeric: Largest accepted numeric literal
        """
        self.source = source
        self.filename = filename
        self.reserved_words = frozenset(RESERVED_WORDS if reserved_words is None else reserved_words)
        self.max_numeric = max_numeric
        self.pos = 0
        self.line = 1
        self.column = 1

    def reset(self, position: int = 0):
        """Restart scanning at `position`, recomputing line and column."""
        if not 0 <= position <= len(self.source):
            raise ValueError(f"position {position} outside source of length {len(self.source)}")
        consumed = self.source[:position]
        self.pos = position
        self.line = consumed.count("\n") + 1
        self.column = position - (consumed.rfind("\n") + 1) + 1

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code from the start.

        Returns:
            List of tokens ending with the EOF token

        Raises:
            LexerError: On the first character no rule accepts
        """
        self.reset()
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenType.EOF:
                return

    def next_token(self) -> Token:
        """Scan and return the next token, advancing past it."""
        self._skip_whitespace()

        if self._is_at_end():
            return self._make_token(TokenType.EOF, self.pos, self._location())

        current_char = self.source[self.pos]

        # '_' is also in the punctuation table, so symbols are tried first
        if current_char in SYMBOL_START:
            return self._scan_symbol()

        if current_char in DIGITS:
            return self._scan_numeric()

        if current_char in PUNCTUATION_CHARS:
            return self._scan_punctuation()

        raise create_unknown_character_error(current_char, self._location())

    def _scan_symbol(self) -> Token:
        """Scan an identifier, or a keyword if the word is reserved."""
        location = self._location()
        start = self.pos
        while not self._is_at_end() and self.source[self.pos] in SYMBOL_PART:
            self._advance()

        text = self.source[start:self.pos]
        kind = TokenType.KEYWORD if text in self.reserved_words else TokenType.SYMBOL
        return self._make_token(kind, start, location)

    def _scan_numeric(self) -> Token:
        """Scan a run of decimal digits."""
        location = self._location()
        start = self.pos
        while not self._is_at_end() and self.source[self.pos] in DIGITS:
            self._advance()

        text = self.source[start:self.pos]
        digits = text.lstrip("0") or "0"
        # Compare lengths before converting so huge runs never reach int()
        if len(digits) > len(str(self.max_numeric)) or int(digits) > self.max_numeric:
            raise create_numeric_overflow_error(text, location, self.max_numeric)
        value = int(digits)

        return self._make_token(TokenType.NUMERIC, start, location, value)

    def _scan_punctuation(self) -> Token:
        """Scan a punctuation token from the fixed table."""
        location = self._location()
        start = self.pos
        kind = PUNCTUATION.get(self.source[self.pos])
        if kind is None:
            raise create_unknown_character_error(self.source[self.pos], location)

        self._advance()
        if kind in COMPOUND_COMPARISONS and self._peek() == "=":
            self._advance()
            kind = COMPOUND_COMPARISONS[kind]

        return self._make_token(kind, start, location)

    def _make_token(self, kind: TokenType, start: int, location: SourceLocation,
                    value=None) -> Token:
        return Token(kind, self.source[start:self.pos], start, self.pos, location, value)

    def _skip_whitespace(self):
        while not self._is_at_end() and self.source[self.pos] in WHITESPACE:
            self._advance()

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.source[self.pos] == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1

    def _peek(self) -> str:
        """Current character, or '' at end of input."""
        if self._is_at_end():
            return ""
        return self.source[self.pos]

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)


def next_token(source: str, position: int = 0, filename: str = "<string>") -> Tuple[Token, int]:
    """
    Scan one token of `source` starting at `position`.

    Returns:
        The token and the position just past it
    """
    lexer = Lexer(source, filename)
    lexer.reset(position)
    token = lexer.next_token()
    return token, lexer.pos


def tokenize_string(source: str, filename: str = "<string>",
                    reserved_words: Optional[Iterable[str]] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        reserved_words: Words lexed as KEYWORD instead of SYMBOL

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename, reserved_words).tokenize()


def tokenize_file(filepath: str, reserved_words: Optional[Iterable[str]] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath, reserved_words)
