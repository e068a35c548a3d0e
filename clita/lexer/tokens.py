"""
Token definitions for the Clita lexer.

This module defines the token kinds produced by the lexer:
- End of input
- Numeric literals and symbols (identifiers)
- Keywords (from a pluggable reserved-word set)
- Single-character punctuation plus the two-character comparisons >= and <=

Author: xwest
"""

import string
from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Tuple


class TokenType(Enum):
    """
    Enumeration of all token kinds in Clita.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input

    # ========================================================================
    # Literals, Identifiers and Keywords
    # ========================================================================
    NUMERIC = auto()                # 42, 007
    SYMBOL = auto()                 # x, total_2, _tmp
    KEYWORD = auto()                # any word in the lexer's reserved set

    # ========================================================================
    # Punctuation and Operators
    # ========================================================================
    COLON = auto()                  # :
    DOT = auto()                    # . (statement terminator)
    BRACKET_LEFT = auto()           # [
    BRACKET_RIGHT = auto()          # ]
    BACKTICK = auto()               # ` (pragma delimiter)
    UNDERSCORE = auto()             # _
    GT = auto()                     # >
    LT = auto()                     # <
    GTE = auto()                    # >=
    LTE = auto()                    # <=
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    TIMES = auto()                  # *
    DIVISION = auto()               # /
    QUOTE = auto()                  # '
    DBL_QUOTE = auto()              # "
    EQUALS = auto()                 # =

    @property
    def display_name(self) -> str:
        """Human-readable kind name used in diagnostics and token dumps."""
        return DISPLAY_NAMES[self]


DISPLAY_NAMES: Dict[TokenType, str] = {
    TokenType.EOF: "End of file",
    TokenType.NUMERIC: "Numeric",
    TokenType.SYMBOL: "Symbol",
    TokenType.KEYWORD: "Keyword",
    TokenType.COLON: "Colon",
    TokenType.DOT: "Dot",
    TokenType.BRACKET_LEFT: "Bracket left",
    TokenType.BRACKET_RIGHT: "Bracket right",
    TokenType.BACKTICK: "Backtick",
    TokenType.UNDERSCORE: "Underscore",
    TokenType.GT: "Greater than",
    TokenType.LT: "Lesser than",
    TokenType.GTE: "Greater than or Equal",
    TokenType.LTE: "Lesser than or Equal",
    TokenType.PLUS: "Plus",
    TokenType.MINUS: "Minus",
    TokenType.TIMES: "Times",
    TokenType.DIVISION: "Division",
    TokenType.QUOTE: "Quote",
    TokenType.DBL_QUOTE: "Double quote",
    TokenType.EQUALS: "Equals",
}


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting. `offset` is the character offset from the start
    of the source; line and column are 1-based.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Clita language.

    `text` is always `source[pos:end]` (empty for EOF). `value` holds the
    parsed integer of a NUMERIC token and is None for every other kind.
    """
    kind: TokenType
    text: str
    pos: int
    end: int
    location: SourceLocation
    value: Any = None

    def __str__(self) -> str:
        return f"{self.text} = ({self.kind.display_name})"

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.text!r}, "
                f"{self.pos}, {self.end})")

    @property
    def is_eof(self) -> bool:
        return self.kind == TokenType.EOF

    @property
    def is_boolean_word(self) -> bool:
        """True or false, lexed either as a symbol or as a reserved keyword."""
        return self.kind in (TokenType.SYMBOL, TokenType.KEYWORD) and self.text in BOOLEAN_WORDS

    @property
    def is_literal(self) -> bool:
        """Check if this token can start a literal expression."""
        return self.kind in LITERAL_KINDS or self.is_boolean_word


# ============================================================================
# Lookup tables
# ============================================================================

# Single-character punctuation, in lookup order. GT and LT are extended to
# GTE and LTE by the lexer when directly followed by '='.
PUNCTUATION_TOKENS: Tuple[Tuple[str, TokenType], ...] = (
    (":", TokenType.COLON),
    (".", TokenType.DOT),
    ("[", TokenType.BRACKET_LEFT),
    ("]", TokenType.BRACKET_RIGHT),
    ("`", TokenType.BACKTICK),
    ("_", TokenType.UNDERSCORE),
    (">", TokenType.GT),
    ("<", TokenType.LT),
    ("+", TokenType.PLUS),
    ("-", TokenType.MINUS),
    ("*", TokenType.TIMES),
    ("/", TokenType.DIVISION),
    ("'", TokenType.QUOTE),
    ('"', TokenType.DBL_QUOTE),
    ("=", TokenType.EQUALS),
)

PUNCTUATION: Dict[str, TokenType] = dict(PUNCTUATION_TOKENS)

# Kinds that may absorb a following '=' into a two-character token
COMPOUND_COMPARISONS: Dict[TokenType, TokenType] = {
    TokenType.GT: TokenType.GTE,
    TokenType.LT: TokenType.LTE,
}

ARITHMETIC_OPERATORS: Dict[TokenType, str] = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.TIMES: "*",
    TokenType.DIVISION: "/",
}

COMPARISON_OPERATORS: Dict[TokenType, str] = {
    TokenType.LT: "<",
    TokenType.LTE: "<=",
    TokenType.GT: ">",
    TokenType.GTE: ">=",
    TokenType.EQUALS: "=",
}

LITERAL_KINDS: FrozenSet[TokenType] = frozenset({
    TokenType.NUMERIC,
    TokenType.SYMBOL,
})

# Character classes (ASCII only)
WHITESPACE: FrozenSet[str] = frozenset(" \t\n\r\v\f")
DIGITS: FrozenSet[str] = frozenset(string.digits)
SYMBOL_START: FrozenSet[str] = frozenset(string.ascii_letters + "_")
SYMBOL_PART: FrozenSet[str] = frozenset(string.ascii_letters + string.digits + "_")
PUNCTUATION_CHARS: FrozenSet[str] = frozenset(string.punctuation)

# Words the parser reads as boolean literals
BOOLEAN_WORDS: Dict[str, bool] = {
    "true": True,
    "false": False,
}

# No words are reserved by default; callers may pass their own set
RESERVED_WORDS: FrozenSet[str] = frozenset()

# Numeric literals are held in a signed 32-bit integer
MAX_NUMERIC_VALUE = 2 ** 31 - 1
