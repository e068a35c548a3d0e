"""
Clita Lexer Package

Implements the lexical analyzer (tokenizer) for the Clita language.

Key Features:
- ASCII symbols, decimal numerals and single-character punctuation
- Two-character comparisons (>=, <=)
- Pluggable reserved-word set for keyword tokens
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, next_token, tokenize_string, tokenize_file
from .errors import (
    ErrorKind, Diagnostic, LexerError, UnknownCharacterError, NumericOverflowError
)

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "next_token",
    "tokenize_string",
    "tokenize_file",
    "ErrorKind",
    "Diagnostic",
    "LexerError",
    "UnknownCharacterError",
    "NumericOverflowError",
]
