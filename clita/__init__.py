"""
Clita Compiler Front End

Tokenizer and recursive descent parser for the Clita language: symbol
declarations (`x := 5.`), assignments (`x = 7.`), pragmas (`` `opt[2]` ``)
and literal, unary, binary and comparison expressions.

Architecture:
    clita/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Syntax analysis and AST generation
    ├── printer.py       # AST outline and source rendering
    └── cli.py           # clitac command-line driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@clita-lang.org"
__license__ = "MIT"

from typing import Iterable, List, Optional

from .lexer import Lexer, Token, TokenType, LexerError, tokenize_string
from .parser import Parser, ASTNode, ParseError, parse_string


def tokenize(source: str, filename: str = "<string>",
             reserved_words: Optional[Iterable[str]] = None) -> List[Token]:
    """Tokenize `source` into a list ending with the EOF token; raises LexerError."""
    return tokenize_string(source, filename, reserved_words)


def parse(source: str, entry: str = "program", filename: str = "<string>",
          reserved_words: Optional[Iterable[str]] = None,
          allow_trailing: bool = False) -> ASTNode:
    """Parse `source` from the named production; raises LexerError or ParseError."""
    return parse_string(source, entry, filename, reserved_words, allow_trailing)


__all__ = [
    # Public surface
    "tokenize",
    "parse",

    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "ASTNode",
    "LexerError",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
