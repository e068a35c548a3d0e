"""
Clita Parser Package

Implements the recursive descent parser for the Clita language. Produces
immutable Abstract Syntax Trees with source spans.

Key Features:
- One method per grammar production, selectable as an entry point
- Bounded lookahead (at most two tokens), no backtracking
- Structured diagnostics; the first syntax error ends the parse

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, parse_string, parse_file
from .errors import (
    ParseError, UnexpectedEndOfInputError, UnexpectedTokenKindError,
    NoMatchingProductionError
)

__all__ = [
    # Core parser
    "Parser", "parse_string", "parse_file",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "SourceSpan",
    "Expression", "Literal", "Statement",
    "Program", "Block", "SymbolDeclaration", "SymbolAssignment", "Pragma",
    "SymbolLiteral", "NumericLiteral", "BooleanLiteral",
    "BinaryExpr", "ComparisonExpr", "UnaryExpr",

    # Error handling
    "ParseError", "UnexpectedEndOfInputError", "UnexpectedTokenKindError",
    "NoMatchingProductionError",
]
