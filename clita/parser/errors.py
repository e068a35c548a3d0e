"""
Error handling for the Clita parser.

Provides error reporting with source location information for syntax
errors. The parser does not recover: the first error raised ends the parse.

Author: xwest
"""

from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic, ErrorKind


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def position(self) -> int:
        """Offset of the offending token."""
        return self.location.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedEndOfInputError(ParseError):
    """A token was requested past the end of the buffer."""

    kind = ErrorKind.UNEXPECTED_END_OF_INPUT

    def __init__(self, expected_kind: Optional[TokenType], location: SourceLocation, **kwargs):
        expected = expected_kind.display_name if expected_kind else "a token"
        super().__init__(f"Unexpected end of input, expected {expected}", location, **kwargs)
        self.expected_kind = expected_kind


class UnexpectedTokenKindError(ParseError):
    """A fixed-sequence production saw a token of the wrong kind."""

    kind = ErrorKind.UNEXPECTED_TOKEN_KIND

    def __init__(self, expected_kind: TokenType, found: Token, **kwargs):
        super().__init__(
            f"Expected {expected_kind.display_name}, found {found.kind.display_name}",
            found.location,
            token=found,
            **kwargs
        )
        self.expected_kind = expected_kind
        self.found_kind = found.kind


class NoMatchingProductionError(ParseError):
    """None of the alternatives of a production matched the lookahead."""

    kind = ErrorKind.NO_MATCHING_PRODUCTION

    def __init__(self, production: str, found: Token, **kwargs):
        super().__init__(
            f"Expected {production}, found {found.kind.display_name}",
            found.location,
            token=found,
            **kwargs
        )
        self.production = production
        self.found_kind = found.kind


TOKEN_SUGGESTIONS = {
    TokenType.DOT: ["Add a dot '.' to end the statement"],
    TokenType.COLON: ["Declarations are written 'name := value.'"],
    TokenType.EQUALS: ["Add an '=' after the name"],
    TokenType.BRACKET_LEFT: ["Pragma arguments are written '`name[3]`'"],
    TokenType.BRACKET_RIGHT: ["Add a closing bracket ']'"],
    TokenType.BACKTICK: ["Close the pragma with a backtick '`'"],
    TokenType.EOF: ["Remove the trailing input"],
}


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: TokenType, found: Token) -> ParseError:
    """Create an error for a token of the wrong kind, or for running out of tokens."""
    if found.kind == TokenType.EOF and expected != TokenType.EOF:
        return create_unexpected_eof_error(expected, found)

    return UnexpectedTokenKindError(
        expected,
        found,
        code="P001",
        help_text=(f"The parser expected to see {expected.display_name} at this position, "
                   f"but found '{found.text}' instead."),
        suggestions=TOKEN_SUGGESTIONS.get(expected, [])
    )


def create_unexpected_eof_error(expected: Optional[TokenType], eof: Token) -> UnexpectedEndOfInputError:
    """Create an error for a token requested at the end of input."""
    expected_str = expected.display_name if expected else "more input"
    return UnexpectedEndOfInputError(
        expected,
        eof.location,
        token=eof,
        code="P010",
        help_text=f"The parser reached the end of the input while expecting {expected_str}.",
        suggestions=TOKEN_SUGGESTIONS.get(expected, ["Check for incomplete statements"])
    )


def create_no_matching_production_error(production: str, found: Token,
                                        alternatives: Union[List[str], None] = None) -> NoMatchingProductionError:
    """Create an error for a lookahead no alternative accepts."""
    help_text = None
    if alternatives:
        help_text = f"A {production} starts with one of: {', '.join(alternatives)}."

    return NoMatchingProductionError(
        production,
        found,
        code="P005",
        help_text=help_text,
    )
