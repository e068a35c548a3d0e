"""
Error handling for the Clita lexer.

Provides error reporting with source location information and IDE-friendly
diagnostics. Lexical errors are fatal: the lexer raises the first one and
does not resynchronize.

Author: xwest
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, MAX_NUMERIC_VALUE


class ErrorKind(Enum):
    """Categories of front-end failures, shared by lexer and parser errors."""
    UNKNOWN_CHARACTER = "UnknownCharacter"
    NUMERIC_OVERFLOW = "NumericOverflow"
    UNEXPECTED_END_OF_INPUT = "UnexpectedEndOfInput"
    UNEXPECTED_TOKEN_KIND = "UnexpectedTokenKind"
    NO_MATCHING_PRODUCTION = "NoMatchingProduction"


@dataclass
class Diagnostic:
    """A rendered-on-demand error report (message, location and hints)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.

    Contains detailed diagnostic information for error reporting.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        location: SourceLocation,
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

    @property
    def position(self) -> int:
        """Offset of the offending character."""
        return self.location.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnknownCharacterError(LexerError):
    """A character matches no token rule."""

    kind = ErrorKind.UNKNOWN_CHARACTER

    def __init__(self, character: str, location: SourceLocation, **kwargs):
        super().__init__(f"Unknown character: '{character}'", location, **kwargs)
        self.character = character


class NumericOverflowError(LexerError):
    """A numeric literal does not fit the signed 32-bit range."""

    kind = ErrorKind.NUMERIC_OVERFLOW

    def __init__(self, text: str, location: SourceLocation, **kwargs):
        super().__init__(f"Numeric literal out of range: '{text}'", location, **kwargs)
        self.text = text


# Helper functions for creating common errors
def create_unknown_character_error(char: str, location: SourceLocation) -> UnknownCharacterError:
    """Create an error for a character no token rule accepts."""
    if char in "!#$%&(),;?@\\^{|}~":
        help_text = f"The punctuation character '{char}' is not part of the Clita language."
    elif char.isprintable() and char.isascii():
        help_text = f"The character '{char}' is not valid in Clita source code."
    elif char.isprintable():
        help_text = "Only ASCII letters, digits, underscores and punctuation are accepted."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnknownCharacterError(
        char,
        location,
        code="L001",
        help_text=help_text,
    )


def create_numeric_overflow_error(
    text: str, location: SourceLocation, limit: int = MAX_NUMERIC_VALUE
) -> NumericOverflowError:
    """Create an error for a numeric literal above the representable range."""
    return NumericOverflowError(
        text,
        location,
        code="L007",
        help_text=f"Numeric literals must not exceed {limit}.",
        suggestions=["Use a smaller literal"]
    )
