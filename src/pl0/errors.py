"""
PL/0 Error Hierarchy
====================

This module defines the exception hierarchy and the recognizer error
codes for the PL/0 toolkit. All exceptions inherit from PL0Error,
allowing callers to catch every toolkit error with a single except
clause if desired.

Exception Hierarchy
-------------------
PL0Error (base)
├── PL0SyntaxError - recognizer violation, carries an ErrorCode
├── LexerError - source text cannot be tokenized
│   ├── InvalidCharacterError - character outside the alphabet
│   ├── IdentifierTooLongError - identifier over 11 characters
│   ├── NumberTooLongError - number over 5 digits
│   └── InvalidIdentifierError - identifier starting with a digit
└── TokenListError - malformed numeric lexeme list

Error Codes
-----------
The recognizer reports exactly one class of failure, a syntax
violation, discriminated by one of 14 numeric codes. Code 0 means the
program was accepted.

Error messages follow this format:
    filename:line:column: error: description
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Recognizer Error Codes
# =============================================================================

class ErrorCode(IntEnum):
    """
    Outcome codes of one recognition pass.

    SUCCESS (0) means the token sequence is a valid program. Every other
    member names the first violation encountered.
    """
    SUCCESS = 0
    NUMBER_EXPECTED = 1
    EQ_EXPECTED = 2
    IDENT_EXPECTED = 3
    VAR_SEMICOLON_EXPECTED = 4
    SEMICOLON_EXPECTED = 5
    PERIOD_EXPECTED = 6
    BECOMES_EXPECTED = 7
    CALL_IDENT_EXPECTED = 8
    THEN_EXPECTED = 9
    END_EXPECTED = 10
    DO_EXPECTED = 11
    RELOP_EXPECTED = 12
    RPARENT_EXPECTED = 13
    FACTOR_EXPECTED = 14

    @property
    def message(self) -> str:
        """Fixed human-readable description used in the status line."""
        return ERROR_MESSAGES[self]


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.SUCCESS: "",
    ErrorCode.NUMBER_EXPECTED: "Number expected after '=' in constant declaration",
    ErrorCode.EQ_EXPECTED: "'=' expected after identifier in constant declaration",
    ErrorCode.IDENT_EXPECTED: "const, var, procedure, read and write must be followed by identifier",
    ErrorCode.VAR_SEMICOLON_EXPECTED: "Semicolon expected after variable declaration",
    ErrorCode.SEMICOLON_EXPECTED: "Semicolon expected after constant or procedure declaration",
    ErrorCode.PERIOD_EXPECTED: "Period expected",
    ErrorCode.BECOMES_EXPECTED: "Assignment operator ':=' expected",
    ErrorCode.CALL_IDENT_EXPECTED: "call must be followed by an identifier",
    ErrorCode.THEN_EXPECTED: "then expected",
    ErrorCode.END_EXPECTED: "end expected",
    ErrorCode.DO_EXPECTED: "do expected",
    ErrorCode.RELOP_EXPECTED: "Relational operator expected",
    ErrorCode.RPARENT_EXPECTED: "Right parenthesis missing",
    ErrorCode.FACTOR_EXPECTED: "The preceding factor cannot begin with this symbol",
}


# =============================================================================
# Base Exception Class
# =============================================================================

class PL0Error(Exception):
    """
    Base exception for all PL/0 toolkit errors.

    This class provides common functionality for error messages including
    source location tracking and optional hint messages.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

        Example output:
            hello.pl0:3:9: error: invalid character '#'
            hint: use '<>' for inequality
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Recognizer Errors
# =============================================================================

class PL0SyntaxError(PL0Error):
    """
    Syntax violation detected by the recognizer.

    Raised at the point of detection and propagated unchanged up to the
    top-level entry point, which turns it into the numeric outcome.

    Attributes:
        code: The ErrorCode describing the violation
        token: The token that was current when the violation was found
        position: Cursor index of that token
    """

    def __init__(
        self,
        code: ErrorCode,
        token=None,
        position: Optional[int] = None,
    ):
        self.code = ErrorCode(code)
        self.token = token
        self.position = position

        location = None
        if token is not None and getattr(token, "line", 0) > 0:
            location = token.location

        hint = None
        if token is not None:
            hint = f"found {token.kind.display_name} '{token.lexeme}'"

        super().__init__(
            f"[{int(self.code)}] {self.code.message}",
            location=location,
            hint=hint,
        )


# =============================================================================
# Lexer Errors
# =============================================================================

class LexerError(PL0Error):
    """
    Source text cannot be tokenized.

    Raised by the lexer, which stops at the first offending character.
    """
    pass


class InvalidCharacterError(LexerError):
    """Character that does not belong to the PL/0 alphabet."""

    def __init__(self, char: str, location: Optional[SourceLocation] = None):
        self.char = char
        hint = None
        if char == ":":
            hint = "assignment is written ':='"
        elif char in "#!":
            hint = "use '<>' for inequality"
        super().__init__(
            f"invalid character '{char}' (0x{ord(char):02X})",
            location=location,
            hint=hint,
        )


class IdentifierTooLongError(LexerError):
    """Identifier longer than the maximum identifier length."""

    def __init__(self, identifier: str, limit: int, location: Optional[SourceLocation] = None):
        self.identifier = identifier
        super().__init__(
            f"identifier '{identifier}' is longer than {limit} characters",
            location=location,
        )


class NumberTooLongError(LexerError):
    """Number with more digits than allowed."""

    def __init__(self, digits: str, limit: int, location: Optional[SourceLocation] = None):
        self.digits = digits
        super().__init__(
            f"number '{digits}' has more than {limit} digits",
            location=location,
        )


class InvalidIdentifierError(LexerError):
    """Identifier that starts with a digit, such as '2abc'."""

    def __init__(self, text: str, location: Optional[SourceLocation] = None):
        self.text = text
        super().__init__(
            f"identifier '{text}' does not start with a letter",
            location=location,
            hint="identifiers must start with a letter",
        )


# =============================================================================
# Token List Errors
# =============================================================================

class TokenListError(PL0Error):
    """
    Malformed numeric lexeme list.

    Raised by read_token_list() for unknown token numbers or an identifier
    or number token whose lexeme is missing.
    """
    pass
