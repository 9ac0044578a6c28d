"""
PL/0 Lexer (Tokenizer)
======================

This module converts PL/0 source text into the token sequence consumed
by the recognizer. It also reads and writes the numeric "lexeme list"
format produced by classic PL/0 scanners.

Token Categories
----------------
- Reserved words: const, var, procedure, call, begin, end, if, then,
  else, while, do, write, read, odd
- Identifiers: a letter followed by letters and digits (max 11 chars)
- Numbers: unsigned decimal integers (max 5 digits)
- Operators: + - * / = <> < <= > >= :=
- Delimiters: ( ) , ; .

Comments
--------
- Block comments: /* comment */ (may span lines)

Lexeme List Format
------------------
Whitespace-separated token numbers (see pl0.tokens); identifier (2) and
number (3) tokens are followed by their lexeme:

    29 2 x 18 21 2 x 20 3 1 22 19

Example Usage
-------------
>>> from pl0.lexer import Lexer
>>> for token in Lexer("var x;", "test.pl0").tokenize():
...     print(token)
Token(VAR, 'var', 1:1)
Token(IDENT, 'x', 1:5)
Token(SEMICOLON, ';', 1:6)
"""

import string
from typing import Iterator, Sequence

from pl0.errors import (
    SourceLocation,
    InvalidCharacterError,
    IdentifierTooLongError,
    NumberTooLongError,
    InvalidIdentifierError,
    TokenListError,
)
from pl0.tokens import Token, TokenKind, KEYWORDS, SYMBOLS


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes PL/0 source code.

    The lexer stops at the first invalid character and reports its exact
    source location. No sentinel token is appended: the token cursor
    supplies nulsym when reading past the end.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = list(lexer.tokenize())

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits

    MAX_IDENT_LENGTH = 11
    MAX_NUMBER_LENGTH = 5

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        # Current position in source
        self._pos = 0
        self._line = 1
        self._column = 1

        # Start of the token being scanned
        self._start_line = 1
        self._start_column = 1

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source code.

        Yields:
            Token objects representing each lexical element

        Raises:
            LexerError: If invalid input is encountered
        """
        while True:
            self._skip_whitespace_and_comments()
            if self._at_end():
                return

            self._start_line = self._line
            self._start_column = self._column
            yield self._scan_token()

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return the current character, tracking line and column."""
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        return char

    def _location(self) -> SourceLocation:
        """Location of the token currently being scanned."""
        return SourceLocation(self.filename, self._start_line, self._start_column)

    def _make_token(self, kind: TokenKind, lexeme: str) -> Token:
        return Token(kind, lexeme, self._start_line, self._start_column, self.filename)

    # =========================================================================
    # Whitespace and Comments
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> None:
        while not self._at_end():
            char = self._peek()
            if char in string.whitespace:
                self._advance()
            elif char == "/" and self._peek(1) == "*":
                self._skip_block_comment()
            else:
                return

    def _skip_block_comment(self) -> None:
        # An unterminated comment runs to the end of the source
        self._advance()
        self._advance()
        while not self._at_end():
            if self._peek() == "*" and self._peek(1) == "/":
                self._advance()
                self._advance()
                return
            self._advance()

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Token:
        char = self._peek()

        if char in self.IDENT_START:
            return self._scan_word()

        if char in string.digits:
            return self._scan_number()

        two = char + self._peek(1)
        if two in SYMBOLS:
            self._advance()
            self._advance()
            return self._make_token(SYMBOLS[two], two)

        if char in SYMBOLS:
            self._advance()
            return self._make_token(SYMBOLS[char], char)

        raise InvalidCharacterError(char, self._location())

    def _scan_word(self) -> Token:
        """Scan a reserved word or an identifier."""
        start = self._pos
        while self._peek() and self._peek() in self.IDENT_CHARS:
            self._advance()
        word = self.source[start:self._pos]

        if word in KEYWORDS:
            return self._make_token(KEYWORDS[word], word)

        if len(word) > self.MAX_IDENT_LENGTH:
            raise IdentifierTooLongError(word, self.MAX_IDENT_LENGTH, self._location())

        return self._make_token(TokenKind.IDENT, word)

    def _scan_number(self) -> Token:
        start = self._pos
        while self._peek() and self._peek() in string.digits:
            self._advance()

        # A letter straight after the digits makes an invalid identifier
        if self._peek() and self._peek() in self.IDENT_START:
            while self._peek() and self._peek() in self.IDENT_CHARS:
                self._advance()
            raise InvalidIdentifierError(self.source[start:self._pos], self._location())

        digits = self.source[start:self._pos]
        if len(digits) > self.MAX_NUMBER_LENGTH:
            raise NumberTooLongError(digits, self.MAX_NUMBER_LENGTH, self._location())

        return self._make_token(TokenKind.NUMBER, digits)


# =============================================================================
# Convenience Functions
# =============================================================================

def is_decimal(text: str) -> bool:
    """Return True if text is a non-empty run of ASCII digits."""
    return text.isascii() and text.isdigit()


def tokenize(source: str, filename: str = "<input>") -> list[Token]:
    """
    Tokenize PL/0 source code into a list.

    Raises:
        LexerError: If invalid input is encountered
    """
    return list(Lexer(source, filename).tokenize())


def read_token_list(text: str) -> list[Token]:
    """
    Read a numeric lexeme list.

    Args:
        text: Whitespace-separated token numbers, with identifier and
              number tokens followed by their lexeme

    Returns:
        The tokens, with keyword and punctuation lexemes filled in

    Raises:
        TokenListError: On an unknown token number, a missing lexeme or a
                        number lexeme that is not all decimal digits
    """
    spellings = {kind: text for text, kind in KEYWORDS.items()}
    spellings.update({kind: text for text, kind in SYMBOLS.items()})

    tokens = []
    words = iter(text.split())
    for word in words:
        try:
            kind = TokenKind(int(word))
        except ValueError:
            raise TokenListError(f"'{word}' is not a token number") from None

        if kind == TokenKind.NUL:
            raise TokenListError("nulsym cannot appear in a lexeme list")

        if kind in (TokenKind.IDENT, TokenKind.NUMBER):
            lexeme = next(words, None)
            if lexeme is None:
                raise TokenListError(f"{kind.display_name} at end of list has no lexeme")
            if kind == TokenKind.NUMBER and not is_decimal(lexeme):
                raise TokenListError(f"'{lexeme}' is not a valid number lexeme")
            tokens.append(Token(kind, lexeme))
        else:
            tokens.append(Token(kind, spellings[kind]))

    return tokens


def format_token_list(tokens: Sequence[Token]) -> str:
    """Render tokens in the numeric lexeme list format."""
    parts = []
    for token in tokens:
        parts.append(str(int(token.kind)))
        if token.kind in (TokenKind.IDENT, TokenKind.NUMBER):
            parts.append(token.lexeme)
    return " ".join(parts)
