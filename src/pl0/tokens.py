"""
PL/0 Tokens
===========

This module defines the closed token-kind enumeration shared by the
lexer, the token cursor and the recognizer, together with the immutable
Token record.

Token Numbering
---------------
Token kinds use the classic PL/0 numbering so that numeric lexeme lists
written by other PL/0 scanners can be read back directly:

| Kind      | No. | Kind       | No. | Kind      | No. |
|-----------|-----|------------|-----|-----------|-----|
| nulsym    | 1   | lessym     | 11  | thensym   | 24  |
| identsym  | 2   | leqsym     | 12  | whilesym  | 25  |
| numbersym | 3   | gtrsym     | 13  | dosym     | 26  |
| plussym   | 4   | geqsym     | 14  | callsym   | 27  |
| minussym  | 5   | lparentsym | 15  | constsym  | 28  |
| multsym   | 6   | rparentsym | 16  | varsym    | 29  |
| slashsym  | 7   | commasym   | 17  | procsym   | 30  |
| oddsym    | 8   | semicolonsym | 18 | writesym | 31  |
| eqsym     | 9   | periodsym  | 19  | readsym   | 32  |
| neqsym    | 10  | becomessym | 20  | elsesym   | 33  |
|           |     | beginsym   | 21  |           |     |
|           |     | endsym     | 22  |           |     |
|           |     | ifsym      | 23  |           |     |

nulsym is the end-of-stream sentinel: it is never produced by the lexer
and is returned by the cursor when reading past the last token.
"""

from dataclasses import dataclass
from enum import IntEnum

from pl0.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(IntEnum):
    """
    Token kinds for the PL/0 language.

    Keywords are distinguished from identifiers so the recognizer can pick
    a production from the token kind alone.
    """

    # === Sentinel and Literals ===
    NUL = 1             # end of stream
    IDENT = 2           # identifier
    NUMBER = 3          # unsigned integer literal

    # === Arithmetic Operators ===
    PLUS = 4            # +
    MINUS = 5           # -
    MULT = 6            # *
    SLASH = 7           # /

    ODD = 8             # odd

    # === Relational Operators ===
    EQ = 9              # =
    NEQ = 10            # <>
    LES = 11            # <
    LEQ = 12            # <=
    GTR = 13            # >
    GEQ = 14            # >=

    # === Delimiters ===
    LPARENT = 15        # (
    RPARENT = 16        # )
    COMMA = 17          # ,
    SEMICOLON = 18      # ;
    PERIOD = 19         # .
    BECOMES = 20        # :=

    # === Keywords ===
    BEGIN = 21
    END = 22
    IF = 23
    THEN = 24
    WHILE = 25
    DO = 26
    CALL = 27
    CONST = 28
    VAR = 29
    PROCEDURE = 30
    WRITE = 31
    READ = 32
    ELSE = 33

    @property
    def display_name(self) -> str:
        """Name used in trace output, e.g. 'identsym'."""
        return TOKEN_NAMES[self]


TOKEN_NAMES: dict[TokenKind, str] = {
    TokenKind.NUL: "nulsym",
    TokenKind.IDENT: "identsym",
    TokenKind.NUMBER: "numbersym",
    TokenKind.PLUS: "plussym",
    TokenKind.MINUS: "minussym",
    TokenKind.MULT: "multsym",
    TokenKind.SLASH: "slashsym",
    TokenKind.ODD: "oddsym",
    TokenKind.EQ: "eqsym",
    TokenKind.NEQ: "neqsym",
    TokenKind.LES: "lessym",
    TokenKind.LEQ: "leqsym",
    TokenKind.GTR: "gtrsym",
    TokenKind.GEQ: "geqsym",
    TokenKind.LPARENT: "lparentsym",
    TokenKind.RPARENT: "rparentsym",
    TokenKind.COMMA: "commasym",
    TokenKind.SEMICOLON: "semicolonsym",
    TokenKind.PERIOD: "periodsym",
    TokenKind.BECOMES: "becomessym",
    TokenKind.BEGIN: "beginsym",
    TokenKind.END: "endsym",
    TokenKind.IF: "ifsym",
    TokenKind.THEN: "thensym",
    TokenKind.WHILE: "whilesym",
    TokenKind.DO: "dosym",
    TokenKind.CALL: "callsym",
    TokenKind.CONST: "constsym",
    TokenKind.VAR: "varsym",
    TokenKind.PROCEDURE: "procsym",
    TokenKind.WRITE: "writesym",
    TokenKind.READ: "readsym",
    TokenKind.ELSE: "elsesym",
}


# =============================================================================
# Reserved Words and Symbols
# =============================================================================

# Map reserved words to their token kinds
KEYWORDS: dict[str, TokenKind] = {
    "const": TokenKind.CONST,
    "var": TokenKind.VAR,
    "procedure": TokenKind.PROCEDURE,
    "call": TokenKind.CALL,
    "begin": TokenKind.BEGIN,
    "end": TokenKind.END,
    "if": TokenKind.IF,
    "then": TokenKind.THEN,
    "else": TokenKind.ELSE,
    "while": TokenKind.WHILE,
    "do": TokenKind.DO,
    "write": TokenKind.WRITE,
    "read": TokenKind.READ,
    "odd": TokenKind.ODD,
}

# Map punctuation and operators to their token kinds.
# Two-character entries must be tried before their one-character prefixes.
SYMBOLS: dict[str, TokenKind] = {
    ":=": TokenKind.BECOMES,
    "<>": TokenKind.NEQ,
    "<=": TokenKind.LEQ,
    ">=": TokenKind.GEQ,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULT,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPARENT,
    ")": TokenKind.RPARENT,
    "=": TokenKind.EQ,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    ".": TokenKind.PERIOD,
    "<": TokenKind.LES,
    ">": TokenKind.GTR,
}

RELATIONAL_OPERATORS = frozenset({
    TokenKind.EQ,
    TokenKind.NEQ,
    TokenKind.LES,
    TokenKind.LEQ,
    TokenKind.GTR,
    TokenKind.GEQ,
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single PL/0 token.

    Attributes:
        kind: The TokenKind classification
        lexeme: Literal source text (may be empty for keywords and
                punctuation built by hand)
        line: Line number in source (1-indexed, 0 when unknown)
        column: Column number in source (1-indexed, 0 when unknown)
        filename: Name of the source file
    """
    kind: TokenKind
    lexeme: str = ""
    line: int = 0
    column: int = 0
    filename: str = "<input>"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.line:
            return f"Token({self.kind.name}, {self.lexeme!r}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.lexeme!r})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_relational_operator(self) -> bool:
        """Return True if this token is one of = <> < <= > >=."""
        return self.kind in RELATIONAL_OPERATORS


# The sentinel returned by the cursor past the end of the sequence
SENTINEL = Token(TokenKind.NUL, "")
