"""
PL/0 Recognizer - Syntax Checker for the PL/0 Teaching Language
===============================================================

This package recognizes whether a token sequence is a syntactically
valid PL/0 program (constants, variables, nested procedures, structured
statements and arithmetic expressions). A pass produces:

- a derivation trace recording every grammar rule entered and every
  token consumed, in left-to-right top-down order;
- on success, the table of declared names with kind, nesting level and
  (for constants) value.

Main Components
---------------
- **tokens**: closed token-kind enumeration and the Token record
- **cursor**: advance-only view over a token sequence
- **symbols**: append-only declaration table
- **trace**: derivation trace writer
- **parser**: the recursive descent recognizer
- **lexer**: source text to tokens, numeric lexeme lists

Quick Start
-----------
    >>> from pl0 import parse_source
    >>> result = parse_source("var x; x := 1.")
    >>> result.success
    True

Or use the command-line tool:
    $ pl0parse program.pl0

Semantic checks (undeclared or duplicate names, types) are not
performed.
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from pl0.errors import (
    PL0Error,
    PL0SyntaxError,
    LexerError,
    TokenListError,
    ErrorCode,
    SourceLocation,
)
from pl0.tokens import Token, TokenKind
from pl0.cursor import TokenCursor
from pl0.symbols import Symbol, SymbolKind, SymbolTable
from pl0.trace import NonTerminal, TraceEmitter, format_status
from pl0.lexer import Lexer, tokenize, read_token_list, format_token_list
from pl0.parser import (
    Parser,
    ParserOptions,
    ParseResult,
    ParseContext,
    parse_tokens,
    parse_source,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "PL0Error",
    "PL0SyntaxError",
    "LexerError",
    "TokenListError",
    "ErrorCode",
    "SourceLocation",
    # Tokens
    "Token",
    "TokenKind",
    "TokenCursor",
    # Declarations
    "Symbol",
    "SymbolKind",
    "SymbolTable",
    # Trace
    "NonTerminal",
    "TraceEmitter",
    "format_status",
    # Lexer
    "Lexer",
    "tokenize",
    "read_token_list",
    "format_token_list",
    # Parser
    "Parser",
    "ParserOptions",
    "ParseResult",
    "ParseContext",
    "parse_tokens",
    "parse_source",
]
