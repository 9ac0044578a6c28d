"""
PL/0 Recursive Descent Recognizer
=================================

This module implements a recursive descent recognizer for PL/0. It reads
a token sequence through a TokenCursor and, as a side effect of
recognition, writes a derivation trace and records every declared name
in a SymbolTable. No syntax tree is built.

Grammar (EBNF)
--------------
program         ::= block '.'
block           ::= const_decl? var_decl? proc_decl statement
const_decl      ::= 'const' IDENT '=' NUMBER (',' IDENT '=' NUMBER)* ';'
var_decl        ::= 'var' IDENT (',' IDENT)* ';'
proc_decl       ::= ('procedure' IDENT ';' block ';')*
statement       ::= IDENT ':=' expression
                  | 'call' IDENT
                  | 'begin' statement (';' statement)* 'end'
                  | 'if' condition 'then' statement ('else' statement)?
                  | 'while' condition 'do' statement
                  | 'write' IDENT
                  | 'read' IDENT
                  | (empty)
condition       ::= 'odd' expression
                  | expression relop expression
relop           ::= '=' | '<>' | '<' | '<=' | '>' | '>='
expression      ::= ('+' | '-')? term (('+' | '-') term)*
term            ::= factor (('*' | '/') factor)*
factor          ::= IDENT | NUMBER | '(' expression ')'

The grammar is LL(1): the current token kind alone selects a production.

Error Handling
--------------
The first violation aborts the whole pass. It is raised as a
PL0SyntaxError carrying an ErrorCode from the point of detection and
propagates through every enclosing rule unchanged; no rule retries an
alternative or resynchronizes. Parser.parse() converts it into the
numeric outcome and the trace status line.

Lexical Levels
--------------
The context level is 0 for the main block and is incremented around each
nested procedure block. The decrement runs in a finally clause, so the
level is back to its previous value even when the nested block fails.

Example Usage
-------------
>>> from pl0.lexer import tokenize
>>> from pl0.parser import parse_tokens
>>> result = parse_tokens(tokenize("const a = 5; var x; begin x := a + 1 end."))
>>> result.error_code
<ErrorCode.SUCCESS: 0>
>>> [s.name for s in result.symbols]
['a', 'x']
"""

import logging
from dataclasses import dataclass, field
from typing import NoReturn, Optional, Sequence, TextIO

from pl0.cursor import TokenCursor
from pl0.errors import ErrorCode, PL0SyntaxError
from pl0.lexer import tokenize, is_decimal
from pl0.symbols import Symbol, SymbolTable
from pl0.tokens import Token, TokenKind
from pl0.trace import NonTerminal, TraceEmitter

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration and Results
# =============================================================================

@dataclass
class ParserOptions:
    """
    Recognizer output options.

    Attributes:
        write_header: Write the "Parsing History" header before the trace
        write_symbol_table: Dump the symbol table after a successful pass
    """
    write_header: bool = True
    write_symbol_table: bool = True


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of one recognition pass.

    Attributes:
        error_code: SUCCESS (0) or the first violation found
        symbols: Declarations in registration order (empty on failure)
        tokens_consumed: Number of token-consumption records emitted
        error: The raised PL0SyntaxError, if any
    """
    error_code: ErrorCode
    symbols: tuple[Symbol, ...] = ()
    tokens_consumed: int = 0
    error: Optional[PL0SyntaxError] = None

    @property
    def success(self) -> bool:
        return self.error_code == ErrorCode.SUCCESS


# =============================================================================
# Parse Context
# =============================================================================

@dataclass
class ParseContext:
    """
    Mutable state of one recognition pass.

    Every grammar function takes the context explicitly, so a rule can be
    exercised on its own by building a context over a token slice.

    Attributes:
        cursor: Position in the token sequence
        symbols: Declarations registered so far
        trace: Sink for rule-entry and token-consumption records
        level: Current procedure nesting depth
    """
    cursor: TokenCursor
    symbols: SymbolTable = field(default_factory=SymbolTable)
    trace: TraceEmitter = field(default_factory=TraceEmitter)
    level: int = 0

    @classmethod
    def create(cls, tokens: Sequence[Token], out: Optional[TextIO] = None) -> "ParseContext":
        return cls(cursor=TokenCursor(tokens), trace=TraceEmitter(out))

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def current(self) -> Token:
        return self.cursor.current()

    def check(self, *kinds: TokenKind) -> bool:
        """Check if the current token is one of the given kinds."""
        return self.cursor.current().kind in kinds

    def consume(self) -> Token:
        """Record the current token in the trace and move past it."""
        token = self.cursor.current()
        self.trace.emit_token_consumption(token)
        self.cursor.advance()
        return token

    def expect(self, kind: TokenKind, code: ErrorCode) -> Token:
        """
        Consume a token of the given kind.

        Raises:
            PL0SyntaxError: With the given code if the current token
                            has a different kind
        """
        if not self.check(kind):
            self.fail(code)
        return self.consume()

    def fail(self, code: ErrorCode) -> NoReturn:
        raise PL0SyntaxError(code, self.cursor.current(), self.cursor.position)

    def release(self) -> None:
        """Clear the table and detach the cursor at the end of a pass."""
        self.symbols.clear()
        self.cursor.detach()


# =============================================================================
# Program Structure
# =============================================================================

def parse_program(ctx: ParseContext) -> None:
    """program ::= block '.'"""
    ctx.trace.emit_rule_entry(NonTerminal.PROGRAM)
    parse_block(ctx)
    ctx.expect(TokenKind.PERIOD, ErrorCode.PERIOD_EXPECTED)


def parse_block(ctx: ParseContext) -> None:
    """
    block ::= const_decl? var_decl? proc_decl statement

    All three declaration rules are always entered; each matches the
    empty string when its leading keyword is absent.
    """
    ctx.trace.emit_rule_entry(NonTerminal.BLOCK)
    parse_const_declaration(ctx)
    parse_var_declaration(ctx)
    parse_proc_declaration(ctx)
    parse_statement(ctx)


# =============================================================================
# Declarations
# =============================================================================

def parse_const_declaration(ctx: ParseContext) -> None:
    """const_decl ::= 'const' IDENT '=' NUMBER (',' IDENT '=' NUMBER)* ';'"""
    ctx.trace.emit_rule_entry(NonTerminal.CONST_DECLARATION)
    if not ctx.check(TokenKind.CONST):
        return

    while True:
        # 'const' on the first pass, ',' afterwards
        ctx.consume()
        name = ctx.expect(TokenKind.IDENT, ErrorCode.IDENT_EXPECTED).lexeme
        ctx.expect(TokenKind.EQ, ErrorCode.EQ_EXPECTED)
        # A number token without decimal digits cannot supply a value
        if not is_decimal(ctx.current().lexeme):
            ctx.fail(ErrorCode.NUMBER_EXPECTED)
        number = ctx.expect(TokenKind.NUMBER, ErrorCode.NUMBER_EXPECTED)
        ctx.symbols.register(Symbol.constant(name, ctx.level, int(number.lexeme)))
        if not ctx.check(TokenKind.COMMA):
            break

    ctx.expect(TokenKind.SEMICOLON, ErrorCode.SEMICOLON_EXPECTED)


def parse_var_declaration(ctx: ParseContext) -> None:
    """var_decl ::= 'var' IDENT (',' IDENT)* ';'"""
    ctx.trace.emit_rule_entry(NonTerminal.VAR_DECLARATION)
    if not ctx.check(TokenKind.VAR):
        return

    while True:
        ctx.consume()
        name = ctx.expect(TokenKind.IDENT, ErrorCode.IDENT_EXPECTED).lexeme
        ctx.symbols.register(Symbol.variable(name, ctx.level))
        if not ctx.check(TokenKind.COMMA):
            break

    ctx.expect(TokenKind.SEMICOLON, ErrorCode.VAR_SEMICOLON_EXPECTED)


def parse_proc_declaration(ctx: ParseContext) -> None:
    """
    proc_decl ::= ('procedure' IDENT ';' block ';')*

    The procedure name is registered at the enclosing level before its
    body is recognized.
    """
    ctx.trace.emit_rule_entry(NonTerminal.PROC_DECLARATION)

    while ctx.check(TokenKind.PROCEDURE):
        ctx.consume()
        name = ctx.expect(TokenKind.IDENT, ErrorCode.IDENT_EXPECTED).lexeme
        ctx.symbols.register(Symbol.procedure(name, ctx.level))
        ctx.expect(TokenKind.SEMICOLON, ErrorCode.SEMICOLON_EXPECTED)

        ctx.level += 1
        try:
            parse_block(ctx)
        finally:
            ctx.level -= 1

        ctx.expect(TokenKind.SEMICOLON, ErrorCode.SEMICOLON_EXPECTED)


# =============================================================================
# Statements
# =============================================================================

def parse_statement(ctx: ParseContext) -> None:
    """Parse one statement; any token outside FIRST(statement) selects the empty statement."""
    ctx.trace.emit_rule_entry(NonTerminal.STATEMENT)

    # Assignment: IDENT ':=' expression
    if ctx.check(TokenKind.IDENT):
        ctx.consume()
        ctx.expect(TokenKind.BECOMES, ErrorCode.BECOMES_EXPECTED)
        parse_expression(ctx)

    elif ctx.check(TokenKind.CALL):
        ctx.consume()
        ctx.expect(TokenKind.IDENT, ErrorCode.CALL_IDENT_EXPECTED)

    elif ctx.check(TokenKind.BEGIN):
        ctx.consume()
        parse_statement(ctx)
        while ctx.check(TokenKind.SEMICOLON):
            ctx.consume()
            parse_statement(ctx)
        ctx.expect(TokenKind.END, ErrorCode.END_EXPECTED)

    elif ctx.check(TokenKind.IF):
        ctx.consume()
        parse_condition(ctx)
        ctx.expect(TokenKind.THEN, ErrorCode.THEN_EXPECTED)
        parse_statement(ctx)
        if ctx.check(TokenKind.ELSE):
            ctx.consume()
            parse_statement(ctx)

    elif ctx.check(TokenKind.WHILE):
        ctx.consume()
        parse_condition(ctx)
        ctx.expect(TokenKind.DO, ErrorCode.DO_EXPECTED)
        parse_statement(ctx)

    elif ctx.check(TokenKind.WRITE, TokenKind.READ):
        ctx.consume()
        ctx.expect(TokenKind.IDENT, ErrorCode.IDENT_EXPECTED)


# =============================================================================
# Conditions
# =============================================================================

def parse_condition(ctx: ParseContext) -> None:
    """condition ::= 'odd' expression | expression relop expression"""
    ctx.trace.emit_rule_entry(NonTerminal.CONDITION)

    if ctx.check(TokenKind.ODD):
        ctx.consume()
        parse_expression(ctx)
        return

    parse_expression(ctx)
    if parse_relop(ctx) == TokenKind.NUL:
        ctx.fail(ErrorCode.RELOP_EXPECTED)
    ctx.consume()
    parse_expression(ctx)


def parse_relop(ctx: ParseContext) -> TokenKind:
    """
    Identify the relational operator at the cursor without consuming it.

    Returns:
        The operator's TokenKind, or TokenKind.NUL if the current token
        is not a relational operator
    """
    ctx.trace.emit_rule_entry(NonTerminal.REL_OP)
    token = ctx.current()
    if token.is_relational_operator():
        return token.kind
    return TokenKind.NUL


# =============================================================================
# Expressions
# =============================================================================

def parse_expression(ctx: ParseContext) -> None:
    """expression ::= ('+' | '-')? term (('+' | '-') term)*"""
    ctx.trace.emit_rule_entry(NonTerminal.EXPRESSION)

    if ctx.check(TokenKind.PLUS, TokenKind.MINUS):
        ctx.consume()
    parse_term(ctx)

    while ctx.check(TokenKind.PLUS, TokenKind.MINUS):
        ctx.consume()
        parse_term(ctx)


def parse_term(ctx: ParseContext) -> None:
    """term ::= factor (('*' | '/') factor)*"""
    ctx.trace.emit_rule_entry(NonTerminal.TERM)

    parse_factor(ctx)
    while ctx.check(TokenKind.MULT, TokenKind.SLASH):
        ctx.consume()
        parse_factor(ctx)


def parse_factor(ctx: ParseContext) -> None:
    """factor ::= IDENT | NUMBER | '(' expression ')'"""
    ctx.trace.emit_rule_entry(NonTerminal.FACTOR)

    if ctx.check(TokenKind.IDENT, TokenKind.NUMBER):
        ctx.consume()
    elif ctx.check(TokenKind.LPARENT):
        ctx.consume()
        parse_expression(ctx)
        ctx.expect(TokenKind.RPARENT, ErrorCode.RPARENT_EXPECTED)
    else:
        ctx.fail(ErrorCode.FACTOR_EXPECTED)


# =============================================================================
# Parser
# =============================================================================

class Parser:
    """
    Runs one recognition pass over a token sequence.

    A Parser owns the pass state for exactly one call to parse(); run
    passes concurrently only with separate Parser instances.

    Example:
        parser = Parser(tokens, out=sys.stdout)
        result = parser.parse()
        if not result.success:
            print(result.error)

    Attributes:
        tokens: Tokens to recognize
        out: Text stream for the trace (in-memory when None)
        options: Output options
    """

    def __init__(
        self,
        tokens: Sequence[Token],
        out: Optional[TextIO] = None,
        options: Optional[ParserOptions] = None,
    ):
        self.tokens = tokens
        self.out = out
        self.options = options or ParserOptions()
        self.trace: Optional[TraceEmitter] = None

    def parse(self) -> ParseResult:
        """
        Recognize the token sequence and write the trace.

        Returns:
            ParseResult with the error code, the declarations (on success)
            and the number of consumed tokens
        """
        ctx = ParseContext.create(self.tokens, self.out)
        self.trace = ctx.trace
        logger.debug(f"Parsing {len(self.tokens)} tokens")

        try:
            if self.options.write_header:
                ctx.trace.write_header()

            error = None
            try:
                parse_program(ctx)
            except PL0SyntaxError as e:
                error = e
                logger.debug(f"Parsing stopped at token {e.position}: {e.message}")

            code = error.code if error is not None else ErrorCode.SUCCESS
            symbols: tuple[Symbol, ...] = ()
            if error is None:
                symbols = ctx.symbols.finalize()
                if self.options.write_symbol_table:
                    ctx.trace.write_symbol_table(ctx.symbols)
            ctx.trace.write_status(code)

            if error is None and not ctx.cursor.at_end:
                logger.debug(
                    f"{len(self.tokens) - ctx.cursor.position} tokens after '.' left unread"
                )
            logger.debug(f"Parsing finished with code {int(code)}")

            return ParseResult(
                error_code=code,
                symbols=symbols,
                tokens_consumed=ctx.trace.token_count,
                error=error,
            )
        finally:
            ctx.release()


# =============================================================================
# Convenience Functions
# =============================================================================

def parse_tokens(
    tokens: Sequence[Token],
    out: Optional[TextIO] = None,
    options: Optional[ParserOptions] = None,
) -> ParseResult:
    """
    Recognize a token sequence.

    Args:
        tokens: Tokens to recognize, without a trailing sentinel
        out: Text stream receiving the trace (discarded when None)
        options: Output options

    Returns:
        The ParseResult of the pass
    """
    return Parser(tokens, out, options).parse()


def parse_source(
    source: str,
    filename: str = "<input>",
    out: Optional[TextIO] = None,
    options: Optional[ParserOptions] = None,
) -> ParseResult:
    """
    Tokenize PL/0 source text and recognize it.

    Raises:
        LexerError: If the source cannot be tokenized
    """
    return parse_tokens(tokenize(source, filename), out, options)
