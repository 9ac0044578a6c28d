"""
Derivation Trace
================

Append-only sink recording, in call order, every grammar rule entered
and every token consumed during one recognition pass.

Output Format
-------------
    Parsing History
    ===============
    NONTERM: PROGRAM
    NONTERM: BLOCK
    TOKEN  : <constsym, 'const'>
    ...

Rule-entry and token lines use a right-justified 8-character label.
After the records come the symbol table (on success only) and a single
status line:

    PARSING WAS SUCCESSFUL.
    PARSING ERROR[12]: Relational operator expected.
"""

import io
from enum import Enum
from typing import NamedTuple, Optional, TextIO, Union

from pl0.errors import ErrorCode
from pl0.symbols import SymbolTable
from pl0.tokens import Token


class NonTerminal(Enum):
    """Grammar rules, valued by their trace display name."""
    PROGRAM = "PROGRAM"
    BLOCK = "BLOCK"
    CONST_DECLARATION = "CONST_DECLARATION"
    VAR_DECLARATION = "VAR_DECLARATION"
    PROC_DECLARATION = "PROC_DECLARATION"
    STATEMENT = "STATEMENT"
    CONDITION = "CONDITION"
    REL_OP = "REL_OP"
    EXPRESSION = "EXPRESSION"
    TERM = "TERM"
    FACTOR = "FACTOR"

    @property
    def display_name(self) -> str:
        return self.value


class TraceRecord(NamedTuple):
    """One trace entry: either a rule entry or a consumed token."""
    nonterminal: Optional[NonTerminal] = None
    token: Optional[Token] = None

    @property
    def is_token(self) -> bool:
        return self.token is not None

    def render(self) -> str:
        if self.token is not None:
            return "%8s <%s, '%s'>" % ("TOKEN  :", self.token.kind.display_name, self.token.lexeme)
        return "%8s %s" % ("NONTERM:", self.nonterminal.display_name)


class TraceEmitter:
    """
    Writes the derivation trace to a text stream.

    Records are also kept in memory so callers can inspect them without
    re-parsing the text.

    Attributes:
        out: Text stream receiving the trace
        records: Every record emitted so far, in order
    """

    HEADER = "Parsing History\n===============\n"

    def __init__(self, out: Optional[TextIO] = None):
        self.out: TextIO = out if out is not None else io.StringIO()
        self.records: list[TraceRecord] = []

    # =========================================================================
    # Records
    # =========================================================================

    def emit_rule_entry(self, nonterminal: NonTerminal) -> None:
        self._append(TraceRecord(nonterminal=nonterminal))

    def emit_token_consumption(self, token: Token) -> None:
        self._append(TraceRecord(token=token))

    def _append(self, record: TraceRecord) -> None:
        self.records.append(record)
        self.out.write(record.render() + "\n")

    @property
    def token_count(self) -> int:
        """Number of token-consumption records emitted."""
        return sum(1 for record in self.records if record.is_token)

    # =========================================================================
    # Frame
    # =========================================================================

    def write_header(self) -> None:
        self.out.write(self.HEADER)

    def write_symbol_table(self, table: SymbolTable) -> None:
        self.out.write("\n\n")
        self.out.write(table.format_table())

    def write_status(self, code: Union[ErrorCode, int]) -> None:
        """Write the final status line for the given outcome."""
        self.out.write("\n" + format_status(code) + "\n")

    def getvalue(self) -> str:
        """Return the text written so far when writing to a StringIO."""
        if isinstance(self.out, io.StringIO):
            return self.out.getvalue()
        raise TypeError("trace was written to an external stream")


def format_status(code: Union[ErrorCode, int]) -> str:
    """
    Format the status line for a recognition outcome.

    >>> format_status(0)
    'PARSING WAS SUCCESSFUL.'
    >>> format_status(6)
    'PARSING ERROR[6]: Period expected.'
    """
    code = ErrorCode(code)
    if code == ErrorCode.SUCCESS:
        return "PARSING WAS SUCCESSFUL."
    return f"PARSING ERROR[{int(code)}]: {code.message}."
