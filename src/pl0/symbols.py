"""
Declaration Table
=================

Append-only record of every name declared while recognizing a PL/0
program, annotated with its kind, lexical level and (for constants)
value.

The table is write-only from the recognizer's point of view: nothing
looks names up, so undeclared uses and duplicate declarations are not
detected here. A semantic checker would be a separate layer reading
the finalized table.

Dump Format
-----------
    Symbol Table
    ============
    Name       Type  Level  Value
    a          const 0      5
    x          var   0
    p          proc  0
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


class SymbolKind(Enum):
    """Kind of a declared name."""
    CONST = "const"
    VAR = "var"
    PROC = "proc"


@dataclass(frozen=True)
class Symbol:
    """
    One declared name.

    Attributes:
        name: Identifier text
        kind: CONST, VAR or PROC
        level: Procedure nesting depth at the declaration (0 = outermost)
        value: Integer value, present only for constants
    """
    name: str
    kind: SymbolKind
    level: int
    value: Optional[int] = None

    def __post_init__(self):
        if self.level < 0:
            raise ValueError(f"symbol level cannot be negative: {self.level}")
        if self.kind is SymbolKind.CONST and self.value is None:
            raise ValueError(f"constant '{self.name}' requires a value")
        if self.kind is not SymbolKind.CONST and self.value is not None:
            raise ValueError(f"only constants carry a value, got {self.kind.value} '{self.name}'")

    @classmethod
    def constant(cls, name: str, level: int, value: int) -> "Symbol":
        return cls(name, SymbolKind.CONST, level, value)

    @classmethod
    def variable(cls, name: str, level: int) -> "Symbol":
        return cls(name, SymbolKind.VAR, level)

    @classmethod
    def procedure(cls, name: str, level: int) -> "Symbol":
        return cls(name, SymbolKind.PROC, level)


class SymbolTable:
    """
    Ordered, append-only list of Symbols.

    Insertion order is declaration order in the source. Duplicates are
    accepted silently.
    """

    TITLE = "Symbol Table"
    COLUMNS = f"{'Name':<10} {'Type':<5} {'Level':<6} Value"

    def __init__(self):
        self._symbols: list[Symbol] = []

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)

    def register(self, symbol: Symbol) -> None:
        """Append a declaration. Always succeeds."""
        logger.debug(
            f"Registered {symbol.kind.value} '{symbol.name}' at level {symbol.level}"
        )
        self._symbols.append(symbol)

    def finalize(self) -> tuple[Symbol, ...]:
        """Return the declarations in registration order."""
        return tuple(self._symbols)

    def clear(self) -> None:
        self._symbols.clear()

    def format_table(self) -> str:
        """Render the table in the dump format described above."""
        lines = [self.TITLE, "=" * len(self.TITLE), self.COLUMNS]
        for symbol in self._symbols:
            line = f"{symbol.name:<10} {symbol.kind.value:<5} {symbol.level:<6}"
            if symbol.value is not None:
                line += f" {symbol.value}"
            lines.append(line.rstrip())
        return "\n".join(lines) + "\n"
