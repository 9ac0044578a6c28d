"""
Token Cursor
============

Advance-only positional view over a token sequence. Reading at or past
the end returns the nulsym sentinel instead of failing, so the grammar
can treat end of input as just another token that never matches.
"""

from typing import Optional, Sequence

from pl0.tokens import Token, SENTINEL


class TokenCursor:
    """
    Positional view over a token sequence.

    The position only ever grows. One token of lookahead (the current
    token) is all the grammar needs.

    Attributes:
        tokens: The token sequence being read (None once detached)
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens: Optional[Sequence[Token]] = tokens
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def at_end(self) -> bool:
        """True once every token in the sequence has been passed."""
        return self.tokens is None or self._pos >= len(self.tokens)

    def current(self) -> Token:
        """Return the current token, or the sentinel past the end."""
        if self.at_end:
            return SENTINEL
        return self.tokens[self._pos]

    def advance(self) -> None:
        """Move to the next token."""
        self._pos += 1

    def detach(self) -> None:
        """Drop the token sequence at the end of a pass."""
        self.tokens = None
