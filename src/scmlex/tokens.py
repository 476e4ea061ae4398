"""Token and TokenKind definitions for the scmlex lexer.

The lexer produces a sequence of Token records that an external parser
consumes through the cursor API. Each Token has a kind and the literal
text of the lexeme it was classified from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Token kinds produced (or accepted) by the lexer.

    Values are the kind names used by the mapping and JSON-text
    representations, e.g. ``{"type": "lparen", "literal": "("}``.

    """

    # Delimiters
    LPAREN = "lparen"  # (
    RPAREN = "rparen"  # )
    VEC_LPAREN = "vec_lparen"  # #(
    BYTEVEC_LPAREN = "bytevec_lparen"  # #u8(
    QUOTATION = "quotation"  # '
    BACKQUOTE = "backquote"  # ` (quasiquote)
    COMMA = "comma"  # ,
    COMMA_AT = "comma_at"  # ,@
    DOT = "dot"  # .
    SEMICOLON = "semicolon"  # ;
    COMMENT_LPAREN = "comment_lparen"  # #|
    COMMENT_RPAREN = "comment_rparen"  # |#

    # Value kinds
    IDENTIFIER = "identifier"  # foo, ..., ->string
    BOOLEAN = "boolean"  # #f, #t, #false, #true
    NUMBER = "number"  # 123, 4.56, 1/2, 3+4i
    CHARACTER = "character"  # #\a, #\space
    STRING = "string"  # "hoge"

    # Bare operators; never emitted by the classifier, but external
    # token sequences may carry it.
    OP_PROC = "op_proc"

    # Unrecognized lexeme
    ILLEGAL = "illegal"

    @classmethod
    def names(cls) -> frozenset[str]:
        """All kind names accepted by the mapping representation."""
        return _KIND_NAMES


_KIND_NAMES: frozenset[str] = frozenset(kind.value for kind in TokenKind)


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme.

    Attributes:
        kind: The token kind (from TokenKind enum)
        literal: The lexeme text exactly as it appeared in the source.
            Only ``None`` when built from a mapping or JSON text that
            carried a null literal.

    """

    kind: TokenKind
    literal: str | None

    def __str__(self) -> str:
        return self.literal if self.literal is not None else ""

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        lit = self.literal
        if lit is not None and len(lit) > 20:
            lit = lit[:17] + "..."
        return f"Token({self.kind.value}, {lit!r})"

    @property
    def type(self) -> TokenKind:
        """Alias of ``kind`` matching the mapping key name."""
        return self.kind
