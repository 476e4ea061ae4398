"""Identifier classifier mixin and R7RS identifier validator.

R7RS identifiers:

    <identifier> → <initial> <subsequent>*
                 | <peculiar identifier>
    <peculiar identifier> → <explicit sign>
                 | <explicit sign> <sign subsequent> <subsequent>*
                 | <explicit sign> . <dot subsequent> <subsequent>*
                 | . <dot subsequent> <subsequent>*

The validator walks the first one or two characters as a small state
machine and then checks the remainder as one run of <subsequent>.
This accepts the peculiar identifiers ``+``, ``-``, ``...``, ``->x``
and rejects numbers such as ``+5`` and ``.5``.

The ``|...|`` form is not supported.
"""

from __future__ import annotations

from scmlex.lexer.charsets import (
    DOT_SUBSEQUENT,
    EXPLICIT_SIGN,
    INITIAL,
    SIGN_SUBSEQUENT,
    SUBSEQUENT,
)
from scmlex.tokens import TokenKind


def is_identifier(lexeme: str) -> bool:
    """Check whether ``lexeme`` is a legal R7RS identifier.

    Examples:
        >>> is_identifier("lambda"), is_identifier("..."), is_identifier("->string")
        (True, True, True)
        >>> is_identifier("+5"), is_identifier("1+")
        (False, False)
    """
    if not lexeme:
        return False

    first = lexeme[0]
    if first in INITIAL:
        return _all_subsequent(lexeme, 1)
    if first in EXPLICIT_SIGN:
        return _after_sign(lexeme)
    if first == ".":
        return _dot_identifier(lexeme, 0)
    return False


def _all_subsequent(lexeme: str, start: int) -> bool:
    """True when every character from ``start`` on is <subsequent>."""
    for char in lexeme[start:]:
        if char not in SUBSEQUENT:
            return False
    return True


def _after_sign(lexeme: str) -> bool:
    if len(lexeme) == 1:
        return True
    second = lexeme[1]
    if second == ".":
        return _dot_identifier(lexeme, 1)
    if second not in SIGN_SUBSEQUENT:
        return False
    return _all_subsequent(lexeme, 2)


def _dot_identifier(lexeme: str, start: int) -> bool:
    """Dot rule, applied to ``lexeme[start:]`` which begins with ``.``."""
    if len(lexeme) - start == 1:
        return True
    if lexeme[start + 1] not in DOT_SUBSEQUENT:
        return False
    return _all_subsequent(lexeme, start + 2)


class IdentifierClassifierMixin:
    """Mixin providing identifier classification (the classifier fallback)."""

    def _try_classify_identifier(self, lexeme: str) -> TokenKind | None:
        """Classify ``lexeme`` as an identifier.

        Returns:
            TokenKind.IDENTIFIER if valid, None otherwise.
        """
        if is_identifier(lexeme):
            return TokenKind.IDENTIFIER
        return None
