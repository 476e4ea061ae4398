"""Number classifier mixin.

Recognizes the shape of Scheme numbers without evaluating them:

- real:      ``[+-]?(0|[1-9][0-9]*)(\\.[0-9]+)?``     e.g. ``42``, ``-3.14``
- rational:  ``[+-]?real/real``                       e.g. ``1/2``, ``3.14/6.28``
- complex:   ``[+-]?creal[+-]creal i``                e.g. ``-2+3i``, ``2/3+4/5i``
- imaginary: ``[+-](creal)?i``                        e.g. ``+i``, ``-10.11i``

where ``creal`` is a real or a rational. Exactness prefixes, radix
prefixes and exponents are not recognized.
"""

from __future__ import annotations

import re

from scmlex.tokens import TokenKind

_REAL = r"(?:[1-9][0-9]*|0)(?:\.[0-9]+)?"
_RATIONAL = rf"{_REAL}/{_REAL}"
_C_REAL = rf"(?:{_REAL}|{_RATIONAL})"
_COMPLEX = rf"{_C_REAL}[+-]{_C_REAL}i"

# Tried in order; all are matched against the whole lexeme
NUMBER_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("real", re.compile(rf"[+-]?{_REAL}")),
    ("rational", re.compile(rf"[+-]?{_RATIONAL}")),
    ("complex", re.compile(rf"[+-]?{_COMPLEX}")),
    ("imaginary", re.compile(rf"[+-](?:{_C_REAL})?i")),
)


def is_number(lexeme: str) -> bool:
    """Check whether ``lexeme`` has the shape of a number."""
    return any(pattern.fullmatch(lexeme) for _, pattern in NUMBER_PATTERNS)


class NumberClassifierMixin:
    """Mixin providing number classification."""

    def _try_classify_number(self, lexeme: str) -> TokenKind | None:
        """Classify ``lexeme`` as a number.

        Returns:
            TokenKind.NUMBER if any number pattern matches, None otherwise.
        """
        if is_number(lexeme):
            return TokenKind.NUMBER
        return None
