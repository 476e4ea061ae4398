"""Ordered classification pipeline: lexeme → TokenKind.

Rules are evaluated in a fixed precedence and the first match wins:

1. delimiters (``(`` ``)`` ``.`` ``'`` ``#(``, and ``|`` as illegal)
2. boolean
3. character
4. string
5. number (real, rational, complex, imaginary)
6. identifier

Anything left over is ``illegal``. The order matters: ``.`` is a
delimiter before it is an identifier, and ``+5`` is a number only
because numbers are tried before identifiers.

Thread Safety:
Classifier holds no state; one instance can be shared.

"""

from __future__ import annotations

from collections.abc import Callable

from scmlex.lexer.classifiers import (
    DelimiterClassifierMixin,
    IdentifierClassifierMixin,
    LiteralClassifierMixin,
    NumberClassifierMixin,
)
from scmlex.tokens import TokenKind

Rule = tuple[str, Callable[[str], TokenKind | None]]


class Classifier(
    DelimiterClassifierMixin,
    LiteralClassifierMixin,
    NumberClassifierMixin,
    IdentifierClassifierMixin,
):
    """Assigns exactly one TokenKind to each lexeme.

    Usage:
        >>> Classifier().classify("#\\\\space")
        <TokenKind.CHARACTER: 'character'>

    """

    __slots__ = ("_rules",)

    def __init__(self) -> None:
        self._rules: tuple[Rule, ...] = (
            ("delimiter", self._try_classify_delimiter),
            ("boolean", self._try_classify_boolean),
            ("character", self._try_classify_character),
            ("string", self._try_classify_string),
            ("number", self._try_classify_number),
            ("identifier", self._try_classify_identifier),
        )

    def rules(self) -> tuple[Rule, ...]:
        """The ordered ``(name, rule)`` table, highest precedence first."""
        return self._rules

    def classify(self, lexeme: str) -> TokenKind:
        """Classify one lexeme.

        Returns:
            The kind of the first matching rule, or TokenKind.ILLEGAL.
        """
        for _, rule in self._rules:
            kind = rule(lexeme)
            if kind is not None:
                return kind
        return TokenKind.ILLEGAL


_DEFAULT_CLASSIFIER = Classifier()


def classify(lexeme: str) -> TokenKind:
    """Classify one lexeme with the shared default Classifier."""
    return _DEFAULT_CLASSIFIER.classify(lexeme)


__all__ = ["Classifier", "Rule", "classify"]
