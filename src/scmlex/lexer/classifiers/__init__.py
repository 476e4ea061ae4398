"""Lexeme classifiers for the scmlex lexer.

Each classifier is a mixin that provides classification logic for one
family of lexemes. Classifiers are pure: they take a lexeme and return
a TokenKind, or None when the lexeme is not theirs.
"""

from scmlex.lexer.classifiers.delimiter import (
    DelimiterClassifierMixin,
)
from scmlex.lexer.classifiers.identifier import (
    IdentifierClassifierMixin,
    is_identifier,
)
from scmlex.lexer.classifiers.literal import (
    LiteralClassifierMixin,
)
from scmlex.lexer.classifiers.number import (
    NumberClassifierMixin,
    is_number,
)

__all__ = [
    "DelimiterClassifierMixin",
    "IdentifierClassifierMixin",
    "LiteralClassifierMixin",
    "NumberClassifierMixin",
    "is_identifier",
    "is_number",
]
