"""Lexer package for scmlex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, Classifier, split, tokenize
├── core.py              # Lexer (cursor) and tokenize()
├── splitter.py          # String-aware splitter
├── classifier.py        # Ordered classification pipeline
├── charsets.py          # R7RS character classes
└── classifiers/         # Classification mixins
    ├── delimiter.py     # ( ) . ' #( |
    ├── literal.py       # Booleans, characters, strings
    ├── number.py        # Reals, rationals, complex numbers
    └── identifier.py    # R7RS identifier validator

Usage:
    >>> from scmlex.lexer import Lexer
    >>> lexer = Lexer("(define x 1)")
    >>> [token.kind.value for token in lexer]
    ['lparen', 'identifier', 'identifier', 'number', 'rparen']

"""

from scmlex.lexer.classifier import Classifier, classify
from scmlex.lexer.classifiers import is_identifier, is_number
from scmlex.lexer.core import Lexer, tokenize
from scmlex.lexer.splitter import split

__all__ = [
    "Classifier",
    "Lexer",
    "classify",
    "is_identifier",
    "is_number",
    "split",
    "tokenize",
]
