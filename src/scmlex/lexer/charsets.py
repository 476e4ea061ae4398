"""Character sets for the R7RS identifier grammar.

All sets are frozensets for O(1) membership tests and immutability.

Reference: R7RS small, section 7.1.1 (lexical structure)

Usage:
    from scmlex.lexer.charsets import INITIAL

    if char in INITIAL:
        ...
"""

import string

LETTERS: frozenset[str] = frozenset(string.ascii_letters)
DIGITS: frozenset[str] = frozenset(string.digits)

# <special initial>
SPECIAL_INITIAL: frozenset[str] = frozenset("!$%&*/:<=>?^_~")

# <initial> → <letter> | <special initial>
INITIAL: frozenset[str] = LETTERS | SPECIAL_INITIAL

# <explicit sign>
EXPLICIT_SIGN: frozenset[str] = frozenset("+-")

# <special subsequent> → <explicit sign> | . | @
SPECIAL_SUBSEQUENT: frozenset[str] = EXPLICIT_SIGN | frozenset(".@")

# <subsequent> → <initial> | <digit> | <special subsequent>
SUBSEQUENT: frozenset[str] = INITIAL | DIGITS | SPECIAL_SUBSEQUENT

# <sign subsequent> → <initial> | <explicit sign> | @
SIGN_SUBSEQUENT: frozenset[str] = INITIAL | EXPLICIT_SIGN | frozenset("@")

# <dot subsequent> → <sign subsequent> | .
DOT_SUBSEQUENT: frozenset[str] = SIGN_SUBSEQUENT | frozenset(".")

# Whitespace separating lexemes
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")
