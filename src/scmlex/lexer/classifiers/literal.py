"""Boolean, character and string literal classifier mixin."""

from __future__ import annotations

import re

from scmlex.tokens import TokenKind

BOOLEAN_RE = re.compile(r"#(?:f(?:alse)?|t(?:rue)?)")

# #\ followed by one character, or a character name
CHARACTER_RE = re.compile(r"#\\(?:.|space|newline)")

# No unescaped quote between the delimiting quotes
STRING_RE = re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL)


class LiteralClassifierMixin:
    """Mixin providing boolean, character and string classification."""

    def _try_classify_boolean(self, lexeme: str) -> TokenKind | None:
        if BOOLEAN_RE.fullmatch(lexeme):
            return TokenKind.BOOLEAN
        return None

    def _try_classify_character(self, lexeme: str) -> TokenKind | None:
        if CHARACTER_RE.fullmatch(lexeme):
            return TokenKind.CHARACTER
        return None

    def _try_classify_string(self, lexeme: str) -> TokenKind | None:
        """Classify a double-quoted string literal.

        The quotes are kept in the token literal.
        """
        if STRING_RE.fullmatch(lexeme):
            return TokenKind.STRING
        return None
