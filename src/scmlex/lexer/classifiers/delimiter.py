"""Delimiter classifier mixin."""

from __future__ import annotations

from scmlex.tokens import TokenKind

# Exact lexemes with a fixed kind. ``|`` opens the unsupported
# delimited-identifier syntax and is always illegal.
DELIMITERS: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ".": TokenKind.DOT,
    "'": TokenKind.QUOTATION,
    "#(": TokenKind.VEC_LPAREN,
    "|": TokenKind.ILLEGAL,
}


class DelimiterClassifierMixin:
    """Mixin providing delimiter classification."""

    def _try_classify_delimiter(self, lexeme: str) -> TokenKind | None:
        """Classify ``lexeme`` as a delimiter.

        Returns:
            The delimiter kind, or None if ``lexeme`` is not a delimiter.
        """
        return DELIMITERS.get(lexeme)
