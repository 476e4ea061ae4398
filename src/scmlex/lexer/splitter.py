"""String-aware splitter: source text → ordered lexemes.

Splits on whitespace, except inside double-quoted string literals, and
makes ``(``, ``)`` and ``'`` split as standalone lexemes. ``(`` only
ends the lexeme it closes, so ``#(`` stays one lexeme.

Two padding modes:

- default: the delimiters are padded only outside string literals, so
  ``"a(b"`` survives intact.
- legacy (``pad_inside_strings=True``): the delimiters are padded by raw
  text substitution before splitting, which also rewrites them inside
  string literals. Kept for compatibility with older token streams.

"""

from __future__ import annotations

import re

from scmlex.lexer.charsets import WHITESPACE

# Raw substitution used by the legacy padding mode
_PADDING: dict[str, str] = {"(": "( ", ")": " ) ", "'": " ' "}
_PADDING_RE = re.compile(r"[()']")


def split(source: str, *, pad_inside_strings: bool = False) -> list[str]:
    """Split source text into lexemes.

    Args:
        source: Scheme source text
        pad_inside_strings: Pad delimiters by raw substitution, even
            inside string literals

    Returns:
        Lexemes in source order. Never contains empty strings.

    Example:
        >>> split('(display "hello world")')
        ['(', 'display', '"hello world"', ')']
    """
    if pad_inside_strings:
        cooked = _PADDING_RE.sub(lambda m: _PADDING[m.group()], source)
        return _scan(cooked, pad=False)
    return _scan(source, pad=True)


def _scan(source: str, *, pad: bool) -> list[str]:
    """Scan character by character, tracking string and escape state."""
    lexemes: list[str] = []
    piece: list[str] = []
    escaped = False
    in_string = False

    def emit() -> None:
        if piece:
            lexemes.append("".join(piece))
            piece.clear()

    for char in source:
        if char == "\\" and in_string:
            escaped = not escaped
            piece.append(char)
            continue

        if char == '"' and not escaped:
            in_string = not in_string
        escaped = False

        if in_string:
            piece.append(char)
        elif char in WHITESPACE:
            emit()
        elif pad and char == "(":
            piece.append(char)
            emit()
        elif pad and char in ")'":
            emit()
            lexemes.append(char)
        else:
            piece.append(char)

    emit()
    return lexemes
