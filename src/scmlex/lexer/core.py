"""Lexer: a cursor over a fixed, classified token sequence.

The token sequence is built once at construction, either by splitting
and classifying source text or by converting a pre-built sequence of
token-like values, and never changes afterwards. Only the two cursor
indices move.

Cursor states:
- Initial: ``current_pos == next_pos == 0``. Nothing has been read yet.
- After any successful ``next_token``/``skip_token``:
  ``next_pos == current_pos + 1``.

Thread Safety:
The token tuple is immutable and can be shared. Cursor movement is not
synchronized; give each consumer its own cursor with :meth:`Lexer.fork`.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from scmlex._version import __version__
from scmlex.config import get_lex_config
from scmlex.errors import EndOfStreamError, InvalidConversionTargetError
from scmlex.lexer.classifier import classify
from scmlex.lexer.splitter import split
from scmlex.representation import ENCODERS, Representation, decode_all
from scmlex.tokens import Token
from scmlex.utils.logger import get_logger

logger = get_logger(__name__)


def tokenize(source: str, *, legacy_padding: bool = False) -> list[Token]:
    """Split and classify source text.

    One Token is produced per lexeme, in source order.

    Args:
        source: Scheme source text
        legacy_padding: Pad delimiters inside string literals too

    Returns:
        List of Token records.

    Example:
        >>> tokenize("(car '(1 2))")[:3]
        [Token(lparen, '('), Token(identifier, 'car'), Token(quotation, "'")]
    """
    tokens = [Token(classify(lexeme), lexeme) for lexeme in split(source, pad_inside_strings=legacy_padding)]
    logger.debug("Tokenized %d lexemes from %d characters", len(tokens), len(source))
    return tokens


class Lexer:
    """Cursor over a token sequence built from source text or tokens.

    Usage:
        >>> lexer = Lexer("(+ 1 2)")
        >>> lexer.next_token()
        Token(lparen, '(')
        >>> lexer.peek_token(1)
        Token(number, '1')
        >>> lexer.skip_token()
        >>> lexer.current_token
        Token(identifier, '+')

        >>> Lexer("(+ 1 2)", representation="mapping").next_token()
        {'type': 'lparen', 'literal': '('}

    Construction from tokens detects the representation of the first
    element and converts every element the same way:

        >>> Lexer([{"type": "lparen", "literal": "("}]).next_token()
        Token(lparen, '(')

    """

    __slots__ = (
        "_tokens",
        "_size",  # Cached len(_tokens)
        "_current_pos",
        "_next_pos",
        "_representation",
        "_encode",
    )

    def __init__(
        self,
        source: str | Iterable[Any],
        representation: Representation | str | None = None,
        *,
        legacy_padding: bool | None = None,
    ) -> None:
        """Build the token sequence.

        Args:
            source: Source text, or an iterable of Tokens, token mappings
                or token JSON strings
            representation: Representation of the tokens this lexer yields
                (defaults to the active LexConfig)
            legacy_padding: Splitter padding mode for source text
                (defaults to the active LexConfig)

        Raises:
            InvalidConversionTargetError: If ``source`` is not text or a
                supported token sequence, or ``representation`` is unknown.
            InvalidMappingError: If a token mapping lacks a key.
            InvalidJsonError: If a token JSON string is malformed.
            UnknownTokenKindError: If a mapping names an unknown kind.
        """
        config = get_lex_config()
        if representation is None:
            representation = config.representation
        self._set_representation(Representation.coerce(representation))

        if isinstance(source, str):
            if legacy_padding is None:
                legacy_padding = config.legacy_padding
            self._tokens: tuple[Token, ...] = tuple(tokenize(source, legacy_padding=legacy_padding))
        elif isinstance(source, Iterable):
            self._tokens, detected = decode_all(source)
            logger.debug(
                "Converted %d tokens from %s form",
                len(self._tokens),
                detected.value if detected else "empty",
            )
        else:
            raise InvalidConversionTargetError("cannot convert as token", source)

        self._size = len(self._tokens)
        self._current_pos = 0
        self._next_pos = 0

    def _set_representation(self, representation: Representation) -> None:
        self._representation = representation
        self._encode = ENCODERS[representation]

    @classmethod
    def version(cls) -> str:
        """Version banner, e.g. ``(scheme-lexer :version 0.3.0)``."""
        return f"(scheme-lexer :version {__version__})"

    # =========================================================================
    # Sequence access
    # =========================================================================

    @property
    def tokens(self) -> tuple[Token, ...]:
        """The underlying Token records."""
        return self._tokens

    @property
    def size(self) -> int:
        return self._size

    @property
    def representation(self) -> Representation:
        return self._representation

    @property
    def current_pos(self) -> int:
        return self._current_pos

    @property
    def next_pos(self) -> int:
        return self._next_pos

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate every token in this lexer's representation.

        Does not move the cursor.
        """
        encode = self._encode
        for token in self._tokens:
            yield encode(token)

    def to_list(self) -> list[Any]:
        """Every token in this lexer's representation."""
        return list(self)

    def __repr__(self) -> str:
        return (
            f"Lexer(size={self._size}, current_pos={self._current_pos}, "
            f"next_pos={self._next_pos}, representation={self._representation.value!r})"
        )

    # =========================================================================
    # Cursor
    # =========================================================================

    @property
    def current_token(self) -> Any:
        """Token at ``current_pos``, or None if the sequence is empty.

        Before the first advance this is the first token, which has not
        been consumed yet.
        """
        if self._size == 0:
            return None
        return self._encode(self._tokens[self._current_pos])

    def next_token(self, offset: int = 0) -> Any:
        """Advance past ``offset`` tokens and return the one reached.

        Raises:
            EndOfStreamError: If ``next_pos + offset`` is past the end.
        """
        self._advance(offset)
        return self._encode(self._tokens[self._current_pos])

    def skip_token(self, offset: int = 0) -> None:
        """Advance exactly like :meth:`next_token`, returning nothing.

        Raises:
            EndOfStreamError: If ``next_pos + offset`` is past the end.
        """
        self._advance(offset)

    def peek_token(self, offset: int = 0) -> Any:
        """Look at the token ``offset`` places after the cursor.

        Never moves the cursor.

        Returns:
            The token at ``next_pos + offset``, or None if that index is
            past the end while tokens remain.

        Raises:
            EndOfStreamError: If no token remains at all.
        """
        _check_offset(offset)
        if self._next_pos >= self._size:
            raise EndOfStreamError(self._next_pos, self._size)
        pos = self._next_pos + offset
        if pos >= self._size:
            return None
        return self._encode(self._tokens[pos])

    def rewind(self) -> Lexer:
        """Reset the cursor to its initial state. Does not re-tokenize."""
        self._current_pos = 0
        self._next_pos = 0
        logger.debug("Rewound cursor over %d tokens", self._size)
        return self

    def fork(self) -> Lexer:
        """A new, rewound Lexer sharing this lexer's token sequence."""
        clone = Lexer.__new__(Lexer)
        clone._set_representation(self._representation)
        clone._tokens = self._tokens
        clone._size = self._size
        clone._current_pos = 0
        clone._next_pos = 0
        return clone

    def _advance(self, offset: int) -> None:
        _check_offset(offset)
        pos = self._next_pos + offset
        if pos >= self._size:
            raise EndOfStreamError(pos, self._size)
        self._current_pos = pos
        self._next_pos = pos + 1


def _check_offset(offset: int) -> None:
    if offset < 0:
        msg = f"Offset must be non-negative, got {offset}"
        raise ValueError(msg)
