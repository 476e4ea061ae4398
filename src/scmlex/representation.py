"""Token representations and conversion tables.

A token can be materialized three ways:

- ``RECORD``: a frozen :class:`~scmlex.tokens.Token`
- ``MAPPING``: ``{"type": "identifier", "literal": "foo"}``
- ``JSON_TEXT``: ``'{"type":"identifier","literal":"foo"}'``

Each Lexer fixes one representation at construction and uses it for
every token it yields. Conversion goes through two function tables
indexed by the closed :class:`Representation` enum; the tables are
checked for completeness at import time.

"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from scmlex.errors import InvalidConversionTargetError
from scmlex.serialization import from_dict, from_json, is_token_mapping, to_dict, to_json
from scmlex.tokens import Token, TokenKind


class Representation(Enum):
    """The external encodings a token can be produced or consumed as."""

    RECORD = "record"
    MAPPING = "mapping"
    JSON_TEXT = "json-text"

    @classmethod
    def coerce(cls, value: Representation | str) -> Representation:
        """Resolve a Representation from a member, its value, or an alias.

        Raises:
            InvalidConversionTargetError: If ``value`` names no representation.
        """
        if isinstance(value, Representation):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            found = _ALIASES.get(key)
            if found is not None:
                return found
        raise InvalidConversionTargetError("Unsupported token representation", value)


_ALIASES: dict[str, Representation] = {
    "record": Representation.RECORD,
    "token": Representation.RECORD,
    "mapping": Representation.MAPPING,
    "hash": Representation.MAPPING,
    "dict": Representation.MAPPING,
    "json-text": Representation.JSON_TEXT,
    "json_text": Representation.JSON_TEXT,
    "json": Representation.JSON_TEXT,
}


def _identity(token: Token) -> Token:
    return token


def _record(value: Any) -> Token:
    if isinstance(value, Token) and isinstance(value.kind, TokenKind):
        return value
    raise InvalidConversionTargetError("cannot convert as token", value)


# Token -> representation
ENCODERS: dict[Representation, Callable[[Token], Any]] = {
    Representation.RECORD: _identity,
    Representation.MAPPING: to_dict,
    Representation.JSON_TEXT: to_json,
}

# representation -> Token
DECODERS: dict[Representation, Callable[[Any], Token]] = {
    Representation.RECORD: _record,
    Representation.MAPPING: from_dict,
    Representation.JSON_TEXT: from_json,
}

for _table in (ENCODERS, DECODERS):
    _missing = set(Representation) - set(_table)
    if _missing:  # pragma: no cover
        raise RuntimeError(f"Conversion table incomplete: {sorted(m.value for m in _missing)}")


def encode(token: Token, representation: Representation) -> Any:
    """Materialize a Token in the given representation."""
    return ENCODERS[representation](token)


def decode(value: Any, representation: Representation) -> Token:
    """Convert a value in the given representation back to a Token."""
    return DECODERS[representation](value)


def detect(value: Any) -> Representation:
    """Detect the representation of one token-like value.

    Raises:
        InvalidConversionTargetError: If ``value`` matches no representation.
    """
    if isinstance(value, Token) and isinstance(value.kind, TokenKind):
        return Representation.RECORD
    if is_token_mapping(value):
        return Representation.MAPPING
    if isinstance(value, str) and _parses_as_json(value):
        return Representation.JSON_TEXT
    raise InvalidConversionTargetError("cannot convert as token", value)


def _parses_as_json(text: str) -> bool:
    try:
        json.loads(text)
    except (ValueError, RecursionError):
        return False
    return True


def decode_all(values: Iterable[Any]) -> tuple[tuple[Token, ...], Representation | None]:
    """Convert a homogeneous sequence of token-like values to Tokens.

    The representation is detected from the first element and applied to
    every element.

    Returns:
        The Tokens, and the detected representation (None when empty).
    """
    items = list(values)
    if not items:
        return (), None
    representation = detect(items[0])
    decoder = DECODERS[representation]
    return tuple(decoder(item) for item in items), representation


__all__ = [
    "DECODERS",
    "ENCODERS",
    "Representation",
    "decode",
    "decode_all",
    "detect",
    "encode",
]
