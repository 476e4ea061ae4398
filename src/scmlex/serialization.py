"""Token serialization: mapping, JSON text and CSV forms of a Token.

Converts Token records to/from JSON-compatible dicts. Useful for:
- Feeding pre-tokenized input to a Lexer
- Sending token streams over the wire
- Debugging and inspection

The mapping form is ``{"type": <kind-name>, "literal": <str or None>}``
and the JSON-text form is that mapping encoded as compact JSON.

Example:
    from scmlex.tokens import Token, TokenKind
    from scmlex.serialization import to_json, from_json

    token = Token(TokenKind.IDENTIFIER, "foo")
    text = to_json(token)  # '{"type":"identifier","literal":"foo"}'
    assert from_json(text) == token

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Mapping
from typing import Any

from scmlex.errors import InvalidJsonError, InvalidMappingError, UnknownTokenKindError
from scmlex.tokens import Token, TokenKind

# Keys every token mapping must carry
REQUIRED_KEYS: tuple[str, ...] = ("type", "literal")


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a Token to a JSON-compatible dict.

    Args:
        token: Token record.

    Returns:
        Dict with ``type`` (kind name) and ``literal``.

    """
    return {"type": token.kind.value, "literal": token.literal}


def from_dict(data: Mapping[str, Any]) -> Token:
    """Reconstruct a Token from a mapping.

    ``type`` may be a kind name or a TokenKind member.

    Args:
        data: Mapping with ``type`` and ``literal`` keys.

    Returns:
        Token record.

    Raises:
        InvalidMappingError: If ``data`` is not a mapping or lacks a key.
        UnknownTokenKindError: If ``type`` is not a TokenKind.

    """
    if not isinstance(data, Mapping):
        msg = f"Expected a mapping, got {type(data).__name__}"
        raise InvalidMappingError(msg, data)

    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        msg = f"Token mapping is missing {', '.join(repr(k) for k in missing)}"
        raise InvalidMappingError(msg, data)

    literal = data["literal"]
    if literal is not None and not isinstance(literal, str):
        msg = f"Token literal must be a string or None, got {type(literal).__name__}"
        raise InvalidMappingError(msg, data)

    return Token(_kind_of(data["type"]), literal)


def _kind_of(value: Any) -> TokenKind:
    """Resolve the ``type`` value of a mapping to a TokenKind."""
    if isinstance(value, TokenKind):
        return value
    if isinstance(value, str) and value in TokenKind.names():
        return TokenKind(value)
    raise UnknownTokenKindError(value)


def is_token_mapping(value: Any) -> bool:
    """Check whether ``value`` looks like a token mapping (has both keys)."""
    return isinstance(value, Mapping) and all(key in value for key in REQUIRED_KEYS)


def to_json(token: Token, *, indent: int | None = None) -> str:
    """Serialize a Token to JSON text.

    Output is compact by default, e.g. ``{"type":"lparen","literal":"("}``.

    Args:
        token: Token to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    separators = (",", ":") if indent is None else None
    return json.dumps(to_dict(token), indent=indent, separators=separators)


def from_json(text: str) -> Token:
    """Deserialize a Token from JSON text.

    Args:
        text: JSON string (as produced by to_json).

    Returns:
        Token record.

    Raises:
        InvalidJsonError: If the text is not JSON or not a token mapping.
        UnknownTokenKindError: If ``type`` is not a TokenKind.

    """
    try:
        raw = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        raise InvalidJsonError(f"Cannot parse token JSON: {e}", _text_or_none(text)) from e

    if not is_token_mapping(raw):
        raise InvalidJsonError("JSON does not encode a token mapping", text)

    try:
        return from_dict(raw)
    except InvalidMappingError as e:
        raise InvalidJsonError(e.message, text) from e


def _text_or_none(text: Any) -> str | None:
    return text if isinstance(text, str) else None


def to_csv(token: Token) -> str:
    """Render a Token as one quoted CSV row: ``"kind","literal"``.

    A ``None`` literal becomes an empty field.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="")
    writer.writerow([token.kind.value, "" if token.literal is None else token.literal])
    return buf.getvalue()


__all__ = [
    "REQUIRED_KEYS",
    "from_dict",
    "from_json",
    "is_token_mapping",
    "to_csv",
    "to_dict",
    "to_json",
]
