"""
scmlex: lexical analyzer for Scheme source

Turns Scheme source text into a flat sequence of classified tokens and
hands them to a parser through a small cursor API.

Quick Start:
    >>> from scmlex import lexer
    >>> lex = lexer("(lambda (x) (* x x))")
    >>> lex.next_token()
    Token(lparen, '(')
    >>> lex.peek_token()
    Token(identifier, 'lambda')

    >>> # Tokens as mappings or JSON text instead of records
    >>> lexer("#t", representation="json").next_token()
    '{"type":"boolean","literal":"#t"}'

    >>> # Rebuild a lexer from previously serialized tokens
    >>> lex = lexer(['{"type":"lparen","literal":"("}', '{"type":"rparen","literal":")"}'])
    >>> len(lex)
    2

Token kinds follow the R7RS lexical grammar: delimiters, booleans,
characters, strings, numbers (reals, rationals, complex) and
identifiers, including peculiar identifiers like ``...`` and ``->string``.
Anything else is ``illegal``.
"""

from collections.abc import Iterable
from typing import Any

from scmlex._version import __version__
from scmlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from scmlex.errors import (
    EndOfStreamError,
    InvalidConversionTargetError,
    InvalidJsonError,
    InvalidMappingError,
    ScmlexError,
    UnknownTokenKindError,
)
from scmlex.lexer import Classifier, Lexer, classify, is_identifier, split, tokenize
from scmlex.representation import Representation
from scmlex.serialization import from_dict, from_json, to_csv, to_dict, to_json
from scmlex.tokens import Token, TokenKind


def lexer(
    source: str | Iterable[Any],
    representation: Representation | str | None = None,
) -> Lexer:
    """Create a Lexer over source text or a pre-built token sequence.

    Args:
        source: Scheme source text, or an iterable of Tokens, token
            mappings or token JSON strings
        representation: Representation of the tokens the lexer yields;
            ``None`` uses the active LexConfig

    Returns:
        Lexer with its cursor at the start of the sequence

    Example:
        >>> lex = lexer("(display 42)", representation="mapping")
        >>> lex.next_token()
        {'type': 'lparen', 'literal': '('}
    """
    return Lexer(source, representation)


__all__ = [
    # Main API
    "lexer",
    "tokenize",
    "split",
    "classify",
    "is_identifier",
    # Classes
    "Classifier",
    "Lexer",
    "Token",
    "TokenKind",
    "Representation",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    "to_csv",
    # Errors
    "ScmlexError",
    "UnknownTokenKindError",
    "InvalidConversionTargetError",
    "InvalidMappingError",
    "InvalidJsonError",
    "EndOfStreamError",
    "__version__",
]
