"""ContextVar-based lexer configuration for scmlex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config for any option not passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from scmlex.config import LexConfig, lex_config_context
    from scmlex.representation import Representation

    with lex_config_context(LexConfig(representation=Representation.MAPPING)):
        lexer = Lexer("(list 1 2)")
        lexer.next_token()  # {"type": "lparen", "literal": "("}

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from scmlex.representation import Representation


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        representation: Representation of the tokens a Lexer yields
        legacy_padding: Pad ``(``, ``)`` and ``'`` even inside string
            literals (raw text substitution before splitting)

    """

    representation: Representation = Representation.RECORD
    legacy_padding: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> LexConfig:
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored. ``representation`` may be given as a string
        (``"mapping"``, ``"json"``, ...).

        Example:
            >>> config = LexConfig.from_dict({
            ...     "representation": "json",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.representation
            <Representation.JSON_TEXT: 'json-text'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "representation" in filtered:
            filtered["representation"] = Representation.coerce(filtered["representation"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Args:
        config: LexConfig to use within the context.

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
