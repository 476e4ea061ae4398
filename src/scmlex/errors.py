"""Exception classes for scmlex.

Provides the exceptions raised while building token sequences and
moving the lexer cursor.
"""

from __future__ import annotations

from typing import Any


class ScmlexError(Exception):
    """Base exception for all scmlex errors.

    Subclass this for specific error categories.
    """

    pass


class UnknownTokenKindError(ScmlexError):
    """A mapping or JSON text names a ``type`` that is not a TokenKind."""

    def __init__(self, kind_name: Any) -> None:
        """Initialize with the offending kind name.

        Args:
            kind_name: The value found under the ``type`` key
        """
        self.kind_name = kind_name
        super().__init__(f"Unknown token kind: {kind_name!r}")


class InvalidConversionTargetError(ScmlexError):
    """Input or requested output is not a supported representation.

    Raised when a token sequence cannot be detected as records, mappings
    or JSON text, or when an output representation other than the three
    supported ones is requested.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        if value is not None:
            message = f"{message}: {value!r}"
        super().__init__(message)


class InvalidMappingError(ScmlexError):
    """A mapping lacks the ``type`` or ``literal`` key, or is not a mapping."""

    def __init__(self, message: str, mapping: Any = None) -> None:
        self.message = message
        self.mapping = mapping
        super().__init__(message)


class InvalidJsonError(ScmlexError):
    """JSON text fails to parse or does not decode to a token mapping."""

    def __init__(self, message: str, text: str | None = None) -> None:
        self.message = message
        self.text = text
        if text is not None:
            preview = text if len(text) <= 40 else text[:37] + "..."
            message = f"{message} (in {preview!r})"
        super().__init__(message)


class EndOfStreamError(ScmlexError):
    """A cursor operation was requested past the end of the token sequence.

    The parser consuming the lexer should stop reading when it sees this.
    """

    def __init__(self, position: int, size: int) -> None:
        """Initialize end-of-stream error.

        Args:
            position: The index the operation tried to reach
            size: Number of tokens in the sequence
        """
        self.position = position
        self.size = size
        super().__init__(f"No token at position {position} (sequence has {size} tokens)")
