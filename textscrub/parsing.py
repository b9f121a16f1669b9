"""Shared parsing helpers for input text, separators, and configuration values."""

from __future__ import annotations

import string

from .errors import EncodingError
from .telemetry import events


TRANSLITERATION_STRATEGIES = ("unicode", "table")
_SEPARATOR_CHARACTERS = frozenset(string.punctuation + " ").difference("<>&")


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def coerce_text(value: object, operation: str) -> str:
    """Return `value` as a `str` that is guaranteed to be valid UTF-8.

    Args:
        value: Input text; `bytes` and `bytearray` are decoded as strict UTF-8.
        operation: Public operation name, used for diagnostics.

    Raises:
        TypeError: If the value is not text.
        EncodingError: If the value cannot be represented as valid UTF-8.
    """

    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise build_encoding_error(operation, exc, "input bytes are not valid UTF-8") from exc

    if not isinstance(value, str):
        raise TypeError(
            f"`{operation}` expects `str` or UTF-8 `bytes`, got `{type(value).__name__}`."
        )

    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise build_encoding_error(
            operation, exc, "input text contains code points that are not valid UTF-8"
        ) from exc
    return value


def build_encoding_error(
    operation: str, exc: UnicodeDecodeError | UnicodeEncodeError, detail: str
) -> EncodingError:
    """Build an `EncodingError` and emit the rejection event."""

    events.log_encoding_rejected(operation, type(exc).__name__)
    return EncodingError(
        operation=operation,
        detail=f"`{operation}` rejected input: {detail} (position {exc.start}).",
        hint="Decode the source with its real encoding before normalizing.",
    )


def validate_separator(value: object, field_name: str = "separator") -> str:
    """Validate a slug separator and return it unchanged.

    The separator may be empty. Otherwise it is built from ASCII punctuation
    and spaces, excluding the markup characters `<`, `>` and `&`, so a slug
    is left unchanged when slugified again.

    Raises:
        ValueError: If the separator is not a string or holds other characters.
    """

    if not isinstance(value, str):
        raise ValueError(f"`{field_name}` must be a string.")
    if not _SEPARATOR_CHARACTERS.issuperset(value):
        raise ValueError(
            f"`{field_name}` may only contain ASCII punctuation and spaces, "
            "excluding `<`, `>` and `&`."
        )
    return value


def parse_strategy_name(value: object, field_name: str = "transliteration") -> str:
    """Parse a transliteration strategy name case-insensitively.

    Raises:
        ValueError: If the name is not one of the supported strategies.
    """

    normalized = normalize_optional_string(value)
    token = normalized.lower() if normalized is not None else ""
    if token in TRANSLITERATION_STRATEGIES:
        return token

    supported = ", ".join(f"`{name}`" for name in TRANSLITERATION_STRATEGIES)
    raise ValueError(f"`{field_name}` must be one of {supported}.")
