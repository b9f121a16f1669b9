"""Deterministic slug helpers for URL-safe identifiers.

Responsibilities:
- Reduce normalized text to ASCII alphanumerics joined by a separator.
- Keep path and query delimiters intact when slugifying paths.
"""

from __future__ import annotations

from functools import lru_cache
import re

from ..parsing import validate_separator


BREAKERS = "\\/_|+ -"
GUARDED = "\\/?&:=."
_PATH_BREAKERS = "".join(character for character in BREAKERS if character not in GUARDED)


@lru_cache(maxsize=32)
def _string_patterns(separator: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    """Compile the filter and collapse patterns for string slugs."""

    breakers = re.escape(BREAKERS + separator)
    return (
        re.compile(f"[^0-9a-zA-Z{breakers}]+"),
        re.compile(f"[{breakers}]+"),
    )


@lru_cache(maxsize=32)
def _path_patterns(
    separator: str,
) -> tuple[re.Pattern[str], re.Pattern[str], re.Pattern[str] | None]:
    """Compile the filter, collapse, and segment-trim patterns for path slugs."""

    allowed = re.escape(GUARDED + BREAKERS + separator)
    breakers = re.escape(_PATH_BREAKERS + separator)
    segment_edges = None
    if separator:
        guarded = re.escape(GUARDED)
        repeated = f"(?:{re.escape(separator)})+"
        segment_edges = re.compile(f"{repeated}(?=[{guarded}])|(?<=[{guarded}]){repeated}")
    return (
        re.compile(f"[^0-9a-zA-Z{allowed}]+"),
        re.compile(f"[{breakers}]+"),
        segment_edges,
    )


def validate_path_separator(separator: str) -> str:
    """Validate a separator for path slugs, which must not reuse delimiters."""

    validate_separator(separator)
    if any(character in GUARDED for character in separator):
        raise ValueError("`separator` must not contain path or query delimiters.")
    return separator


def build_string_slug(text: str, separator: str) -> str:
    """Return `text` reduced to alphanumeric runs joined by `separator`.

    `text` is expected to be normalized, transliterated, and lowercased already.
    """

    disallowed, breaker_runs = _string_patterns(separator)
    kept = disallowed.sub("", text)
    return breaker_runs.sub(separator, kept).strip(separator)


def build_path_slug(text: str, separator: str) -> str:
    """Return a slug of `text` that keeps `/`, `?`, `&`, `:`, `=` and `.` in place."""

    disallowed, breaker_runs, segment_edges = _path_patterns(separator)
    kept = disallowed.sub("", text)
    collapsed = breaker_runs.sub(separator, kept)
    if segment_edges is not None:
        collapsed = segment_edges.sub("", collapsed)
    return collapsed.strip(separator)
