"""Text normalization pipelines.

Responsibilities:
- Compose cleaner rules and a transliteration strategy into fixed pipelines.
- Expose the public cleaning and slug operations, both as `TextNormalizer`
  methods and as module-level functions backed by a shared default instance.
"""

from __future__ import annotations

from functools import lru_cache
from urllib.parse import unquote_plus

from ..config import ConfigLoader, NormalizerConfig
from ..parsing import build_encoding_error, coerce_text, validate_separator
from ..telemetry import events
from .cleaners import StripLines, StripTags, TextCleaner
from .slug import build_path_slug, build_string_slug, validate_path_separator
from .transliteration import select_strategy


class TextNormalizer:
    """Normalize text into clean single-line strings and URL-safe slugs.

    The transliteration strategy is selected once from `config` at
    construction; every method is a pure function of its arguments.
    """

    def __init__(self, config: NormalizerConfig | None = None) -> None:
        """Initialize pipelines for the given or default configuration."""

        self.config = config or NormalizerConfig()
        self.config.validate()
        self.strategy = select_strategy(self.config.transliteration)

        self._strip_tags = StripTags()
        self._strip_lines = StripLines()
        self._plain_cleaner = TextCleaner([self._strip_tags, self._strip_lines])
        self._transliterating_cleaner = TextCleaner(
            [self._strip_tags, self.strategy, self._strip_lines]
        )
        events.log_strategy_selected(self.strategy.name)

    def strip_tags(self, text: str | bytes) -> str:
        """Decode HTML entities, remove tags, and trim surrounding whitespace."""

        return self._strip_tags.apply(coerce_text(text, "strip_tags"))

    def strip_lines(self, text: str | bytes) -> str:
        """Remove tabs and line breaks."""

        return self._strip_lines.apply(coerce_text(text, "strip_lines"))

    def transliterate(self, text: str | bytes) -> str:
        """Replace accented letters and typographic punctuation with ASCII."""

        return self.strategy.apply(coerce_text(text, "transliterate"))

    def normalize_string(self, text: str | bytes, transliterate: bool = False) -> str:
        """Strip tags, optionally transliterate, then strip line breaks."""

        return self._normalize(coerce_text(text, "normalize_string"), transliterate)

    def normalize_path(self, uri: str | bytes) -> str:
        """Return a decoded, lowercased, transliterated path without outer slashes."""

        return self._normalize_path(coerce_text(uri, "normalize_path"), "normalize_path")

    def slugify_string(self, text: str | bytes, separator: str | None = None) -> str:
        """Return a lowercase slug of `text` joined by `separator`.

        The result only holds ASCII letters, digits, and single separators
        between them, so slugifying a slug returns it unchanged.
        """

        resolved = validate_separator(self._resolve_separator(separator))
        normalized = self._normalize(coerce_text(text, "slugify_string"), True)
        return build_string_slug(normalized.lower(), resolved)

    def slugify_path(self, uri: str | bytes, separator: str | None = None) -> str:
        """Return a slug of a path or URI that keeps its segment and query structure.

        Example: `/Some Café/Path?x=1&y=2` becomes `some-cafe/path?x=1&y=2`.
        """

        resolved = validate_path_separator(self._resolve_separator(separator))
        path = self._normalize_path(coerce_text(uri, "slugify_path"), "slugify_path")
        return build_path_slug(path, resolved)

    def _normalize(self, text: str, transliterate: bool) -> str:
        """Run the plain or transliterating cleaner pipeline."""

        cleaner = self._transliterating_cleaner if transliterate else self._plain_cleaner
        return cleaner.clean(text)

    def _normalize_path(self, uri: str, operation: str) -> str:
        """Decode and clean a path; percent-escapes must decode to valid UTF-8."""

        try:
            decoded = unquote_plus(uri, errors="strict")
        except UnicodeDecodeError as exc:
            raise build_encoding_error(
                operation, exc, "percent-escapes do not decode to valid UTF-8"
            ) from exc

        path = self._strip_tags.apply(decoded.lower())
        path = path.replace("\\", "/").strip("/")
        # Entities decoded above can reintroduce uppercase letters.
        return self._normalize(path, True).lower()

    def _resolve_separator(self, separator: str | None) -> str:
        """Return the explicit separator, or the configured default."""

        return self.config.separator if separator is None else separator


@lru_cache(maxsize=1)
def default_normalizer() -> TextNormalizer:
    """Return the shared normalizer configured from the process environment."""

    return TextNormalizer(ConfigLoader.from_env())


def strip_tags(text: str | bytes) -> str:
    """Decode HTML entities, remove tags, and trim surrounding whitespace."""

    return default_normalizer().strip_tags(text)


def strip_lines(text: str | bytes) -> str:
    """Remove tabs and line breaks."""

    return default_normalizer().strip_lines(text)


def transliterate(text: str | bytes) -> str:
    """Replace accented letters and typographic punctuation with ASCII."""

    return default_normalizer().transliterate(text)


def normalize_string(text: str | bytes, transliterate: bool = False) -> str:
    """Strip tags, optionally transliterate, then strip line breaks."""

    return default_normalizer().normalize_string(text, transliterate)


def normalize_path(uri: str | bytes) -> str:
    """Return a decoded, lowercased, transliterated path without outer slashes."""

    return default_normalizer().normalize_path(uri)


def slugify_string(text: str | bytes, separator: str | None = None) -> str:
    """Return a lowercase slug of `text` joined by `separator`."""

    return default_normalizer().slugify_string(text, separator)


def slugify_path(uri: str | bytes, separator: str | None = None) -> str:
    """Return a slug of a path or URI that keeps its segment and query structure."""

    return default_normalizer().slugify_path(uri, separator)
