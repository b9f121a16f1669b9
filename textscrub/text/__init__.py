"""Text cleaning, transliteration, and slug components.

This package provides the deterministic rules and pipelines behind the public
`textscrub` functions.
"""

from .cleaners import StripLines, StripTags, TextCleaner
from .normalizer import (
    TextNormalizer,
    default_normalizer,
    normalize_path,
    normalize_string,
    slugify_path,
    slugify_string,
    strip_lines,
    strip_tags,
    transliterate,
)
from .transliteration import (
    TableTransliterator,
    TransliterationStrategy,
    UnicodeTransliterator,
    select_strategy,
)

__all__ = [
    "TextNormalizer",
    "TextCleaner",
    "StripTags",
    "StripLines",
    "TransliterationStrategy",
    "UnicodeTransliterator",
    "TableTransliterator",
    "select_strategy",
    "default_normalizer",
    "strip_tags",
    "strip_lines",
    "transliterate",
    "normalize_string",
    "normalize_path",
    "slugify_string",
    "slugify_path",
]
