"""Top-level package for textscrub.

This package provides deterministic string cleaning: HTML tag stripping,
line-break removal, ASCII transliteration, and URL-safe slugs for strings and
paths. The main entry point is `TextNormalizer`; the module-level functions
use a shared instance configured from the environment.
"""

from loguru import logger

from .config import ConfigLoader, NormalizerConfig
from .errors import EncodingError
from .text import (
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

logger.disable(__name__)

__all__ = [
    "TextNormalizer",
    "NormalizerConfig",
    "ConfigLoader",
    "EncodingError",
    "default_normalizer",
    "strip_tags",
    "strip_lines",
    "transliterate",
    "normalize_string",
    "normalize_path",
    "slugify_string",
    "slugify_path",
    "__version__",
]

__version__ = "0.1.0"
