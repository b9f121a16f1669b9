"""Transliteration strategies for accented and typographic characters.

Responsibilities:
- Map accented Latin letters to their closest unaccented ASCII letters.
- Map smart quotes, angle quotes, dashes, and no-break spaces to plain ASCII.
- Offer a Unicode-database strategy and a fixed substitution-table strategy
  that agree on every character class the table covers.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Protocol

from unidecode import unidecode

from ..parsing import parse_strategy_name


_DASHES = "–—"
_SINGLE_QUOTES = "’‘‹›‚"
_DOUBLE_QUOTES = "“”«»„"
_NO_BREAK_SPACE = "\u00a0"
_ORDINAL_INDICATORS = "ªº"

_TYPOGRAPHIC_MAP = str.maketrans(
    {
        **dict.fromkeys(_DASHES, "-"),
        **dict.fromkeys(_SINGLE_QUOTES + _DOUBLE_QUOTES, " "),
        _NO_BREAK_SPACE: " ",
    }
)

# Order matters: each pattern runs over the output of the previous one.
FALLBACK_TABLE: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(pattern), replacement)
    for pattern, replacement in (
        ("[áàâãªäå]", "a"),
        ("[ÁÀÂÃÄÅ]", "A"),
        ("[ÍÌÎÏ]", "I"),
        ("[íìîï]", "i"),
        ("[éèêë]", "e"),
        ("[ÉÈÊË]", "E"),
        ("[óòôõºöő]", "o"),
        ("[ÓÒÔÕÖŐ]", "O"),
        ("[úùûüű]", "u"),
        ("[ÚÙÛÜŰ]", "U"),
        ("[ýÿ]", "y"),
        ("Ý", "Y"),
        ("ç", "c"),
        ("Ç", "C"),
        ("ñ", "n"),
        ("Ñ", "N"),
        (f"[{_DASHES}]", "-"),
        (f"[{_SINGLE_QUOTES}]", " "),
        (f"[{_DOUBLE_QUOTES}]", " "),
        (_NO_BREAK_SPACE, " "),
    )
)


class TransliterationStrategy(Protocol):
    """Protocol for transliteration strategies.

    Strategies double as cleaner rules, so they can sit inside a `TextCleaner`.
    """

    name: str

    def apply(self, text: str) -> str:
        """Return `text` with accents and typographic punctuation replaced."""


class UnicodeTransliterator:
    """Transliterate through Unicode normalization and `unidecode`.

    Pipeline: typographic map, NFD decomposition, removal of nonspacing marks
    that follow a Latin base letter, NFC recomposition, then ASCII
    transliteration of remaining Latin-script letters such as `ß`, `ø`, or
    `æ`. Letters from other scripts keep their marks and are not changed.
    """

    name = "unicode"

    def apply(self, text: str) -> str:
        """Apply the Unicode transliteration pipeline."""

        mapped = text.translate(_TYPOGRAPHIC_MAP)
        decomposed = unicodedata.normalize("NFD", mapped)
        kept: list[str] = []
        latin_base = False
        for character in decomposed:
            if unicodedata.category(character) == "Mn":
                if latin_base:
                    continue
            else:
                latin_base = self._is_latin(character)
            kept.append(character)
        recomposed = unicodedata.normalize("NFC", "".join(kept))
        return "".join(self._to_latin_ascii(character) for character in recomposed)

    @staticmethod
    def _is_latin(character: str) -> bool:
        """Return whether a base character belongs to the Latin script."""

        if character.isascii():
            return character.isalpha()
        return character in _ORDINAL_INDICATORS or unicodedata.name(character, "").startswith(
            "LATIN "
        )

    @classmethod
    def _to_latin_ascii(cls, character: str) -> str:
        """Return an ASCII rendering for Latin-script characters, else the character."""

        if character.isascii():
            return character
        if cls._is_latin(character):
            return unidecode(character)
        return character


class TableTransliterator:
    """Transliterate with the fixed, ordered substitution table."""

    name = "table"

    def __init__(
        self, table: tuple[tuple[re.Pattern[str], str], ...] = FALLBACK_TABLE
    ) -> None:
        """Initialize with the default table or a custom one."""

        self.table = table

    def apply(self, text: str) -> str:
        """Apply every table substitution in order."""

        current = text
        for pattern, replacement in self.table:
            current = pattern.sub(replacement, current)
        return current


_STRATEGIES: dict[str, type[UnicodeTransliterator] | type[TableTransliterator]] = {
    UnicodeTransliterator.name: UnicodeTransliterator,
    TableTransliterator.name: TableTransliterator,
}


def select_strategy(name: str) -> TransliterationStrategy:
    """Return a new strategy instance for a strategy name.

    Raises:
        ValueError: If the name is not a supported strategy.
    """

    return _STRATEGIES[parse_strategy_name(name)]()
