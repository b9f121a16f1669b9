"""Deterministic text cleaning rules.

Responsibilities:
- Provide composable cleanup rules for markup and line-break artifacts.
- Keep every rule a pure function of its input for reproducibility.
"""

from __future__ import annotations

import html
import re
from typing import Protocol


# ASCII padding only; no-break spaces decoded from `&nbsp;` are kept.
TRIM_CHARACTERS = " \t\n\r\0\x0b"


class CleanerRule(Protocol):
    """Protocol for text cleaning rules."""

    def apply(self, text: str) -> str:
        """Apply a single cleaning transformation."""


class StripTags:
    """Decode HTML entities, then remove tag and comment markup."""

    _COMMENT_RE = re.compile(r"<!--.*?(?:-->|$)", re.DOTALL)
    _TAG_RE = re.compile(r"<[A-Za-z/!?][^>]*(?:>|$)")

    def apply(self, text: str) -> str:
        """Return text without markup, trimmed of surrounding whitespace.

        Entities are decoded first, so escaped markup such as `&lt;b&gt;` is
        removed as well. A `<` not followed by a tag-name start is kept.
        Removal repeats until no markup remains, so nested fragments such as
        `<<b>b>` cannot reassemble into a tag.
        """

        current = html.unescape(text)
        while True:
            without_comments, comment_count = self._COMMENT_RE.subn("", current)
            current, tag_count = self._TAG_RE.subn("", without_comments)
            if comment_count == 0 and tag_count == 0:
                break
        return current.strip(TRIM_CHARACTERS)


class StripLines:
    """Remove tabs and line breaks without touching regular spaces."""

    _LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

    def apply(self, text: str) -> str:
        """Join multi-line text into one line."""

        return self._LINE_BREAK_RE.sub("", text.replace("\t", ""))


class TextCleaner:
    """Apply a sequence of deterministic cleaner rules."""

    def __init__(self, rules: list[CleanerRule] | None = None) -> None:
        """Initialize with custom rules or default rule sequence."""

        self.rules = rules or [StripTags(), StripLines()]

    def clean(self, text: str) -> str:
        """Apply all configured rules in order."""

        current = text
        for rule in self.rules:
            current = rule.apply(current)
        return current
