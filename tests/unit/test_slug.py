"""Unit tests for string and path slug generation."""

from __future__ import annotations

import re

import pytest

from textscrub import NormalizerConfig, TextNormalizer, slugify_path, slugify_string


SLUG_CORPUS = [
    "Héllo, World!!  Foo_Bar",
    "  --Leading and trailing--  ",
    "<h1>Über&nbsp;uns</h1>",
    "C++ | Rust / Go\\Zig",
    "東京 Tokyo",
    "“Smart” quotes – and dashes — everywhere",
    "Line one\nLine two\r\n\tindented",
    "Straße Øre Æsir",
    "already-a-slug",
    "UPPER_lower 123",
    "!!!",
    "",
]


def test_slugify_string_reference_example() -> None:
    """Mixed punctuation, accents, and underscores should collapse into one slug."""

    assert slugify_string("Héllo, World!!  Foo_Bar") == "hello-world-foo-bar"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  --Leading and trailing--  ", "leading-and-trailing"),
        ("<h1>Über&nbsp;uns</h1>", "uber-uns"),
        ("C++ | Rust / Go\\Zig", "c-rust-go-zig"),
        ("東京 Tokyo", "tokyo"),
        ("“Smart” quotes – and dashes", "smart-quotes-and-dashes"),
        ("!!!", ""),
        ("", ""),
    ],
)
def test_slugify_string_examples(raw: str, expected: str) -> None:
    """Slugs should keep only lowercase alphanumerics joined by single separators."""

    assert slugify_string(raw) == expected


@pytest.mark.parametrize(
    ("separator", "expected"),
    [
        ("_", "hello_world_foo_bar"),
        (".", "hello.world.foo.bar"),
        ("~", "hello~world~foo~bar"),
        ("", "helloworldfoobar"),
    ],
)
def test_slugify_string_custom_separator(separator: str, expected: str) -> None:
    """An explicit separator should replace every breaker run."""

    assert slugify_string("Héllo, World!!  Foo_Bar", separator=separator) == expected


@pytest.mark.parametrize("separator", ["-", "_", "~", " ", ""])
@pytest.mark.parametrize("raw", SLUG_CORPUS)
def test_slugify_string_matches_character_class_and_is_idempotent(
    any_normalizer: TextNormalizer, raw: str, separator: str
) -> None:
    """Slugs should match the alphanumeric-run shape and be stable on re-slugify."""

    slug = any_normalizer.slugify_string(raw, separator)
    if separator:
        shape = re.compile(f"^[0-9a-z]+(?:{re.escape(separator)}[0-9a-z]+)*$")
    else:
        shape = re.compile("^[0-9a-z]*$")

    assert slug == "" or shape.fullmatch(slug)
    assert any_normalizer.slugify_string(slug, separator) == slug


def test_slugify_string_uses_configured_default_separator() -> None:
    """Without an explicit separator, the normalizer config should apply."""

    normalizer = TextNormalizer(NormalizerConfig(separator="_"))

    assert normalizer.slugify_string("Foo Bar") == "foo_bar"
    assert normalizer.slugify_string("Foo Bar", "-") == "foo-bar"


@pytest.mark.parametrize("separator", ["x", "9", "<", "&", "\n", "–"])
def test_slugify_string_rejects_unsafe_separators(separator: str) -> None:
    """Separators that could be confused with content or markup should be rejected."""

    with pytest.raises(ValueError, match="`separator` may only contain"):
        slugify_string("Foo Bar", separator=separator)


def test_slugify_path_reference_example() -> None:
    """Path and query delimiters should survive while segments are slugified."""

    assert slugify_path("/Some Café/Path?x=1&y=2") == "some-cafe/path?x=1&y=2"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (
            "https://Example.com/Blog Posts/Ünïcödé Title/?utm_source=News Letter&page=2",
            "https://example.com/blog-posts/unicode-title/?utm-source=news-letter&page=2",
        ),
        ("/docs\\Guide <b>v2</b>/", "docs/guide-v2"),
        ("/Café au lait / Menu .pdf", "cafe-au-lait/menu.pdf"),
        ("/a+b%20c%2Fd", "a-b-c/d"),
        ("/Price: 10€ (approx)!", "price:10-approx"),
        ("/Caf&#201;/X", "cafe/x"),
        ("", ""),
    ],
)
def test_slugify_path_examples(raw: str, expected: str) -> None:
    """Path slugs should decode, clean, and trim separators around delimiters."""

    assert slugify_path(raw) == expected


def test_slugify_path_custom_separator() -> None:
    """A custom separator should be used inside path segments."""

    assert slugify_path("/Some Café/Path", separator="_") == "some_cafe/path"


@pytest.mark.parametrize("separator", [".", "/", "?", "=", "&"])
def test_slugify_path_rejects_delimiter_separators(separator: str) -> None:
    """Separators that reuse path or query delimiters should be rejected."""

    with pytest.raises(ValueError):
        slugify_path("/a b", separator=separator)


def test_slugify_path_agrees_across_strategies(any_normalizer: TextNormalizer) -> None:
    """Both strategies should slugify the reference path identically."""

    assert any_normalizer.slugify_path("/Some Café/Path?x=1&y=2") == "some-cafe/path?x=1&y=2"
