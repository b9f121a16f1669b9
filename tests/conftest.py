"""Shared pytest fixtures for the full textscrub test suite."""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger
import pytest

from textscrub import NormalizerConfig, TextNormalizer, default_normalizer


@pytest.fixture(autouse=True)
def _isolated_default_normalizer(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Build the shared normalizer from a clean environment for every test."""

    monkeypatch.delenv("TEXTSCRUB_SEPARATOR", raising=False)
    monkeypatch.delenv("TEXTSCRUB_TRANSLITERATION", raising=False)
    default_normalizer.cache_clear()
    yield
    default_normalizer.cache_clear()


@pytest.fixture
def normalizer() -> TextNormalizer:
    """Provide a normalizer with the default Unicode transliteration strategy."""

    return TextNormalizer()


@pytest.fixture(params=["unicode", "table"])
def any_normalizer(request: pytest.FixtureRequest) -> TextNormalizer:
    """Provide one normalizer per transliteration strategy."""

    return TextNormalizer(NormalizerConfig(transliteration=request.param))


@pytest.fixture
def log_lines() -> Iterator[list[str]]:
    """Capture textscrub log lines emitted while the test runs."""

    captured: list[str] = []
    logger.enable("textscrub")
    handler_id = logger.add(
        lambda message: captured.append(str(message).rstrip("\n")),
        format="{message}",
        level="DEBUG",
    )
    yield captured
    logger.remove(handler_id)
    logger.disable("textscrub")
