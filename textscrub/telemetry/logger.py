"""Structured event logging utilities.

Responsibilities:
- Emit concise, deterministic event lines through `loguru`.
- Never include input text in emitted lines, only operation metadata.
"""

from __future__ import annotations

from loguru import logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class EventLogger:
    """Emit deterministic event lines for normalizer lifecycle activity."""

    def _emit(self, level: str, event: str, **context: object) -> None:
        """Emit one structured event line."""

        line = f"[textscrub] level={level} event={event}{_format_context(context)}"
        logger.log(level, line)

    def log_strategy_selected(self, strategy: str) -> None:
        """Emit the transliteration strategy chosen for a normalizer."""

        self._emit("DEBUG", "strategy_selected", strategy=strategy)

    def log_config_loaded(self, source: str) -> None:
        """Emit a configuration-loaded event naming its source kind."""

        self._emit("DEBUG", "config_loaded", source=source)

    def log_encoding_rejected(self, operation: str, error_type: str) -> None:
        """Emit an input-rejection event without the offending payload."""

        self._emit("WARNING", "encoding_rejected", operation=operation, error_type=error_type)


events = EventLogger()
