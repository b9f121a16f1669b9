"""Configuration model and loaders for textscrub.

Responsibilities:
- Define normalizer settings as a typed, immutable dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `NormalizerConfig`: validated settings for one `TextNormalizer`.
- `ConfigLoader`: static construction helpers for `NormalizerConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_strategy_name,
    validate_separator,
)
from .telemetry import events


_DEFAULT_SEPARATOR = "-"
_DEFAULT_TRANSLITERATION = "unicode"


@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    """Settings for one normalizer instance.

    Attributes:
        separator: Default slug separator used when a call does not pass one.
        transliteration: Transliteration strategy name, `unicode` or `table`.
    """

    separator: str = _DEFAULT_SEPARATOR
    transliteration: str = _DEFAULT_TRANSLITERATION

    def validate(self) -> None:
        """Validate configuration values before a normalizer is built."""

        validate_separator(self.separator, "separator")
        if parse_strategy_name(self.transliteration) != self.transliteration:
            raise ValueError("`transliteration` must be given in lowercase.")


class ConfigLoader:
    """Factory methods for constructing `NormalizerConfig` from supported sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"separator", "transliteration"})
    _ENV_SEPARATOR = "TEXTSCRUB_SEPARATOR"
    _ENV_TRANSLITERATION = "TEXTSCRUB_TRANSLITERATION"

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> NormalizerConfig:
        """Build config from environment variables.

        Blank values are treated as unset. The separator is read verbatim,
        without stripping.
        """

        env_map = os.environ if env is None else env

        separator = env_map.get(ConfigLoader._ENV_SEPARATOR)
        if separator is None or separator == "":
            separator = _DEFAULT_SEPARATOR
        transliteration_raw = normalize_optional_string(
            env_map.get(ConfigLoader._ENV_TRANSLITERATION)
        )
        transliteration = (
            parse_strategy_name(transliteration_raw, ConfigLoader._ENV_TRANSLITERATION)
            if transliteration_raw is not None
            else _DEFAULT_TRANSLITERATION
        )

        config = NormalizerConfig(separator=separator, transliteration=transliteration)
        config.validate()
        events.log_config_loaded("env")
        return config

    @staticmethod
    def from_yaml(path: Path) -> NormalizerConfig:
        """Build config from a YAML file with optional `separator`/`transliteration` keys."""

        raw_text = path.read_text(encoding="utf-8")
        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        config = ConfigLoader._build_config_from_mapping(payload, f"YAML config `{path}`")
        events.log_config_loaded("yaml")
        return config

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> NormalizerConfig:
        """Build a validated config from a mapping payload."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        separator = ConfigLoader._optional_string(payload, "separator", source_label)
        transliteration = ConfigLoader._optional_string(payload, "transliteration", source_label)

        config = NormalizerConfig(
            separator=_DEFAULT_SEPARATOR if separator is None else separator,
            transliteration=(
                parse_strategy_name(transliteration)
                if normalize_optional_string(transliteration) is not None
                else _DEFAULT_TRANSLITERATION
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _optional_string(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> str | None:
        """Read an optional string field, rejecting non-string values."""

        if key not in payload or payload[key] is None:
            return None
        value = payload[key]
        if not isinstance(value, str):
            raise ValueError(f"{source_label} field `{key}` must be a string.")
        return value
