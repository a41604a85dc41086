"""Configuration model and loaders for extramacros.

Responsibilities:
- Define macro runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `MacroConfig`: normalized settings shared by macro expansions.
- `ConfigLoader`: static construction helpers for `MacroConfig`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_comment_prefixes,
    parse_permissive_boolean,
)
from .text.cleaners import DEFAULT_COMMENT_PREFIXES


_DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class MacroConfig:
    """Runtime configuration for macro expansion.

    Attributes:
        base_dir: Directory relative path arguments resolve against; `None`
            means the process working directory.
        encoding: Text encoding used to read macro input files.
        comment_prefixes: Line prefixes that mark a comment line.
        confine_to_base_dir: Reject relative paths whose `..` segments escape `base_dir`.
    """

    base_dir: Path | None = None
    encoding: str = _DEFAULT_ENCODING
    comment_prefixes: tuple[str, ...] = DEFAULT_COMMENT_PREFIXES
    confine_to_base_dir: bool = False

    def validate(self) -> None:
        """Validate configuration values before macro expansion."""

        if normalize_optional_string(self.encoding) is None:
            raise ValueError("`encoding` must be a non-empty string.")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"`encoding` names an unknown codec: `{self.encoding}`.") from exc
        if not self.comment_prefixes:
            raise ValueError("`comment_prefixes` must contain at least one prefix.")
        if any(normalize_optional_string(prefix) is None for prefix in self.comment_prefixes):
            raise ValueError("`comment_prefixes` must not contain blank prefixes.")


class ConfigLoader:
    """Factory methods for creating `MacroConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {"base_dir", "encoding", "comment_prefixes", "confine_to_base_dir"}
    )

    @staticmethod
    def from_yaml(path: Path) -> MacroConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> MacroConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        base_dir_text = normalize_optional_string(env_map.get("EXTRAMACROS_BASE_DIR"))
        encoding = (
            normalize_optional_string(env_map.get("EXTRAMACROS_ENCODING")) or _DEFAULT_ENCODING
        )
        comment_prefixes = (
            parse_comment_prefixes(env_map.get("EXTRAMACROS_COMMENT_PREFIXES"))
            or DEFAULT_COMMENT_PREFIXES
        )
        confine = False
        if "EXTRAMACROS_CONFINE_TO_BASE_DIR" in env_map:
            parsed = parse_permissive_boolean(env_map["EXTRAMACROS_CONFINE_TO_BASE_DIR"])
            if parsed is None:
                raise ValueError(
                    "Environment variable `EXTRAMACROS_CONFINE_TO_BASE_DIR` must be a boolean "
                    "value (`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            confine = parsed

        config = MacroConfig(
            base_dir=Path(base_dir_text) if base_dir_text is not None else None,
            encoding=encoding,
            comment_prefixes=comment_prefixes,
            confine_to_base_dir=confine,
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> MacroConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        base_dir_text = normalize_optional_string(payload.get("base_dir"))
        encoding = normalize_optional_string(payload.get("encoding")) or _DEFAULT_ENCODING
        try:
            comment_prefixes = parse_comment_prefixes(payload.get("comment_prefixes"))
        except ValueError as exc:
            raise ValueError(f"{source_label} field `comment_prefixes`: {exc}") from exc
        confine = ConfigLoader._optional_boolean(
            payload, "confine_to_base_dir", source_label, default=False
        )

        config = MacroConfig(
            base_dir=Path(base_dir_text) if base_dir_text is not None else None,
            encoding=encoding,
            comment_prefixes=comment_prefixes or DEFAULT_COMMENT_PREFIXES,
            confine_to_base_dir=confine,
        )
        config.validate()
        return config

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
