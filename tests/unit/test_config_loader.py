"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from extramacros.config import ConfigLoader, MacroConfig


def test_config_loader_from_yaml_loads_valid_config_and_normalizes_values(
    tmp_path: Path,
) -> None:
    """YAML loader should parse valid payloads and normalize typed/blank values."""

    config_path = tmp_path / "extramacros.yml"
    config_path.write_text(
        """
base_dir: " project "
encoding: " latin-1 "
comment_prefixes: ["#", " ; ", "#"]
confine_to_base_dir: " yes "
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.base_dir == Path("project")
    assert config.encoding == "latin-1"
    assert config.comment_prefixes == ("#", ";")
    assert config.confine_to_base_dir is True


def test_config_loader_from_yaml_applies_defaults_for_empty_file(tmp_path: Path) -> None:
    """An empty YAML file should produce the default configuration."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == MacroConfig()


def test_config_loader_from_yaml_rejects_unknown_keys(tmp_path: Path) -> None:
    """YAML loader should fail clearly on unsupported fields."""

    config_path = tmp_path / "unknown.yml"
    config_path.write_text("base_dir: .\nunknown_field: x\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): unknown_field"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_non_mapping_root(tmp_path: Path) -> None:
    """A list root is not a valid configuration payload."""

    config_path = tmp_path / "list.yml"
    config_path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_invalid_values(tmp_path: Path) -> None:
    """Invalid boolean and codec values should raise actionable errors."""

    bad_bool = tmp_path / "bool.yml"
    bad_bool.write_text("confine_to_base_dir: maybe\n", encoding="utf-8")
    with pytest.raises(ValueError, match="`confine_to_base_dir` must be a boolean"):
        ConfigLoader.from_yaml(bad_bool)

    bad_codec = tmp_path / "codec.yml"
    bad_codec.write_text("encoding: not-a-codec\n", encoding="utf-8")
    with pytest.raises(ValueError, match="unknown codec"):
        ConfigLoader.from_yaml(bad_codec)

    bad_prefixes = tmp_path / "prefixes.yml"
    bad_prefixes.write_text("comment_prefixes: 42\n", encoding="utf-8")
    with pytest.raises(ValueError, match="`comment_prefixes`"):
        ConfigLoader.from_yaml(bad_prefixes)


def test_config_loader_from_yaml_rejects_malformed_yaml(tmp_path: Path) -> None:
    """YAML syntax errors should surface as `ValueError`."""

    config_path = tmp_path / "broken.yml"
    config_path.write_text("base_dir: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError, match="is not valid YAML"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_env_reads_all_keys() -> None:
    """Environment loader should normalize values from `EXTRAMACROS_*` keys."""

    config = ConfigLoader.from_env(
        {
            "EXTRAMACROS_BASE_DIR": " /srv/project ",
            "EXTRAMACROS_ENCODING": "utf-16",
            "EXTRAMACROS_COMMENT_PREFIXES": "#, --",
            "EXTRAMACROS_CONFINE_TO_BASE_DIR": "on",
        }
    )

    assert config.base_dir == Path("/srv/project")
    assert config.encoding == "utf-16"
    assert config.comment_prefixes == ("#", "--")
    assert config.confine_to_base_dir is True


def test_config_loader_from_env_defaults_and_blank_values() -> None:
    """Blank environment values should fall back to defaults."""

    config = ConfigLoader.from_env(
        {"EXTRAMACROS_BASE_DIR": "  ", "EXTRAMACROS_COMMENT_PREFIXES": " , "}
    )

    assert config == MacroConfig()


def test_config_loader_from_env_rejects_invalid_boolean() -> None:
    """Invalid boolean tokens should raise a descriptive error."""

    with pytest.raises(ValueError, match="EXTRAMACROS_CONFINE_TO_BASE_DIR"):
        ConfigLoader.from_env({"EXTRAMACROS_CONFINE_TO_BASE_DIR": "sometimes"})


def test_macro_config_validate_rejects_blank_prefixes() -> None:
    """Direct construction should still be validated."""

    with pytest.raises(ValueError, match="at least one prefix"):
        MacroConfig(comment_prefixes=()).validate()
    with pytest.raises(ValueError, match="blank prefixes"):
        MacroConfig(comment_prefixes=("#", " ")).validate()
    with pytest.raises(ValueError, match="non-empty string"):
        MacroConfig(encoding=" ").validate()
