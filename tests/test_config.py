"""Tests for nodegen.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from nodegen.config import DEFAULT_BANNER, ConfigError, GeneratorConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, GeneratorConfig)
    assert config.root == tmp_path.resolve()
    assert config.manifest_path == (tmp_path / ".." / "language" / "Cargo.toml").resolve()
    assert config.output_dir == tmp_path.resolve() / "types"
    assert config.banner == DEFAULT_BANNER
    assert config.request_timeout == pytest.approx(60.0)
    assert config.tag_overrides == {}


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / ".nodegen.yml").write_text(
        """
manifest: crates/language/Cargo.toml
output_dir: generated/types
banner: "// generated, do not edit"
request_timeout: 7.5
tag_overrides:
  Css: v0.23.0
  Html: 0.23
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    root = tmp_path.resolve()
    assert config.manifest_path == root / "crates" / "language" / "Cargo.toml"
    assert config.output_dir == root / "generated" / "types"
    assert config.banner == "// generated, do not edit"
    assert config.request_timeout == pytest.approx(7.5)
    assert config.tag_overrides == {"Css": "v0.23.0", "Html": "0.23"}


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".nodegen.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path) == GeneratorConfig.defaults(tmp_path)


def test_load_config_explicit_path(tmp_path: Path) -> None:
    config_file = tmp_path / "custom.yml"
    config_file.write_text("output_dir: out\n", encoding="utf-8")

    config = load_config(tmp_path, config_file)

    assert config.output_dir == tmp_path.resolve() / "out"


def test_load_config_explicit_path_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "missing.yml")


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "request_timeout: soon\n",
        "request_timeout: 0\n",
        "tag_overrides: [Css]\n",
        "tag_overrides:\n  Css: ''\n",
        "banner: [1, 2]\n",
        "manifest: [unterminated\n",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, content: str) -> None:
    (tmp_path / ".nodegen.yml").write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_read_config_returns_sequence_roots_unchanged(tmp_path: Path) -> None:
    from nodegen.config import _read_config

    config_file = tmp_path / ".nodegen.yml"
    config_file.write_text("- Css\n- Html\n", encoding="utf-8")
    assert _read_config(config_file) == ["Css", "Html"]
