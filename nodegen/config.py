"""Configuration loading for nodegen (.nodegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import NodeGenError

CONFIG_FILENAME = ".nodegen.yml"
DEFAULT_MANIFEST = Path("../language/Cargo.toml")
DEFAULT_OUTPUT_DIR = Path("types")
DEFAULT_BANNER = "// This file is auto-generated by ast-grep script"
DEFAULT_REQUEST_TIMEOUT = 60.0


class ConfigError(NodeGenError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GeneratorConfig:
    """Represents the settings defined in .nodegen.yml."""

    root: Path
    manifest_path: Path
    output_dir: Path
    banner: str = DEFAULT_BANNER
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    tag_overrides: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def defaults(cls, root: Path) -> "GeneratorConfig":
        root = root.resolve()
        return cls(
            root=root,
            manifest_path=(root / DEFAULT_MANIFEST).resolve(),
            output_dir=root / DEFAULT_OUTPUT_DIR,
        )


def load_config(root: Path, config_path: Path | None = None) -> GeneratorConfig:
    """Load configuration for the project rooted at ``root``.

    ``config_path`` defaults to ``root/.nodegen.yml``; a missing default file
    yields the built-in settings, while a missing explicit file is an error.
    """
    root = root.expanduser().resolve()
    config = GeneratorConfig.defaults(root)

    if config_path is None:
        config_file = root / CONFIG_FILENAME
        if not config_file.exists():
            return config
    else:
        config_file = config_path.expanduser().resolve()
        if not config_file.exists():
            raise ConfigError(f"Configuration file not found: {config_file}")

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    manifest = _as_str(data.get("manifest"))
    if manifest:
        config.manifest_path = (root / manifest).resolve()

    output_dir = _as_str(data.get("output_dir"))
    if output_dir:
        config.output_dir = root / output_dir

    banner = data.get("banner")
    if banner is not None:
        if not isinstance(banner, str) or "\n" in banner:
            raise ConfigError("banner must be a single-line string")
        config.banner = banner

    if "request_timeout" in data:
        timeout = _as_float(data.get("request_timeout"))
        if timeout is None or timeout <= 0:
            raise ConfigError("request_timeout must be a positive number")
        config.request_timeout = timeout

    overrides = data.get("tag_overrides")
    if overrides is not None:
        if not isinstance(overrides, dict):
            raise ConfigError("tag_overrides must map language names to tags")
        for language, tag in overrides.items():
            tag_str = _as_str(tag)
            if not tag_str:
                raise ConfigError(f"tag_overrides.{language} must be a non-empty string")
            config.tag_overrides[str(language)] = tag_str

    return config


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_BANNER",
    "GeneratorConfig",
    "load_config",
]
