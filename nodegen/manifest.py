"""Cargo manifest loading for grammar version lookups."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from .errors import DependencyLookupError, ManifestParseError


@dataclass
class Manifest:
    """Parsed dependency manifest exposing pinned crate versions."""

    path: Path
    dependencies: Dict[str, Any] = field(default_factory=dict)

    def version_for(self, crate: str) -> str:
        """Return the pinned version of ``crate`` or raise ``DependencyLookupError``."""
        if crate not in self.dependencies:
            raise DependencyLookupError(crate)
        entry = self.dependencies[crate]
        # Cargo accepts both `crate = "1.0"` and `crate = { version = "1.0" }`.
        if isinstance(entry, str):
            version = entry
        elif isinstance(entry, dict):
            version = entry.get("version")
        else:
            version = None
        if not isinstance(version, str) or not version:
            raise DependencyLookupError(crate, "has no version string")
        return version


def load_manifest(path: Path) -> Manifest:
    """Read and parse the manifest at ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestParseError(path, "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestParseError(path, str(exc)) from exc

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestParseError(path, str(exc)) from exc

    dependencies = data.get("dependencies", {})
    if not isinstance(dependencies, dict):
        raise ManifestParseError(path, "[dependencies] must be a table")
    return Manifest(path=path, dependencies=dependencies)


__all__ = ["Manifest", "load_manifest"]
