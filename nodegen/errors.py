"""Error taxonomy for node type generation."""

from __future__ import annotations

from pathlib import Path


class NodeGenError(RuntimeError):
    """Base class for failures raised while regenerating declarations."""


class ManifestParseError(NodeGenError):
    """Raised when the dependency manifest is missing or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to parse manifest {path}: {reason}")
        self.path = path
        self.reason = reason


class DependencyLookupError(NodeGenError, LookupError):
    """Raised when a grammar crate has no usable version in the manifest."""

    def __init__(self, crate: str, reason: str = "missing from [dependencies]") -> None:
        super().__init__(f"Dependency '{crate}' {reason}")
        self.crate = crate


class FetchError(NodeGenError):
    """Raised when a language's node types cannot be downloaded or decoded."""

    def __init__(self, language: str, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch node types for {language} from {url}: {reason}")
        self.language = language
        self.url = url
        self.reason = reason


class SchemaFormatError(FetchError):
    """Raised when a fetched node type entry is not an object with a string ``type``."""


class WriteError(NodeGenError):
    """Raised when a declaration file cannot be written."""

    def __init__(self, language: str, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write node types for {language} to {path}: {reason}")
        self.language = language
        self.path = path


__all__ = [
    "DependencyLookupError",
    "FetchError",
    "ManifestParseError",
    "NodeGenError",
    "SchemaFormatError",
    "WriteError",
]
