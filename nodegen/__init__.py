"""Regenerate typed node declarations for parser bindings from grammar metadata."""

from .config import GeneratorConfig, load_config
from .errors import (
    DependencyLookupError,
    FetchError,
    ManifestParseError,
    NodeGenError,
    SchemaFormatError,
    WriteError,
)
from .generator import NodeTypesGenerator

__all__ = [
    "DependencyLookupError",
    "FetchError",
    "GeneratorConfig",
    "ManifestParseError",
    "NodeGenError",
    "NodeTypesGenerator",
    "SchemaFormatError",
    "WriteError",
    "load_config",
]
