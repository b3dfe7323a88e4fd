"""Core data models shared across nodegen components."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class LanguageSpec:
    """Registry entry describing where a language's node types live."""

    name: str
    crate: str
    url_template: str
    tag_override: Optional[str] = None


@dataclass
class GeneratedDeclaration:
    """Outcome of emitting one language's declaration file."""

    language: str
    tag: str
    url: str
    path: Path
    node_count: int
