"""Registry of languages whose node types are generated, plus tag resolution."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from .config import ConfigError
from .manifest import Manifest
from .models import LanguageSpec

TAG_PLACEHOLDER = "{{TAG}}"

_RAW_GITHUB = "https://raw.githubusercontent.com/tree-sitter"

DEFAULT_LANGUAGES: tuple[LanguageSpec, ...] = (
    LanguageSpec(
        name="Html",
        crate="tree-sitter-html",
        url_template=f"{_RAW_GITHUB}/tree-sitter-html/refs/tags/{TAG_PLACEHOLDER}/src/node-types.json",
    ),
    LanguageSpec(
        name="JavaScript",
        crate="tree-sitter-javascript",
        url_template=f"{_RAW_GITHUB}/tree-sitter-javascript/refs/tags/{TAG_PLACEHOLDER}/src/node-types.json",
    ),
    LanguageSpec(
        name="Tsx",
        crate="tree-sitter-typescript",
        url_template=f"{_RAW_GITHUB}/tree-sitter-typescript/refs/tags/{TAG_PLACEHOLDER}/tsx/src/node-types.json",
    ),
    LanguageSpec(
        name="Css",
        crate="tree-sitter-css",
        url_template=f"{_RAW_GITHUB}/tree-sitter-css/refs/tags/{TAG_PLACEHOLDER}/src/node-types.json",
    ),
    LanguageSpec(
        name="TypeScript",
        crate="tree-sitter-typescript",
        url_template=f"{_RAW_GITHUB}/tree-sitter-typescript/refs/tags/{TAG_PLACEHOLDER}/typescript/src/node-types.json",
    ),
)


def build_registry(
    languages: Iterable[LanguageSpec] = DEFAULT_LANGUAGES,
    tag_overrides: Optional[Mapping[str, str]] = None,
) -> List[LanguageSpec]:
    """Return the ordered registry with ``tag_overrides`` applied on top."""
    registry: List[LanguageSpec] = []
    overrides: Dict[str, str] = dict(tag_overrides or {})
    for spec in languages:
        if TAG_PLACEHOLDER not in spec.url_template:
            raise ConfigError(
                f"URL template for {spec.name} lacks the {TAG_PLACEHOLDER} placeholder"
            )
        override = overrides.pop(spec.name, spec.tag_override)
        registry.append(
            LanguageSpec(
                name=spec.name,
                crate=spec.crate,
                url_template=spec.url_template,
                tag_override=override,
            )
        )
    if overrides:
        unknown = ", ".join(sorted(overrides))
        raise ConfigError(f"tag_overrides names unknown languages: {unknown}")
    return registry


def resolve_tag(spec: LanguageSpec, manifest: Manifest) -> str:
    """Return the source tag for ``spec``: its override, else ``v<version>``.

    The crate must be pinned in the manifest even when an override applies.
    """
    version = manifest.version_for(spec.crate)
    if spec.tag_override is not None:
        return spec.tag_override
    return f"v{version}"


def build_url(template: str, tag: str) -> str:
    return template.replace(TAG_PLACEHOLDER, tag, 1)


__all__ = [
    "DEFAULT_LANGUAGES",
    "TAG_PLACEHOLDER",
    "build_registry",
    "build_url",
    "resolve_tag",
]
