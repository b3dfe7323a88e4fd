"""Sequential regeneration of node type declarations for every registered language."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .config import GeneratorConfig
from .emitter import DeclarationEmitter
from .fetcher import SchemaFetcher
from .languages import DEFAULT_LANGUAGES, build_registry, build_url, resolve_tag
from .logging import get_logger
from .manifest import Manifest, load_manifest
from .models import GeneratedDeclaration, LanguageSpec


class NodeTypesGenerator:
    """Drives manifest lookup, download and emission one language at a time.

    The first failing language aborts the run; declarations already written
    for earlier languages stay on disk.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        *,
        fetcher: SchemaFetcher | None = None,
        emitter: DeclarationEmitter | None = None,
        languages: Optional[Iterable[LanguageSpec]] = None,
    ) -> None:
        self.config = config
        self.fetcher = fetcher or SchemaFetcher(timeout=config.request_timeout)
        self.emitter = emitter or DeclarationEmitter(config.output_dir, banner=config.banner)
        self.registry = build_registry(
            languages if languages is not None else DEFAULT_LANGUAGES,
            config.tag_overrides,
        )
        self.logger = get_logger("generator")

    def run(self) -> List[GeneratedDeclaration]:
        self.logger.debug("Reading manifest %s", self.config.manifest_path)
        manifest = load_manifest(self.config.manifest_path)

        results: List[GeneratedDeclaration] = []
        for spec in self.registry:
            try:
                results.append(self.generate_language(spec, manifest))
            except Exception:
                self.logger.error("Error while generating node types for %s", spec.name)
                raise
        self.logger.info("Generated node types for %d languages", len(results))
        return results

    def generate_language(self, spec: LanguageSpec, manifest: Manifest) -> GeneratedDeclaration:
        tag = resolve_tag(spec, manifest)
        url = build_url(spec.url_template, tag)
        self.logger.info("Generating node types for %s (tag=%s)", spec.name, tag)
        nodes = self.fetcher.fetch(spec.name, url)
        path, count = self.emitter.emit(spec.name, nodes, source=url)
        return GeneratedDeclaration(
            language=spec.name, tag=tag, url=url, path=path, node_count=count
        )


__all__ = ["NodeTypesGenerator"]
