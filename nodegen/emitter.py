"""Rendering and writing of per-language node type declaration files."""

from __future__ import annotations

import json
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable

from jinja2 import Environment, StrictUndefined

from .config import DEFAULT_BANNER
from .errors import SchemaFormatError, WriteError
from .logging import get_logger

DECLARATION_SUFFIX = ".d.ts"

_TEMPLATE = (
    "{{ banner }}\n"
    "type {{ language }}Types = {{ node_types }};\n"
    "export default {{ language }}Types;"
)

# json.loads joins valid surrogate pairs, so any surrogate left in a string is unpaired.
_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")

_DECLARATION_RE = re.compile(
    r"^type (?P<alias>\w+) = (?P<body>.*);\nexport default (?P=alias);\s*\Z",
    re.DOTALL | re.MULTILINE,
)

_environment = Environment(autoescape=False, undefined=StrictUndefined)


def build_node_type_map(
    language: str, nodes: Iterable[Any], *, source: str = "<payload>"
) -> Dict[str, Dict[str, Any]]:
    """Key node type records by their ``type`` field; later duplicates win."""
    node_types: Dict[str, Dict[str, Any]] = {}
    for index, node in enumerate(nodes):
        if not isinstance(node, dict):
            raise SchemaFormatError(
                language, source, f"entry {index} is not an object"
            )
        node_type = node.get("type")
        if not isinstance(node_type, str):
            raise SchemaFormatError(
                language, source, f"entry {index} has no string 'type' field"
            )
        node_types[node_type] = node
    return node_types


def render_declaration(
    language: str,
    node_types: Dict[str, Dict[str, Any]],
    banner: str = DEFAULT_BANNER,
) -> str:
    """Render the three-line declaration: banner, type alias, default export."""
    template = _environment.from_string(_TEMPLATE)
    return template.render(
        banner=banner,
        language=language,
        node_types=_escape_lone_surrogates(
            json.dumps(node_types, indent=2, ensure_ascii=False)
        ),
    )


def _escape_lone_surrogates(text: str) -> str:
    return _LONE_SURROGATE_RE.sub(lambda match: f"\\u{ord(match.group()):04x}", text)


def parse_declaration(text: str) -> Dict[str, Any]:
    """Return the mapping embedded in a rendered declaration."""
    match = _DECLARATION_RE.search(text)
    if match is None:
        raise ValueError("Text is not a generated node type declaration")
    return json.loads(match.group("body"))


class DeclarationEmitter:
    """Writes ``<output_dir>/<Lang>.d.ts`` files, replacing any existing content."""

    def __init__(self, output_dir: Path, *, banner: str = DEFAULT_BANNER) -> None:
        self.output_dir = output_dir
        self.banner = banner
        self.logger = get_logger("emitter")

    def path_for(self, language: str) -> Path:
        return self.output_dir / f"{language}{DECLARATION_SUFFIX}"

    def emit(
        self, language: str, nodes: Iterable[Any], *, source: str = "<payload>"
    ) -> tuple[Path, int]:
        """Render and write the declaration for ``language``.

        Returns the written path and the number of distinct node types.
        """
        node_types = build_node_type_map(language, nodes, source=source)
        content = render_declaration(language, node_types, self.banner)
        path = self.path_for(language)
        try:
            data = content.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise WriteError(language, path, f"content is not valid UTF-8: {exc.reason}") from exc
        self._replace(language, path, data)
        self.logger.info("Wrote %d node types to %s", len(node_types), path)
        return path, len(node_types)

    @staticmethod
    def _replace(language: str, path: Path, data: bytes) -> None:
        # Readers never observe a partially written declaration.
        temp_path: Path | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
            ) as handle:
                temp_path = Path(handle.name)
                handle.write(data)
            os.chmod(temp_path, 0o644)
            os.replace(temp_path, path)
        except OSError as exc:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise WriteError(language, path, str(exc)) from exc


__all__ = [
    "DECLARATION_SUFFIX",
    "DeclarationEmitter",
    "build_node_type_map",
    "parse_declaration",
    "render_declaration",
]
