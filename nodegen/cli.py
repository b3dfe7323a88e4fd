"""CLI entrypoint for regenerating node type declarations."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config
from .generator import NodeTypesGenerator
from .logging import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nodegen",
        description="Regenerate per-language node type declarations from grammar releases.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Path to the bindings package root (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Only report warnings and errors.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug-level log records to this file.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file to use instead of <root>/.nodegen.yml.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for nodegen."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )

    try:
        config = load_config(Path(args.root), args.config)
        NodeTypesGenerator(config).run()
    except Exception as exc:
        logger.debug("Generation failed", exc_info=True)
        parser.exit(1, f"Error: {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
