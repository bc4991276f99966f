"""
Command-line interface for locscan.

Resolves declarations (or any tree-sitter node type) in source files, or
a raw character range in a single file, into locations.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from locscan import __version__
from locscan.config import Config, find_config
from locscan.core.location import Location
from locscan.core.resolver import resolve
from locscan.core.source import SourceFile, SpanNode
from locscan.parsing.treesitter import find_nodes, parse_file, tree_sitter_available
from locscan.reporting import format_json, format_text
from locscan.utils import iter_source_files

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="locscan",
        description="Resolve source positions into diagnostic locations.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  locscan locate ./src                          # Locate all declarations
  locscan locate app.kt --node-type call_expression
  locscan locate . --format json -o out.json    # JSON output to file
  locscan offset Sample.kt 120 134              # Locate a character range
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    locate_parser = subparsers.add_parser("locate", help="Locate nodes in a file or directory")
    locate_parser.add_argument("path", nargs="?", default=".", help="Path to scan")
    locate_parser.add_argument(
        "-t", "--node-type",
        action="append",
        dest="node_types",
        help="Tree-sitter node type to locate (can be specified multiple times)",
    )
    locate_parser.add_argument(
        "--offset",
        type=int,
        help="Character offset added to every node range (overrides config)",
    )
    _add_output_arguments(locate_parser)

    offset_parser = subparsers.add_parser("offset", help="Locate a character range in a file")
    offset_parser.add_argument("file", help="Source file")
    offset_parser.add_argument("start", type=int, help="Start character offset")
    offset_parser.add_argument("end", type=int, nargs="?", help="End character offset")
    _add_output_arguments(offset_parser)

    return parser


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-c", "--config", dest="config_path", help="Path to YAML/JSON config file")
    parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        help="Output format (overrides config)",
    )
    parser.add_argument("-o", "--output", help="Write output to file instead of stdout")


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.load(args.config_path or find_config(_config_root(args)))
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else config.log_level(),
            format="%(levelname)s %(name)s: %(message)s",
        )
    except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        if args.command == "locate":
            if not tree_sitter_available():
                print(
                    "Error: parsing requires tree_sitter_languages "
                    "(pip install 'locscan[treesitter]')",
                    file=sys.stderr,
                )
                return 1
            locations = locate(args.path, config, args.node_types, args.offset)
        else:
            locations = [locate_range(args.file, args.start, args.end)]
    except (FileNotFoundError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    fmt = args.format or config.reporting().get("format", "text")
    if fmt == "json":
        output = format_json(locations)
    else:
        output = format_text(locations, config.display_text_max_length())
    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
    else:
        print(output, end="")
    return 0


def locate(
    path: str,
    config: Config,
    node_types: Optional[List[str]] = None,
    offset: Optional[int] = None,
) -> List[Location]:
    if offset is None:
        offset = config.offset()
    if not Path(path).exists():
        raise FileNotFoundError(f"Path not found: {path}")
    locations: List[Location] = []
    for file_path in iter_source_files(path, config.languages()):
        parsed = parse_file(file_path)
        if parsed is None:
            continue
        types = set(node_types or config.node_types(parsed.language))
        if not types:
            types = parsed.spec.declaration_node_types
        found = [resolve(node, offset) for node in find_nodes(parsed, types)]
        logger.debug("%s: %d node(s) located", file_path, len(found))
        locations.extend(found)
    return locations


def locate_range(file_path: str, start: int, end: Optional[int] = None) -> Location:
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")
    # raw bytes keep \r\n intact so offsets match the file on disk
    file = SourceFile(path.read_bytes().decode("utf-8", errors="replace"), path=file_path)
    return resolve(SpanNode(file, start, end))


def _config_root(args: argparse.Namespace) -> str:
    return getattr(args, "path", None) or getattr(args, "file", None) or "."
