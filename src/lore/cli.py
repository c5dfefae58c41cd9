"""
CLI interface for Lore.

Reads a ``.lore`` file and writes it out as an HTML page (the default), an
HTML fragment, canonical Lore source, or JSON.

    lore links.lore links.html
    lore links.lore --format lore
    cat links.lore | lore - --fragment
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from lore import __version__, parse
from lore.config import ParseConfig
from lore.errors import ParseError
from lore.nodes import Document
from lore.renderers.html import DEFAULT_TITLE, HtmlRenderer
from lore.renderers.source import LoreRenderer
from lore.serialization import to_json
from lore.utils.logger import get_logger

logger = get_logger(__name__)

FORMATS = ("html", "lore", "json")


def parse_args(args: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="lore",
        description="Render a Lore file as collapsible HTML",
    )

    parser.add_argument("input", help="Input .lore file ('-' reads from stdin)")

    parser.add_argument(
        "output",
        nargs="?",
        help="Output file (writes to stdout if not provided)",
    )

    parser.add_argument(
        "--format",
        "-f",
        choices=FORMATS,
        default="html",
        help="Output format (default: html)",
    )

    parser.add_argument(
        "--title",
        "-t",
        type=str,
        help="Page title (default: output file name, else input file name)",
    )

    parser.add_argument(
        "--fragment",
        action="store_true",
        help="Emit an HTML fragment instead of a full page",
    )

    parser.add_argument(
        "--indent-step",
        type=int,
        help="Require this indent step instead of discovering it",
    )

    parser.add_argument(
        "--comments",
        action="store_true",
        help="Treat lines starting with '#' as comments",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log progress to stderr",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(args)


def read_input(filepath: str) -> tuple[str, str | None]:
    """Read from file or stdin, return (content, source_file)."""
    if filepath == "-":
        return sys.stdin.read(), None
    return Path(filepath).read_text(encoding="utf-8"), filepath


def default_title(args: argparse.Namespace) -> str:
    """Page title: --title, else the output's stem, else the input's stem."""
    if args.title:
        return args.title
    if args.output:
        return Path(args.output).stem
    if args.input != "-":
        return Path(args.input).stem
    return DEFAULT_TITLE


def render_output(doc: Document, args: argparse.Namespace) -> str:
    """Render doc in the requested format."""
    match args.format:
        case "lore":
            return LoreRenderer().render(doc)
        case "json":
            return to_json(doc, indent=2) + "\n"
        case _:
            renderer = HtmlRenderer(page=not args.fragment, title=default_title(args))
            return renderer.render(doc)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ParseConfig(indent_step=args.indent_step, comments_enabled=args.comments)
    except ValueError as e:
        print(f"lore: {e}", file=sys.stderr)
        return 2

    try:
        source, source_file = read_input(args.input)
    except OSError as e:
        print(f"lore: cannot read {args.input}: {e.strerror}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"lore: cannot decode {args.input} as UTF-8: {e.reason}", file=sys.stderr)
        return 1

    try:
        doc = parse(source, source_file=source_file, config=config)
    except ParseError as e:
        logger.debug("Parse failed for %s", args.input)
        print(e, file=sys.stderr)
        return 1

    output = render_output(doc, args)

    if args.output:
        try:
            Path(args.output).write_text(output, encoding="utf-8")
        except OSError as e:
            print(f"lore: cannot write {args.output}: {e.strerror}", file=sys.stderr)
            return 1
        logger.info("done from %s to %s", args.input, args.output)
    else:
        sys.stdout.write(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
