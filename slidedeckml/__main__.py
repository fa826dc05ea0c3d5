"""slidedeckml — Compile a parsed SlideDeckML presentation into a reveal.js HTML page."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from .assembler import generate_html
from .loader import load_presentation
from .template import PageShell

logger = logging.getLogger("slidedeckml.cli")


def _configure_logging(verbose: bool, log_file: str | None) -> None:
    """Attach stderr (and optionally file) handlers to the package logger."""
    pkg_logger = logging.getLogger("slidedeckml")
    pkg_logger.setLevel(logging.DEBUG)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    pkg_logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        pkg_logger.addHandler(file_handler)


def compile_file(input_path: Path, output_path: Path, shell: PageShell | None = None) -> None:
    """Load the AST dump at *input_path* and write the HTML page to *output_path*."""
    print(f"Compiling {input_path}...")
    t0 = time.monotonic()
    presentation = load_presentation(str(input_path))
    html = generate_html(presentation, shell=shell)
    output_path.write_text(html, encoding="utf-8")
    logger.info(
        "Compiled %d slide(s) in %.2fs -> %s",
        len(presentation.slides),
        time.monotonic() - t0,
        output_path,
    )
    print(f"✓ Generated: {output_path}")
    print("  Open it in your browser to view the presentation!")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="slidedeckml",
        description="Compile SlideDeckML presentations to reveal.js HTML.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_parser = subparsers.add_parser("compile", help="Compile a parsed presentation to HTML")
    compile_parser.add_argument("input", help="Path to the JSON AST of a .sdml presentation")
    compile_parser.add_argument("-o", "--output", default="presentation.html",
                                help="Output HTML file (default: presentation.html)")
    compile_parser.add_argument("--theme", default=PageShell.theme,
                                help=f"reveal.js theme name (default: {PageShell.theme})")
    compile_parser.add_argument("--transition", default=PageShell.transition,
                                help=f"reveal.js slide transition (default: {PageShell.transition})")
    compile_parser.add_argument("-v", "--verbose", action="store_true",
                                help="Log debug output to stderr")
    compile_parser.add_argument("--log-file", help="Also write a debug log to this file")

    args = parser.parse_args()
    _configure_logging(args.verbose, args.log_file)
    logger.info("CLI arguments: %s", vars(args))

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    shell = PageShell(theme=args.theme, transition=args.transition)
    try:
        compile_file(input_path, Path(args.output), shell=shell)
    except (OSError, ValueError) as exc:
        logger.debug("Compilation failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
