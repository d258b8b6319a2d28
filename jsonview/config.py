"""
Command-line configuration for jsonview.

All settings come from the command line; there are no config files.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

from jsonview import __version__
from jsonview.render.renderer import DEFAULT_MAX_DEPTH
from jsonview.render.sinks import LineEnding

COLOR_CHOICES = ("auto", "always", "never")


@dataclass(frozen=True)
class ViewerConfig:
    """Settings for one run of the viewer.

    Attributes:
        path: JSON file to display, or None to open an empty view.
        print_only: Render to stdout instead of opening the viewer.
        color: Color policy for printed output ('auto', 'always', 'never').
        line_ending: Line terminator for printed output.
        max_depth: Maximum container nesting to render, or None for no limit.
        log_file: Where to write diagnostic logs, or None to disable logging.
    """

    path: str | None = None
    print_only: bool = False
    color: str = "auto"
    line_ending: LineEnding = LineEnding.LF
    max_depth: int | None = DEFAULT_MAX_DEPTH
    log_file: str | None = None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``jsonview`` command."""
    parser = argparse.ArgumentParser(
        prog="jsonview",
        description="View a JSON document in the terminal with colors and indentation. "
        "Scroll with j/k, quit with q or Ctrl+C.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to a JSON file (omit to open an empty view)",
    )
    parser.add_argument(
        "-p",
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the rendered document to stdout instead of opening the viewer "
        "(implied when stdout is not a terminal)",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        default="auto",
        help="When to color printed output (default: auto)",
    )
    parser.add_argument(
        "--crlf",
        action="store_true",
        help="End printed lines with CR+LF instead of LF",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        metavar="N",
        help=f"Maximum nesting depth to render, 0 for no limit (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        metavar="PATH",
        help="Write debug logs to PATH",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: list[str] | None = None) -> ViewerConfig:
    """Parse command-line arguments into a ``ViewerConfig``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_depth < 0:
        parser.error("--max-depth must be zero or positive")

    return ViewerConfig(
        path=args.path,
        print_only=args.print_only,
        color=args.color,
        line_ending=LineEnding.CRLF if args.crlf else LineEnding.LF,
        max_depth=args.max_depth or None,
        log_file=args.log_file,
    )


def configure_logging(log_file: str | None) -> None:
    """Send jsonview's logs to a file.

    The terminal belongs to the viewer while it runs, so logs are never
    written to the screen.
    """
    if not log_file:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    package_logger = logging.getLogger("jsonview")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
