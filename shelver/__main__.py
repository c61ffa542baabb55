#!/usr/bin/env python3
"""
Shelver - CLI Entry Point
=========================

Usage:
    python -m shelver *.wav sp02.jpg
    python -m shelver --prefix p "*.jpg"
    python -m shelver --dest sorted --dry-run "*"
"""

import argparse
import sys
from pathlib import Path

from rich.markup import escape

from . import __version__
from .config import load_settings
from .scanner import expand_patterns
from .planning import plan_moves
from .executor import apply_moves
from .utils import console, print_header, print_error, print_warning, print_success, print_plan_table, print_summary


def build_parser(settings: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shelver",
        description="Shelver - Sort numbered files into folders named after their common stem",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("patterns", nargs="*", metavar="FILE_OR_GLOB",
                        help="Files or glob patterns to organize")
    parser.add_argument("-p", "--prefix", type=str, default=settings["prefix"], metavar="MARKER",
                        help="Group files by the text before MARKER followed by a number "
                             "(e.g. 'p' for 'trip p04.jpg')")
    parser.add_argument("-d", "--dest", type=Path, default=settings["dest"],
                        help="Destination root directory (default: %(default)s)")
    parser.add_argument("-n", "--dry-run", "--dryrun", dest="dry_run", action="store_true",
                        help="Show planned moves without executing them")
    parser.add_argument("--no-progress", action="store_true",
                        help="Disable the progress bar")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args) -> int:
    """Expand inputs, plan moves and execute them."""
    expanded = expand_patterns(args.patterns)
    files = expanded["files"]

    if not files:
        print_warning("No files found matching the provided patterns")
        return 0

    plan = plan_moves(files, args.prefix)
    unmatched_count = len(plan["unmatched"])

    if not plan["moves"]:
        print_warning(f"No files matched the grouping patterns. Skipped: {unmatched_count}")
        return 0

    mode_str = "dry-run" if args.dry_run else "apply"
    marker_str = escape(args.prefix) if args.prefix else "(none)"
    print_header("Shelver", f"Destination: {escape(str(args.dest))}\nMarker: {marker_str}\nMode: {mode_str}")
    print_plan_table(plan)

    report = apply_moves(plan["moves"], args.dest, args.dry_run, show_progress=not args.no_progress)

    print_summary(report, unmatched_count)

    if args.dry_run:
        console.print(f"\nDry run complete. Would move {report['planned_moves_count']} files.")
        print_warning("This was a DRY-RUN. No files were actually moved.")
    elif report["failed_moves_count"]:
        print_error(f"{report['failed_moves_count']} moves failed")
    else:
        print_success(f"Moved {report['executed_moves_count']} files")

    if unmatched_count:
        console.print(f"Files that didn't match pattern: {unmatched_count}")

    return 0


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if not args.patterns:
        parser.print_usage(sys.stderr)
        print_error("No files or glob patterns given")
        return 1

    try:
        return run(args)
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
