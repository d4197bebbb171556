#!/usr/bin/env python3
"""Log Viewer CLI

Reads the date-named log files (``YYYY-MM-DD.log``) written by the web server
and prints them filtered by level or search term, colourised by level.
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from doc2code.config import Config
from doc2code.logger import Logger, session_logger

RESET = "\x1b[0m"
LEVEL_COLOURS = (
    ("[ERROR]", "\x1b[31m"),
    ("[CRITICAL]", "\x1b[31m"),
    ("[WARNING]", "\x1b[33m"),
    ("[WARN]", "\x1b[33m"),
    ("[INFO]", "\x1b[32m"),
    ("[DEBUG]", "\x1b[36m"),
)

# Client-facing level names mapped to the tags DefaultLogger writes
LEVEL_ALIASES = {"WARN": ("WARN", "WARNING"), "WARNING": ("WARN", "WARNING")}


def list_log_files(log_dir: Path) -> List[str]:
    """Names of ``*.log`` files in ``log_dir``, newest date first."""
    return sorted((p.name for p in log_dir.glob("*.log") if p.is_file()), reverse=True)


def filter_lines(
    lines: Iterable[str],
    level: Optional[str] = None,
    search: Optional[str] = None,
    tail: Optional[int] = None,
) -> Tuple[List[str], int]:
    """
    Apply the level, search and tail filters.

    Returns:
        Tuple of (matching lines, total number of lines read)
    """
    tags = None
    if level:
        names = LEVEL_ALIASES.get(level.upper(), (level.upper(),))
        tags = [f"[{name}]" for name in names]
    needle = search.lower() if search else None

    matched: List[str] = []
    total = 0
    for line in lines:
        total += 1
        line = line.rstrip("\n")
        if tags and not any(tag in line for tag in tags):
            continue
        if needle and needle not in line.lower():
            continue
        matched.append(line)

    if tail:
        matched = matched[-tail:]
    return matched, total


def colourise(line: str) -> str:
    for tag, colour in LEVEL_COLOURS:
        if tag in line:
            return f"{colour}{line}{RESET}"
    return line


def render(
    filename: str,
    lines: Sequence[str],
    total: int,
    level: Optional[str] = None,
    search: Optional[str] = None,
    tail: Optional[int] = None,
    colour: bool = True,
) -> List[str]:
    """Output lines for a filtered log file, header and summary included."""
    output = [f"=== Log file: {filename} ==="]
    if level:
        output.append(f"Filtering by level: {level.upper()}")
    if search:
        output.append(f'Searching for: "{search}"')
    if tail:
        output.append(f"Showing last {tail} matching lines")
    output.append("")

    if not lines:
        output.append("No matching log entries found.")
        return output

    output.extend(colourise(line) if colour else line for line in lines)
    output.append("")
    output.append(f"Displayed {len(lines)} of {total} total log entries.")
    return output


def main(argv: Optional[Sequence[str]] = None, logger: Logger = session_logger) -> int:
    parser = argparse.ArgumentParser(
        description="doc2code Log Viewer - Inspect server log files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m doc2code.management.log_viewer
  python -m doc2code.management.log_viewer --level error --tail 50
  python -m doc2code.management.log_viewer --file 2024-05-01.log --search openrouter
  python -m doc2code.management.log_viewer --list

Environment Variables:
    DOC2CODE_LOG_DIR    Log directory (default: ./logs)
        """,
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Log directory (default: DOC2CODE_LOG_DIR or ./logs)",
    )
    parser.add_argument("--file", type=str, default=None, help="Log file to view (default: most recent)")
    parser.add_argument("--level", type=str, default=None, help="Filter by level (INFO, WARN, ERROR, DEBUG)")
    parser.add_argument("--search", type=str, default=None, help="Case-insensitive search term")
    parser.add_argument("--tail", type=int, default=None, help="Show only the last N matching lines")
    parser.add_argument("--list", action="store_true", help="List available log files")
    parser.add_argument("--no-color", action="store_true", help="Disable coloured output")
    args = parser.parse_args(argv)

    log_dir = Path(args.log_dir) if args.log_dir else Config.get_log_dir()
    if not log_dir.is_dir():
        logger.error("Logs directory does not exist. No logs have been generated yet.", log_dir=str(log_dir))
        return 1

    log_files = list_log_files(log_dir)
    if not log_files:
        logger.error("No log files found.", log_dir=str(log_dir))
        return 1

    if args.list:
        print("Available log files:")
        for name in log_files:
            print(f"  {name}")
        return 0

    selected = args.file or log_files[0]
    if selected not in log_files:
        logger.error(f'Log file "{selected}" not found.', available=",".join(log_files))
        return 1

    if args.tail is not None and args.tail < 1:
        logger.error("--tail must be a positive number", tail=args.tail)
        return 1

    try:
        with open(log_dir / selected, "r", encoding="utf-8", errors="replace") as f:
            lines, total = filter_lines(f, level=args.level, search=args.search, tail=args.tail)
    except OSError as e:
        logger.error("Error processing log file", file=selected, error=str(e))
        return 1

    for line in render(
        selected,
        lines,
        total,
        level=args.level,
        search=args.search,
        tail=args.tail,
        colour=not args.no_color,
    ):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
