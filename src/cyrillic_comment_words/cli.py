"""
cli.py

Count Cyrillic words inside // comments of one source file.

Usage:
  cyrillic-comment-words path/to/file.c
or
  PYTHONPATH=src python -m cyrillic_comment_words.cli path/to/file.c

Output:
  - the count on stdout, no trailing newline, exit status 0
  - on open failure: message on stderr, exit status 1, nothing on stdout
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from cyrillic_comment_words.scan.scanner import FileOpenError, scan_file


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="cyrillic-comment-words",
        description="Count Cyrillic words in // comments of a C-like source file.",
    )
    ap.add_argument("path", help="Source file to scan (read as bytes, UTF-8).")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        count = scan_file(args.path)
    except FileOpenError as e:
        print(f"Error opening file: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(str(count))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
