#!/usr/bin/env python3
"""
scripts/report_tree.py

Scan a source tree and write a per-file CSV of Cyrillic words in // comments.

Output:
  - CSV with columns: path, cyrillic_words (sorted by count, highest first)
  - per-file table + TOTAL on stdout

Usage example:
  PYTHONPATH=src python scripts/report_tree.py \
    --root src \
    --out data/cyrillic_comments.csv \
    --ext c,h,cpp,hpp \
    --min-count 1
"""

from __future__ import annotations

import argparse
import sys

from cyrillic_comment_words.report.tree import build_report, write_report
from cyrillic_comment_words.utils.io import parse_ext_list


def main() -> None:
  ap = argparse.ArgumentParser()
  ap.add_argument("--root", required=True, help="Directory (or single file) to scan.")
  ap.add_argument("--out", required=True, help="Output CSV path.")
  ap.add_argument("--ext", default=None, help="Comma-separated extensions (default: C-family).")
  ap.add_argument("--min-count", type=int, default=0, help="Drop files with fewer Cyrillic words.")
  args = ap.parse_args()

  df = build_report(args.root, extensions=parse_ext_list(args.ext), min_count=args.min_count)

  for row in df.itertuples(index=False):
    print(f"{row.cyrillic_words:6d} {row.path}")
  print(f"TOTAL: {int(df['cyrillic_words'].sum())}")

  out = write_report(df, args.out)
  print(f"✅ wrote {len(df)} files → {out}", file=sys.stderr)


if __name__ == "__main__":
  main()
