"""
report/tree.py

What this file does:
- Scans every source file under a directory.
- Collects per-file Cyrillic comment word counts into a pandas DataFrame.
- Writes the DataFrame to CSV.

How it fits:
- scripts/report_tree.py is the command-line wrapper.
- Files that cannot be opened are reported on stderr and left out.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

import pandas as pd

from ..scan.scanner import FileOpenError, scan_file
from ..utils.io import collect_source_files

COLUMNS = ["path", "cyrillic_words"]


def scan_paths(paths: Iterable[Path], root: Path | None = None) -> pd.DataFrame:
    records = []
    for p in paths:
        try:
            n = scan_file(p)
        except FileOpenError as e:
            print(f"skip: {e}", file=sys.stderr)
            continue
        shown = p.relative_to(root) if root is not None and root.is_dir() else p
        records.append({"path": shown.as_posix(), "cyrillic_words": n})

    return pd.DataFrame(records, columns=COLUMNS)


def build_report(
    root: str | Path,
    extensions: set[str] | None = None,
    min_count: int = 0,
) -> pd.DataFrame:
    root = Path(root)
    files = collect_source_files(root, extensions)
    df = scan_paths(files, root=root)

    df = df[df["cyrillic_words"] >= int(min_count)]
    df = df.sort_values(["cyrillic_words", "path"], ascending=[False, True])
    return df.reset_index(drop=True)


def write_report(df: pd.DataFrame, csv_path: str | Path) -> Path:
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(csv_path, index=False, encoding="utf-8")
    return csv_path
