"""
utils/io.py

What this file does:
- Finds the source files under a directory that a tree report should scan.
- Parses a comma-separated extension list ("c,.h, .cpp") into a set.

How it fits:
- Only the tree report needs directory walking; single-file scans go straight
  to scan.scanner.scan_file.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_EXTENSIONS = frozenset({
    ".c", ".h", ".cc", ".cpp", ".cxx", ".hpp", ".hh",
    ".java", ".js", ".ts", ".cs", ".go", ".rs", ".kt", ".swift",
})


def parse_ext_list(s: str | None) -> set[str] | None:
    if s is None:
        return None
    out: set[str] = set()
    for part in s.split(","):
        part = part.strip().lower()
        if not part:
            continue
        if not part.startswith("."):
            part = "." + part
        out.add(part)
    if not out:
        raise ValueError(f"Extension list is empty: {s!r}")
    return out


def collect_source_files(root: str | Path, extensions: set[str] | frozenset[str] | None = None) -> list[Path]:
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Root directory not found: {root}")
    if root.is_file():
        return [root]
    exts = DEFAULT_EXTENSIONS if extensions is None else extensions
    return sorted(p for p in root.rglob("*") if p.is_file() and p.suffix.lower() in exts)
