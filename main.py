"""
main.py

What this file does:
- Runs the single-file Cyrillic comment word counter.

How to run:
- From project root:
  PYTHONPATH=src python main.py path/to/file.c
or
  PYTHONPATH=src python -m cyrillic_comment_words.cli path/to/file.c
"""

from __future__ import annotations

import sys

from cyrillic_comment_words.cli import main

if __name__ == "__main__":
    sys.exit(main())
