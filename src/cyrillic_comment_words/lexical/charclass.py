"""
lexical/charclass.py

What this file does:
- Classifies single codepoints for the word automaton:
  1) is_cyrillic: fixed Cyrillic block ranges
  2) is_word_separator: whitespace + a fixed punctuation set

How it fits:
- Only consulted while the automaton is inside a // comment.
- Hyphen and apostrophe are deliberately NOT separators (they may sit inside
  a Cyrillic word, e.g. "кто-то").
"""

from __future__ import annotations

from typing import FrozenSet, Tuple

# (start, end) inclusive
CYRILLIC_RANGES: Tuple[Tuple[int, int], ...] = (
  (0x0400, 0x04FF),  # Cyrillic
  (0x0500, 0x052F),  # Cyrillic Supplement
  (0x2DE0, 0x2DFF),  # Cyrillic Extended-A
  (0xA640, 0xA69F),  # Cyrillic Extended-B
)

SEPARATOR_PUNCT: FrozenSet[int] = frozenset(ord(ch) for ch in '.,;:!?()[]{}"<>=+*/&|^%$#@~`')

HYPHEN = ord("-")
APOSTROPHE = ord("'")

MAX_CODEPOINT = 0x10FFFF


def is_cyrillic(cp: int) -> bool:
  for lo, hi in CYRILLIC_RANGES:
    if lo <= cp <= hi:
      return True
  return False


def is_whitespace(cp: int) -> bool:
  # the lenient decoder can produce values past the Unicode range
  if cp < 0 or cp > MAX_CODEPOINT:
    return False
  return chr(cp).isspace()


def is_word_separator(cp: int) -> bool:
  return is_whitespace(cp) or cp in SEPARATOR_PUNCT


def is_word_joiner(cp: int) -> bool:
  """Hyphen / apostrophe: allowed inside a Cyrillic word without breaking it."""
  return cp == HYPHEN or cp == APOSTROPHE
