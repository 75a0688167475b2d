"""
scan/scanner.py

Drives decoder -> automaton over one input:
  1) decode codepoints from a ByteStream
  2) feed each one to CommentWordAutomaton
  3) call finish() once the stream is exhausted
  4) return the Cyrillic word count

Entry points:
- scan_stream(stream)                    -> int
- count_cyrillic_comment_words(data)     -> int   (in-memory bytes)
- scan_file(path)                        -> int   (raises FileOpenError)
"""

from __future__ import annotations

from pathlib import Path

from ..decode.utf8 import ByteStream, read_codepoint
from ..lexical.automaton import CommentWordAutomaton


class FileOpenError(OSError):
    """Input path is missing or cannot be opened for reading."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


def scan_stream(stream: ByteStream) -> int:
    automaton = CommentWordAutomaton(pull=lambda: read_codepoint(stream))
    while True:
        cp = read_codepoint(stream)
        if cp is None:
            break
        automaton.feed(cp)
    return automaton.finish()


def count_cyrillic_comment_words(data: bytes) -> int:
    return scan_stream(ByteStream.from_bytes(data))


def scan_file(path: str | Path) -> int:
    path = Path(path)
    try:
        f = path.open("rb")
    except OSError as e:
        raise FileOpenError(path, e.strerror or str(e)) from e
    with f:
        return scan_stream(ByteStream(f))
