"""
decode/utf8.py

What this file does:
- Wraps a binary file-like object in a ByteStream (byte reads + pushback).
- Decodes one codepoint per call from that stream (1-4 byte UTF-8 sequences).

How it fits:
- The scanner pulls codepoints from here and feeds them to the automaton.
- The automaton's escape handling pulls one extra codepoint through the same
  read_codepoint() call, so both share a single ByteStream.

Decoding is lenient on purpose:
- continuation bytes are not checked for the 10xxxxxx pattern
- no overlong / surrogate / range validation
- an unknown lead byte is dropped and decoding resumes on the next byte
- a sequence cut short by end of input yields None (end of stream)
"""

from __future__ import annotations

import io
from typing import BinaryIO, Iterator, List, Optional

CHUNK_SIZE = 64 * 1024


class ByteStream:
    """
    Byte-at-a-time reader with a pushback buffer.

    Pushed-back bytes are returned (in the order they were given to unread)
    before anything new is read from the underlying object.
    """

    def __init__(self, raw: BinaryIO, chunk_size: int = CHUNK_SIZE) -> None:
        self.raw = raw
        self.chunk_size = int(chunk_size)
        self._buf = b""
        self._pos = 0
        self._pushback: List[int] = []

    @classmethod
    def from_bytes(cls, data: bytes) -> "ByteStream":
        return cls(io.BytesIO(data))

    def read_byte(self) -> Optional[int]:
        if self._pushback:
            return self._pushback.pop()
        if self._pos >= len(self._buf):
            self._buf = self.raw.read(self.chunk_size)
            self._pos = 0
            if not self._buf:
                return None
        b = self._buf[self._pos]
        self._pos += 1
        return b

    def unread(self, *bs: int) -> None:
        # stored reversed so pop() hands back the first one first
        for b in reversed(bs):
            self._pushback.append(b)


def _sequence_length(lead: int) -> int:
    if (lead & 0x80) == 0:
        return 1
    if (lead & 0xE0) == 0xC0:
        return 2
    if (lead & 0xF0) == 0xE0:
        return 3
    if (lead & 0xF8) == 0xF0:
        return 4
    return 0


_LEAD_MASK = {2: 0x1F, 3: 0x0F, 4: 0x07}


def read_codepoint(stream: ByteStream) -> Optional[int]:
    """
    Decode the next codepoint from `stream`, or return None at end of stream.

    A truncated 2-byte sequence is simply dropped. For 3- and 4-byte sequences
    the continuation bytes already read are pushed back before returning None.
    """
    while True:
        lead = stream.read_byte()
        if lead is None:
            return None

        n = _sequence_length(lead)
        if n == 0:
            # invalid lead byte: skip it and try again
            continue
        if n == 1:
            return lead

        tail: List[int] = []
        for _ in range(n - 1):
            b = stream.read_byte()
            if b is None:
                # the lead byte stays consumed; only its continuation goes back
                stream.unread(*tail)
                return None
            tail.append(b)

        cp = lead & _LEAD_MASK[n]
        for b in tail:
            cp = (cp << 6) | (b & 0x3F)
        return cp


def iter_codepoints(stream: ByteStream) -> Iterator[int]:
    while True:
        cp = read_codepoint(stream)
        if cp is None:
            return
        yield cp
