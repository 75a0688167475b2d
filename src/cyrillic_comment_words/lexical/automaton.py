"""
lexical/automaton.py

Two nested state machines driven one codepoint at a time.

Outer machine (LexicalContext):
- tracks where we are in a C-like source file:
  code, "string", 'char', // line comment, /* block comment */

Inner machine (WordState):
- only active inside a // comment
- splits the comment into words and counts the purely Cyrillic ones

Key rules:
- after a lone '/', the next codepoint is re-evaluated in MAIN
  (so "a/'b'" still opens a char literal on the quote)
- a backslash inside a literal pulls and discards one extra codepoint,
  so \" does not close a string; if that pull hits end of stream the literal
  is closed
- a Cyrillic word may contain '-' and "'"; any other non-Cyrillic codepoint
  turns it into an "other" word, which is never counted
- a Cyrillic word still open when the file ends is counted by finish()
"""

from __future__ import annotations

import enum
from typing import Callable, Optional

from .charclass import is_cyrillic, is_word_joiner, is_word_separator

Pull = Callable[[], Optional[int]]

NEWLINE = ord("\n")
SLASH = ord("/")
STAR = ord("*")
BACKSLASH = ord("\\")
DOUBLE_QUOTE = ord('"')
SINGLE_QUOTE = ord("'")


class LexicalContext(enum.Enum):
    MAIN = enum.auto()
    SAW_SLASH = enum.auto()  # '/' seen in code, not yet known which comment (if any)
    LINE_COMMENT = enum.auto()
    STRING_LITERAL = enum.auto()
    CHAR_LITERAL = enum.auto()
    BLOCK_COMMENT = enum.auto()
    BLOCK_COMMENT_SAW_STAR = enum.auto()  # '*' inside /* */, may be closing


class WordState(enum.Enum):
    NONE = enum.auto()
    IN_CYRILLIC_WORD = enum.auto()
    IN_OTHER_WORD = enum.auto()


def _no_lookahead() -> Optional[int]:
    return None


class CommentWordAutomaton:
    """
    Counts Cyrillic words in // comments.

    `pull` is called for escape lookahead inside literals. It must return the
    next codepoint of the same input, or None at end of stream.
    """

    def __init__(self, pull: Pull = _no_lookahead) -> None:
        self.pull = pull
        self.context = LexicalContext.MAIN
        self.word_state = WordState.NONE
        self.cyrillic_word_count = 0
        self.finished = False

    def feed(self, cp: int) -> None:
        while self._step(cp):
            pass

    def finish(self) -> int:
        if not self.finished:
            self.finished = True
            if (
                self.context is LexicalContext.LINE_COMMENT
                and self.word_state is WordState.IN_CYRILLIC_WORD
            ):
                self.cyrillic_word_count += 1
        return self.cyrillic_word_count

    def _step(self, cp: int) -> bool:
        """Apply one transition. Returns True when `cp` must be re-evaluated."""
        ctx = self.context

        if ctx is LexicalContext.MAIN:
            if cp == DOUBLE_QUOTE:
                self.context = LexicalContext.STRING_LITERAL
            elif cp == SINGLE_QUOTE:
                self.context = LexicalContext.CHAR_LITERAL
            elif cp == SLASH:
                self.context = LexicalContext.SAW_SLASH

        elif ctx is LexicalContext.SAW_SLASH:
            if cp == SLASH:
                self.context = LexicalContext.LINE_COMMENT
                self.word_state = WordState.NONE
            elif cp == STAR:
                self.context = LexicalContext.BLOCK_COMMENT
            else:
                self.context = LexicalContext.MAIN
                return True

        elif ctx is LexicalContext.LINE_COMMENT:
            if cp == NEWLINE:
                if self.word_state is WordState.IN_CYRILLIC_WORD:
                    self.cyrillic_word_count += 1
                self.context = LexicalContext.MAIN
                self.word_state = WordState.NONE
            else:
                self._advance_word(cp)

        elif ctx is LexicalContext.STRING_LITERAL:
            if cp == DOUBLE_QUOTE:
                self.context = LexicalContext.MAIN
            elif cp == BACKSLASH:
                self._skip_escaped()

        elif ctx is LexicalContext.CHAR_LITERAL:
            if cp == SINGLE_QUOTE:
                self.context = LexicalContext.MAIN
            elif cp == BACKSLASH:
                self._skip_escaped()

        elif ctx is LexicalContext.BLOCK_COMMENT:
            if cp == STAR:
                self.context = LexicalContext.BLOCK_COMMENT_SAW_STAR

        elif ctx is LexicalContext.BLOCK_COMMENT_SAW_STAR:
            if cp == SLASH:
                self.context = LexicalContext.MAIN
            elif cp != STAR:
                self.context = LexicalContext.BLOCK_COMMENT

        return False

    def _skip_escaped(self) -> None:
        if self.pull() is None:
            self.context = LexicalContext.MAIN

    def _advance_word(self, cp: int) -> None:
        ws = self.word_state

        if ws is WordState.NONE:
            if not is_word_separator(cp):
                if is_cyrillic(cp):
                    self.word_state = WordState.IN_CYRILLIC_WORD
                else:
                    self.word_state = WordState.IN_OTHER_WORD

        elif ws is WordState.IN_CYRILLIC_WORD:
            if is_word_separator(cp):
                self.cyrillic_word_count += 1
                self.word_state = WordState.NONE
            elif not is_cyrillic(cp) and not is_word_joiner(cp):
                self.word_state = WordState.IN_OTHER_WORD

        elif ws is WordState.IN_OTHER_WORD:
            if is_word_separator(cp):
                self.word_state = WordState.NONE
