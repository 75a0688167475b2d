import pytest

from cyrillic_comment_words.lexical.charclass import is_cyrillic, is_word_joiner, is_word_separator


@pytest.mark.parametrize("cp", [0x0400, 0x04FF, 0x0500, 0x052F, 0x2DE0, 0x2DFF, 0xA640, 0xA69F, ord("я"), ord("ё")])
def test_cyrillic_ranges(cp):
    assert is_cyrillic(cp)


@pytest.mark.parametrize("cp", [0x03FF, 0x0530, 0x2DDF, 0x2E00, 0xA63F, 0xA6A0, ord("a"), ord("-")])
def test_not_cyrillic(cp):
    assert not is_cyrillic(cp)


@pytest.mark.parametrize("ch", list(" \t\n\r.,;:!?()[]{}\"<>=+*/&|^%$#@~`") + ["\u00a0"])
def test_separators(ch):
    assert is_word_separator(ord(ch))


@pytest.mark.parametrize("ch", ["-", "'", "_", "a", "я", "\\", "0"])
def test_non_separators(ch):
    assert not is_word_separator(ord(ch))


def test_out_of_range_codepoint_is_not_a_separator():
    assert not is_word_separator(0x1FFFFF)


def test_word_joiners():
    assert is_word_joiner(ord("-"))
    assert is_word_joiner(ord("'"))
    assert not is_word_joiner(ord("_"))
