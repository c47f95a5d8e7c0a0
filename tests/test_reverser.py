import pytest

from botplugins.reverser import CHAR_MAP, extract_target, flip_text


def test_extract_target():
    assert extract_target("翻转 hello world") == "hello world"


def test_extract_target_requires_command():
    with pytest.raises(ValueError):
        extract_target("hello world")


def test_extract_first_run_even_before_command():
    assert extract_target("abc 翻转 xyz") == "abc"


def test_single_letters_use_map():
    for ch, flipped in CHAR_MAP.items():
        assert flip_text(ch) == flipped


def test_flip_reverses_order():
    assert flip_text("ab") == CHAR_MAP["b"] + CHAR_MAP["a"]


def test_spaces_kept_and_length_preserved():
    out = flip_text("ab cd")
    assert len(out) == 5
    assert out[2] == " "


def test_unmapped_becomes_nul():
    assert flip_text("a_b") == CHAR_MAP["b"] + "\x00" + CHAR_MAP["a"]