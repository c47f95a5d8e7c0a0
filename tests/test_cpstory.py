import pytest

from botplugins.cpstory import CpStory, parse_pair


def test_render_placeholders():
    story = CpStory(1, "甲", "乙", "<攻>爱<受>")
    assert story.render("A", "B") == "A爱B"


def test_render_original_names_take_first():
    story = CpStory(2, "甲", "乙", "甲和乙")
    assert story.render("A", "B") == "A和A"


def test_parse_pair():
    assert parse_pair("A B") == ("A", "B")


def test_parse_pair_double_space():
    assert parse_pair("A  B") == ("A", "")


def test_parse_pair_needs_two():
    with pytest.raises(ValueError):
        parse_pair("A")