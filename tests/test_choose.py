import random

from botplugins.choose import choose, split_options


class _FixedRng:
    def __init__(self, index):
        self.index = index

    def randrange(self, n):
        assert 0 <= self.index < n
        return self.index


def test_split_options():
    assert split_options("肯德基还是麦当劳还是必胜客") == ["肯德基", "麦当劳", "必胜客"]


def test_split_without_separator():
    assert split_options("可乐") == ["可乐"]


def test_choose_layout():
    out = choose("可口可乐还是百事可乐", "小明", _FixedRng(1))
    assert out == "> 小明\n你的选项有:\n1, 可口可乐\n2, 百事可乐\n你最终会选: 百事可乐"


def test_choose_result_is_an_option():
    rng = random.Random(3)
    options = split_options("a还是b还是c")
    for _ in range(20):
        out = choose("a还是b还是c", "n", rng)
        assert out.rsplit("你最终会选: ", 1)[1] in options