import pytest

from botplugins.driftbottle import (
    GLOBAL_CHANNEL,
    Bottle,
    Sea,
    crc64_iso,
    parse_pick,
    parse_throw,
)


@pytest.fixture
def sea():
    with Sea() as s:
        yield s


def test_crc64_iso_check_value():
    assert crc64_iso(b"123456789") == 0xB90956C775A41001


def test_crc64_iso_empty():
    assert crc64_iso(b"") == 0


def test_bottle_id_deterministic_and_signed():
    a = Bottle.create(1, 2, "n", "m")
    b = Bottle.create(1, 2, "n", "m")
    c = Bottle.create(1, 2, "n", "other")
    assert a == b
    assert a.id != c.id
    assert -(2**63) <= a.id < 2**63


def test_throw_and_fetch_round_trip(sea):
    bottle = Bottle.create(10, 0, "alice", "hello")
    sea.throw(bottle, GLOBAL_CHANNEL)
    assert sea.fetch(GLOBAL_CHANNEL, 99) == bottle


def test_fetch_respects_group(sea):
    bottle = Bottle.create(10, 5, "alice", "hello")
    sea.throw(bottle)
    assert sea.fetch(GLOBAL_CHANNEL, 5) == bottle
    with pytest.raises(LookupError):
        sea.fetch(GLOBAL_CHANNEL, 6)


def test_same_bottle_stored_once(sea):
    bottle = Bottle.create(10, 0, "alice", "hello")
    sea.throw(bottle)
    sea.throw(bottle)
    assert sea.count() == 1


def test_destroy(sea):
    bottle = Bottle.create(10, 0, "alice", "hello")
    sea.throw(bottle)
    sea.destroy(bottle)
    assert sea.count() == 0


def test_channels(sea):
    with pytest.raises(LookupError):
        sea.throw(Bottle.create(1, 0, "a", "b"), "lake")
    sea.create_channel("lake")
    sea.throw(Bottle.create(1, 0, "a", "b"), "lake")
    assert sea.count("lake") == 1
    assert sea.count(GLOBAL_CHANNEL) == 0


def test_empty_channel_name(sea):
    with pytest.raises(ValueError):
        sea.create_channel("  ")


def test_count_missing_channel(sea):
    with pytest.raises(LookupError):
        sea.count("nowhere")


def test_parse_throw_full():
    assert parse_throw("在群123丢漂流瓶到频道abc 你好") == (123, "abc", "你好")


def test_parse_throw_defaults():
    assert parse_throw("丢漂流瓶 hi there") == (None, GLOBAL_CHANNEL, "hi there")


def test_parse_throw_empty_message():
    with pytest.raises(ValueError):
        parse_throw("丢漂流瓶 ")


def test_parse_throw_not_command():
    with pytest.raises(ValueError):
        parse_throw("捡漂流瓶")


def test_parse_pick():
    assert parse_pick("捡漂流瓶") == GLOBAL_CHANNEL
    assert parse_pick("从频道abc捡漂流瓶") == "abc"
    with pytest.raises(ValueError):
        parse_pick("捡漂流瓶吧")