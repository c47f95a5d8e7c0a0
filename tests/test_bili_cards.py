import json
import re

import pytest

from botplugins.bili_cards import (
    article_card_to_msg,
    dynamic_card_to_msg,
    human_num,
    int_to_rgb,
    live_card_to_msg,
    video_card_to_msg,
)
from botplugins.bili_types import Card, MemberCard, RoomCard
from botplugins.segments import Segment

TS = r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"


def dynamic(type_, id_str, card, vote=None, uname=""):
    extension = {"vote": json.dumps(vote)} if vote is not None else {}
    return json.dumps({
        "desc": {"type": type_, "dynamic_id_str": id_str,
                 "user_profile": {"info": {"uname": uname}}},
        "card": json.dumps(card),
        "extension": extension,
    })


def link(id_str):
    return Segment.text("动态链接: https://t.bilibili.com/" + id_str)


def text_of(segment):
    assert segment.type == "text"
    return segment.data["text"]


@pytest.mark.parametrize("value, expected", [
    (0, "0"), (9999, "9999"), (10000, "1.00万"), (12345, "1.23万"), (-20000, "-2.00万"),
])
def test_human_num(value, expected):
    assert human_num(value) == expected


def test_int_to_rgb():
    assert int_to_rgb(0x123456) == (0x12, 0x34, 0x56)
    assert int_to_rgb(-1) == (255, 255, 255)
    assert int_to_rgb(0x7F000000123456) == (0x12, 0x34, 0x56)


def test_forward_dynamic():
    origin = {"user": {"uname": "bob"}, "item": {"content": "hello", "timestamp": 1600000000}}
    card = {"user": {"uname": "alice"},
            "item": {"content": "forwarding", "orig_type": 4},
            "origin": json.dumps(origin)}
    msg = dynamic_card_to_msg(dynamic(1, "642279068898689029", card), 0)
    assert len(msg) == 3
    assert text_of(msg[0]) == "alice转发了动态\nforwarding\n转发的内容: \n"
    assert re.fullmatch(f"bob在{TS}无图营业\nhello\n", text_of(msg[1]))
    assert msg[2] == link("642279068898689029")


def test_picture_dynamic():
    card = {"user": {"name": "carol"},
            "item": {"upload_time": 1600000000, "description": "pics",
                     "pictures": [{"img_src": "http://img.example.com/a.jpg"},
                                  {"img_src": "http://img.example.com/b.jpg"}]}}
    msg = dynamic_card_to_msg(dynamic(2, "642470680290394121", card), 0)
    assert re.fullmatch(f"carol在{TS}有图营业\npics", text_of(msg[0]))
    assert msg[1:3] == [Segment.image("http://img.example.com/a.jpg"),
                        Segment.image("http://img.example.com/b.jpg")]
    assert msg[3] == link("642470680290394121")


def test_sketch_dynamic():
    card = {"user": {"uname": "dave"}, "vest": {"content": "vest"},
            "sketch": {"title": "st", "desc_text": "dt",
                       "cover_url": "http://img.example.com/c.jpg",
                       "target_url": "http://example.com/t"}}
    msg = dynamic_card_to_msg(dynamic(2048, "642277677329285174", card), 0)
    assert msg == [
        Segment.text("dave发布了简报\nvest\nst\ndt\n"),
        Segment.image("http://img.example.com/c.jpg"),
        Segment.text("分享链接: http://example.com/t\n"),
        link("642277677329285174"),
    ]


def test_plain_dynamic_without_vote():
    card = {"user": {"uname": "eve"}, "item": {"content": "words", "timestamp": 1600000000}}
    msg = dynamic_card_to_msg(dynamic(4, "642154347357011968", card), 0)
    assert len(msg) == 2
    assert re.fullmatch(f"eve在{TS}无图营业\nwords\n", text_of(msg[0]))
    assert msg[1] == link("642154347357011968")


def test_vote_dynamic():
    card = {"user": {"uname": "eve"}, "item": {"content": "vote now", "timestamp": 1600000000}}
    vote = {"choice_cnt": 2, "desc": "best", "endtime": 1600000000, "join_num": 12345,
            "options": [{"idx": 1, "desc": "A", "img_url": "http://img.example.com/o.jpg"},
                        {"idx": 2, "desc": "B"}]}
    msg = dynamic_card_to_msg(dynamic(4, "677231070435868704", card, vote), 0)
    assert len(msg) == 6
    assert re.fullmatch(
        f"【投票】best\n截止日期: {TS}\n参与人数: 1.23万\n投票选项\\( 最多选择2项 \\)\n",
        text_of(msg[1]),
    )
    assert msg[2:5] == [Segment.text("- 1. A\n"),
                        Segment.image("http://img.example.com/o.jpg"),
                        Segment.text("- 2. B\n")]
    assert msg[5] == link("677231070435868704")


def test_video_dynamic():
    card = {"owner": {"name": "frank"}, "pubdate": 1600000000, "title": "vid",
            "pic": "http://img.example.com/p.jpg", "desc": "d", "share_subtitle": "sub",
            "short_link": "https://b23.tv/x"}
    msg = dynamic_card_to_msg(dynamic(8, "675892999274627104", card), 0)
    assert re.fullmatch(f"frank在{TS}投稿了视频\nvid", text_of(msg[0]))
    assert msg[1:] == [Segment.image("http://img.example.com/p.jpg"),
                       Segment.text("d\nsub\n视频链接: https://b23.tv/x\n"),
                       link("675892999274627104")]


def test_live_dynamic():
    card = {"live_play_info": {"cover": "http://img.example.com/l.jpg", "title": "live",
                               "room_id": 83171, "parent_area_name": "游戏",
                               "area_name": "单机", "live_status": 1,
                               "watched_show": "100人看过",
                               "link": "https://live.bilibili.com/83171"}}
    msg = dynamic_card_to_msg(dynamic(4308, "668598718656675844", card, uname="grace"), 0)
    assert msg == [
        Segment.text("grace发布了直播\n"),
        Segment.image("http://img.example.com/l.jpg"),
        Segment.text("live\n房间号: 83171\n分区: 游戏"),
        Segment.text("-单机"),
        Segment.text("直播中 100人看过\n"),
        Segment.text("直播链接: https://live.bilibili.com/83171"),
        link("668598718656675844"),
    ]


def test_article_dynamic():
    card = {"author": {"name": "heidi"}, "publish_time": 1600000000, "title": "art",
            "summary": "sum", "image_urls": ["http://img.example.com/i.jpg"], "id": 17279244}
    msg = dynamic_card_to_msg(dynamic(64, "675966082178088963", card), 0)
    assert re.fullmatch(f"heidi在{TS}投稿了文章\nart\nsum", text_of(msg[0]))
    assert msg[1:] == [Segment.image("http://img.example.com/i.jpg"),
                       Segment.text("文章链接: https://www.bilibili.com/read/cv17279244\n"),
                       link("675966082178088963")]


def test_article_dynamic_needs_author_object():
    with pytest.raises(ValueError):
        dynamic_card_to_msg(json.dumps({"author": "nobody"}), 64)


def test_audio_dynamic():
    card = {"upper": "ivan", "ctime": 1600000000, "title": "song",
            "cover": "http://img.example.com/s.jpg", "intro": "intro", "id": 42}
    msg = dynamic_card_to_msg(dynamic(256, "599253048535707632", card), 0)
    assert re.fullmatch(f"ivan在{TS}投稿了音频\nsong", text_of(msg[0]))
    assert msg[1:] == [Segment.image("http://img.example.com/s.jpg"),
                       Segment.text("intro\n"),
                       Segment.text("音频链接: https://www.bilibili.com/audio/au42\n"),
                       link("599253048535707632")]


def test_unknown_type_in_dynamic():
    msg = dynamic_card_to_msg(dynamic(4200, "1", {}), 0)
    assert msg == [Segment.text("动态id: 1未知动态类型: 4200\n"), link("1")]


def test_bare_card_has_no_link():
    msg = dynamic_card_to_msg(json.dumps({"user": {"uname": "x"}}), 2048)
    assert all("动态链接" not in s.data.get("text", "") for s in msg)
    assert text_of(msg[0]) == "x发布了简报\n\n\n\n"


def test_invalid_mode():
    with pytest.raises(ValueError):
        dynamic_card_to_msg("{}", 3)


def test_bad_json():
    with pytest.raises(ValueError):
        dynamic_card_to_msg("not json", 0)


def test_article_card():
    card = Card.from_dict({"title": "cv title", "author_name": "judy",
                           "stats": {"view": 12345, "reply": 7},
                           "origin_image_urls": ["http://img.example.com/x.jpg"]})
    assert article_card_to_msg(card, "17279244") == [
        Segment.image("http://img.example.com/x.jpg"),
        Segment.text("cv title\nUP主: judy\n阅读: 1.23万 评论: 7\n"
                     "https://www.bilibili.com/read/cv17279244"),
    ]


def test_live_card_offline():
    card = RoomCard.from_dict({"room_info": {
        "room_id": 83171, "title": "room", "live_status": 0, "area_name": "闲聊",
        "parent_area_name": "闲聊", "keyframe": "http://img.example.com/k.jpg"},
        "anchor_info": {"base_info": {"uname": "kim"}}})
    assert live_card_to_msg(card) == [
        Segment.image("http://img.example.com/k.jpg"),
        Segment.text("room\n主播: kim\n房间号: 83171\n"),
        Segment.text("分区: 闲聊"),
        Segment.text("未开播 \n"),
        Segment.text("直播间链接: https://live.bilibili.com/83171"),
    ]


def test_live_card_online_with_short_id():
    card = RoomCard(room_id=83171, short_id=5, title="room", live_status=1,
                    area_name="单机", parent_area_name="游戏", keyframe="k", online=20000,
                    uname="kim")
    msg = live_card_to_msg(card)
    assert Segment.text("短号: 5\n") in msg
    assert Segment.text("-单机") in msg
    assert Segment.text("直播中 2.00万人气\n") in msg
    assert msg[-1] == Segment.text("直播间链接: https://live.bilibili.com/5")


def test_video_card():
    card = Card.from_dict({"title": "t", "bvid": "BV1xx411c7mD",
                           "owner": {"name": "leo", "mid": 2},
                           "pic": "http://img.example.com/v.jpg",
                           "stat": {"view": 10007, "danmaku": 3, "like": 1, "coin": 2,
                                    "favorite": 3, "share": 4}})
    member = MemberCard.from_dict({"mid": "2", "fans": 20000})
    assert video_card_to_msg(card, member) == [
        Segment.text("标题: t\n"),
        Segment.text("UP主: leo 粉丝: 2.00万\n"),
        Segment.text("播放: 1.00万 弹幕: 3"),
        Segment.image("http://img.example.com/v.jpg"),
        Segment.text("点赞: 1 投币: 2\n收藏: 3 分享: 4\n"
                     "https://www.bilibili.com/video/BV1xx411c7mD"),
    ]


def test_video_card_cooperation():
    card = Card.from_dict({"title": "t", "bvid": "BV1mF411j7iU",
                           "rights": {"is_cooperation": 1},
                           "staff": [{"title": "UP主", "name": "a", "follower": 5},
                                     {"title": "参与", "name": "b", "follower": 30000}]})
    msg = video_card_to_msg(card, MemberCard())
    assert msg[1:3] == [Segment.text("UP主: a 粉丝: 5\n"),
                        Segment.text("参与: b 粉丝: 3.00万\n")]
    assert text_of(msg[-1]).endswith("https://www.bilibili.com/video/BV1mF411j7iU")