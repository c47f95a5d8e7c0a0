"""Turn bilibili cards into chat messages."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from .bili_types import (
    CV_URL,
    L_URL,
    T_URL,
    V_URL,
    Card,
    DynamicCard,
    MemberCard,
    RoomCard,
    Vote,
)
from .segments import Segment

TYPE_MSG = {
    1: "转发了动态",
    2: "有图营业",
    4: "无图营业",
    8: "投稿了视频",
    16: "投稿了短视频",
    64: "投稿了文章",
    256: "投稿了音频",
    2048: "发布了简报",
    4200: "发布了直播",
    4308: "发布了直播",
}

_CARD_TYPES = frozenset(TYPE_MSG)


def human_num(n: int) -> str:
    """Format a count, in units of ten thousand from 10000 upwards."""
    if abs(n) >= 10000:
        return f"{n / 10000:.2f}万"
    return str(n)


def int_to_rgb(value: int) -> tuple[int, int, int]:
    """Split the low three bytes of a colour number into (r, g, b)."""
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def _time(ts: int) -> str:
    return datetime.fromtimestamp(ts).strftime("%Y-%m-%d %H:%M:%S")


def _iface(value: Any) -> Any:
    return "<nil>" if value is None else value


def _load(raw: str) -> dict[str, Any]:
    data = json.loads(raw)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return data


def dynamic_card_to_msg(raw: str, card_type: int) -> list[Segment]:
    """Render a card as message segments.

    With ``card_type`` 0 ``raw`` is a whole dynamic whose type is read from it;
    otherwise ``raw`` is a bare card of that type.
    """
    vote = Vote()
    if card_type == 0:
        dynamic = DynamicCard.from_dict(_load(raw))
        card = Card.from_dict(_load(dynamic.card))
        if dynamic.vote:
            vote = Vote.from_dict(_load(dynamic.vote))
        card_type = dynamic.desc.type
    elif card_type in _CARD_TYPES:
        dynamic = DynamicCard()
        card = Card.from_dict(_load(raw))
    else:
        raise ValueError("只有0, 1, 2, 4, 8, 16, 64, 256, 2048, 4200, 4308模式")

    msg: list[Segment] = []
    kind = TYPE_MSG.get(card_type, "")
    if card_type == 1:
        msg.append(Segment.text(card.user.uname, kind, "\n",
                                card.item.content, "\n", "转发的内容: \n"))
        msg.extend(dynamic_card_to_msg(card.origin, card.item.orig_type))
    elif card_type == 2:
        msg.append(Segment.text(card.user.name, "在", _time(card.item.upload_time), kind, "\n",
                                card.item.description))
        msg.extend(Segment.image(p) for p in card.item.pictures)
    elif card_type == 4:
        msg.append(Segment.text(card.user.uname, "在", _time(card.item.timestamp), kind, "\n",
                                card.item.content, "\n"))
        if dynamic.vote:
            msg.append(Segment.text(
                "【投票】", vote.desc, "\n",
                "截止日期: ", _time(vote.endtime), "\n",
                "参与人数: ", human_num(vote.join_num), "\n",
                "投票选项( 最多选择", vote.choice_cnt, "项 )\n",
            ))
            for option in vote.options:
                msg.append(Segment.text("- ", option.idx, ". ", option.desc, "\n"))
                if option.img_url:
                    msg.append(Segment.image(option.img_url))
    elif card_type == 8:
        msg.append(Segment.text(card.owner.name, "在", _time(card.pubdate), kind, "\n", card.title))
        msg.append(Segment.image(card.pic))
        msg.append(Segment.text(card.desc, "\n", card.share_subtitle, "\n",
                                "视频链接: ", card.short_link, "\n"))
    elif card_type == 16:
        msg.append(Segment.text(card.user.name, "在", _time(card.item.upload_time), kind, "\n",
                                card.item.description))
        msg.append(Segment.image(card.item.cover))
    elif card_type == 64:
        if not isinstance(card.author, dict):
            raise ValueError("author: expected an object")
        msg.append(Segment.text(_iface(card.author.get("name")), "在", _time(card.publish_time),
                                kind, "\n", card.title, "\n", card.summary))
        msg.extend(Segment.image(u) for u in card.image_urls)
        if card.id != 0:
            msg.append(Segment.text("文章链接: https://www.bilibili.com/read/cv", card.id, "\n"))
    elif card_type == 256:
        msg.append(Segment.text(card.upper, "在", _time(card.ctime), kind, "\n", card.title))
        msg.append(Segment.image(card.cover))
        msg.append(Segment.text(card.intro, "\n"))
        if card.id != 0:
            msg.append(Segment.text("音频链接: https://www.bilibili.com/audio/au", card.id, "\n"))
    elif card_type == 2048:
        msg.append(Segment.text(card.user.uname, kind, "\n", card.vest_content, "\n",
                                card.sketch.title, "\n", card.sketch.desc_text, "\n"))
        msg.append(Segment.image(card.sketch.cover_url))
        msg.append(Segment.text("分享链接: ", card.sketch.target_url, "\n"))
    elif card_type == 4308:
        live = card.live_play_info
        if dynamic.desc.uname:
            msg.append(Segment.text(dynamic.desc.uname, kind, "\n"))
        msg.append(Segment.image(live.cover))
        msg.append(Segment.text(live.title, "\n", "房间号: ", live.room_id, "\n",
                                "分区: ", live.parent_area_name))
        if live.parent_area_name != live.area_name:
            msg.append(Segment.text("-", live.area_name))
        if live.live_status == 0:
            msg.append(Segment.text("未开播 \n"))
        else:
            msg.append(Segment.text("直播中 ", live.watched_show, "\n"))
        msg.append(Segment.text("直播链接: ", live.link))
    else:
        msg.append(Segment.text("动态id: ", dynamic.desc.dynamic_id_str,
                                "未知动态类型: ", card_type, "\n"))
    if dynamic.desc.dynamic_id_str:
        msg.append(Segment.text("动态链接: ", T_URL, dynamic.desc.dynamic_id_str))
    return msg


def article_card_to_msg(card: Card, default_id: str) -> list[Segment]:
    """Render an article card; ``default_id`` builds its link."""
    msg = [Segment.image(u) for u in card.origin_image_urls]
    msg.append(Segment.text(
        card.title, "\n", "UP主: ", card.author_name, "\n",
        "阅读: ", human_num(card.stats.view), " 评论: ", human_num(card.stats.reply), "\n",
        CV_URL, default_id,
    ))
    return msg


def live_card_to_msg(card: RoomCard) -> list[Segment]:
    """Render a live room."""
    msg = [
        Segment.image(card.keyframe),
        Segment.text(card.title, "\n", "主播: ", card.uname, "\n",
                     "房间号: ", card.room_id, "\n"),
    ]
    if card.short_id != 0:
        msg.append(Segment.text("短号: ", card.short_id, "\n"))
    msg.append(Segment.text("分区: ", card.parent_area_name))
    if card.parent_area_name != card.area_name:
        msg.append(Segment.text("-", card.area_name))
    if card.live_status == 0:
        msg.append(Segment.text("未开播 \n"))
    else:
        msg.append(Segment.text("直播中 ", human_num(card.online), "人气\n"))
    room = card.short_id if card.short_id != 0 else card.room_id
    msg.append(Segment.text("直播间链接: ", L_URL, room))
    return msg


def video_card_to_msg(card: Card, member: MemberCard) -> list[Segment]:
    """Render a video; ``member`` is the uploader's profile."""
    msg = [Segment.text("标题: ", card.title, "\n")]
    if card.is_cooperation == 1:
        msg.extend(
            Segment.text(s.title, ": ", s.name, " 粉丝: ", human_num(s.follower), "\n")
            for s in card.staff
        )
    else:
        msg.append(Segment.text("UP主: ", card.owner.name, " 粉丝: ", human_num(member.fans), "\n"))
    msg.append(Segment.text("播放: ", human_num(card.stat.view),
                            " 弹幕: ", human_num(card.stat.danmaku)))
    msg.append(Segment.image(card.pic))
    msg.append(Segment.text(
        "点赞: ", human_num(card.stat.like), " 投币: ", human_num(card.stat.coin), "\n",
        "收藏: ", human_num(card.stat.favorite), " 分享: ", human_num(card.stat.share), "\n",
        V_URL, _iface(card.bvid),
    ))
    return msg