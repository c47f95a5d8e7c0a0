"""Data shapes of the bilibili web API answers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

T_URL = "https://t.bilibili.com/"
DYNAMIC_DETAIL_URL = (
    "https://api.vc.bilibili.com/dynamic_svr/v1/dynamic_svr/get_dynamic_detail?dynamic_id={}"
)
MEMBER_CARD_URL = "https://account.bilibili.com/api/member/getCardByMid?mid={}"
ARTICLE_INFO_URL = "https://api.bilibili.com/x/article/viewinfo?id={}"
CV_URL = "https://www.bilibili.com/read/cv"
LIVE_ROOM_INFO_URL = (
    "https://api.live.bilibili.com/xlive/web-room/v1/index/getInfoByRoom?room_id={}"
)
L_URL = "https://live.bilibili.com/"
VIDEO_INFO_URL = "https://api.bilibili.com/x/web-interface/view?aid={}&bvid={}"
V_URL = "https://www.bilibili.com/video/"
SEARCH_USER_URL = (
    "http://api.bilibili.com/x/web-interface/search/type?search_type=bili_user&keyword={}"
)
VTB_DETAIL_URL = "https://api.vtbs.moe/v1/detail/{}"
MEDALWALL_URL = "https://api.live.bilibili.com/xlive/web-ucenter/user/MedalWall?target_id={}"


def _obj(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{key}: expected an object")
    return value


def _int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key}: expected a number")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{key}: expected an integer")
    return int(value)


def _float(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key}: expected a number")
    return float(value)


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected a string")
    return value


def _list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{key}: expected a list")
    return value


def _check(data: Any) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("expected an object")
    return data


@dataclass
class _Item:
    content: str = ""
    upload_time: int = 0
    description: str = ""
    pictures: list[str] = field(default_factory=list)
    timestamp: int = 0
    cover: str = ""
    orig_type: int = 0


@dataclass
class _Sketch:
    title: str = ""
    desc_text: str = ""
    cover_url: str = ""
    target_url: str = ""


@dataclass
class _Stat:
    aid: int = 0
    view: int = 0
    danmaku: int = 0
    reply: int = 0
    favorite: int = 0
    coin: int = 0
    share: int = 0
    like: int = 0


@dataclass
class _Owner:
    name: str = ""
    pubdate: int = 0
    mid: int = 0


@dataclass
class _LivePlayInfo:
    parent_area_name: str = ""
    area_name: str = ""
    cover: str = ""
    link: str = ""
    online: int = 0
    room_id: int = 0
    live_status: int = 0
    watched_show: str = ""
    title: str = ""


@dataclass
class _User:
    name: str = ""
    uname: str = ""


@dataclass
class _Staff:
    title: str = ""
    name: str = ""
    follower: int = 0


def _stat(data: dict[str, Any]) -> _Stat:
    return _Stat(*(_int(data, k) for k in
                   ("aid", "view", "danmaku", "reply", "favorite", "coin", "share", "like")))


@dataclass
class Card:
    """Any card the API returns: dynamic, video, article, audio or live."""

    item: _Item = field(default_factory=_Item)
    aid: Any = None
    bvid: Any = None
    dynamic: Any = None
    pic: str = ""
    title: str = ""
    id: int = 0
    summary: str = ""
    image_urls: list[str] = field(default_factory=list)
    origin_image_urls: list[str] = field(default_factory=list)
    sketch: _Sketch = field(default_factory=_Sketch)
    stat: _Stat = field(default_factory=_Stat)
    stats: _Stat = field(default_factory=_Stat)
    owner: _Owner = field(default_factory=_Owner)
    cover: str = ""
    short_id: Any = None
    live_play_info: _LivePlayInfo = field(default_factory=_LivePlayInfo)
    intro: str = ""
    schema: str = ""
    author: Any = None
    author_name: str = ""
    play_cnt: int = 0
    reply_cnt: int = 0
    type_info: str = ""
    user: _User = field(default_factory=_User)
    desc: str = ""
    share_subtitle: str = ""
    short_link: str = ""
    publish_time: int = 0
    banner_url: str = ""
    ctime: int = 0
    vest_content: str = ""
    upper: str = ""
    origin: str = ""
    pubdate: int = 0
    is_cooperation: int = 0
    staff: list[_Staff] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Card":
        data = _check(data)
        item = _obj(data, "item")
        sketch = _obj(data, "sketch")
        owner = _obj(data, "owner")
        live = _obj(data, "live_play_info")
        user = _obj(data, "user")
        return cls(
            item=_Item(
                content=_str(item, "content"),
                upload_time=_int(item, "upload_time"),
                description=_str(item, "description"),
                pictures=[_str(_check(p), "img_src") for p in _list(item, "pictures")],
                timestamp=_int(item, "timestamp"),
                cover=_str(_obj(item, "cover"), "default"),
                orig_type=_int(item, "orig_type"),
            ),
            aid=data.get("aid"),
            bvid=data.get("bvid"),
            dynamic=data.get("dynamic"),
            pic=_str(data, "pic"),
            title=_str(data, "title"),
            id=_int(data, "id"),
            summary=_str(data, "summary"),
            image_urls=[str(u) for u in _list(data, "image_urls")],
            origin_image_urls=[str(u) for u in _list(data, "origin_image_urls")],
            sketch=_Sketch(
                _str(sketch, "title"), _str(sketch, "desc_text"),
                _str(sketch, "cover_url"), _str(sketch, "target_url"),
            ),
            stat=_stat(_obj(data, "stat")),
            stats=_stat(_obj(data, "stats")),
            owner=_Owner(_str(owner, "name"), _int(owner, "pubdate"), _int(owner, "mid")),
            cover=_str(data, "cover"),
            short_id=data.get("short_id"),
            live_play_info=_LivePlayInfo(
                parent_area_name=_str(live, "parent_area_name"),
                area_name=_str(live, "area_name"),
                cover=_str(live, "cover"),
                link=_str(live, "link"),
                online=_int(live, "online"),
                room_id=_int(live, "room_id"),
                live_status=_int(live, "live_status"),
                watched_show=_str(live, "watched_show"),
                title=_str(live, "title"),
            ),
            intro=_str(data, "intro"),
            schema=_str(data, "schema"),
            author=data.get("author"),
            author_name=_str(data, "author_name"),
            play_cnt=_int(data, "play_cnt"),
            reply_cnt=_int(data, "reply_cnt"),
            type_info=_str(data, "type_info"),
            user=_User(_str(user, "name"), _str(user, "uname")),
            desc=_str(data, "desc"),
            share_subtitle=_str(data, "share_subtitle"),
            short_link=_str(data, "short_link"),
            publish_time=_int(data, "publish_time"),
            banner_url=_str(data, "banner_url"),
            ctime=_int(data, "ctime"),
            vest_content=_str(_obj(data, "vest"), "content"),
            upper=_str(data, "upper"),
            origin=_str(data, "origin"),
            pubdate=_int(data, "pubdate"),
            is_cooperation=_int(_obj(data, "rights"), "is_cooperation"),
            staff=[
                _Staff(_str(s, "title"), _str(s, "name"), _int(s, "follower"))
                for s in map(_check, _list(data, "staff"))
            ],
        )


@dataclass
class _Desc:
    type: int = 0
    dynamic_id_str: str = ""
    orig_type: int = 0
    timestamp: int = 0
    origin_dynamic_id_str: str = ""
    uname: str = ""


@dataclass
class DynamicCard:
    """A dynamic: its description, its card as JSON text and an optional vote."""

    desc: _Desc = field(default_factory=_Desc)
    card: str = ""
    vote_id: int = 0
    vote_desc: str = ""
    vote_join_num: int = 0
    vote: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "DynamicCard":
        data = _check(data)
        desc = _obj(data, "desc")
        extension = _obj(data, "extension")
        vote_cfg = _obj(extension, "vote_cfg")
        return cls(
            desc=_Desc(
                type=_int(desc, "type"),
                dynamic_id_str=_str(desc, "dynamic_id_str"),
                orig_type=_int(desc, "orig_type"),
                timestamp=_int(desc, "timestamp"),
                origin_dynamic_id_str=_str(_obj(desc, "origin"), "dynamic_id_str"),
                uname=_str(_obj(_obj(desc, "user_profile"), "info"), "uname"),
            ),
            card=_str(data, "card"),
            vote_id=_int(vote_cfg, "vote_id"),
            vote_desc=_str(vote_cfg, "desc"),
            vote_join_num=_int(vote_cfg, "join_num"),
            vote=_str(extension, "vote"),
        )


@dataclass
class _VoteOption:
    idx: int = 0
    desc: str = ""
    img_url: str = ""


@dataclass
class Vote:
    """A poll attached to a dynamic."""

    choice_cnt: int = 0
    desc: str = ""
    endtime: int = 0
    join_num: int = 0
    options: list[_VoteOption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Vote":
        data = _check(data)
        return cls(
            choice_cnt=_int(data, "choice_cnt"),
            desc=_str(data, "desc"),
            endtime=_int(data, "endtime"),
            join_num=_int(data, "join_num"),
            options=[
                _VoteOption(_int(o, "idx"), _str(o, "desc"), _str(o, "img_url"))
                for o in map(_check, _list(data, "options"))
            ],
        )


@dataclass
class MemberCard:
    """Public profile of a user."""

    mid: str = ""
    name: str = ""
    sex: str = ""
    face: str = ""
    coins: float = 0.0
    regtime: int = 0
    birthday: str = ""
    sign: str = ""
    attentions: list[int] = field(default_factory=list)
    fans: int = 0
    friend: int = 0
    attention: int = 0
    current_level: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "MemberCard":
        data = _check(data)
        attentions = []
        for value in _list(data, "attentions"):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("attentions: expected integers")
            attentions.append(value)
        return cls(
            mid=_str(data, "mid"),
            name=_str(data, "name"),
            sex=_str(data, "sex"),
            face=_str(data, "face"),
            coins=_float(data, "coins"),
            regtime=_int(data, "regtime"),
            birthday=_str(data, "birthday"),
            sign=_str(data, "sign"),
            attentions=attentions,
            fans=_int(data, "fans"),
            friend=_int(data, "friend"),
            attention=_int(data, "attention"),
            current_level=_int(_obj(data, "level_info"), "current_level"),
        )


@dataclass
class RoomCard:
    """A live room and the name of its host."""

    room_id: int = 0
    short_id: int = 0
    title: str = ""
    live_status: int = 0
    area_name: str = ""
    parent_area_name: str = ""
    keyframe: str = ""
    online: int = 0
    uname: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "RoomCard":
        data = _check(data)
        room = _obj(data, "room_info")
        base = _obj(_obj(data, "anchor_info"), "base_info")
        return cls(
            room_id=_int(room, "room_id"),
            short_id=_int(room, "short_id"),
            title=_str(room, "title"),
            live_status=_int(room, "live_status"),
            area_name=_str(room, "area_name"),
            parent_area_name=_str(room, "parent_area_name"),
            keyframe=_str(room, "keyframe"),
            online=_int(room, "online"),
            uname=_str(base, "uname"),
        )


@dataclass
class Medal:
    """A fan medal worn for a streamer."""

    uname: str = ""
    mid: int = 0
    medal_name: str = ""
    level: int = 0
    medal_color_start: int = 0
    medal_color_end: int = 0
    medal_color_border: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Medal":
        data = _check(data)
        info = _obj(data, "medal_info")
        return cls(
            uname=_str(data, "target_name"),
            mid=_int(info, "target_id"),
            medal_name=_str(info, "medal_name"),
            level=_int(info, "level"),
            medal_color_start=_int(info, "medal_color_start"),
            medal_color_end=_int(info, "medal_color_end"),
            medal_color_border=_int(info, "medal_color_border"),
        )


@dataclass
class VtbDetail:
    """Statistics of a virtual streamer."""

    mid: int = 0
    uname: str = ""
    video: int = 0
    roomid: int = 0
    rise: int = 0
    follower: int = 0
    guard_num: int = 0
    area_rank: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "VtbDetail":
        data = _check(data)
        return cls(
            mid=_int(data, "mid"),
            uname=_str(data, "uname"),
            video=_int(data, "video"),
            roomid=_int(data, "roomid"),
            rise=_int(data, "rise"),
            follower=_int(data, "follower"),
            guard_num=_int(data, "guardNum"),
            area_rank=_int(data, "areaRank"),
        )


@dataclass
class SearchResult:
    """One user found by a search."""

    mid: int = 0
    uname: str = ""
    gender: int = 0
    usign: str = ""
    level: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "SearchResult":
        data = _check(data)
        return cls(
            mid=_int(data, "mid"),
            uname=_str(data, "uname"),
            gender=_int(data, "gender"),
            usign=_str(data, "usign"),
            level=_int(data, "level"),
        )


def sort_medals(medals: Iterable[Medal]) -> list[Medal]:
    """Return the medals with the highest level first."""
    return sorted(medals, key=lambda m: m.level, reverse=True)