"""Client of the bilibili web API and of the streamer lists."""

from __future__ import annotations

import json
import re
from typing import Any, Callable, Iterator, TypeVar

import requests

from .bili_cards import dynamic_card_to_msg
from .bili_types import (
    ARTICLE_INFO_URL,
    DYNAMIC_DETAIL_URL,
    LIVE_ROOM_INFO_URL,
    MEDALWALL_URL,
    MEMBER_CARD_URL,
    SEARCH_USER_URL,
    VIDEO_INFO_URL,
    VTB_DETAIL_URL,
    Card,
    Medal,
    MemberCard,
    RoomCard,
    SearchResult,
    VtbDetail,
)
from .segments import Segment

VTB_URLS = (
    "https://api.vtbs.moe/v1/short",
    "https://api.tokyo.vtbs.moe/v1/short",
    "https://vtbs.musedash.moe/v1/short",
)

NEED_COOKIE = (
    '该api需要设置b站cookie，请发送命令设置cookie，例如"设置b站cookie SESSDATA=placeholder"'
)

_NUMERIC = re.compile(r"[+-]?[0-9]+")
_MISSING = object()

T = TypeVar("T")


class BilibiliError(Exception):
    """A request failed or its answer could not be used."""


def _lookup(payload: Any, path: str) -> Any:
    value = payload
    for key in path.split("."):
        if not isinstance(value, dict) or key not in value:
            return _MISSING
        value = value[key]
    return value


def _require(payload: Any, path: str) -> Any:
    value = _lookup(payload, path)
    if value is _MISSING:
        raise BilibiliError(f"missing {path} in answer")
    return value


def _decode(factory: Callable[[Any], T], data: Any) -> T:
    try:
        return factory(data)
    except ValueError as e:
        raise BilibiliError(str(e)) from e


class BilibiliClient:
    """Queries users, videos, articles, live rooms and dynamics."""

    def __init__(self, session: Any = None, timeout: float = 10.0) -> None:
        self._session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _get_json(self, url: str, headers: dict[str, str] | None = None) -> Any:
        try:
            response = self._session.get(url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise BilibiliError(str(e)) from e
        except ValueError as e:
            raise BilibiliError(f"invalid JSON: {e}") from e

    def search_user(self, keyword: str) -> list[SearchResult]:
        """Find users by name."""
        payload = self._get_json(SEARCH_USER_URL.format(keyword))
        if not _lookup(payload, "data.numResults") or _lookup(payload, "data.numResults") is _MISSING:
            raise BilibiliError("查无此人")
        results = _require(payload, "data.result")
        if not isinstance(results, list):
            raise BilibiliError("data.result: expected a list")
        return [_decode(SearchResult.from_dict, r) for r in results]

    def vtb_detail(self, uid: str) -> VtbDetail:
        return _decode(VtbDetail.from_dict, self._get_json(VTB_DETAIL_URL.format(uid)))

    def member_card(self, uid: Any) -> MemberCard:
        payload = self._get_json(MEMBER_CARD_URL.format(uid))
        return _decode(MemberCard.from_dict, _require(payload, "card"))

    def medal_wall(self, uid: str, cookie: str) -> list[Medal]:
        """Return the fan medals a user wears; needs a logged-in cookie."""
        payload = self._get_json(MEDALWALL_URL.format(uid), headers={"cookie": cookie})
        if not isinstance(payload, dict):
            raise BilibiliError("expected an object")
        code = payload.get("code", 0)
        if code == -101:
            raise BilibiliError(NEED_COOKIE)
        if code != 0:
            raise BilibiliError(str(payload.get("message", "")))
        medals = _lookup(payload, "data.list")
        if medals is _MISSING or medals is None:
            return []
        if not isinstance(medals, list):
            raise BilibiliError("data.list: expected a list")
        return [_decode(Medal.from_dict, m) for m in medals]

    def article_info(self, article_id: str) -> Card:
        payload = self._get_json(ARTICLE_INFO_URL.format(article_id))
        return _decode(Card.from_dict, _require(payload, "data"))

    def live_room_info(self, room_id: str) -> RoomCard:
        payload = self._get_json(LIVE_ROOM_INFO_URL.format(room_id))
        return _decode(RoomCard.from_dict, _require(payload, "data"))

    def video_info(self, video_id: str) -> Card:
        """Look a video up by its av number or its bv id."""
        video_id = str(video_id)
        if _NUMERIC.fullmatch(video_id):
            url = VIDEO_INFO_URL.format(video_id, "")
        else:
            url = VIDEO_INFO_URL.format("", video_id)
        return _decode(Card.from_dict, _require(self._get_json(url), "data"))

    def dynamic_detail(self, dynamic_id: str) -> list[Segment]:
        """Fetch a dynamic and render it as message segments."""
        payload = self._get_json(DYNAMIC_DETAIL_URL.format(dynamic_id))
        raw = json.dumps(_require(payload, "data.card"), ensure_ascii=False)
        return _decode(lambda r: dynamic_card_to_msg(r, 0), raw)

    def real_url(self, url: str) -> str:
        """Return the address a link finally redirects to."""
        try:
            response = self._session.head(url, allow_redirects=True, timeout=self.timeout)
        except requests.RequestException as e:
            raise BilibiliError(str(e)) from e
        return response.url

    def fetch_vups(self) -> Iterator[dict[str, Any]]:
        """Yield the streamer entries of every list, one list after another."""
        for url in VTB_URLS:
            payload = self._get_json(url)
            if not isinstance(payload, list):
                raise BilibiliError(f"{url}: expected a list")
            yield from (entry for entry in payload if isinstance(entry, dict))