"""City epidemic statistics: look a city up in the national area tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import requests

TXURL = (
    "https://api.inews.qq.com/newsqa/v1/query/inner/publish/modules/list"
    "?modules=statisGradeCityDetail,diseaseh5Shelf"
)


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


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected a string")
    return value


@dataclass
class Area:
    """Figures of one area and the areas below it."""

    name: str = ""
    today_confirm: int = 0
    today_wzz_add: Any = None
    now_confirm: int = 0
    confirm: int = 0
    dead: int = 0
    heal: int = 0
    grade: str = ""
    wzz: int = 0
    children: list["Area"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Area":
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("expected an object")
        today = _obj(data, "today")
        total = _obj(data, "total")
        children = data.get("children") or []
        if not isinstance(children, list):
            raise ValueError("children: expected a list")
        return cls(
            name=_str(data, "name"),
            today_confirm=_int(today, "confirm"),
            today_wzz_add=today.get("wzz_add"),
            now_confirm=_int(total, "nowConfirm"),
            confirm=_int(total, "confirm"),
            dead=_int(total, "dead"),
            heal=_int(total, "heal"),
            grade=_str(total, "grade"),
            wzz=_int(total, "wzz"),
            children=[cls.from_dict(c) for c in children if c is not None],
        )


def find_city(area: Area | None, name: str) -> Area | None:
    """Search the tree below ``area`` for the area with this name."""
    if area is None:
        return None
    if area.name == name:
        return area
    for child in area.children:
        if child.name == name:
            return child
        found = find_city(child, name)
        if found is not None:
            return found
    return None


def parse_epidemic(payload: Any, city: str) -> tuple[Area | None, str]:
    """Return the city's area (None if unknown) and the time of the data."""
    if not isinstance(payload, dict):
        raise ValueError("expected an object")
    shelf = _obj(_obj(payload, "data"), "diseaseh5Shelf")
    tree = shelf.get("areaTree") or []
    if not isinstance(tree, list):
        raise ValueError("areaTree: expected a list")
    if not tree:
        raise LookupError("no area data")
    root = Area.from_dict(tree[0])
    return find_city(root, city), _str(shelf, "lastUpdateTime")


def _show(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_report(area: Area, updated: str) -> str:
    """Render an area's figures as a chat reply."""
    return "".join((
        "【", area.name, "】疫情数据\n",
        "新增人数：", str(area.today_confirm), "\n",
        "现有确诊：", str(area.now_confirm), "\n",
        "累计确诊：", str(area.confirm), "\n",
        "治愈人数：", str(area.heal), "\n",
        "死亡人数：", str(area.dead), "\n",
        "无症状人数：", str(area.wzz), "\n",
        "新增无症状：", _show(area.today_wzz_add), "\n",
        "更新时间：\n『", updated, "』",
    ))


def query_epidemic(city: str, session: Any = None) -> tuple[Area | None, str]:
    """Fetch the current figures and look the city up in them."""
    if not city:
        raise ValueError("你还没有输入城市名字呢！")
    session = session if session is not None else requests.Session()
    response = session.get(TXURL, timeout=10)
    response.raise_for_status()
    return parse_epidemic(response.json(), city)