import pytest

from botplugins.epidemic import (
    TXURL,
    Area,
    find_city,
    format_report,
    parse_epidemic,
    query_epidemic,
)

UPDATED = "2022-07-22 10:00:00"


def _payload():
    return {
        "data": {
            "diseaseh5Shelf": {
                "lastUpdateTime": UPDATED,
                "areaTree": [
                    {
                        "name": "中国",
                        "today": {"confirm": 5, "wzz_add": 3.0},
                        "total": {"nowConfirm": 40, "confirm": 90, "dead": 1, "heal": 49, "wzz": 7},
                        "children": [
                            {
                                "name": "广东",
                                "children": [
                                    {
                                        "name": "广州",
                                        "today": {"confirm": 2, "wzz_add": None},
                                        "total": {"nowConfirm": 11, "confirm": 12, "heal": 1},
                                    }
                                ],
                            }
                        ],
                    }
                ],
            }
        }
    }


class _Response:
    def __init__(self, payload):
        self._payload = payload

    def raise_for_status(self):
        return None

    def json(self):
        return self._payload


class _Session:
    def __init__(self, payload):
        self.payload = payload
        self.urls = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        return _Response(self.payload)


def test_parse_finds_nested_city():
    area, updated = parse_epidemic(_payload(), "广州")
    assert area.name == "广州"
    assert area.today_confirm == 2
    assert area.now_confirm == 11
    assert updated == UPDATED


def test_find_city_root_and_missing():
    root = Area.from_dict(_payload()["data"]["diseaseh5Shelf"]["areaTree"][0])
    assert find_city(root, "中国") is root
    assert find_city(root, "火星") is None
    assert find_city(None, "广州") is None


def test_parse_unknown_city_gives_none():
    area, updated = parse_epidemic(_payload(), "火星")
    assert area is None
    assert updated == UPDATED


def test_parse_empty_tree_raises():
    with pytest.raises(LookupError):
        parse_epidemic({"data": {"diseaseh5Shelf": {"areaTree": []}}}, "广州")


def test_from_dict_rejects_bad_children():
    with pytest.raises(ValueError):
        Area.from_dict({"name": "x", "children": "nope"})


def test_format_report_lines():
    area, updated = parse_epidemic(_payload(), "广州")
    report = format_report(area, updated)
    assert report.startswith("【广州】疫情数据\n")
    assert "新增人数：2\n" in report
    assert "新增无症状：<nil>\n" in report
    assert report.endswith("『" + UPDATED + "』")


def test_format_report_integral_float():
    area, updated = parse_epidemic(_payload(), "中国")
    assert "新增无症状：3\n" in format_report(area, updated)


def test_query_uses_session():
    session = _Session(_payload())
    area, updated = query_epidemic("广州", session)
    assert session.urls == [TXURL]
    assert area.name == "广州"
    assert updated == UPDATED


def test_query_empty_city_raises():
    with pytest.raises(ValueError):
        query_epidemic("", _Session(_payload()))