import json

import pytest

from botplugins.config import (
    BotConfig,
    WebSocketClient,
    build_config,
    help_reply,
    load_config,
    main,
    parse_args,
    save_config,
)


def test_parse_defaults():
    options = parse_args([])
    assert options.url == "ws://127.0.0.1:6700"
    assert options.prefix == "/"
    assert options.nickname == "蔡徐坤"
    assert options.token == ""
    assert options.super_users == []


def test_parse_super_users_skip_non_numbers():
    options = parse_args(["-t", "token", "123", "abc", "456"])
    assert options.token == "token"
    assert options.super_users == [123, 456]


def test_build_config():
    options = parse_args(["-n", "bot", "-p", "#", "-u", "ws://localhost:1", "7"])
    config = build_config(options)
    assert config.nicknames == ["bot", "蔡徐坤哥哥"]
    assert config.command_prefix == "#"
    assert config.super_users == [7]
    assert config.drivers == [WebSocketClient("ws://localhost:1", "")]


def test_dict_round_trip():
    config = BotConfig(["a", "b"], "/", [1, 2], [WebSocketClient("ws://localhost:2", "token")])
    assert BotConfig.from_dict(config.to_dict()) == config


def test_save_and_load(tmp_path):
    path = tmp_path / "cfg.json"
    config = build_config(parse_args(["9"]))
    save_config(config, path)
    assert load_config(path) == config
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["zero"]["nickname"][0] == "蔡徐坤"


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_config(path)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")


def test_main_saves_and_exits(tmp_path):
    path = tmp_path / "saved.json"
    assert main(["-s", str(path), "5"]) == 0
    assert load_config(path) == build_config(parse_args(["5"]))


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_main_runs_from_config(tmp_path):
    path = tmp_path / "c.json"
    save_config(build_config(parse_args([])), path)
    assert main(["-c", str(path)]) == 0


def test_help_reply_mentions_service_list():
    assert help_reply().endswith('可发送"/服务列表"查看 bot 功能')