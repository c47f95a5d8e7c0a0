"""Command-line options and bot configuration."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Sequence

from .banner import BANNER, render_banner
from .logformat import ColorFormatter

DEFAULT_URL = "ws://127.0.0.1:6700"
DEFAULT_NICKNAME = "蔡徐坤"
EXTRA_NICKNAME = "蔡徐坤哥哥"

log = logging.getLogger("botplugins")


@dataclass
class WebSocketClient:
    """Connection target of the bot."""

    url: str
    access_token: str = ""


@dataclass
class BotConfig:
    """Settings of a bot instance and its connections."""

    nicknames: list[str] = field(default_factory=list)
    command_prefix: str = "/"
    super_users: list[int] = field(default_factory=list)
    drivers: list[WebSocketClient] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "zero": {
                "nickname": list(self.nicknames),
                "command_prefix": self.command_prefix,
                "super_users": list(self.super_users),
            },
            "ws": [{"Url": d.url, "AccessToken": d.access_token} for d in self.drivers],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BotConfig":
        zero = data.get("zero") or {}
        drivers = [
            WebSocketClient(w.get("Url", ""), w.get("AccessToken", ""))
            for w in data.get("ws") or []
        ]
        return cls(
            nicknames=list(zero.get("nickname") or []),
            command_prefix=zero.get("command_prefix", ""),
            super_users=[int(u) for u in zero.get("super_users") or []],
            drivers=drivers,
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("-d", dest="debug", action="store_true",
                        help="Enable debug level log and higher.")
    parser.add_argument("-w", dest="warning", action="store_true",
                        help="Enable warning level log and higher.")
    parser.add_argument("-h", dest="help", action="store_true", help="Display this help.")
    parser.add_argument("-t", dest="token", default="", help="Set AccessToken of WSClient.")
    parser.add_argument("-u", dest="url", default=DEFAULT_URL, help="Set Url of WSClient.")
    parser.add_argument("-n", dest="nickname", default=DEFAULT_NICKNAME,
                        help="Set default nickname.")
    parser.add_argument("-p", dest="prefix", default="/", help="Set command prefix.")
    parser.add_argument("-c", dest="config", default="", help="Run from config file.")
    parser.add_argument("-s", dest="save", default="",
                        help="Save default config to file and exit.")
    parser.add_argument("users", nargs="*", help="Super user ids.")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse options; positional values that are integers become super users."""
    options = _build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    super_users = []
    for value in options.users:
        try:
            super_users.append(int(value, 10))
        except ValueError:
            continue
    options.super_users = super_users
    return options


def build_config(options: argparse.Namespace) -> BotConfig:
    """Build the configuration described by parsed command-line options."""
    return BotConfig(
        nicknames=[options.nickname, EXTRA_NICKNAME],
        command_prefix=options.prefix,
        super_users=list(options.super_users),
        drivers=[WebSocketClient(options.url, options.token)],
    )


def load_config(path: str | os.PathLike[str]) -> BotConfig:
    """Read a configuration file written by :func:`save_config`."""
    with open(path, encoding="utf-8") as f:
        return BotConfig.from_dict(json.load(f))


def save_config(config: BotConfig, path: str | os.PathLike[str]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, ensure_ascii=False)
        f.write("\n")


def help_reply() -> str:
    """Text answered to a help request."""
    return BANNER + '\n可发送"/服务列表"查看 bot 功能'


def _configure_logging(options: argparse.Namespace) -> None:
    level = logging.INFO
    if options.debug and not options.warning:
        level = logging.DEBUG
    if options.warning:
        level = logging.WARNING
    log.setLevel(level)
    if not log.handlers:
        handler = logging.StreamHandler()
        if sys.platform == "win32":
            handler.setFormatter(ColorFormatter())
            handler.terminator = ""
        log.addHandler(handler)


def main(argv: Sequence[str] | None = None) -> int:
    options = parse_args(argv)
    print(render_banner(""), end="")
    if options.help:
        print("Usage:")
        _build_parser().print_help()
        return 0
    _configure_logging(options)

    if options.config:
        config = load_config(options.config)
        log.info("[main] 从 %s 读取配置文件", options.config)
    else:
        config = build_config(options)
        if options.save:
            save_config(config, options.save)
            log.info("[main] 配置文件已保存到 %s", options.save)
            return 0

    for driver in config.drivers:
        log.info("[main] 连接到 %s", driver.url)
    return 0


if __name__ == "__main__":
    sys.exit(main())