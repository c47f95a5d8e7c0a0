# botplugins

A chat bot's configuration command together with a collection of small chat
plugins. Each plugin is an ordinary Python module you call from your own bot
loop: pick an option, flip text upside down, throw and pick up drift bottles,
mix two emoji, pull a gacha ten-draw, turn Bilibili links into message cards,
and more.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## The `botplugins` command

The command prints a banner and builds the bot's configuration from flags, or
reads it from a JSON file.

```
botplugins -h
```

prints the banner and the list of options:

| Flag | Meaning | Default |
| ---- | ------- | ------- |
| `-d` | debug-level logging | off |
| `-w` | warning-level logging (wins over `-d`) | off |
| `-h` | show help and exit | |
| `-t` | access token for the WebSocket client | empty |
| `-u` | WebSocket URL | `ws://127.0.0.1:6700` |
| `-n` | default nickname | `蔡徐坤` |
| `-p` | command prefix | `/` |
| `-c` | run from a config file | |
| `-s` | save the default config to a file and exit | |

Any bare integers after the flags are taken as super-user IDs; other bare
words are ignored.

Write a default configuration to a file, then run from it:

```
botplugins -n Atri -p "#" -s bot.json
botplugins -c bot.json
```

The file has two parts: `zero` (nicknames, command prefix, super users) and
`ws` (the list of WebSocket clients, each with `Url` and `AccessToken`).

From Python, the same steps are available as `parse_args`, `build_config`,
`save_config` and `load_config` in `botplugins.config`;
`BotConfig.to_dict` and `BotConfig.from_dict` convert to and from the JSON
form, and `help_reply()` gives the text answered to a help request. On
Windows the log output goes through `botplugins.logformat.ColorFormatter`,
which prints `[LEVEL] message` in a colour chosen by `level_color`.

## Plugins

Messages are built from `botplugins.segments.Segment`
(`Segment.text`, `Segment.image`, `Segment.record`, `Segment.reply`,
`Segment.at`).

| Module | What it does |
| ------ | ------------ |
| `botplugins.banner` | `render_banner(notice)` builds the start-up banner around a notice text |
| `botplugins.choose` | `choose("A还是B", nickname, rng)` picks one option and lists them all |
| `botplugins.search` | `search_link(text)` builds a "let me search that for you" link |
| `botplugins.waifu` | `waifu_url(rng)` returns a random generated-waifu picture address |
| `botplugins.reverser` | `extract_target` finds the text of a flip command; `flip_text` reverses it upside down |
| `botplugins.chat` | `name_reply`, a token-bucket `PokeLimiter`, and a per-group `AirConditioner` |
| `botplugins.driftbottle` | a SQLite `Sea` of channels where `Bottle`s are thrown, fetched and destroyed; `parse_throw` / `parse_pick` read the commands |
| `botplugins.quotes` | `JokeBook` and `CurseBook`: random jokes (with `%name` filled in) and curses by level |
| `botplugins.reviews` | `ReviewStore`: book reviews by keyword or at random |
| `botplugins.bili_types` | Bilibili API records: `Card`, `DynamicCard`, `Vote`, `MemberCard`, `RoomCard`, `Medal`, `VtbDetail`, `SearchResult` |
| `botplugins.bili_cards` | turns those records into message segments; `human_num` formats counts in 万 |
| `botplugins.bili_api` | `BilibiliClient` for users, videos, articles, live rooms, dynamics, medal walls and streamer lists; failures raise `BilibiliError` |
| `botplugins.bili_parse` | `find_link` / `find_short_link` recognise Bilibili links in chat text; `describe` renders them |
| `botplugins.bili_store` | `VupStore`: the local list of virtual streamers and the saved cookie; `order_vups` puts medal holders first |
| `botplugins.emojimix` | `match_pair` and `mix_urls` for combining two emoji into one picture |
| `botplugins.genshin` | `GachaPool` loaded from an image archive; `draw` performs a ten-pull and returns the pulled picture names |
| `botplugins.epidemic` | `query_epidemic` fetches the area tree, `find_city` looks a city up, `format_report` renders it |
| `botplugins.fortune` | layout of the daily fortune slip (`glyph_positions`) and the background themes |
| `botplugins.chouxianghua` | `translate` text into "abstract speech" with pinyin and emoji lookups you supply |
| `botplugins.cpstory` | `CpStory.render` fills two names into a short story; `parse_pair` splits the names |
| `botplugins.diana` | `EssayStore` of short essays with stable IDs from `essay_id` |
| `botplugins.limiter` | pack and unpack default rate limits, parse the limit command; `system_status` reports CPU, memory and disk use |

### A few examples

```python
import random

from botplugins.bili_cards import human_num
from botplugins.choose import choose
from botplugins.reverser import flip_text
from botplugins.search import search_link

print(human_num(12345))      # 1.23万
print(flip_text("hello"))
print(search_link("python"))
print(choose("咖啡还是茶", "Alice", random.Random(1)))
```

Drift bottles (the `global` channel exists from the start):

```python
from botplugins.driftbottle import Bottle, Sea

with Sea("sea.db") as sea:
    sea.throw(Bottle.create(10001, 0, "Alice", "hello, whoever finds this"), "global")
    found = sea.fetch("global", 20002)
    print(found.name, found.msg)
    sea.destroy(found, "global")
```

Functions that draw at random take an `rng` argument (any `random.Random`),
so results can be reproduced with a fixed seed.

## What the package does not do

- The `botplugins` command only prepares the configuration: it logs the
  WebSocket addresses but opens no connection, receives no messages and does
  not route commands to the plugins. Wiring the plugins to a chat connection
  is left to your own bot loop.
- The banner's notice board is whatever text you pass to `render_banner`; the
  command prints it empty. Nothing is fetched from a remote notice service.
- Nothing is drawn: `GachaPool.draw` and `glyph_positions` return names and
  coordinates, not pictures, and there is no text-to-image rendering.
- There are no greeting replies tied to the time of day, no AI chat replies
  and no speech synthesis.
- The stores (`Sea`, `JokeBook`, `CurseBook`, `ReviewStore`, `EssayStore`,
  `VupStore`) start empty; no data files come with the package.