"""Worked examples that build hierarchical keys for taxonomies and genre lists."""

from __future__ import annotations

import json
import re
from collections.abc import Iterator
from urllib.parse import urlencode
from urllib.request import urlopen

from hierarkey.keys import HierarKey

GENRE_API = "https://en.wikipedia.org/w/api.php"
GENRE_PARAMS = {
    "action": "parse",
    "page": "List_of_music_genres_and_styles",
    "section": "13",
    "prop": "wikitext",
    "format": "json",
}
GENRE_URL = f"{GENRE_API}?{urlencode(GENRE_PARAMS)}"

_LINE_BREAK = re.compile(r"\r?\n")
_MARKUP = re.compile(r"[=*\[\]]")


def example_a_entries() -> list[tuple[str, str]]:
    """Build a small taxonomy and return its (key, name) pairs sorted by key."""
    hk = HierarKey(1, 2)
    steps = [
        (hk.next_leaf, (), "Animal"),
        (hk.next_level, (), "Vertebrate"),
        (hk.next_level, (), "Mammal"),
        (hk.next_level, (), "Carnivore"),
        (hk.next_level, (), "Cat"),
        (hk.next_level, (), "Panthera"),
        (hk.next_level, (), "Tiger"),
        (hk.prev_level, (3,), "Primate"),
        (hk.next_level, (), "Great Apes"),
        (hk.next_level, (), "Pongo"),
        (hk.next_level, (), "Orangutan"),
        (hk.prev_level, (1,), "Homo"),
        (hk.next_level, (), "Human"),
        (hk.jump_to_level, ("01",), "Plant"),
        (hk.next_level, (), "Flowering Plant"),
        (hk.next_level, (), "Magnoliopsida"),
        (hk.next_level, (), "Fabales"),
        (hk.next_level, (), "Pae/Bean"),
        (hk.next_level, (), "Pisum"),
        (hk.next_level, (), "Pea"),
    ]
    entries: dict[str, str] = {}
    for step, args, name in steps:
        entries[step(*args)] = name
    return sorted(entries.items())


def run_example_a() -> None:
    """Print the taxonomy of example A in key order."""
    for key, name in example_a_entries():
        print(f"{key}: {name}")


def genre_lines(content: str, hk: HierarKey) -> Iterator[str]:
    """Yield ``key: entry`` lines for the headings and bullet items of wikitext."""
    prev_level = 0
    for item in _LINE_BREAK.split(content):
        if item.startswith("=="):
            hk.jump_to_level("0")
            prev_level = 0
        elif item.startswith("*"):
            level = len(item) - len(item.lstrip("*"))
            if level > prev_level:
                hk.next_level()
            elif level == prev_level:
                hk.next_leaf()
            else:
                hk.prev_level(prev_level - level)
            prev_level = level
        else:
            continue
        yield f"{hk.curr_leaf}: {_MARKUP.sub('', item)}"


def fetch_genre_wikitext(url: str = GENRE_URL) -> str:
    """Download a parse API response and return its wikitext.

    Raises OSError when the download fails and ValueError when the
    response is not JSON of the expected shape.
    """
    with urlopen(url) as resp:
        body = resp.read()
    data = json.loads(body)
    parse = data.get("parse") if isinstance(data, dict) else None
    if not isinstance(parse, dict):
        raise ValueError("parse data not found or has unexpected format")
    wikitext = parse.get("wikitext")
    content = wikitext.get("*") if isinstance(wikitext, dict) else None
    if not isinstance(content, str):
        raise ValueError("wikitext not found or has unexpected format")
    return content


def run_example_b() -> None:
    """Fetch the rock genre list and print it with hierarchical keys."""
    try:
        content = fetch_genre_wikitext()
    except OSError as exc:
        print(f"Error fetching data: {exc}")
        return
    except json.JSONDecodeError as exc:
        print(f"Error parsing JSON: {exc}")
        return
    except ValueError as exc:
        print(f"Error: {exc}")
        return
    for line in genre_lines(content, HierarKey(1, 2)):
        print(line)


def example_c_lines() -> list[str]:
    """Return the output lines of the navigation walk-through."""
    hk = HierarKey(1, 4, "")
    return [
        "Get the root leaf:",
        hk.next_leaf(),
        "Go up a few levels:",
        hk.next_level(),
        hk.next_level(),
        hk.next_leaf(),
        hk.next_level(),
        "Go down a few levels:",
        hk.prev_level(),
        hk.prev_level(),
        "Jump to an existing level:",
        hk.jump_to_level("0001.0001.0002"),
        "Jump to an arbitrary level:",
        hk.jump_to_level("7.6.5"),
        hk.next_leaf(),
        "Go a down 2 levels:",
        hk.prev_level(2),
        "Jump to a level in between:",
        hk.jump_to_level("2.1"),
        hk.next_leaf(),
    ]


def run_example_c() -> None:
    """Print the navigation walk-through of example C."""
    for line in example_c_lines():
        print(line)