"""Search a list of data feeds concurrently with matchers chosen by feed type."""

from __future__ import annotations

import json
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

log = logging.getLogger(__name__)

DATA_FILE = "data/data.json"


@dataclass(frozen=True)
class Feed:
    """A data source: its site name, its link and the kind of document it serves."""

    name: str
    uri: str
    type: str


@dataclass(frozen=True)
class Result:
    """One match: the field it was found in and that field's content."""

    field: str
    content: str


class Matcher(Protocol):
    """Searches one feed for a term."""

    def search(self, feed: Feed, search_term: str) -> list[Result]: ...


class DefaultMatcher:
    """The fallback matcher; it counts the feeds it is handed and finds nothing."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.searched = 0

    def search(self, feed: Feed, search_term: str) -> list[Result]:
        with self._lock:
            self.searched += 1
        log.debug("No matcher for feed type[%s] site[%s]", feed.type, feed.name)
        return []


class MatcherAlreadyRegistered(Exception):
    """Raised when a second matcher is registered for the same feed type."""

    def __init__(self, feed_type: str) -> None:
        super().__init__(f"{feed_type} Matcher already registered")
        self.feed_type = feed_type


_matchers: dict[str, Matcher] = {}
_matchers_lock = threading.Lock()


def register(feed_type: str, matcher: Matcher) -> None:
    """Make ``matcher`` the one used for feeds of ``feed_type``."""
    with _matchers_lock:
        if feed_type in _matchers:
            raise MatcherAlreadyRegistered(feed_type)
        log.info("Register %s matcher", feed_type)
        _matchers[feed_type] = matcher


def _matcher_for(feed_type: str) -> Matcher:
    with _matchers_lock:
        return _matchers.get(feed_type) or _matchers["default"]


def _feed_from_json(entry: dict) -> Feed:
    return Feed(
        name=entry.get("site", ""),
        uri=entry.get("link", ""),
        type=entry.get("type", ""),
    )


def retrieve_feeds(path: str | Path = DATA_FILE) -> list[Feed]:
    """Read the JSON list of feeds stored at ``path``."""
    with open(path, encoding="utf-8") as handle:
        entries = json.load(handle)
    if entries is None:
        return []
    return [_feed_from_json(entry) for entry in entries]


def match(matcher: Matcher, feed: Feed, search_term: str) -> list[Result]:
    """Search one feed; a failing search is logged and yields no results."""
    try:
        return list(matcher.search(feed, search_term))
    except Exception as exc:
        log.error("%s", exc)
        return []


def _display(results: list[Result]) -> None:
    for result in results:
        log.info("%s:\n%s\n\n", result.field, result.content)


def run(search_term: str, path: str | Path = DATA_FILE) -> list[Result]:
    """Search every feed concurrently, log each result and return them all."""
    feeds = retrieve_feeds(path)
    if not feeds:
        return []

    with ThreadPoolExecutor(max_workers=len(feeds)) as executor:
        futures = [
            executor.submit(match, _matcher_for(feed.type), feed, search_term)
            for feed in feeds
        ]
        results = [result for future in futures for result in future.result()]

    _display(results)
    return results


register("default", DefaultMatcher())