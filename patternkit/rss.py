"""An RSS matcher: fetches a feed over HTTP and searches its items."""

from __future__ import annotations

import argparse
import logging
import re
import sys
import urllib.error
import urllib.request
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from patternkit import feeds
from patternkit.feeds import Feed, Result

log = logging.getLogger(__name__)


@dataclass
class Item:
    """One ``<item>`` of a channel."""

    pub_date: str = ""
    title: str = ""
    description: str = ""
    link: str = ""
    guid: str = ""
    geo_rss_point: str = ""


@dataclass
class Image:
    """The channel's ``<image>``."""

    url: str = ""
    title: str = ""
    link: str = ""


@dataclass
class Channel:
    """The ``<channel>`` element of an RSS document."""

    title: str = ""
    description: str = ""
    link: str = ""
    pub_date: str = ""
    last_build_date: str = ""
    ttl: str = ""
    language: str = ""
    managing_editor: str = ""
    web_master: str = ""
    image: Image = field(default_factory=Image)
    items: list[Item] = field(default_factory=list)


@dataclass
class RSSDocument:
    """A whole ``<rss>`` document."""

    channel: Channel = field(default_factory=Channel)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element | None, name: str) -> ET.Element | None:
    if element is None:
        return None
    for child in element:
        if child.tag == name or _local(child.tag) == name:
            return child
    return None


def _text(element: ET.Element | None, name: str) -> str:
    child = _child(element, name)
    if child is None:
        return ""
    return "".join(child.itertext())


def _geo_point(element: ET.Element) -> str:
    for child in element:
        if child.tag == "georss:point" or (
            child.tag.startswith("{") and _local(child.tag) == "point"
        ):
            return "".join(child.itertext())
    return ""


def _parse_item(element: ET.Element) -> Item:
    return Item(
        pub_date=_text(element, "pubDate"),
        title=_text(element, "title"),
        description=_text(element, "description"),
        link=_text(element, "link"),
        guid=_text(element, "guid"),
        geo_rss_point=_geo_point(element),
    )


def _parse_channel(element: ET.Element | None) -> Channel:
    if element is None:
        return Channel()
    image = _child(element, "image")
    return Channel(
        title=_text(element, "title"),
        description=_text(element, "description"),
        link=_text(element, "link"),
        pub_date=_text(element, "pubDate"),
        last_build_date=_text(element, "lastBuildDate"),
        ttl=_text(element, "ttl"),
        language=_text(element, "language"),
        managing_editor=_text(element, "managingEditor"),
        web_master=_text(element, "webMaster"),
        image=Image(
            url=_text(image, "url"),
            title=_text(image, "title"),
            link=_text(image, "link"),
        ),
        items=[_parse_item(child) for child in element if _local(child.tag) == "item"],
    )


def parse_rss(data: str | bytes) -> RSSDocument:
    """Decode an RSS document; the root element must be ``<rss>``."""
    root = ET.fromstring(data)
    if _local(root.tag) != "rss":
        raise ValueError(f"expected element type <rss> but have <{_local(root.tag)}>")
    return RSSDocument(channel=_parse_channel(_child(root, "channel")))


class RSSMatcher:
    """Finds the search term in the titles and descriptions of an RSS feed."""

    def search(self, feed: Feed, search_term: str) -> list[Result]:
        log.info(
            "Search Feed Type[%s] Site[%s] For URI[%s]", feed.type, feed.name, feed.uri
        )
        pattern = re.compile(search_term)
        document = self.retrieve(feed)

        results: list[Result] = []
        for item in document.channel.items:
            if pattern.search(item.title):
                results.append(Result(field="Title", content=item.title))
            if pattern.search(item.description):
                results.append(Result(field="Description", content=item.description))
        return results

    def retrieve(self, feed: Feed) -> RSSDocument:
        """Download the feed's document and decode it."""
        if not feed.uri:
            raise ValueError("No rss feed uri provided")
        try:
            with urllib.request.urlopen(feed.uri) as response:
                status = response.status
                body = response.read()
        except urllib.error.HTTPError as exc:
            raise RuntimeError(f"HTTP Response Error {exc.code}") from None
        if status != 200:
            raise RuntimeError(f"HTTP Response Error {status}")
        return parse_rss(body)


feeds.register("rss", RSSMatcher())


def main(argv: list[str] | None = None) -> int:
    """Search every configured feed for a term and log what is found."""
    parser = argparse.ArgumentParser(description="Search RSS feeds for a term.")
    parser.add_argument("term", nargs="?", default="president")
    parser.add_argument("--data", default=feeds.DATA_FILE)
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stdout, level=logging.INFO, format="%(asctime)s %(message)s"
    )
    feeds.run(args.term, args.data)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())