import re
import threading
import xml.etree.ElementTree as ET
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from patternkit.feeds import Feed, MatcherAlreadyRegistered, Result, register
from patternkit.rss import RSSMatcher, parse_rss

FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss>
<channel>
    <title>Going Go Programming</title>
    <description>Programming articles : http://www.example.com/</description>
    <link>http://www.example.com/</link>
    <item>
        <pubDate>Sun, 15 Mar 2015 15:04:00 +0000</pubDate>
        <title>Object Oriented Programming Mechanics</title>
        <description>Go is an object oriented language.</description>
        <link>http://www.example.com/2015/03/object-oriented</link>
    </item>
</channel>
</rss>"""


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/":
            body = (FEED + "\n").encode("utf-8")
            self.send_response(200)
            self.send_header("Content-Type", "application/xml")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)
        else:
            self.send_response(404)
            self.send_header("Content-Length", "0")
            self.end_headers()

    def log_message(self, format, *args):
        pass


@pytest.fixture
def server_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


def test_download_decodes_one_item(server_url):
    document = RSSMatcher().retrieve(Feed(name="mock", uri=server_url + "/", type="rss"))
    assert len(document.channel.items) == 1
    assert document.channel.title == "Going Go Programming"


def test_parse_rss_fields():
    document = parse_rss(FEED.encode("utf-8"))
    channel = document.channel
    assert channel.description == "Programming articles : http://www.example.com/"
    assert channel.link == "http://www.example.com/"
    item = channel.items[0]
    assert item.pub_date == "Sun, 15 Mar 2015 15:04:00 +0000"
    assert item.title == "Object Oriented Programming Mechanics"
    assert item.description == "Go is an object oriented language."
    assert item.link == "http://www.example.com/2015/03/object-oriented"


def test_parse_rss_rejects_other_root():
    with pytest.raises(ValueError):
        parse_rss("<feed><channel/></feed>")


def test_parse_rss_malformed_raises():
    with pytest.raises((ET.ParseError, ValueError)):
        parse_rss("<rss><channel>")


def test_search_matches_title(server_url):
    results = RSSMatcher().search(Feed(name="mock", uri=server_url + "/", type="rss"), "Object")
    assert results == [Result(field="Title", content="Object Oriented Programming Mechanics")]


def test_search_matches_description(server_url):
    results = RSSMatcher().search(Feed(name="mock", uri=server_url + "/", type="rss"), "object")
    assert results == [Result(field="Description", content="Go is an object oriented language.")]


def test_search_no_match(server_url):
    assert RSSMatcher().search(Feed(name="mock", uri=server_url + "/", type="rss"), "president") == []


def test_search_invalid_pattern_raises(server_url):
    with pytest.raises(re.error):
        RSSMatcher().search(Feed(name="mock", uri=server_url + "/", type="rss"), "(")


def test_retrieve_without_uri_raises():
    with pytest.raises(ValueError, match="No rss feed uri provided"):
        RSSMatcher().retrieve(Feed(name="empty", uri="", type="rss"))


def test_retrieve_bad_status_raises(server_url):
    with pytest.raises(RuntimeError, match="HTTP Response Error 404"):
        RSSMatcher().retrieve(Feed(name="mock", uri=server_url + "/missing", type="rss"))


def test_rss_matcher_registered():
    with pytest.raises(MatcherAlreadyRegistered):
        register("rss", RSSMatcher())