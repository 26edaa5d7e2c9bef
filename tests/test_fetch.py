import io
import socket
import threading
import urllib.error
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from patternkit.fetch import fetch, main

BODY = b"hello from the test server\n" * 100
NOT_FOUND_BODY = b"missing"


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/":
            status, body = 200, BODY
        else:
            status, body = 404, NOT_FOUND_BODY
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def base_url(monkeypatch):
    for name in ("http_proxy", "HTTP_PROXY", "all_proxy", "ALL_PROXY"):
        monkeypatch.delenv(name, raising=False)
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def _closed_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_fetch_copies_to_every_destination(base_url):
    first, second = io.BytesIO(), io.BytesIO()
    assert fetch(base_url + "/", first, second) == len(BODY)
    assert first.getvalue() == BODY
    assert second.getvalue() == BODY


def test_fetch_without_destinations_counts_bytes(base_url):
    assert fetch(base_url + "/") == len(BODY)


def test_fetch_copies_error_body(base_url):
    out = io.BytesIO()
    assert fetch(base_url + "/nothing", out) == len(NOT_FOUND_BODY)
    assert out.getvalue() == NOT_FOUND_BODY


def test_fetch_unreachable_raises():
    with pytest.raises(urllib.error.URLError):
        fetch(f"http://127.0.0.1:{_closed_port()}/", io.BytesIO())


def test_main_writes_stdout_and_file(base_url, tmp_path, capsysbinary):
    path = tmp_path / "page.log"
    assert main([base_url + "/", str(path)]) == 0
    assert path.read_bytes() == BODY
    assert BODY in capsysbinary.readouterr().out


def test_main_reports_failure(capsys):
    assert main([f"http://127.0.0.1:{_closed_port()}/"]) == 1
    assert capsys.readouterr().err.strip() != ""
    assert "Traceback" not in capsys.readouterr().err