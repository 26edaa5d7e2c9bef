"""A tiny WSGI service with one JSON endpoint."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Callable, Iterable
from wsgiref.simple_server import make_server

log = logging.getLogger(__name__)

DEFAULT_PORT = 4000

StartResponse = Callable[..., object]
WSGIApp = Callable[[dict, StartResponse], Iterable[bytes]]


def send_json(environ: dict, start_response: StartResponse) -> list[bytes]:
    """Answer with a small JSON document describing a user."""
    user = {"Name": "Bill", "Email": "[email]"}
    body = (json.dumps(user, separators=(",", ":")) + "\n").encode("utf-8")
    start_response(
        "200 OK",
        [("Content-Type", "application/json"), ("Content-Length", str(len(body)))],
    )
    return [body]


def _not_found(environ: dict, start_response: StartResponse) -> list[bytes]:
    body = b"404 page not found\n"
    start_response(
        "404 Not Found",
        [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("Content-Length", str(len(body))),
        ],
    )
    return [body]


def make_app() -> WSGIApp:
    """Return a WSGI application that routes ``/sendjson`` to :func:`send_json`."""
    routes: dict[str, WSGIApp] = {"/sendjson": send_json}

    def app(environ: dict, start_response: StartResponse) -> Iterable[bytes]:
        handler = routes.get(environ.get("PATH_INFO", ""), _not_found)
        return handler(environ, start_response)

    return app


def serve(port: int = DEFAULT_PORT) -> None:
    """Serve the application on ``port`` until interrupted."""
    with make_server("", port, make_app()) as server:
        log.info("listener : Started : Listening on :%d", port)
        server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    """Start the JSON service."""
    parser = argparse.ArgumentParser(description="Serve the /sendjson endpoint.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        serve(args.port)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())