import json
from wsgiref.util import setup_testing_defaults

from patternkit.handlers import make_app, send_json


def _environ(path):
    environ = {}
    setup_testing_defaults(environ)
    environ["REQUEST_METHOD"] = "GET"
    environ["PATH_INFO"] = path
    return environ


def call(app, path):
    captured = {}

    def start_response(status, headers, exc_info=None):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(app(_environ(path), start_response))
    return captured["status"], captured["headers"], body


def test_send_json_endpoint():
    status, headers, body = call(make_app(), "/sendjson")
    assert status.startswith("200")
    user = json.loads(body)
    assert user["Name"] == "Bill"
    assert user["Email"] == "[email]"


def test_send_json_example_output():
    _, _, body = call(make_app(), "/sendjson")
    user = json.loads(body)
    assert (user["Name"], user["Email"]) == ("Bill", "[email]")


def test_send_json_content_type_and_body():
    captured = {}

    def start_response(status, headers, exc_info=None):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(send_json(_environ("/sendjson"), start_response))
    assert captured["status"].startswith("200")
    assert captured["headers"]["Content-Type"] == "application/json"
    assert body == b'{"Name":"Bill","Email":"[email]"}\n'
    assert captured["headers"]["Content-Length"] == str(len(body))


def test_unknown_path_is_not_found():
    status, _, body = call(make_app(), "/other")
    assert status.startswith("404")
    assert body == b"404 page not found\n"