import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from adminkit.httpclient import http_get, http_post


class _Handler(BaseHTTPRequestHandler):
    def _reply(self, status, payload):
        self.send_response(status)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def do_GET(self):
        if self.path == "/missing":
            self._reply(404, b"gone")
            return
        payload = json.dumps(
            {
                "accept": self.headers.get("Accept"),
                "content_type": self.headers.get("Content-Type"),
            }
        ).encode()
        self._reply(200, payload)

    def do_POST(self):
        length = int(self.headers["Content-Length"])
        body = self.rfile.read(length)
        payload = json.dumps(
            {"content_type": self.headers.get("Content-Type"), "body": body.decode()}
        ).encode()
        self._reply(200, payload)

    def log_message(self, *args):
        pass


@pytest.fixture()
def server_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()


def test_get_sends_default_headers(server_url):
    echoed = json.loads(http_get(server_url + "/echo"))
    assert echoed["accept"] == "*/*"
    assert echoed["content_type"] == "application/json"


def test_get_returns_body_of_error_status(server_url):
    assert http_get(server_url + "/missing") == "gone"


def test_post_sends_json_body(server_url):
    data = {"name": "box", "items": [1, 2]}
    echoed = json.loads(http_post(server_url + "/submit", data, "application/json"))
    assert echoed["content_type"] == "application/json"
    assert json.loads(echoed["body"]) == data


def test_post_to_closed_port_raises():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    with pytest.raises(OSError):
        http_post(f"http://127.0.0.1:{port}/", {"a": 1}, "application/json")