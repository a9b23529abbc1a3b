"""Greeting helpers and a tiny HTTP greeter."""

from __future__ import annotations

import io
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import TextIO


def hello(name: str = "") -> str:
    """Return a greeting for ``name``, or for the world when it is empty."""
    return "Hello, " + (name or "World")


def greet(writer: TextIO, name: str) -> None:
    """Write a greeting for ``name`` to ``writer``."""
    writer.write(f"Hello, {name}")


class GreeterHandler(BaseHTTPRequestHandler):
    """Answers every GET request with a greeting to the world."""

    def do_GET(self) -> None:
        buffer = io.StringIO()
        greet(buffer, "world")
        body = buffer.getvalue().encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


def make_server(host: str = "", port: int = 5000) -> ThreadingHTTPServer:
    """Create a greeter server bound to ``host`` and ``port``."""
    return ThreadingHTTPServer((host, port), GreeterHandler)


def main(argv: list[str] | None = None) -> int:
    """Serve greetings on port 5000 until interrupted."""
    with make_server() as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())