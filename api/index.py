#!/usr/bin/env python3
"""Serverless entry point: hands each inbound request to the banner app."""

import json
import sys
from http.server import BaseHTTPRequestHandler
from pathlib import Path
from urllib.parse import urlsplit

from werkzeug.test import EnvironBuilder, run_wsgi_app

print("[lambda] cold start", flush=True)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

wsgi_app = None
import_error: Exception | None = None

try:
    from banner_server.server import app as wsgi_app
except Exception as exc:  # pragma: no cover
    print(f"[lambda] banner_server import failed: {type(exc).__name__}: {exc}", flush=True)
    import_error = exc


class handler(BaseHTTPRequestHandler):
    """Routes every HTTP method, known or not, through the banner app."""

    server_version = "BannerServer/1.0"

    def __getattr__(self, name):
        # BaseHTTPRequestHandler looks up do_<METHOD>; answer all of them
        if name.startswith("do_"):
            return self._dispatch
        raise AttributeError(name)

    def log_message(self, format, *args):
        print(f"[lambda] {self.address_string()} - {format % args}", flush=True)

    def _request_environ(self) -> dict:
        length = int(self.headers.get("Content-Length") or 0)
        url = urlsplit(self.path)
        builder = EnvironBuilder(
            path=url.path or "/",
            query_string=url.query,
            method=self.command,
            headers=list(self.headers.items()),
            data=self.rfile.read(length) if length else None,
        )
        try:
            return builder.get_environ()
        finally:
            builder.close()

    def _write(self, status: int, headers, body: bytes) -> None:
        self.send_response(status)
        for name, value in headers:
            self.send_header(name, value)
        self.end_headers()
        if body and self.command != "HEAD":
            self.wfile.write(body)

    def _write_error(self, exc: BaseException) -> None:
        body = json.dumps({"error": type(exc).__name__, "message": str(exc)}).encode("utf-8")
        self._write(
            500,
            [("Content-Type", "application/json"), ("Content-Length", str(len(body)))],
            body,
        )

    def _dispatch(self) -> None:
        if wsgi_app is None:
            self._write_error(import_error or ImportError("banner_server not loaded"))
            return

        try:
            app_iter, status, headers = run_wsgi_app(
                wsgi_app, self._request_environ(), buffered=True
            )
            body = b"".join(app_iter)
        except Exception as exc:
            print(f"[lambda] request error: {type(exc).__name__}: {exc}", flush=True)
            self._write_error(exc)
            return

        self._write(int(status.split(" ", 1)[0]), headers.to_wsgi_list(), body)
