"""Shared fixtures for javadoc_paranamer tests."""

import os
import sys
import threading
from functools import partial
from http.server import BaseHTTPRequestHandler, SimpleHTTPRequestHandler, ThreadingHTTPServer

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from javadoc_paranamer.utils.logger import Logger  # noqa: E402

from javadoc_pages import FIXTURES  # noqa: E402


class _QuietHandler(SimpleHTTPRequestHandler):
    def log_message(self, format, *args):
        pass


class _TruncatingHandler(BaseHTTPRequestHandler):
    """Serves a valid package-list; every page announces 5000 bytes and sends 13."""

    def do_GET(self):
        if self.path.endswith('/package-list'):
            body = b'com.example\n'
            self.send_response(200)
            self.send_header('Content-Length', str(len(body)))
            self.end_headers()
            self.wfile.write(body)
            return
        self.send_response(200)
        self.send_header('Content-Type', 'text/html')
        self.send_header('Content-Length', '5000')
        self.end_headers()
        self.wfile.write(b'<html>partial')
        self.close_connection = True

    def log_message(self, format, *args):
        pass


@pytest.fixture(autouse=True)
def reset_logger():
    """Each test gets a fresh package logger bound to the current stderr."""
    Logger.reset()
    yield
    Logger.reset()


@pytest.fixture
def http_servers():
    """Start HTTP servers on free local ports; returns a function giving the base URL."""
    servers = []

    def start(handler):
        server = ThreadingHTTPServer(('127.0.0.1', 0), handler)
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        servers.append(server)
        return f"http://127.0.0.1:{server.server_address[1]}"

    yield start

    for server in servers:
        server.shutdown()
        server.server_close()


@pytest.fixture
def serve_directory(http_servers):
    """Serve a directory over HTTP; returns a function giving the base URL."""
    return lambda directory: http_servers(partial(_QuietHandler, directory=str(directory)))


@pytest.fixture
def truncating_site(http_servers):
    """Base URL of a site whose pages are cut short mid-body."""
    return http_servers(_TruncatingHandler) + '/docs'


@pytest.fixture
def jdk17_root():
    return FIXTURES / 'jdk17'
