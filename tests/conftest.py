"""
Test fixtures: a stub monero-wallet-rpc served over HTTP.
"""

import json
import os
import socket
import sys
import threading
from http.server import HTTPServer, BaseHTTPRequestHandler

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from walletrpc import Config, WalletClient, ErrorCode


class StubWallet:
    """
    Canned answers per method plus a record of what was received.

    results:   method -> result object
    errors:    method -> (code, message)
    statuses:  method -> HTTP status to answer with
    responses: method -> callable(request) returning the raw response body
    """

    def __init__(self):
        self.url = ''
        self.results = {}
        self.errors = {}
        self.statuses = {}
        self.responses = {}
        self.requests = []
        self.headers = []

    def last_request(self):
        return self.requests[-1]


class StubHandler(BaseHTTPRequestHandler):
    """HTTP handler answering like monero-wallet-rpc."""

    def log_message(self, format, *args):
        pass

    def do_POST(self):
        stub = self.server.stub

        if self.path != '/json_rpc':
            self._send(404, b'not found', 'text/plain')
            return

        content_length = int(self.headers.get('Content-Length', 0))
        try:
            request = json.loads(self.rfile.read(content_length).decode('utf-8'))
        except json.JSONDecodeError:
            self._send(400, b'bad request', 'text/plain')
            return

        stub.requests.append(request)
        stub.headers.append(self.headers)

        method = request.get('method')
        request_id = request.get('id')

        if method in stub.statuses:
            self._send(stub.statuses[method], b'error', 'text/plain')
            return

        if method in stub.responses:
            body = stub.responses[method](request)
            if isinstance(body, bytes):
                self._send(200, body, 'application/json')
            else:
                self._send_json(body)
            return

        if method in stub.errors:
            code, message = stub.errors[method]
            self._send_json({
                'jsonrpc': '2.0',
                'error': {'code': code, 'message': message},
                'id': request_id,
            })
            return

        if method in stub.results:
            self._send_json({
                'jsonrpc': '2.0',
                'result': stub.results[method],
                'id': request_id,
            })
            return

        self._send_json({
            'jsonrpc': '2.0',
            'error': {
                'code': int(ErrorCode.UNKNOWN),
                'message': 'test this in curl with the real rpc',
            },
            'id': request_id,
        })

    def _send_json(self, response):
        self._send(200, json.dumps(response).encode('utf-8'), 'application/json')

    def _send(self, status, body, content_type):
        self.send_response(status)
        self.send_header('Content-Type', content_type)
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        self.wfile.write(body)


@pytest.fixture
def stub_wallet():
    """Running stub wallet-rpc on an ephemeral port."""
    server = HTTPServer(('127.0.0.1', 0), StubHandler)
    server.stub = StubWallet()
    server.stub.url = f"http://127.0.0.1:{server.server_address[1]}/json_rpc"

    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    yield server.stub

    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


@pytest.fixture
def client(stub_wallet):
    """WalletClient pointed at the stub wallet."""
    return WalletClient(Config(address=stub_wallet.url, timeout=5))


@pytest.fixture
def closed_port():
    """A local port nothing listens on."""
    sock = socket.socket()
    sock.bind(('127.0.0.1', 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
