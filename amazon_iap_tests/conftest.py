import socketserver
import threading

import pytest


@pytest.fixture
def socket_server():
    """
    Factory for local servers that read the request and then hand the raw socket to `respond(sock, release)`.
    `release` is set at teardown, so responders waiting on it should stop.
    """
    release = threading.Event()
    servers = []

    def start(respond):
        class Handler(socketserver.BaseRequestHandler):
            def handle(self):
                self.request.recv(65536)
                try:
                    respond(self.request, release)
                except OSError:
                    pass  # client hung up on us

        server = socketserver.ThreadingTCPServer(('127.0.0.1', 0), Handler)
        server.daemon_threads = True
        threading.Thread(target=server.serve_forever, daemon=True).start()
        servers.append(server)
        return f'http://127.0.0.1:{server.server_address[1]}'

    yield start
    release.set()
    for server in servers:
        server.shutdown()
        server.server_close()


@pytest.fixture
def stalling_server_url(socket_server):
    "A server that answers every request with `100 Continue` and then never sends a final response"

    def respond(sock, release):
        sock.sendall(b'HTTP/1.1 100 Continue\r\n\r\n')
        release.wait(10)

    yield socket_server(respond)


@pytest.fixture
def aws_env(monkeypatch):
    # moto needs credentials & a region to be set, but never checks them
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'mock_key_id')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'mock_secret')
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-east-1')


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        'IAP_ENVIRONMENT',
        'IAP_SANDBOX_URL',
        'IAP_TIMEOUT',
        'IAP_DEVELOPER_SECRET',
        'SECRETSMANAGER_AMAZON_IAP_SECRET_NAME',
    ):
        monkeypatch.delenv(name, raising=False)
