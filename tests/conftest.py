import io
import socket
import socketserver
import threading

import pytest


class _SilentHandler(socketserver.BaseRequestHandler):
    def handle(self):
        try:
            self.request.recv(1)
        except OSError:
            pass


class _Server(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True


@pytest.fixture
def listener():
    """A loopback TCP listener; yields its port."""
    with _Server(("127.0.0.1", 0), _SilentHandler) as server:
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        try:
            yield server.server_address[1]
        finally:
            server.shutdown()
            thread.join()


def _free_pair():
    for _ in range(50):
        with socket.socket() as s:
            s.bind(("127.0.0.1", 0))
            port = s.getsockname()[1]
        if port >= 65535:
            continue
        try:
            with socket.socket() as a, socket.socket() as b:
                a.bind(("127.0.0.1", port))
                b.bind(("127.0.0.1", port + 1))
        except OSError:
            continue
        return port
    pytest.skip("no two consecutive free loopback ports")


@pytest.fixture
def free_ports():
    """Two consecutive loopback ports with nothing listening; yields the first."""
    return _free_pair()


class RecordingReporter:
    def __init__(self):
        self.outcomes = []
        self.started = False
        self.completed = False
        self._lock = threading.Lock()

    def start(self, options):
        self.started = True

    def emit(self, outcome, verbose):
        with self._lock:
            self.outcomes.append(outcome)

    def complete(self):
        self.completed = True


@pytest.fixture
def recorder():
    return RecordingReporter()


@pytest.fixture
def stream():
    return io.StringIO()
