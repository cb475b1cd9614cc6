import queue
import socket
import socketserver
import threading
import time

import pytest

from ledstrip import led_controller


class _FrameHandler(socketserver.BaseRequestHandler):
    def handle(self):
        chunks = []
        while True:
            data = self.request.recv(1024)
            if not data:
                break
            chunks.append(data)
        self.server.frames.put(b"".join(chunks))


class StripServer(socketserver.TCPServer):
    allow_reuse_address = True

    def __init__(self):
        super().__init__(("127.0.0.1", 0), _FrameHandler)
        self.frames = queue.Queue()

    @property
    def port(self) -> int:
        return self.server_address[1]

    def next_frame(self, timeout: float = 2.0) -> bytes:
        return self.frames.get(timeout=timeout)


@pytest.fixture
def strip_server():
    """Loopback stand-in for the strip that records every frame it receives"""
    server = StripServer()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()
    thread.join(timeout=2)


@pytest.fixture
def closed_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class SlowSender:
    """send_frame stand-in that records how many sends overlap"""

    def __init__(self, delay=0.05):
        self.delay = delay
        self.active = 0
        self.peak = 0
        self.frames = []
        self._guard = threading.Lock()

    def __call__(self, host, port, frame, timeout=None):
        with self._guard:
            self.active += 1
            self.peak = max(self.peak, self.active)
        time.sleep(self.delay)
        with self._guard:
            self.active -= 1
            self.frames.append(frame)


@pytest.fixture
def slow_sender(monkeypatch):
    """Replace send_frame with a slow recorder of overlapping sends"""
    sender = SlowSender()
    monkeypatch.setattr(led_controller, "send_frame", sender)
    return sender
