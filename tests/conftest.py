"""
Shared fixtures: a loopback UDP server that answers one status query
"""

import socket
import threading

import pytest


SAMPLE_RESPONSE = (
    b'\xff\xff\xff\xffstatusResponse\n'
    b'\\sv_hostname\\^1My^7Server\\mapname\\q3dm17\\g_gametype\\0\n'
    b'0 48 "^1Alice"\n'
    b'5 12 "^2Bob^^Cool"\n'
)


class FakeQ3Server:
    """Answers each datagram with a canned reply and records what it got."""

    def __init__(self, reply: bytes):
        self.reply = reply
        self.requests = []
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.sock.bind(('127.0.0.1', 0))
        self.sock.settimeout(0.1)
        self.address = self.sock.getsockname()
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._stop = threading.Event()

    @property
    def hostname(self) -> str:
        return f"{self.address[0]}:{self.address[1]}"

    def start(self):
        self._thread.start()

    def stop(self):
        self._stop.set()
        self._thread.join(timeout=2)
        self.sock.close()

    def _serve(self):
        while not self._stop.is_set():
            try:
                data, addr = self.sock.recvfrom(2048)
            except socket.timeout:
                continue
            except OSError:
                return
            self.requests.append(data)
            self.sock.sendto(self.reply, addr)


@pytest.fixture
def q3_server():
    server = FakeQ3Server(SAMPLE_RESPONSE)
    server.start()
    yield server
    server.stop()


@pytest.fixture
def make_q3_server():
    servers = []

    def factory(reply: bytes) -> FakeQ3Server:
        server = FakeQ3Server(reply)
        server.start()
        servers.append(server)
        return server

    yield factory

    for server in servers:
        server.stop()


@pytest.fixture
def silent_port():
    """A bound UDP port that never answers."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(('127.0.0.1', 0))
    yield sock.getsockname()
    sock.close()
