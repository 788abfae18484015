"""Shared fixtures for protocol tests."""

import pytest


class FakeTransport:
    """In-memory transport that replays a canned response."""

    def __init__(self, response=b"", send_count=None, send_error=None, receive_error=None):
        self.response = bytes(response)
        self.send_count = send_count
        self.send_error = send_error
        self.receive_error = receive_error
        self.sent = []
        self.receive_calls = 0

    def send(self, data):
        if self.send_error is not None:
            raise self.send_error
        self.sent.append(bytes(data))
        return len(data) if self.send_count is None else self.send_count

    def receive(self, size):
        self.receive_calls += 1
        if self.receive_error is not None:
            raise self.receive_error
        return self.response[:size]


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def good_response():
    """Sensor reply carrying 544 with a valid checksum."""
    return bytes([0xFF, 0x86, 0x02, 0x20, 0x00, 0x00, 0x00, 0x00, 0x58])


@pytest.fixture
def corrupted_response():
    """Same reply as good_response with a wrong trailing byte."""
    return bytes([0xFF, 0x86, 0x02, 0x20, 0x00, 0x00, 0x00, 0x00, 0x69])
