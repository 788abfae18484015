"""Tests for the serial transport layer."""

from unittest import mock

import pytest
import serial

from mhz14a.protocol.exceptions import TransportError
from mhz14a.protocol.transport import SerialTransport


@pytest.fixture
def mock_serial():
    with mock.patch("mhz14a.protocol.transport.serial.Serial") as serial_cls:
        port = serial_cls.return_value
        port.is_open = True
        yield serial_cls


def test_open_configures_8n1(mock_serial):
    transport = SerialTransport("/dev/ttyUSB0")
    transport.open()

    mock_serial.assert_called_once_with(
        port="/dev/ttyUSB0",
        baudrate=9600,
        bytesize=serial.EIGHTBITS,
        parity=serial.PARITY_NONE,
        stopbits=serial.STOPBITS_ONE,
        xonxoff=False,
        rtscts=False,
        timeout=None,
    )
    assert transport.is_open


def test_open_failure_raises_transport_error(mock_serial):
    mock_serial.side_effect = serial.SerialException("no such device")
    transport = SerialTransport("/dev/missing")
    with pytest.raises(TransportError):
        transport.open()
    assert not transport.is_open


def test_send_writes_all_bytes(mock_serial):
    mock_serial.return_value.write.return_value = 9
    with SerialTransport() as transport:
        assert transport.send(bytes(9)) == 9
    mock_serial.return_value.write.assert_called_once_with(bytes(9))


def test_send_partial_write(mock_serial):
    mock_serial.return_value.write.return_value = 4
    with SerialTransport() as transport:
        with pytest.raises(TransportError):
            transport.send(bytes(9))


def test_send_serial_exception(mock_serial):
    mock_serial.return_value.write.side_effect = serial.SerialException("io")
    with SerialTransport() as transport:
        with pytest.raises(TransportError):
            transport.send(bytes(9))


def test_receive_exact(mock_serial):
    mock_serial.return_value.read.return_value = bytes(range(9))
    with SerialTransport() as transport:
        assert transport.receive(9) == bytes(range(9))
    mock_serial.return_value.read.assert_called_once_with(9)


def test_receive_short_read(mock_serial):
    """A read timeout returns fewer bytes than requested."""
    mock_serial.return_value.read.return_value = b"\xff\x86"
    with SerialTransport(timeout=0.5) as transport:
        with pytest.raises(TransportError):
            transport.receive(9)


def test_send_and_receive_require_open_port():
    transport = SerialTransport()
    with pytest.raises(TransportError):
        transport.send(bytes(9))
    with pytest.raises(TransportError):
        transport.receive(9)


def test_context_manager_closes(mock_serial):
    with SerialTransport() as transport:
        pass
    mock_serial.return_value.close.assert_called_once()
    assert not transport.is_open


def test_repr(mock_serial):
    transport = SerialTransport("/dev/ttyS1")
    assert repr(transport) == "SerialTransport(/dev/ttyS1, 9600, closed)"
    transport.open()
    assert repr(transport) == "SerialTransport(/dev/ttyS1, 9600, open)"
