"""
Serial transport layer.

Blocking, single-threaded serial I/O with "write all or fail" and
"read exactly or fail" semantics.
"""

import serial
import logging
from typing import Optional

from .constants import DEFAULT_PORT, DEFAULT_BAUDRATE
from .exceptions import TransportError

logger = logging.getLogger(__name__)


class SerialTransport:
    """Serial communication transport layer."""

    def __init__(
        self,
        port: str = DEFAULT_PORT,
        baudrate: int = DEFAULT_BAUDRATE,
        timeout: Optional[float] = None
    ):
        """
        Initialize serial transport.

        Args:
            port: Serial port name (e.g., '/dev/ttyS0' or 'COM3')
            baudrate: Baud rate (default: 9600)
            timeout: Read timeout in seconds (None blocks until all bytes arrive)
        """
        self.port = port
        self.baudrate = baudrate
        self.timeout = timeout
        self._serial: Optional[serial.Serial] = None

    def open(self) -> None:
        """Open and configure the serial port."""
        try:
            self._serial = serial.Serial(
                port=self.port,
                baudrate=self.baudrate,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                xonxoff=False,
                rtscts=False,
                timeout=self.timeout
            )
            logger.info(f"Opened serial port {self.port} at {self.baudrate} bps")

        except serial.SerialException as e:
            raise TransportError(f"Failed to open {self.port}: {e}") from e

    def close(self) -> None:
        """Close serial port."""
        if self._serial:
            try:
                self._serial.close()
            except serial.SerialException as e:
                logger.warning(f"Error closing {self.port}: {e}")
            self._serial = None
            logger.info(f"Closed serial port {self.port}")

    def send(self, data: bytes) -> int:
        """
        Send all bytes over the serial port.

        Args:
            data: Bytes to send

        Returns:
            Number of bytes sent (always len(data))

        Raises:
            TransportError: If the port is not open or the write is incomplete
        """
        if not self.is_open:
            raise TransportError("Serial port not open")

        try:
            count = self._serial.write(data)
        except serial.SerialException as e:
            raise TransportError(f"Send failed: {e}") from e

        logger.debug(f"TX ({count} bytes): {data.hex(' ')}")
        if count != len(data):
            raise TransportError(f"Partial write: sent {count} of {len(data)} bytes")
        return count

    def receive(self, size: int) -> bytes:
        """
        Receive exactly size bytes.

        Args:
            size: Number of bytes to read

        Returns:
            Received bytes

        Raises:
            TransportError: If the port is not open, the read fails or
                fewer than size bytes arrive before the timeout
        """
        if not self.is_open:
            raise TransportError("Serial port not open")

        try:
            data = self._serial.read(size)
        except serial.SerialException as e:
            raise TransportError(f"Receive failed: {e}") from e

        logger.debug(f"RX ({len(data)} bytes): {data.hex(' ')}")
        if len(data) != size:
            raise TransportError(f"Short read: received {len(data)} of {size} bytes")
        return data

    @property
    def is_open(self) -> bool:
        """Check if port is open."""
        return self._serial is not None and self._serial.is_open

    def __enter__(self) -> 'SerialTransport':
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        status = "open" if self.is_open else "closed"
        return f"SerialTransport({self.port}, {self.baudrate}, {status})"
