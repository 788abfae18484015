"""
High-level protocol client.

Runs a single read-concentration exchange against a transport.
"""

import logging
from enum import Enum

from .constants import FRAME_SIZE
from .frame import (
    build_request, verify_checksum, extract_checksum,
    extract_concentration, format_frame,
)
from .exceptions import TransportError, ChecksumMismatchError

logger = logging.getLogger(__name__)


class AcquisitionState(Enum):
    """Exchange state."""
    IDLE = 0
    AWAITING_RESPONSE = 1
    DONE = 2
    FAILED = 3


class MHZ14AClient:
    """
    Client for the MH-Z14A read-concentration exchange.

    The transport must provide send(data) -> int, which writes all bytes
    or raises TransportError, and receive(size) -> bytes, which returns
    exactly size bytes or raises TransportError.
    """

    def __init__(self, transport, ignore_checksum: bool = False):
        """
        Initialize client.

        Args:
            transport: Transport instance (e.g. SerialTransport)
            ignore_checksum: Return the concentration even if the
                response checksum does not match
        """
        self.transport = transport
        self.ignore_checksum = ignore_checksum
        self.state = AcquisitionState.IDLE

    def read_concentration(self) -> int:
        """
        Request and decode one concentration reading.

        Returns:
            Concentration (uint16)

        Raises:
            TransportError: If the request could not be sent or the
                response was incomplete
            ChecksumMismatchError: If the response checksum is wrong and
                ignore_checksum is not set
        """
        self.state = AcquisitionState.IDLE
        try:
            request = build_request()
            self._send(request)
            self.state = AcquisitionState.AWAITING_RESPONSE

            response = self._receive()
        except TransportError:
            self.state = AcquisitionState.FAILED
            raise

        valid, checksum = verify_checksum(response)
        if not valid:
            if self.ignore_checksum:
                logger.warning(f"Ignored invalid checksum: 0x{checksum:02x}!")
            else:
                logger.error(f"Invalid checksum: 0x{checksum:02x}!")
                self.state = AcquisitionState.FAILED
                raise ChecksumMismatchError(checksum, extract_checksum(response))

        concentration = extract_concentration(response)
        self.state = AcquisitionState.DONE
        logger.debug(f"Concentration: {concentration}")
        return concentration

    def _send(self, request: bytes) -> None:
        try:
            count = self.transport.send(request)
        except OSError as e:
            raise TransportError(f"Couldn't send request: {e}") from e

        if count != len(request):
            raise TransportError(f"Partial write: sent {count} of {len(request)} bytes")

    def _receive(self) -> bytes:
        try:
            response = self.transport.receive(FRAME_SIZE)
        except OSError as e:
            raise TransportError(f"Couldn't receive response: {e}") from e

        if len(response) != FRAME_SIZE:
            raise TransportError(
                f"Expected {FRAME_SIZE} bytes, received {len(response)}"
            )
        logger.debug(f"Response frame: {format_frame(response)}")
        return bytes(response)


def acquire_concentration(transport, ignore_checksum: bool = False) -> int:
    """
    Run one read-concentration exchange.

    Args:
        transport: Transport instance (e.g. SerialTransport)
        ignore_checksum: Tolerate a response checksum mismatch

    Returns:
        Concentration (uint16)
    """
    return MHZ14AClient(transport, ignore_checksum=ignore_checksum).read_concentration()
