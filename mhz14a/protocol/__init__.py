"""
MH-Z14A Protocol - Python implementation of the MH-Z14A / MH-Z19 UART protocol.

This package provides:
- Protocol constants
- Frame building, checksum and concentration decoding
- Serial transport layer
- Read-concentration client
"""

from .constants import (
    FRAME_SIZE, START_BYTE, SENSOR_ADDRESS, Command, GET_CONCENTRATION_REQUEST
)
from .exceptions import (
    MHZ14AProtocolError, FrameError, AcquisitionError, TransportError,
    ChecksumMismatchError
)
from .frame import (
    build_request, compute_checksum, verify_checksum, extract_checksum,
    extract_concentration, format_frame
)
from .transport import SerialTransport
from .client import AcquisitionState, MHZ14AClient, acquire_concentration

__all__ = [
    # Constants
    "FRAME_SIZE", "START_BYTE", "SENSOR_ADDRESS", "Command",
    "GET_CONCENTRATION_REQUEST",
    # Exceptions
    "MHZ14AProtocolError", "FrameError", "AcquisitionError", "TransportError",
    "ChecksumMismatchError",
    # Frame
    "build_request", "compute_checksum", "verify_checksum", "extract_checksum",
    "extract_concentration", "format_frame",
    # Transport
    "SerialTransport",
    # Client
    "AcquisitionState", "MHZ14AClient", "acquire_concentration",
]
