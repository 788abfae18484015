"""
Frame building, checksum and payload decoding.

Frame Format: [0xFF][ADDR][HIGH][LOW][R][R][R][R][CHECKSUM]
- 0xFF: Start byte, not covered by the checksum
- ADDR: Sensor address (request) or command echo (response)
- HIGH/LOW: Concentration, big-endian uint16 (response only)
- R: Reserved
- CHECKSUM: Negated 8-bit sum of bytes 1..6

All functions are pure and operate on a single 9-byte buffer.
"""

from typing import Sequence, Tuple, Union

from .constants import (
    FRAME_SIZE,
    CHECKSUM_START, CHECKSUM_END, CHECKSUM_INDEX,
    CONCENTRATION_HIGH_INDEX, CONCENTRATION_LOW_INDEX,
    GET_CONCENTRATION_REQUEST,
)
from .exceptions import FrameError

FrameLike = Union[bytes, bytearray, Sequence[int]]


def _check_frame(frame: FrameLike) -> None:
    if len(frame) != FRAME_SIZE:
        raise FrameError(len(frame), FRAME_SIZE)


def build_request() -> bytes:
    """
    Build the read-concentration request frame.

    Returns:
        The fixed 9-byte request ``FF 01 86 00 00 00 00 00 79``
    """
    return GET_CONCENTRATION_REQUEST


def compute_checksum(frame: FrameLike) -> int:
    """
    Calculate the checksum of a frame.

    Bytes 1..6 are summed with 8-bit wraparound, then the result is
    ``(0xFF - sum) + 1``, again wrapped to 8 bits. A sum of 0xFF therefore
    gives 0x01 and a sum of 0x00 gives 0x00.

    Args:
        frame: 9-byte frame (the trailing checksum byte is ignored)

    Returns:
        8-bit checksum

    Raises:
        FrameError: If the frame is not 9 bytes long
    """
    _check_frame(frame)

    total = 0
    for byte in frame[CHECKSUM_START:CHECKSUM_END]:
        total = (total + byte) & 0xFF

    checksum = (0xFF - total) & 0xFF
    return (checksum + 1) & 0xFF


def extract_checksum(frame: FrameLike) -> int:
    """Get the checksum byte a frame claims to have."""
    _check_frame(frame)
    return frame[CHECKSUM_INDEX]


def verify_checksum(frame: FrameLike) -> Tuple[bool, int]:
    """
    Verify the trailing checksum byte of a frame.

    Args:
        frame: 9-byte frame

    Returns:
        Tuple of (valid, checksum)
        - valid: True if the trailing byte matches the computed checksum
        - checksum: The computed checksum, also on mismatch
    """
    claimed = extract_checksum(frame)
    actual = compute_checksum(frame)
    return (claimed == actual, actual)


def extract_concentration(frame: FrameLike) -> int:
    """
    Decode the concentration field of a response frame.

    The checksum is not checked here; call verify_checksum() first if
    integrity matters.

    Returns:
        Concentration as uint16 (0-65535)
    """
    _check_frame(frame)
    return (frame[CONCENTRATION_HIGH_INDEX] << 8) | frame[CONCENTRATION_LOW_INDEX]


def format_frame(frame: FrameLike) -> str:
    """Render a frame as space separated hex for logging."""
    return bytes(frame).hex(' ')
