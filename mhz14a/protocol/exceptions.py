"""
Custom exceptions for the MH-Z14A protocol.
"""


class MHZ14AProtocolError(Exception):
    """Base exception for MH-Z14A protocol errors."""
    pass


class FrameError(MHZ14AProtocolError):
    """Buffer handed to the frame codec is not a valid frame."""

    def __init__(self, length: int, expected: int = 9):
        self.length = length
        self.expected = expected
        super().__init__(f"Frame must be {expected} bytes, got {length}")


class AcquisitionError(MHZ14AProtocolError):
    """A request/response exchange with the sensor failed."""
    pass


class TransportError(AcquisitionError):
    """Serial write or read did not complete."""
    pass


class ChecksumMismatchError(AcquisitionError):
    """Response checksum verification failed."""

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Checksum mismatch: expected 0x{expected:02X}, received 0x{received:02X}"
        )
