"""
Protocol constants for the MH-Z14A / MH-Z19 UART interface.

Every frame, in both directions, is exactly 9 bytes:
[START][ADDR][D0][D1][D2][D3][D4][D5][CHECKSUM]
"""

from enum import IntEnum

# Frame layout
FRAME_SIZE = 9
START_BYTE = 0xFF
SENSOR_ADDRESS = 0x01

# Byte offsets inside a frame
CHECKSUM_START = 1      # first byte covered by the checksum
CHECKSUM_END = 7        # exclusive; byte 7 is reserved and not covered
CHECKSUM_INDEX = 8
CONCENTRATION_HIGH_INDEX = 2
CONCENTRATION_LOW_INDEX = 3

# UART settings required by the sensor (8N1, no flow control)
DEFAULT_PORT = "/dev/ttyS0"
DEFAULT_BAUDRATE = 9600


class Command(IntEnum):
    """Command codes (Host -> Sensor)."""
    READ_CONCENTRATION = 0x86


# UART command to read the gas concentration.
GET_CONCENTRATION_REQUEST = bytes(
    [START_BYTE, SENSOR_ADDRESS, Command.READ_CONCENTRATION, 0x00, 0x00, 0x00, 0x00, 0x00, 0x79]
)
