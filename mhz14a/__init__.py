"""
MH-Z14A Reader Package

Reads the gas concentration from an MH-Z14A / MH-Z19 sensor over UART.
"""

from .protocol import acquire_concentration, SerialTransport

__version__ = "0.1.0"
__all__ = ["acquire_concentration", "SerialTransport", "__version__"]
