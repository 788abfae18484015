#!/usr/bin/env python3
"""
MH-Z14A Reader - CLI Entry Point

Reads one concentration value from the sensor and prints it.

Usage:
    mhz14a
    mhz14a --path /dev/ttyUSB0
    mhz14a --ignore-checksum --log-level DEBUG
    python -m mhz14a.main --version
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .protocol import (
    SerialTransport, AcquisitionError, ChecksumMismatchError, acquire_concentration
)
from .protocol.constants import DEFAULT_PORT

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_LOG_LEVEL = "WARNING"


def _env_log_level() -> str:
    """Log level from MHZ14A_LOG_LEVEL, or the default if unset or unknown."""
    level = os.environ.get("MHZ14A_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="mhz14a",
        description="Read data from the MH-Z14A CO2 sensor.",
    )
    parser.add_argument(
        "--path",
        default=os.environ.get("MHZ14A_PORT", DEFAULT_PORT),
        help="Serial device the sensor is attached to (default: %(default)s)",
    )
    parser.add_argument(
        "--ignore-checksum",
        action="store_true",
        help="Ignore data checksums.",
    )
    parser.add_argument(
        "--log-level",
        default=_env_log_level(),
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging threshold (default: %(default)s)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"mhz14a {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one acquisition.

    Returns:
        Process exit code (0 on success, 1 on failure)
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        with SerialTransport(port=args.path) as transport:
            concentration = acquire_concentration(
                transport, ignore_checksum=args.ignore_checksum
            )
    except ChecksumMismatchError:
        # already logged with the computed checksum
        return 1
    except AcquisitionError as e:
        logger.error(f"Acquisition failed: {e}")
        return 1

    print(concentration)
    return 0


if __name__ == "__main__":
    sys.exit(main())
