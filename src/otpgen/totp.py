"""RFC 6238 TOTP (Time-based One-Time Password) implementation."""

import calendar
import math
from datetime import datetime
from typing import Optional, Union

from otpgen.hashes import HashAlgorithm
from otpgen.otp import DEFAULT_DIGITS, generate_otp


# Time step in seconds per RFC 6238
DEFAULT_TIME_STEP = 30

Timestamp = Union[datetime, int, float]


def unix_seconds(timestamp: Timestamp) -> int:
    """
    Convert a timestamp to whole seconds since the Unix epoch.

    Naive datetimes are interpreted as UTC. Fractional seconds are floored.
    """
    if isinstance(timestamp, datetime):
        return calendar.timegm(timestamp.utctimetuple())
    return math.floor(timestamp)


def time_counter(timestamp: Timestamp, time_step: int = DEFAULT_TIME_STEP) -> int:
    """
    Map a timestamp to a TOTP counter value.

    Args:
        timestamp: A datetime or a number of Unix seconds.
        time_step: Length of one counter interval in seconds.

    Returns:
        floor(unix_seconds / time_step).

    Raises:
        ValueError: If time_step is not positive or the timestamp is before
            the Unix epoch.
    """
    if time_step <= 0:
        raise ValueError(f"Time step must be positive, got {time_step}")

    seconds = unix_seconds(timestamp)
    if seconds < 0:
        raise ValueError(f"Timestamp {timestamp!r} is before the Unix epoch")

    return seconds // time_step


def generate_totp(
    secret: bytes,
    timestamp: Timestamp,
    digits: int = DEFAULT_DIGITS,
    algorithm: Optional[HashAlgorithm] = None,
    time_step: int = DEFAULT_TIME_STEP,
) -> str:
    """
    Generate a TOTP code using RFC 6238.

    Args:
        secret: The raw TOTP secret.
        timestamp: The instant to generate the code for.
        digits: Number of digits in the output code (default: 6).
        algorithm: Hash function for the HMAC (default: SHA-1).
        time_step: Time step in seconds (default: 30).

    Returns:
        A zero-padded TOTP code string.
    """
    if algorithm is None:
        algorithm = HashAlgorithm.SHA1

    return generate_otp(algorithm, secret, time_counter(timestamp, time_step), digits)
