"""RFC 4226 HOTP (HMAC-based One-Time Password) implementation."""

from otpgen.hashes import HashAlgorithm
from otpgen.otp import DEFAULT_DIGITS, generate_otp


def generate_hotp(secret: bytes, counter: int, digits: int = DEFAULT_DIGITS) -> str:
    """
    Generate an HOTP code using RFC 4226.

    Args:
        secret: The raw HOTP secret.
        counter: The moving counter value (incremented after each use).
        digits: Number of digits in the output code (default: 6).

    Returns:
        A zero-padded HOTP code string.
    """
    return generate_otp(HashAlgorithm.SHA1, secret, counter, digits)
