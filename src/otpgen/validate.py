"""Constant-time validation of one-time passwords."""

from cryptography.hazmat.primitives import constant_time


def equal_otp(a: str, b: str) -> bool:
    """
    Compare two OTP strings without leaking where they differ.

    Args:
        a: The expected code.
        b: The presented code.

    Returns:
        True if both strings are identical, including length.
    """
    return constant_time.bytes_eq(a.encode("utf-8"), b.encode("utf-8"))
