"""RFC 4226 dynamic truncation shared by HOTP and TOTP."""

from otpgen.hashes import HashAlgorithm, hmac_digest


DEFAULT_DIGITS = 6
MAX_COUNTER = 2**64 - 1


class DigestTooShortError(ValueError):
    """Raised when a digest is too short for dynamic truncation."""


def truncate(digest: bytes) -> int:
    """
    Extract a 31-bit integer from an HMAC digest (RFC 4226, Section 5.3).

    Args:
        digest: The HMAC digest.

    Returns:
        A non-negative integer below 2**31.

    Raises:
        DigestTooShortError: If the digest does not hold 4 bytes at the offset.
    """
    if not digest:
        raise DigestTooShortError("Cannot truncate an empty digest")

    offset = digest[-1] & 0x0F
    if offset + 4 > len(digest):
        raise DigestTooShortError(
            f"Digest of {len(digest)} bytes is too short for offset {offset}"
        )

    return (
        ((digest[offset] & 0x7F) << 24)
        | ((digest[offset + 1] & 0xFF) << 16)
        | ((digest[offset + 2] & 0xFF) << 8)
        | (digest[offset + 3] & 0xFF)
    )


def generate_otp(
    algorithm: HashAlgorithm, secret: bytes, counter: int, digits: int = DEFAULT_DIGITS
) -> str:
    """
    Generate an HMAC-based one-time password.

    Args:
        algorithm: Hash function used for the HMAC.
        secret: The raw shared secret.
        counter: Moving factor, an unsigned 64-bit integer.
        digits: Number of digits in the output code. Zero yields "".

    Returns:
        A zero-padded OTP string of exactly `digits` characters.

    Raises:
        ValueError: If the counter is outside the unsigned 64-bit range or
            digits is negative.
        DigestTooShortError: If the digest cannot be truncated.
    """
    if not 0 <= counter <= MAX_COUNTER:
        raise ValueError(f"Counter must be an unsigned 64-bit integer, got {counter}")
    if digits < 0:
        raise ValueError(f"Number of digits must not be negative, got {digits}")

    # Convert counter to 8-byte big-endian integer
    counter_bytes = counter.to_bytes(8, byteorder="big")

    code = truncate(hmac_digest(algorithm, secret, counter_bytes))

    if digits == 0:
        return ""
    return f"{code % 10**digits:0{digits}d}"
