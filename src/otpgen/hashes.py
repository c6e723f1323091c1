"""Keyed-hash (HMAC) primitives used by OTP generation."""

import enum
import hashlib
import hmac


class UnknownHashAlgorithmError(ValueError):
    """Raised when a hash algorithm name is not supported."""


class HashAlgorithm(enum.Enum):
    """Hash functions supported for HMAC-based OTP generation."""

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @classmethod
    def from_name(cls, name: str) -> "HashAlgorithm":
        """
        Look up a hash algorithm by name.

        Args:
            name: Algorithm name such as "sha1", "SHA-256" or "sha_512".

        Returns:
            The matching HashAlgorithm member.

        Raises:
            UnknownHashAlgorithmError: If the name is not supported.
        """
        normalized = name.strip().lower().replace("-", "").replace("_", "")
        for algorithm in cls:
            if algorithm.value == normalized:
                return algorithm
        raise UnknownHashAlgorithmError(f"Unknown hash algorithm: {name!r}")

    @property
    def digest_size(self) -> int:
        return hashlib.new(self.value).digest_size


def hmac_digest(algorithm: HashAlgorithm, key: bytes, message: bytes) -> bytes:
    """
    Compute HMAC(key, message) with the given hash algorithm.

    Args:
        algorithm: The hash function to use.
        key: The HMAC key. May be empty.
        message: The message to authenticate.

    Returns:
        The raw digest bytes.
    """
    return hmac.new(key, message, algorithm.value).digest()
