"""Command-line interface for otpgen."""

import argparse
import base64
import binascii
import logging
import os
import sys
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from otpgen.hashes import HashAlgorithm, UnknownHashAlgorithmError
from otpgen.hotp import generate_hotp
from otpgen.otp import DEFAULT_DIGITS
from otpgen.totp import DEFAULT_TIME_STEP, generate_totp


logger = logging.getLogger(__name__)

SECRET_ENV_VAR = "OTPGEN_SECRET"

EXIT_OK = 0
EXIT_MISSING_SECRET = 1
EXIT_BAD_TIME = 2
EXIT_BAD_SECRET = 3
EXIT_BAD_HASH = 4
EXIT_GENERATION_FAILED = 5

# RFC 4226 Appendix D / RFC 6238 Appendix B reference keys
DEMO_KEYS = {
    HashAlgorithm.SHA1: b"12345678901234567890",
    HashAlgorithm.SHA256: b"12345678901234567890123456789012",
    HashAlgorithm.SHA512: b"1234567890123456789012345678901234567890123456789012345678901234",
}


def decode_secret(secret: str) -> bytes:
    """
    Decode a Base32 secret, tolerating lowercase and missing padding.

    Raises:
        ValueError: If the secret is not valid Base32.
    """
    secret = secret.strip().replace(" ", "")
    secret += "=" * (-len(secret) % 8)
    try:
        return base64.b32decode(secret, casefold=True)
    except binascii.Error as e:
        raise ValueError(f"Unable to decode Base32 secret: {e}") from e


def parse_time(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp. Timestamps without an offset are UTC.

    Raises:
        ValueError: If the timestamp cannot be parsed.
    """
    value = value.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_time(value: datetime) -> str:
    """Format a timestamp as RFC 3339 with second precision."""
    if value.utcoffset() == timedelta(0):
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    return value.isoformat(timespec="seconds")


def _fail(message: str, exit_code: int) -> int:
    print(f"✗ {message}", file=sys.stderr)
    return exit_code


def _resolve_secret(args: argparse.Namespace) -> Optional[str]:
    return args.secret or os.environ.get(SECRET_ENV_VAR) or None


def totp_command(args: argparse.Namespace) -> int:
    """Handle the totp command."""
    secret = _resolve_secret(args)
    if secret is None:
        return _fail(
            f"A secret is required (--secret or {SECRET_ENV_VAR})", EXIT_MISSING_SECRET
        )

    if args.time is None:
        timestamp = datetime.now(timezone.utc).replace(microsecond=0)
    else:
        try:
            timestamp = parse_time(args.time)
        except ValueError as e:
            return _fail(f"Invalid time {args.time!r}: {e}", EXIT_BAD_TIME)

    try:
        raw_secret = decode_secret(secret)
    except ValueError as e:
        return _fail(str(e), EXIT_BAD_SECRET)

    try:
        algorithm = HashAlgorithm.from_name(args.hash)
    except UnknownHashAlgorithmError as e:
        return _fail(str(e), EXIT_BAD_HASH)

    logger.debug(
        "Generating TOTP: time=%s digits=%d hash=%s step=%d",
        format_time(timestamp),
        args.digits,
        algorithm.value,
        args.step,
    )

    try:
        code = generate_totp(raw_secret, timestamp, args.digits, algorithm, args.step)
    except ValueError as e:
        return _fail(f"Failed to generate code: {e}", EXIT_GENERATION_FAILED)

    print(f"{code} {format_time(timestamp)} digits={args.digits} hash={args.hash}")
    return EXIT_OK


def hotp_command(args: argparse.Namespace) -> int:
    """Handle the hotp command."""
    secret = _resolve_secret(args)
    if secret is None:
        return _fail(
            f"A secret is required (--secret or {SECRET_ENV_VAR})", EXIT_MISSING_SECRET
        )

    try:
        raw_secret = decode_secret(secret)
    except ValueError as e:
        return _fail(str(e), EXIT_BAD_SECRET)

    logger.debug("Generating HOTP: counter=%d digits=%d", args.counter, args.digits)

    try:
        code = generate_hotp(raw_secret, args.counter, args.digits)
    except ValueError as e:
        return _fail(f"Failed to generate code: {e}", EXIT_GENERATION_FAILED)

    print(code)
    return EXIT_OK


def demo_command(args: argparse.Namespace) -> int:
    """Print the RFC 4226 and RFC 6238 reference values."""
    print("Count\tHOTP")
    for counter in range(10):
        print(f"{counter}\t{generate_hotp(DEMO_KEYS[HashAlgorithm.SHA1], counter, 6)}")

    print()

    timestamp = datetime(1970, 1, 1, 0, 0, 59, tzinfo=timezone.utc)
    print("Time\t\t\tTOTP\t\tMode")
    for algorithm, key in DEMO_KEYS.items():
        code = generate_totp(key, timestamp, 8, algorithm)
        print(f"{format_time(timestamp)}\t{code}\t{algorithm.name}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="otpgen",
        description="HOTP (RFC 4226) and TOTP (RFC 6238) code generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # TOTP command
    totp_parser = subparsers.add_parser(
        "totp",
        help="Generate a time-based code",
    )
    totp_parser.add_argument(
        "--secret",
        "-s",
        default=None,
        help=f"Base32 encoded secret (default: ${SECRET_ENV_VAR})",
    )
    totp_parser.add_argument(
        "--digits",
        "-d",
        type=int,
        default=DEFAULT_DIGITS,
        help=f"Number of digits in the code (default: {DEFAULT_DIGITS})",
    )
    totp_parser.add_argument(
        "--time",
        "-t",
        default=None,
        help="RFC 3339 timestamp to generate the code for (default: now)",
    )
    totp_parser.add_argument(
        "--hash",
        default="sha1",
        help="Hash function: sha1, sha256 or sha512 (default: sha1)",
    )
    totp_parser.add_argument(
        "--step",
        type=int,
        default=DEFAULT_TIME_STEP,
        help=f"Time step in seconds (default: {DEFAULT_TIME_STEP})",
    )

    # HOTP command
    hotp_parser = subparsers.add_parser(
        "hotp",
        help="Generate a counter-based code",
    )
    hotp_parser.add_argument(
        "--secret",
        "-s",
        default=None,
        help=f"Base32 encoded secret (default: ${SECRET_ENV_VAR})",
    )
    hotp_parser.add_argument(
        "--counter",
        "-c",
        type=int,
        required=True,
        help="Counter value",
    )
    hotp_parser.add_argument(
        "--digits",
        "-d",
        type=int,
        default=DEFAULT_DIGITS,
        help=f"Number of digits in the code (default: {DEFAULT_DIGITS})",
    )

    # Demo command
    subparsers.add_parser(
        "demo",
        help="Print RFC 4226 and RFC 6238 reference values",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "totp":
        return totp_command(args)
    elif args.command == "hotp":
        return hotp_command(args)
    elif args.command == "demo":
        return demo_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
