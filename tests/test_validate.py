"""Tests for constant-time OTP comparison."""

import pytest

from otpgen.hotp import generate_hotp
from otpgen.validate import equal_otp


@pytest.mark.parametrize("code", ["", "0", "755224", "07081804"])
def test_equal_otp_identical(code):
    assert equal_otp(code, code)


@pytest.mark.parametrize(
    "a,b",
    [
        ("755224", "755225"),
        ("755224", "855224"),
        ("755224", "75522"),
        ("755224", "7552240"),
        ("", "0"),
        ("07081804", "7081804"),
    ],
)
def test_equal_otp_different(a, b):
    assert not equal_otp(a, b)
    assert not equal_otp(b, a)


def test_equal_otp_against_generated_code():
    expected = generate_hotp(b"12345678901234567890", 9)
    assert equal_otp(expected, "520489")
    assert not equal_otp(expected, "520488")
