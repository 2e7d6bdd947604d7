"""Typed access to the claims carried in a JWT payload."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from adminkit.convert import string_to_int

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MOD = 2**64


def _format_float(value: float) -> str:
    """Format a float the shortest way, switching to exponent form outside 1e-4..1e6."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    raw = "".join(str(d) for d in digit_tuple)
    digits = raw.rstrip("0")
    exponent += len(raw) - len(digits)
    count = len(digits)
    point = count + exponent
    prefix = "-" if sign else ""
    exp10 = point - 1
    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if count > 1 else "")
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp10):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= count:
        return f"{prefix}{digits}{'0' * (point - count)}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


class MapClaims(dict):
    """A claims mapping with conversions for numeric and string values."""

    def _value(self, key: str) -> Any:
        value = self.get(key)
        if value is None:
            raise LookupError(f"invalid key '{key}'")
        return value

    def _signed(self, key: str) -> int:
        value = self._value(key)
        if isinstance(value, bool):
            raise TypeError(f"invalid value '{value}' type '{type(value).__name__}'")
        if isinstance(value, int):
            if not _INT64_MIN <= value <= _INT64_MAX:
                raise ValueError(f"value out of range: {value}")
            return value
        if isinstance(value, float):
            return int(value)
        if isinstance(value, str):
            return string_to_int(value)
        raise TypeError(f"invalid value '{value}' type '{type(value).__name__}'")

    def exp(self) -> int:
        """Return the 'exp' claim."""
        return self.as_int64("exp")

    def orig_iat(self) -> int:
        """Return the 'orig_iat' claim."""
        return self.as_int64("orig_iat")

    def identity(self) -> int:
        """Return the 'identity' claim."""
        return self.as_int64("identity")

    def as_int64(self, key: str) -> int:
        """Convert the value under key to a signed 64-bit integer."""
        return self._signed(key)

    def as_int(self, key: str) -> int:
        """Convert the value under key to an integer."""
        return self._signed(key)

    def as_uint64(self, key: str) -> int:
        """Convert the value under key to an unsigned 64-bit integer, wrapping negatives."""
        return self._signed(key) % _UINT64_MOD

    def as_string(self, key: str) -> str:
        """Convert the value under key to text; '' when missing or of another type."""
        value = self.get(key)
        if value is None or isinstance(value, bool):
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return _format_float(value)
        return ""