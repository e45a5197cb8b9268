# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : literals.py
#   file_relpath : src/canonrepr/rendering/literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Literal text for scalar values.

Floats use the *shortest round-trip* digits of the value (for its bit width)
laid out the way a ``%g`` verb does: scientific notation when the decimal
exponent is below -4 or at least 6, plain decimal otherwise, never with
trailing zeros:

| value | text |
|---|---|
| ``3.14`` | ``3.14`` |
| ``1203.0`` | ``1203`` |
| ``1e6`` | ``1e+06`` |
| ``0.0001`` | ``0.0001`` |
| ``1e-5`` | ``1e-05`` |

Strings are double-quoted with backslash escapes for quotes, backslashes and
non-printable characters (``\\n``, ``\\x1b``, ``\\u00ad``, ``\\U000e0001``).
"""

from __future__ import annotations

import math
import struct
from decimal import Decimal
from typing import Final

_ESCAPES: Final[dict[str, str]] = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}

# Decimal exponents outside [-4, _SCI_THRESHOLD) switch to scientific notation.
_SCI_THRESHOLD: Final[int] = 6


def format_bool(value: bool) -> str:
    """Return ``true`` or ``false``."""
    return "true" if value else "false"


def format_int(value: int) -> str:
    """Return the decimal text of an integer."""
    return str(int(value))


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _shortest_digits(value: float, bits: int) -> tuple[str, int]:
    """Return ``(digits, dp)``: significant digits and decimal-point position.

    ``dp`` counts the digits before the decimal point, so the value equals
    ``0.<digits> * 10**dp``. ``value`` must be finite and non-zero.
    """
    if bits == 64:
        text: str = repr(abs(value))
    else:
        target: float = _to_float32(abs(value))
        for precision in range(1, 10):
            text = f"{target:.{precision - 1}e}"
            if _to_float32(float(text)) == target:
                break
    _sign, digit_tuple, exponent = Decimal(text).as_tuple()
    digits: str = "".join(str(d) for d in digit_tuple)
    stripped: str = digits.rstrip("0")
    assert isinstance(exponent, int)
    exponent += len(digits) - len(stripped)
    return stripped, len(stripped) + exponent


def format_float(value: float, *, bits: int = 64, plus: bool = False) -> str:
    """Return the shortest ``%g``-style text of a float.

    Args:
        value (float): The value.
        bits (int): Bit width of the static type (32 or 64); controls how many
            digits are needed to round-trip.
        plus (bool): Always emit a sign (used for imaginary parts).

    Returns:
        str: The literal text; ``NaN``, ``+Inf`` and ``-Inf`` for non-finite values.
    """
    if bits == 32:
        value = _to_float32(value)
    if math.isnan(value):
        return "+NaN" if plus else "NaN"
    negative: bool = math.copysign(1.0, value) < 0
    sign: str = "-" if negative else ("+" if plus else "")
    if math.isinf(value):
        return f"{'-' if negative else '+'}Inf"
    if value == 0:
        return f"{sign}0"

    digits, dp = _shortest_digits(value, bits)
    exp: int = dp - 1
    if exp < -4 or exp >= _SCI_THRESHOLD:
        mantissa: str = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        return f"{sign}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    if dp <= 0:
        return f"{sign}0.{'0' * -dp}{digits}"
    if dp >= len(digits):
        return f"{sign}{digits}{'0' * (dp - len(digits))}"
    return f"{sign}{digits[:dp]}.{digits[dp:]}"


def format_complex(value: complex, *, bits: int = 128) -> str:
    """Return ``(re+imi)`` with both parts in shortest ``%g`` form.

    Args:
        value (complex): The value.
        bits (int): Bit width of the complex type (64 or 128).

    Returns:
        str: The literal, e.g. ``(3+0.14i)`` or ``(1-2i)``.
    """
    part_bits: int = bits // 2
    real: str = format_float(value.real, bits=part_bits)
    imag: str = format_float(value.imag, bits=part_bits, plus=True)
    return f"({real}{imag}i)"


def quote_string(text: str) -> str:
    """Return ``text`` double-quoted with backslash escapes."""
    out: list[str] = ['"']
    for ch in text:
        escaped: str | None = _ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
            continue
        cp: int = ord(ch)
        if ch.isprintable() and not 0xD800 <= cp <= 0xDFFF:
            out.append(ch)
        elif cp < 0x20 or cp == 0x7F:
            out.append(f"\\x{cp:02x}")
        elif cp < 0x10000:
            out.append(f"\\u{cp:04x}")
        else:
            out.append(f"\\U{cp:08x}")
    out.append('"')
    return "".join(out)
