# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : test_literals.py
#   file_relpath : tests/rendering/test_literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Literal text of scalars: shortest floats, complex numbers and quoted strings."""

from __future__ import annotations

import math

from canonrepr.core.types import COMPLEX64, FLOAT32, INT64, UINT8
from canonrepr.core.values import Typed
from canonrepr.rendering.literals import (
    format_bool,
    format_complex,
    format_float,
    format_int,
    quote_string,
)
from tests.conftest import assert_renders_like, parametrize


@parametrize(
    ("value", "expected"),
    [
        (3.14, "3.14"),
        (1203.0, "1203"),
        (10.15, "10.15"),
        (123456.0, "123456"),
        (1234567.0, "1.234567e+06"),
        (1e6, "1e+06"),
        (1e21, "1e+21"),
        (0.0001, "0.0001"),
        (0.00012, "0.00012"),
        (1e-5, "1e-05"),
        (2.5e-10, "2.5e-10"),
        (0.1 + 0.2, "0.30000000000000004"),
        (0.0, "0"),
        (-0.0, "-0"),
        (-7.25, "-7.25"),
        (math.inf, "+Inf"),
        (-math.inf, "-Inf"),
        (math.nan, "NaN"),
    ],
)
def test_format_float64(value: float, expected: str) -> None:
    assert format_float(value) == expected


@parametrize(
    ("value", "expected"),
    [
        (0.1, "0.1"),
        (3.14, "3.14"),
        (16777217.0, "1.6777216e+07"),
        (1e39, "+Inf"),
        (-1e39, "-Inf"),
    ],
)
def test_format_float32_uses_single_precision_digits(value: float, expected: str) -> None:
    assert format_float(value, bits=32) == expected


def test_format_float_plus_sign() -> None:
    assert format_float(2.0, plus=True) == "+2"
    assert format_float(-2.0, plus=True) == "-2"
    assert format_float(math.nan, plus=True) == "+NaN"


@parametrize(
    ("value", "bits", "expected"),
    [
        (complex(3, 0.14), 128, "(3+0.14i)"),
        (complex(1, -2), 128, "(1-2i)"),
        (0j, 128, "(0+0i)"),
        (complex(0.1, 0.2), 64, "(0.1+0.2i)"),
        (complex(math.nan, math.inf), 128, "(NaN+Infi)"),
    ],
)
def test_format_complex(value: complex, bits: int, expected: str) -> None:
    assert format_complex(value, bits=bits) == expected


def test_format_bool_and_int() -> None:
    assert format_bool(True) == "true"
    assert format_bool(False) == "false"
    assert format_int(-42) == "-42"
    assert format_int(2**70) == "1180591620717411303424"


@parametrize(
    ("text", "expected"),
    [
        ("hello", '"hello"'),
        ("", '""'),
        ('say "hi"', '"say \\"hi\\""'),
        ("back\\slash", '"back\\\\slash"'),
        ("line\nbreak\ttab", '"line\\nbreak\\ttab"'),
        ("\x1b[0m", '"\\x1b[0m"'),
        ("\x7f", '"\\x7f"'),
        ("café", '"café"'),
        ("soft\u00adhyphen", '"soft\\u00adhyphen"'),
        ("\U000e0001", '"\\U000e0001"'),
        ("\ud800", '"\\ud800"'),
    ],
)
def test_quote_string(text: str, expected: str) -> None:
    assert quote_string(text) == expected


def test_typed_scalars_use_their_declared_width() -> None:
    assert_renders_like(Typed(FLOAT32, 0.1), "0.1")
    assert_renders_like(Typed(COMPLEX64, complex(0.1, 0.2)), "(0.1+0.2i)")
    assert_renders_like(Typed(INT64, -3), "-3")
    assert_renders_like(Typed(UINT8, 255), "255")
