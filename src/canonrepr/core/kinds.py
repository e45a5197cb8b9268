# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : kinds.py
#   file_relpath : src/canonrepr/core/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Shape categories understood by the CanonRepr renderer.

Every value handed to the renderer is described by a static type whose
[`Kind`][canonrepr.core.kinds.Kind] selects the formatting rule. Kinds are
deliberately fine-grained for scalars (integer widths, float widths) so that
typed values keep their declared spelling (``uint32``, ``float32``) in the
rendered output.

Groupings used across the code base:
    - ``INT_KINDS`` / ``UINT_KINDS`` / ``FLOAT_KINDS`` / ``COMPLEX_KINDS``:
      numeric families.
    - ``BASIC_KINDS``: every scalar kind; values of these kinds have a builtin
      spelling (see ``BUILTIN_NAMES``).
    - ``HANDLE_KINDS``: opaque handles rendered through an identity token.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class Kind(str, Enum):
    """Structural category of a static type."""

    INVALID = "invalid"
    BOOL = "bool"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    UINTPTR = "uintptr"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    COMPLEX64 = "complex64"
    COMPLEX128 = "complex128"
    STRING = "string"
    POINTER = "ptr"
    SLICE = "slice"
    ARRAY = "array"
    MAP = "map"
    SET = "set"
    STRUCT = "struct"
    INTERFACE = "interface"
    FUNC = "func"
    CHAN = "chan"
    UNSAFE_POINTER = "unsafe.Pointer"

    @property
    def is_basic(self) -> bool:
        """Whether this kind is a scalar with a builtin spelling."""
        return self in BASIC_KINDS

    @property
    def is_numeric(self) -> bool:
        """Whether this kind is an integer or a real float (complex excluded)."""
        return self in INT_KINDS or self in UINT_KINDS or self in FLOAT_KINDS


INT_KINDS: Final[frozenset[Kind]] = frozenset(
    {Kind.INT, Kind.INT8, Kind.INT16, Kind.INT32, Kind.INT64}
)
UINT_KINDS: Final[frozenset[Kind]] = frozenset(
    {Kind.UINT, Kind.UINT8, Kind.UINT16, Kind.UINT32, Kind.UINT64, Kind.UINTPTR}
)
FLOAT_KINDS: Final[frozenset[Kind]] = frozenset({Kind.FLOAT32, Kind.FLOAT64})
COMPLEX_KINDS: Final[frozenset[Kind]] = frozenset({Kind.COMPLEX64, Kind.COMPLEX128})

BASIC_KINDS: Final[frozenset[Kind]] = (
    frozenset({Kind.BOOL, Kind.STRING}) | INT_KINDS | UINT_KINDS | FLOAT_KINDS | COMPLEX_KINDS
)

HANDLE_KINDS: Final[frozenset[Kind]] = frozenset({Kind.FUNC, Kind.CHAN, Kind.UNSAFE_POINTER})

# Kinds whose values carry a reference identity and may therefore close a cycle.
REFERENCE_KINDS: Final[frozenset[Kind]] = frozenset(
    {Kind.POINTER, Kind.SLICE, Kind.MAP, Kind.SET}
)

# Builtin spelling of each scalar kind; a static type whose text equals this
# spelling renders its values without a type prefix.
BUILTIN_NAMES: Final[dict[Kind, str]] = {kind: kind.value for kind in BASIC_KINDS}
