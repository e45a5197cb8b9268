# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : ordering.py
#   file_relpath : src/canonrepr/rendering/ordering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Canonical ordering of map keys and set members.

Unordered containers are rendered in the order defined here, which is total
and stable for a given render call. It exists only to make output
reproducible; it says nothing about key identity.

Order:
    1. Class bucket: booleans < numerics < strings < complex numbers <
       composites (slices, arrays, maps, sets, structs) < handles (pointers,
       functions, channels) < interface keys holding nil.
    2. Booleans: ``false < true``.
    3. Numerics of any width and signedness: by value; ``NaN`` sorts last.
    4. Strings: by UTF-8 bytes.
    5. Complex numbers: by real part, then imaginary part.
    6. Composites: by type text, then element by element (fields in
       declaration order) with these same rules; sets compare their members
       and maps their ``(key, value)`` pairs in canonical order. A nil slice
       or map sorts before an empty one; a container re-entered through a
       cycle compares by its type text alone.
    7. Handles: by identity token.

Keys that still tie are ordered by their rendered text (see
[`sort_entries`][canonrepr.rendering.ordering.sort_entries]).
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Final, TypeVar

from canonrepr.core.errors import IntrospectionError
from canonrepr.core.kinds import COMPLEX_KINDS, HANDLE_KINDS, REFERENCE_KINDS, Kind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from canonrepr.introspection.base import Introspector, Reflection

SortKey = tuple[Any, ...]

_T = TypeVar("_T")

BUCKET_BOOL: Final[int] = 0
BUCKET_NUMERIC: Final[int] = 1
BUCKET_STRING: Final[int] = 2
BUCKET_COMPLEX: Final[int] = 3
BUCKET_COMPOSITE: Final[int] = 4
BUCKET_HANDLE: Final[int] = 5
BUCKET_NIL: Final[int] = 6
BUCKET_UNKNOWN: Final[int] = 7

_HANDLE_LIKE: Final[frozenset[Kind]] = HANDLE_KINDS | {Kind.POINTER}


def _real_key(value: float) -> tuple[int, float]:
    if math.isnan(value):
        return (1, 0.0)
    return (0, value)


class KeyOrdering:
    """Computes canonical sort keys for reflected values."""

    def __init__(self, introspector: Introspector) -> None:
        self._introspector = introspector

    def sort_key(self, r: Reflection) -> SortKey:
        """Return the canonical sort key of ``r``.

        Args:
            r (Reflection): The key (or set member) to order.

        Returns:
            SortKey: A tuple comparable with the sort key of any other value.
        """
        try:
            return self._key(r, set())
        except IntrospectionError:
            return (BUCKET_UNKNOWN,)

    def _key(self, r: Reflection, active: set[int]) -> SortKey:
        intro: Introspector = self._introspector
        kind: Kind = r.kind

        if kind == Kind.INTERFACE:
            if intro.is_nil(r):
                return (BUCKET_NIL,)
            return self._key(intro.unwrap(r), active)
        if kind == Kind.INVALID:
            return (BUCKET_NIL,)
        if kind == Kind.BOOL:
            return (BUCKET_BOOL, bool(r.data))
        if kind.is_numeric:
            return (BUCKET_NUMERIC, _real_key(r.data))
        if kind == Kind.STRING:
            return (BUCKET_STRING, str(r.data).encode("utf-8", "surrogatepass"))
        if kind in COMPLEX_KINDS:
            value: complex = complex(r.data)
            return (BUCKET_COMPLEX, _real_key(value.real), _real_key(value.imag))
        if kind in _HANDLE_LIKE:
            return (BUCKET_HANDLE, intro.identity(r))

        # Composites: slices, arrays, maps, sets, structs.
        if r.kind in REFERENCE_KINDS and intro.is_nil(r):
            return (BUCKET_COMPOSITE, str(r.type))
        tracked: bool = r.kind in REFERENCE_KINDS or r.type.by_reference
        ident: int = intro.identity(r) if tracked else 0
        if ident:
            if ident in active:
                return (BUCKET_COMPOSITE, str(r.type))
            active.add(ident)
        try:
            return (BUCKET_COMPOSITE, str(r.type), self._children(r, active))
        finally:
            active.discard(ident)

    def _children(self, r: Reflection, active: set[int]) -> SortKey:
        intro: Introspector = self._introspector
        if r.kind == Kind.STRUCT:
            text: str | None = intro.describe(r)
            if text is not None:
                return ((BUCKET_STRING, text.encode("utf-8", "surrogatepass")),)
            return tuple(
                self._key(intro.field(r, i), active) for i in range(len(r.type.fields))
            )
        if r.kind == Kind.MAP:
            return tuple(
                sorted((self._key(k, active), self._key(v, active)) for k, v in intro.items(r))
            )
        keys: list[SortKey] = [self._key(e, active) for e in intro.elements(r)]
        if r.kind == Kind.SET:
            keys.sort()
        return tuple(keys)


def sort_entries(entries: Iterable[tuple[SortKey, str, _T]]) -> list[tuple[SortKey, str, _T]]:
    """Sort ``(sort_key, rendered_text, payload)`` entries canonically.

    Ties on the sort key fall back to the rendered text.
    """
    return sorted(entries, key=lambda e: (e[0], e[1]))
