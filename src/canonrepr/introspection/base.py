# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : base.py
#   file_relpath : src/canonrepr/introspection/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Introspection capability consumed by the renderer.

The renderer does not inspect Python objects itself. It asks an
[`Introspector`][canonrepr.introspection.base.Introspector] to resolve values
to [`Reflection`][canonrepr.introspection.base.Reflection] views (static type +
raw data) and to enumerate their constituents. Swapping the introspector lets
callers render values from foreign object models (ORM rows, protocol
messages, ...) without touching the rendering rules.

Contract:
    - ``reflect`` resolves a *dynamic* value (a top-level argument or the
      content of an interface) to its concrete type; ``None`` resolves to
      [`NIL`][canonrepr.introspection.base.NIL].
    - The other methods are only called with reflections of the matching kind
      (``elem`` on non-nil pointers, ``items`` on non-nil maps, ...).
    - Any failure to describe a value is reported by raising
      `canonrepr.core.errors.IntrospectionError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Protocol

from canonrepr.core.kinds import Kind
from canonrepr.core.types import INVALID, TypeDesc

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, eq=False)
class Reflection:
    """A value seen through its static type.

    Attributes:
        type (TypeDesc): Static type of the value.
        data (Any): Raw data, interpreted according to ``type.kind``
            (see ``canonrepr.core.values``).
    """

    type: TypeDesc
    data: Any

    @property
    def kind(self) -> Kind:
        """Kind of the static type."""
        return self.type.kind


NIL: Final[Reflection] = Reflection(INVALID, None)


class Introspector(Protocol):
    """Describes values to the renderer."""

    def reflect(self, value: Any) -> Reflection:
        """Resolve a dynamic value to its concrete static type and raw data."""
        ...

    def is_nil(self, r: Reflection) -> bool:
        """Whether a pointer/slice/map/interface/func/chan value is nil."""
        ...

    def identity(self, r: Reflection) -> int:
        """Return the identity token of a reference or handle (0 when nil)."""
        ...

    def elem(self, r: Reflection) -> Reflection:
        """Return the pointee of a non-nil pointer."""
        ...

    def unwrap(self, r: Reflection) -> Reflection:
        """Return the concrete content of a non-nil interface."""
        ...

    def elements(self, r: Reflection) -> Iterator[Reflection]:
        """Yield the elements of a slice, array or set."""
        ...

    def items(self, r: Reflection) -> Iterator[tuple[Reflection, Reflection]]:
        """Yield the ``(key, value)`` pairs of a non-nil map, in any order."""
        ...

    def field(self, r: Reflection, index: int) -> Reflection:
        """Return field ``index`` of a struct (as listed in ``r.type.fields``)."""
        ...

    def describe(self, r: Reflection) -> str | None:
        """Return canonical text for value-like structs, or ``None``."""
        ...
