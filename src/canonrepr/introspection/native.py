# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : native.py
#   file_relpath : src/canonrepr/introspection/native.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Default introspector for typed values and native Python values.

[`DefaultIntrospector`][canonrepr.introspection.native.DefaultIntrospector]
resolves [`Typed`][canonrepr.core.values.Typed] values to their declared type
and infers a static type for everything else:

- ``bool`` / ``int`` / ``float`` / ``complex`` / ``str`` map to ``bool`` /
  ``int`` / ``float64`` / ``complex128`` / ``string``;
- ``bytes``-like values are ``[]uint8``;
- ``list`` is ``[]T``, ``tuple`` is ``[N]T``, ``dict`` is ``map[K]V`` and
  ``set`` is ``set[T]``, where ``T``/``K``/``V`` is the common scalar type of
  the items or ``any`` when the items are mixed or non-scalar;
- subclasses of builtin containers and scalars become *named* types
  (``collections.OrderedDict{...}``);
- enum members are named scalars (``shapes.Color(1)``);
- dataclasses, named tuples and plain objects are named structs whose fields
  are typed ``any``; objects are shared references and take part in cycle
  detection;
- date/time values, decimals, fractions, UUIDs, IP addresses and paths are
  described by their ``str()`` text;
- callables, classes, modules, queues and generators are opaque handles.

Inference only looks at one container level, so its cost is linear in the
container size and it cannot loop on cyclic data.
"""

from __future__ import annotations

import asyncio
import dataclasses
import datetime
import decimal
import fractions
import functools
import inspect
import ipaddress
import pathlib
import queue
import uuid
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from types import ModuleType
from typing import TYPE_CHECKING, Any, Final

from canonrepr.config.logging import get_logger
from canonrepr.core.errors import IntrospectionError
from canonrepr.core.kinds import Kind
from canonrepr.core.types import (
    ANY,
    BOOL,
    BYTES,
    COMPLEX128,
    FLOAT64,
    INT,
    STRING,
    Field,
    TypeDesc,
    array_of,
    func_of,
    map_of,
    named,
    set_of,
    slice_of,
)
from canonrepr.core.values import Cell, Typed, zero_value
from canonrepr.introspection.base import NIL, Reflection
from canonrepr.introspection.names import qualified_type_name

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from canonrepr.config.logging import CanonreprLogger

logger: CanonreprLogger = get_logger(__name__)

_SCALAR_TYPES: Final[dict[type[Any], TypeDesc]] = {
    bool: BOOL,
    int: INT,
    float: FLOAT64,
    complex: COMPLEX128,
    str: STRING,
}

# Value-like classes whose ``str()`` is a complete, canonical description.
_TEXTUAL_TYPES: Final[tuple[type[Any], ...]] = (
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    decimal.Decimal,
    fractions.Fraction,
    uuid.UUID,
    ipaddress.IPv4Address,
    ipaddress.IPv6Address,
    ipaddress.IPv4Network,
    ipaddress.IPv6Network,
    pathlib.PurePath,
)

_CHANNEL_TYPES: Final[tuple[type[Any], ...]] = (
    queue.Queue,
    queue.SimpleQueue,
    asyncio.Queue,
)

_FUNC: Final[TypeDesc] = func_of(None)
_MODULE: Final[TypeDesc] = TypeDesc(Kind.FUNC, name="module")

# Kinds whose nil state is represented by ``None`` raw data.
_NILABLE_KINDS: Final[frozenset[Kind]] = frozenset(
    {Kind.POINTER, Kind.SLICE, Kind.MAP, Kind.SET, Kind.INTERFACE, Kind.FUNC, Kind.CHAN}
)


def common_scalar_type(values: Iterable[Any]) -> TypeDesc:
    """Return the scalar type shared by all ``values``, else ``any``.

    Only exact builtin scalars count: a list mixing ``int`` and ``bool`` (or
    holding an ``IntEnum``) is ``[]any``. An empty iterable yields ``any``.
    """
    common: TypeDesc | None = None
    for value in values:
        t: TypeDesc | None = _SCALAR_TYPES.get(type(value))
        if t is None or (common is not None and t is not common):
            return ANY
        common = t
    return common or ANY


def _normalize(t: TypeDesc, data: Any) -> Any:
    """Return the raw data of a component of static type ``t``.

    A [`Typed`][canonrepr.core.values.Typed] of the same kind stands for its
    raw data (so ``new(...)`` results can be stored in pointer fields), and
    ``None`` becomes the zero value for kinds that cannot be nil.
    """
    if isinstance(data, Typed) and t.kind != Kind.INTERFACE and data.type.kind == t.kind:
        return data.data
    if data is None and t.kind not in _NILABLE_KINDS:
        return zero_value(t)
    return data


def _record_fields(value: Any) -> tuple[str, ...]:
    """Return the field names of a native record object in declaration order."""
    if dataclasses.is_dataclass(value):
        return tuple(f.name for f in dataclasses.fields(value))
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return tuple(value._fields)  # pyright: ignore[reportAttributeAccessIssue]
    names: list[str] = list(vars(value)) if hasattr(value, "__dict__") else []
    for klass in reversed(type(value).__mro__):
        slots: Any = klass.__dict__.get("__slots__", ())
        for slot in (slots,) if isinstance(slots, str) else slots:
            if slot in ("__dict__", "__weakref__") or slot in names:
                continue
            if hasattr(value, slot):
                names.append(slot)
    return tuple(names)


def _is_record(value: Any) -> bool:
    if dataclasses.is_dataclass(value):
        return True
    return hasattr(value, "__dict__") or bool(getattr(type(value), "__slots__", ()))


class DefaultIntrospector:
    """Introspector for [`Typed`][canonrepr.core.values.Typed] and native values."""

    def reflect(self, value: Any) -> Reflection:
        """Resolve a dynamic value to its concrete static type and raw data.

        Args:
            value (Any): A typed value, a native Python value, or ``None``.

        Returns:
            Reflection: The resolved view; [`NIL`][canonrepr.introspection.base.NIL]
            for ``None``.

        Raises:
            IntrospectionError: If the value's structure cannot be read.
        """
        if value is None:
            return NIL
        if isinstance(value, Typed):
            return Reflection(value.type, _normalize(value.type, value.data))
        try:
            return self._reflect_native(value)
        except IntrospectionError:
            raise
        except Exception as exc:
            raise IntrospectionError(
                f"cannot introspect {type(value).__name__}: {exc}",
                type_text=qualified_type_name(type(value)),
            ) from exc

    def _reflect_native(self, value: Any) -> Reflection:
        cls: type[Any] = type(value)
        scalar: TypeDesc | None = _SCALAR_TYPES.get(cls)
        if scalar is not None:
            return Reflection(scalar, value)

        if isinstance(value, Enum):
            inner: Reflection = self.reflect(value.value)
            if inner.type.kind.is_basic and not inner.type.is_named:
                return Reflection(named(qualified_type_name(cls), inner.type), inner.data)
            return Reflection(named(qualified_type_name(cls), STRING), value.name)

        if isinstance(value, _TEXTUAL_TYPES):
            return Reflection(TypeDesc(Kind.STRUCT, name=qualified_type_name(cls)), value)

        if isinstance(value, str):
            # str.__str__ copies the text without calling an overridden __str__.
            return Reflection(named(qualified_type_name(cls), STRING), str.__str__(value))
        for base, base_type in _SCALAR_TYPES.items():
            if isinstance(value, base):
                return Reflection(named(qualified_type_name(cls), base_type), base(value))

        if isinstance(value, memoryview):
            return Reflection(BYTES, value.tobytes())
        if isinstance(value, (bytes, bytearray)):
            return Reflection(self._maybe_named(cls, (bytes, bytearray), BYTES), value)

        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return Reflection(self._record_type(value), value)
        if isinstance(value, tuple) and hasattr(value, "_fields"):
            return Reflection(self._record_type(value, by_reference=False), value)

        if isinstance(value, Mapping):
            mt: TypeDesc = map_of(
                common_scalar_type(value.keys()), common_scalar_type(value.values())
            )
            return Reflection(self._maybe_named(cls, (dict,), mt), value)
        if isinstance(value, Set):
            st: TypeDesc = set_of(
                common_scalar_type(value), frozen=isinstance(value, frozenset)
            )
            return Reflection(self._maybe_named(cls, (set, frozenset), st), value)
        if isinstance(value, tuple):
            at: TypeDesc = array_of(len(value), common_scalar_type(value))
            return Reflection(self._maybe_named(cls, (tuple,), at), value)
        if isinstance(value, Sequence):
            lt: TypeDesc = slice_of(common_scalar_type(value))
            return Reflection(self._maybe_named(cls, (list,), lt), value)

        if inspect.isroutine(value) or isinstance(value, functools.partial):
            return Reflection(_FUNC, value)
        if isinstance(value, type):
            return Reflection(
                TypeDesc(Kind.FUNC, name=f"type[{qualified_type_name(value)}]"), value
            )
        if isinstance(value, ModuleType):
            return Reflection(_MODULE, value)
        if isinstance(value, _CHANNEL_TYPES) or inspect.isgenerator(value):
            return Reflection(self._handle_type(cls), value)
        if inspect.iscoroutine(value) or inspect.isasyncgen(value):
            return Reflection(self._handle_type(cls), value)

        if _is_record(value):
            return Reflection(self._record_type(value), value)

        logger.debug("No structural rule for %s; rendering as opaque handle", cls)
        return Reflection(self._handle_type(cls), value)

    @staticmethod
    def _maybe_named(cls: type[Any], builtins: tuple[type[Any], ...], t: TypeDesc) -> TypeDesc:
        if cls in builtins:
            return t
        return named(qualified_type_name(cls), t)

    @staticmethod
    def _handle_type(cls: type[Any]) -> TypeDesc:
        return TypeDesc(Kind.CHAN, name=qualified_type_name(cls), elem=ANY)

    @staticmethod
    def _record_type(value: Any, *, by_reference: bool = True) -> TypeDesc:
        return TypeDesc(
            Kind.STRUCT,
            name=qualified_type_name(type(value)),
            fields=tuple(Field(name, ANY) for name in _record_fields(value)),
            by_reference=by_reference,
        )

    def is_nil(self, r: Reflection) -> bool:
        """Whether a reference, interface or handle value is nil."""
        return r.data is None

    def identity(self, r: Reflection) -> int:
        """Return the identity token of a reference or handle (0 when nil)."""
        if r.data is None:
            return 0
        if r.kind == Kind.UNSAFE_POINTER:
            return int(r.data)
        return id(r.data)

    def elem(self, r: Reflection) -> Reflection:
        """Return the pointee of a non-nil pointer.

        Raises:
            IntrospectionError: If the pointer data is not a cell.
        """
        cell: Any = r.data
        if not isinstance(cell, Cell):
            raise IntrospectionError(
                f"pointer data must be a Cell, got {type(cell).__name__}",
                type_text=str(r.type),
            )
        elem_type: TypeDesc = self._component(r.type.elem, r)
        return Reflection(elem_type, _normalize(elem_type, cell.value))

    def unwrap(self, r: Reflection) -> Reflection:
        """Return the concrete content of a non-nil interface."""
        return self.reflect(r.data)

    def elements(self, r: Reflection) -> Iterator[Reflection]:
        """Yield the elements of a slice, array or set.

        Raises:
            IntrospectionError: If the container cannot be iterated, or an
                array holds the wrong number of items.
        """
        elem_type: TypeDesc = self._component(r.type.elem, r)
        try:
            items: list[Any] = list(r.data)
        except Exception as exc:
            raise IntrospectionError(
                f"cannot iterate {r.type}: {exc}", type_text=str(r.type)
            ) from exc
        if r.kind == Kind.ARRAY and len(items) != r.type.length:
            raise IntrospectionError(
                f"array of length {r.type.length} holds {len(items)} items",
                type_text=str(r.type),
            )
        for item in items:
            yield Reflection(elem_type, _normalize(elem_type, item))

    def items(self, r: Reflection) -> Iterator[tuple[Reflection, Reflection]]:
        """Yield the ``(key, value)`` pairs of a non-nil map.

        Raises:
            IntrospectionError: If the mapping cannot be iterated.
        """
        key_type: TypeDesc = self._component(r.type.key, r)
        value_type: TypeDesc = self._component(r.type.elem, r)
        try:
            pairs: list[tuple[Any, Any]] = list(r.data.items())
        except Exception as exc:
            raise IntrospectionError(
                f"cannot iterate {r.type}: {exc}", type_text=str(r.type)
            ) from exc
        for key, value in pairs:
            yield (
                Reflection(key_type, _normalize(key_type, key)),
                Reflection(value_type, _normalize(value_type, value)),
            )

    def field(self, r: Reflection, index: int) -> Reflection:
        """Return field ``index`` of a struct.

        Typed struct data may be a mapping by field name or a positional
        sequence; anything else (including native records) is read by
        attribute. Missing fields take their zero value.

        Raises:
            IntrospectionError: If reading the attribute fails.
        """
        f: Field = r.type.fields[index]
        data: Any = r.data
        raw: Any = None
        if not r.type.by_reference and isinstance(data, Mapping):
            raw = data.get(f.name)
        elif not r.type.by_reference and isinstance(data, (list, tuple)):
            raw = data[index] if index < len(data) else None
        else:
            try:
                raw = getattr(data, f.name, None)
            except Exception as exc:
                raise IntrospectionError(
                    f"cannot read field {f.name!r}: {exc}", type_text=str(f.type)
                ) from exc
        return Reflection(f.type, _normalize(f.type, raw))

    def describe(self, r: Reflection) -> str | None:
        """Return ``str()`` of date/time, decimal, UUID, address and path values."""
        if isinstance(r.data, _TEXTUAL_TYPES):
            return str(r.data)
        return None

    @staticmethod
    def _component(t: TypeDesc | None, r: Reflection) -> TypeDesc:
        if t is None:
            raise IntrospectionError(
                f"type {r.type} has no component type", type_text=str(r.type)
            )
        return t
