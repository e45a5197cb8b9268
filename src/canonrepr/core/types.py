# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : types.py
#   file_relpath : src/canonrepr/core/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Static type descriptors for rendered values.

A [`TypeDesc`][canonrepr.core.types.TypeDesc] describes the *declared* type of
a value: its [`Kind`][canonrepr.core.kinds.Kind], an optional qualified name
and the component types (element, key, fields, ...). The renderer never looks
at Python classes directly; it only consumes these descriptors, as produced by
an introspector or built explicitly by callers.

Naming:
    - Named types carry a qualified name such as ``"render.myIntType"``;
      ``str()`` of a named type is that name.
    - Unnamed (anonymous) types spell their structure instead:
      ``[]int``, ``map[string]bool``, ``struct { a int; b string }``.

Recursive named types are built in two steps with
[`declare`][canonrepr.core.types.declare] and
[`TypeDesc.define`][canonrepr.core.types.TypeDesc.define]:

    ```python
    node = declare("list.Node", Kind.STRUCT)
    node.define(struct_of(("Value", INT), ("Next", pointer_to(node))))
    ```

Type descriptors compare by identity. Two separately built unnamed types with
the same structure are interchangeable for rendering purposes because the
renderer only relies on their text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final

from canonrepr.core.kinds import BASIC_KINDS, Kind

if TYPE_CHECKING:
    from collections.abc import Iterable


class ChanDir(str, Enum):
    """Direction of a channel-like handle."""

    BOTH = "chan"
    RECV = "<-chan"
    SEND = "chan<-"


@dataclass(eq=False)
class Field:
    """A struct field: its name and static type."""

    name: str
    type: TypeDesc


@dataclass(eq=False)
class TypeDesc:
    """Static type of a value.

    Attributes:
        kind (Kind): Structural category (of the underlying type for named types).
        name (str): Qualified declared name, or ``""`` for unnamed types.
        elem (TypeDesc | None): Element type of pointers, slices, arrays, sets and
            channels; value type of maps.
        key (TypeDesc | None): Key type of maps.
        length (int): Length of arrays.
        fields (tuple[Field, ...]): Fields of structs, in declaration order.
        params (tuple[TypeDesc, ...] | None): Parameter types of functions;
            ``None`` when the signature is unknown.
        results (tuple[TypeDesc, ...]): Result types of functions.
        chan_dir (ChanDir): Direction of channels.
        frozen (bool): For sets, whether the set is immutable (``frozenset``).
        by_reference (bool): For structs, whether values of this type are
            shared references (native Python objects) rather than plain values.
            Such values render like pointers to the struct (``(*T){...}``).
    """

    kind: Kind
    name: str = ""
    elem: TypeDesc | None = None
    key: TypeDesc | None = None
    length: int = 0
    fields: tuple[Field, ...] = ()
    params: tuple[TypeDesc, ...] | None = None
    results: tuple[TypeDesc, ...] = ()
    chan_dir: ChanDir = ChanDir.BOTH
    frozen: bool = False
    by_reference: bool = False
    _defined: bool = field(default=True, repr=False)

    @property
    def is_named(self) -> bool:
        """Whether the type has a declared name."""
        return bool(self.name)

    def define(self, underlying: TypeDesc) -> TypeDesc:
        """Complete a type created by [`declare`][canonrepr.core.types.declare].

        Args:
            underlying (TypeDesc): The structure of the named type.

        Returns:
            TypeDesc: ``self``, now fully defined.

        Raises:
            ValueError: If the type was already defined or the kinds disagree.
        """
        if self._defined:
            raise ValueError(f"type {self.name!r} is already defined")
        if underlying.kind != self.kind:
            raise ValueError(
                f"type {self.name!r} was declared as {self.kind.value}, "
                f"got {underlying.kind.value}"
            )
        self._copy_structure(underlying)
        self._defined = True
        return self

    def _copy_structure(self, underlying: TypeDesc) -> None:
        self.elem = underlying.elem
        self.key = underlying.key
        self.length = underlying.length
        self.fields = underlying.fields
        self.params = underlying.params
        self.results = underlying.results
        self.chan_dir = underlying.chan_dir
        self.frozen = underlying.frozen
        self.by_reference = underlying.by_reference

    def __str__(self) -> str:
        if self.name:
            return self.name
        return self.structure_text()

    def structure_text(self) -> str:
        """Return the structural spelling of the type, ignoring its name."""
        kind: Kind = self.kind
        if kind in BASIC_KINDS or kind in (Kind.UNSAFE_POINTER, Kind.INVALID):
            return kind.value
        if kind == Kind.POINTER:
            return f"*{self.elem}"
        if kind == Kind.SLICE:
            return f"[]{self.elem}"
        if kind == Kind.ARRAY:
            return f"[{self.length}]{self.elem}"
        if kind == Kind.MAP:
            return f"map[{self.key}]{self.elem}"
        if kind == Kind.SET:
            return f"{'frozenset' if self.frozen else 'set'}[{self.elem}]"
        if kind == Kind.STRUCT:
            if not self.fields:
                return "struct {}"
            body: str = "; ".join(f"{f.name} {f.type}" for f in self.fields)
            return f"struct {{ {body} }}"
        if kind == Kind.INTERFACE:
            return "any"
        if kind == Kind.CHAN:
            return f"{self.chan_dir.value} {self.elem}"
        # Kind.FUNC
        if self.params is None:
            return "func"
        params: str = ", ".join(str(p) for p in self.params)
        if not self.results:
            return f"func({params})"
        if len(self.results) == 1:
            return f"func({params}) {self.results[0]}"
        return f"func({params}) ({', '.join(str(r) for r in self.results)})"


# --- Basic types ---

INVALID: Final[TypeDesc] = TypeDesc(Kind.INVALID)
BOOL: Final[TypeDesc] = TypeDesc(Kind.BOOL)
INT: Final[TypeDesc] = TypeDesc(Kind.INT)
INT8: Final[TypeDesc] = TypeDesc(Kind.INT8)
INT16: Final[TypeDesc] = TypeDesc(Kind.INT16)
INT32: Final[TypeDesc] = TypeDesc(Kind.INT32)
INT64: Final[TypeDesc] = TypeDesc(Kind.INT64)
UINT: Final[TypeDesc] = TypeDesc(Kind.UINT)
UINT8: Final[TypeDesc] = TypeDesc(Kind.UINT8)
UINT16: Final[TypeDesc] = TypeDesc(Kind.UINT16)
UINT32: Final[TypeDesc] = TypeDesc(Kind.UINT32)
UINT64: Final[TypeDesc] = TypeDesc(Kind.UINT64)
UINTPTR: Final[TypeDesc] = TypeDesc(Kind.UINTPTR)
FLOAT32: Final[TypeDesc] = TypeDesc(Kind.FLOAT32)
FLOAT64: Final[TypeDesc] = TypeDesc(Kind.FLOAT64)
COMPLEX64: Final[TypeDesc] = TypeDesc(Kind.COMPLEX64)
COMPLEX128: Final[TypeDesc] = TypeDesc(Kind.COMPLEX128)
STRING: Final[TypeDesc] = TypeDesc(Kind.STRING)
UNSAFE_POINTER: Final[TypeDesc] = TypeDesc(Kind.UNSAFE_POINTER)
ANY: Final[TypeDesc] = TypeDesc(Kind.INTERFACE)
BYTES: Final[TypeDesc] = TypeDesc(Kind.SLICE, elem=UINT8)


# --- Builders ---


def named(name: str, underlying: TypeDesc) -> TypeDesc:
    """Return a named type with the structure of ``underlying``.

    Args:
        name (str): Qualified type name (e.g. ``"render.myIntType"``).
        underlying (TypeDesc): The structure of the new type.

    Returns:
        TypeDesc: The named type.

    Raises:
        ValueError: If ``name`` is empty.
    """
    return declare(name, underlying.kind).define(underlying)


def declare(name: str, kind: Kind) -> TypeDesc:
    """Return a named type whose structure is supplied later via ``define``."""
    if not name:
        raise ValueError("named types require a non-empty name")
    return TypeDesc(kind, name=name, _defined=False)


def pointer_to(elem: TypeDesc) -> TypeDesc:
    """Return the unnamed pointer type ``*elem``."""
    return TypeDesc(Kind.POINTER, elem=elem)


def slice_of(elem: TypeDesc) -> TypeDesc:
    """Return the unnamed slice type ``[]elem``."""
    return TypeDesc(Kind.SLICE, elem=elem)


def array_of(length: int, elem: TypeDesc) -> TypeDesc:
    """Return the unnamed array type ``[length]elem``.

    Raises:
        ValueError: If ``length`` is negative.
    """
    if length < 0:
        raise ValueError(f"array length must be >= 0 (got {length})")
    return TypeDesc(Kind.ARRAY, elem=elem, length=length)


def map_of(key: TypeDesc, elem: TypeDesc) -> TypeDesc:
    """Return the unnamed map type ``map[key]elem``."""
    return TypeDesc(Kind.MAP, key=key, elem=elem)


def set_of(elem: TypeDesc, *, frozen: bool = False) -> TypeDesc:
    """Return the unnamed set type ``set[elem]`` (or ``frozenset[elem]``)."""
    return TypeDesc(Kind.SET, elem=elem, frozen=frozen)


def struct_of(*fields: Field | tuple[str, TypeDesc]) -> TypeDesc:
    """Return an anonymous struct type with the given fields in order.

    Args:
        *fields (Field | tuple[str, TypeDesc]): Fields, either as
            [`Field`][canonrepr.core.types.Field] or ``(name, type)`` pairs.

    Returns:
        TypeDesc: The struct type.

    Raises:
        ValueError: If two fields share a name.
    """
    normalized: list[Field] = [f if isinstance(f, Field) else Field(*f) for f in fields]
    names: list[str] = [f.name for f in normalized]
    if len(set(names)) != len(names):
        raise ValueError(f"duplicate struct field names: {names}")
    return TypeDesc(Kind.STRUCT, fields=tuple(normalized))


def chan_of(elem: TypeDesc, direction: ChanDir = ChanDir.BOTH) -> TypeDesc:
    """Return the unnamed channel type ``chan elem``."""
    return TypeDesc(Kind.CHAN, elem=elem, chan_dir=direction)


def func_of(
    params: Iterable[TypeDesc] | None = (),
    results: Iterable[TypeDesc] = (),
) -> TypeDesc:
    """Return a function type; ``params=None`` denotes an unknown signature."""
    return TypeDesc(
        Kind.FUNC,
        params=None if params is None else tuple(params),
        results=tuple(results),
    )


def interface_type(name: str = "") -> TypeDesc:
    """Return an interface type; unnamed interfaces spell as ``any``."""
    return TypeDesc(Kind.INTERFACE, name=name)
