# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : formatters.py
#   file_relpath : src/canonrepr/rendering/formatters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Per-shape formatting rules.

Each formatter appends the text of one value to an output buffer (a list of
string fragments) and delegates its children back to the
[`Traversal`][canonrepr.rendering.engine.Traversal], which owns cycle detection
and error isolation.

Every formatter receives:

- ``ptrs``: the number of pointer indirections already traversed to reach the
  value; non-zero counts show up as ``(*...*T)`` type prefixes.
- ``implicit``: whether the enclosing literal already implies the value's
  type, in which case the type prefix is omitted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Final

from canonrepr.core.kinds import (
    BUILTIN_NAMES,
    COMPLEX_KINDS,
    FLOAT_KINDS,
    HANDLE_KINDS,
    INT_KINDS,
    UINT_KINDS,
    Kind,
)
from canonrepr.rendering.literals import (
    format_bool,
    format_complex,
    format_float,
    format_int,
    quote_string,
)
from canonrepr.rendering.ordering import sort_entries

if TYPE_CHECKING:
    from canonrepr.core.types import TypeDesc
    from canonrepr.introspection.base import Reflection
    from canonrepr.rendering.engine import Traversal

Formatter = Callable[["Traversal", list[str], "Reflection", int, bool], None]

# Map keys of these kinds never need a type prefix.
_IMPLICIT_KEY_KINDS: Final[frozenset[Kind]] = (
    frozenset({Kind.STRING}) | INT_KINDS | UINT_KINDS | FLOAT_KINDS
)

_BITS: Final[dict[Kind, int]] = {
    Kind.FLOAT32: 32,
    Kind.FLOAT64: 64,
    Kind.COMPLEX64: 64,
    Kind.COMPLEX128: 128,
}


def is_anon(t: TypeDesc) -> bool:
    """Whether values of type ``t`` may omit their type inside a container literal.

    Named composite types always spell their name; interfaces never omit the
    concrete type of their content.
    """
    if t.is_named and not t.kind.is_basic:
        return False
    return t.kind != Kind.INTERFACE


def write_type(buf: list[str], ptrs: int, t: TypeDesc) -> None:
    """Append the type text of ``t`` reached through ``ptrs`` indirections.

    The text is parenthesized when ``ptrs > 0`` (``(**T)``) or when ``t`` is a
    function, channel or unsafe pointer, whose spelling would otherwise be
    ambiguous next to a literal.

    Args:
        buf (list[str]): Output buffer.
        ptrs (int): Pointer indirections traversed to reach the value.
        t (TypeDesc): The static type.
    """
    parens: bool = ptrs > 0 or t.kind in HANDLE_KINDS
    if parens:
        buf.append("(")
        buf.append("*" * ptrs)

    kind: Kind = t.kind
    if t.is_named:
        buf.append(t.name)
    elif kind == Kind.POINTER:
        if ptrs == 0:
            buf.append("*")
        _write_component(buf, t.elem)
    elif kind == Kind.SLICE:
        buf.append("[]")
        _write_component(buf, t.elem)
    elif kind == Kind.ARRAY:
        buf.append(f"[{t.length}]")
        _write_component(buf, t.elem)
    elif kind == Kind.MAP:
        buf.append("map[")
        _write_component(buf, t.key)
        buf.append("]")
        _write_component(buf, t.elem)
    elif kind == Kind.SET:
        buf.append("frozenset[" if t.frozen else "set[")
        _write_component(buf, t.elem)
        buf.append("]")
    else:
        buf.append(t.structure_text())

    if parens:
        buf.append(")")


def _write_component(buf: list[str], t: TypeDesc | None) -> None:
    if t is None:
        buf.append("invalid")
    else:
        write_type(buf, 0, t)


def type_text(ptrs: int, t: TypeDesc) -> str:
    """Return the type text of ``t`` as `write_type` spells it."""
    buf: list[str] = []
    write_type(buf, ptrs, t)
    return "".join(buf)


def _write_nil(buf: list[str], ptrs: int, t: TypeDesc, implicit: bool) -> None:
    if implicit:
        buf.append("nil")
    else:
        write_type(buf, ptrs, t)
        buf.append("(nil)")


# --- Formatters ---


def format_scalar(
    engine: Traversal, buf: list[str], r: Reflection, ptrs: int, implicit: bool
) -> None:
    """Booleans, numbers and strings: ``T(literal)`` or the bare literal."""
    kind: Kind = r.kind
    if not implicit and ptrs == 0 and BUILTIN_NAMES.get(kind) == str(r.type):
        implicit = True
    if not implicit:
        write_type(buf, ptrs, r.type)
        buf.append("(")

    if kind == Kind.BOOL:
        buf.append(format_bool(r.data))
    elif kind == Kind.STRING:
        buf.append(quote_string(r.data))
    elif kind in FLOAT_KINDS:
        buf.append(format_float(r.data, bits=_BITS[kind]))
    elif kind in COMPLEX_KINDS:
        buf.append(format_complex(complex(r.data), bits=_BITS[kind]))
    else:
        buf.append(format_int(r.data))

    if not implicit:
        buf.append(")")


def format_pointer(
    engine: Traversal, buf: list[str], r: Reflection, ptrs: int, implicit: bool
) -> None:
    """Pointers add one indirection and render their pointee."""
    ptrs += 1
    if engine.introspector.is_nil(r):
        write_type(buf, ptrs, r.type)
        buf.append("(nil)")
        return
    engine.render(buf, engine.introspector.elem(r), ptrs, False)


def format_interface(
    engine: Traversal, buf: list[str], r: Reflection, ptrs: int, implicit: bool
) -> None:
    """Interfaces render their content with its concrete type, or ``T(nil)``."""
    if engine.introspector.is_nil(r):
        write_type(buf, ptrs, r.type)
        buf.append("(nil)")
        return
    engine.render(buf, engine.introspector.unwrap(r), ptrs, False)


def format_struct(
    engine: Traversal, buf: list[str], r: Reflection, ptrs: int, implicit: bool
) -> None:
    """Structs: ``T{name:value, ...}``.

    Fields of an unnamed struct whose type is itself implicit render
    positionally and without type (``struct { a int }{1}``). Value-like
    structs the introspector can describe render as ``T{text}``.
    """
    if not implicit:
        write_type(buf, ptrs, r.type)
    buf.append("{")
    text: str | None = engine.introspector.describe(r)
    if text is not None:
        buf.append(text)
    else:
        unnamed: bool = not r.type.is_named
        for index, f in enumerate(r.type.fields):
            if index:
                buf.append(", ")
            anon: bool = unnamed and is_anon(f.type)
            if not anon:
                buf.append(f.name)
                buf.append(":")
            engine.render_field(buf, r, index, anon)
    buf.append("}")


def format_sequence(
    engine: Traversal, buf: list[str], r: Reflection, ptrs: int, implicit: bool
) -> None:
    """Slices and arrays: ``T{e0, e1, ...}``; nil slices are ``T(nil)``."""
    if r.kind == Kind.SLICE and engine.introspector.is_nil(r):
        _write_nil(buf, ptrs, r.type, implicit)
        return
    if not implicit:
        write_type(buf, ptrs, r.type)
    anon: bool = _elements_implicit(r.type)
    buf.append("{")
    for index, element in enumerate(engine.introspector.elements(r)):
        if index:
            buf.append(", ")
        engine.render(buf, element, 0, anon)
    buf.append("}")


def format_set(
    engine: Traversal, buf: list[str], r: Reflection, ptrs: int, implicit: bool
) -> None:
    """Sets: ``set[T]{...}`` with members in canonical order."""
    if engine.introspector.is_nil(r):
        _write_nil(buf, ptrs, r.type, implicit)
        return
    if not implicit:
        write_type(buf, ptrs, r.type)
    anon: bool = _elements_implicit(r.type)
    members = sort_entries(
        (engine.ordering.sort_key(m), engine.render_text(m, anon), None)
        for m in engine.introspector.elements(r)
    )
    buf.append("{")
    buf.append(", ".join(text for _key, text, _ in members))
    buf.append("}")


def format_map(
    engine: Traversal, buf: list[str], r: Reflection, ptrs: int, implicit: bool
) -> None:
    """Maps: ``T{k:v, ...}`` with keys in canonical order; nil maps are ``T(nil)``."""
    if engine.introspector.is_nil(r):
        _write_nil(buf, ptrs, r.type, implicit)
        return
    if not implicit:
        write_type(buf, ptrs, r.type)

    t: TypeDesc = r.type
    key_type: TypeDesc | None = t.key
    elem_type: TypeDesc | None = t.elem
    key_anon: bool = key_type is not None and (
        key_type.kind in _IMPLICIT_KEY_KINDS or (not t.is_named and is_anon(key_type))
    )
    value_anon: bool = elem_type is not None and not t.is_named and is_anon(elem_type)

    # Keys are rendered (and ordered) before any value is rendered.
    entries = sort_entries(
        (engine.ordering.sort_key(k), engine.render_text(k, key_anon), v)
        for k, v in engine.introspector.items(r)
    )
    buf.append("{")
    for index, (_key, key_text, value) in enumerate(entries):
        if index:
            buf.append(", ")
        buf.append(key_text)
        buf.append(":")
        engine.render(buf, value, 0, value_anon)
    buf.append("}")


def format_handle(
    engine: Traversal, buf: list[str], r: Reflection, ptrs: int, implicit: bool
) -> None:
    """Functions, channels and unsafe pointers: ``(T)(token)``."""
    write_type(buf, ptrs, r.type)
    buf.append("(")
    buf.append(engine.address_formatter(engine.introspector.identity(r)))
    buf.append(")")


def _elements_implicit(t: TypeDesc) -> bool:
    return not t.is_named and t.elem is not None and is_anon(t.elem)


FORMATTERS: Final[dict[Kind, Formatter]] = {
    **{kind: format_scalar for kind in BUILTIN_NAMES},
    Kind.POINTER: format_pointer,
    Kind.INTERFACE: format_interface,
    Kind.STRUCT: format_struct,
    Kind.SLICE: format_sequence,
    Kind.ARRAY: format_sequence,
    Kind.SET: format_set,
    Kind.MAP: format_map,
    **{kind: format_handle for kind in HANDLE_KINDS},
}
