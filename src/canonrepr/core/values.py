# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : values.py
#   file_relpath : src/canonrepr/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Typed value model.

Native Python values carry no static type, so callers that need exact control
over the rendered type names wrap their data in
[`Typed`][canonrepr.core.values.Typed]. The raw ``data`` of a typed value is
plain Python, interpreted according to the type's kind:

| Kind | Raw data |
|---|---|
| scalars | ``bool`` / ``int`` / ``float`` / ``complex`` / ``str`` |
| pointer | a [`Cell`][canonrepr.core.values.Cell] or ``None`` |
| slice | a sequence or ``None`` |
| array | a sequence of ``length`` items |
| map | a mapping or ``None`` |
| set | a set or frozenset |
| struct | a mapping by field name, a positional sequence, or an object |
| interface | a ``Typed``, a native value, or ``None`` |
| func / chan | any object (its identity is rendered) or ``None`` |
| unsafe pointer | an ``int`` address |

Missing struct fields take the zero value of their type. Inside raw data, a
``Typed`` of the component's kind may stand in for its raw data, so
``new(...)`` results can be stored directly in pointer fields and elements.

Pointers point at cells rather than at data so that two pointers to the same
variable share an identity, and cycles are built by storing a pointer in the
data its own cell holds:

    ```python
    p = new(node_t, {"Name": "recursive"})
    p.data.value["Self"] = p
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from canonrepr.core.kinds import COMPLEX_KINDS, FLOAT_KINDS, INT_KINDS, UINT_KINDS, Kind
from canonrepr.core.types import TypeDesc, pointer_to


class Cell:
    """An addressable variable; the target of a pointer.

    The identity of the cell is the identity of every pointer to it.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any = None) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"


@dataclass(frozen=True)
class Typed:
    """A value paired with its static type.

    When ``data`` is omitted (``None``) for a kind that has no nil state, the
    zero value of the type is used instead.

    Attributes:
        type (TypeDesc): The static type.
        data (Any): The raw data, interpreted according to ``type.kind``.
    """

    type: TypeDesc
    data: Any = None

    def __post_init__(self) -> None:
        if self.data is None:
            object.__setattr__(self, "data", zero_value(self.type))


def zero_value(t: TypeDesc) -> Any:
    """Return the raw zero value of type ``t``.

    Args:
        t (TypeDesc): The static type.

    Returns:
        Any: ``False``, ``0``, ``0.0``, ``0j`` or ``""`` for scalars, a list of zero
        elements for arrays, an empty field mapping for structs, ``None`` (nil)
        for every other kind.
    """
    kind: Kind = t.kind
    if kind == Kind.BOOL:
        return False
    if kind in INT_KINDS or kind in UINT_KINDS or kind == Kind.UNSAFE_POINTER:
        return 0
    if kind in FLOAT_KINDS:
        return 0.0
    if kind in COMPLEX_KINDS:
        return 0j
    if kind == Kind.STRING:
        return ""
    if kind == Kind.ARRAY:
        assert t.elem is not None
        return [zero_value(t.elem) for _ in range(t.length)]
    if kind == Kind.STRUCT:
        return {}
    return None


def new(t: TypeDesc, data: Any = None) -> Typed:
    """Return a pointer of type ``*t`` to a fresh cell holding ``data``.

    Args:
        t (TypeDesc): The pointee type.
        data (Any): Initial raw data; the zero value of ``t`` when ``None``.

    Returns:
        Typed: The pointer value; its ``data`` is the new [`Cell`][canonrepr.core.values.Cell].
    """
    return Typed(pointer_to(t), Cell(zero_value(t) if data is None else data))
