# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : engine.py
#   file_relpath : src/canonrepr/rendering/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Depth-first traversal with cycle detection and per-branch error isolation.

A [`Traversal`][canonrepr.rendering.engine.Traversal] renders one top-level
value. It keeps the identities of the references (pointers, slices, maps,
sets, shared records) on the path from the root to the node being rendered.
Re-entering one of them renders ``<REC(T)>`` instead of recursing; sibling
branches that merely share a reference are rendered in full.

Failures to describe a value never abort the render: the failing branch is
replaced by ``<unrenderable:T>`` and a warning is logged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from canonrepr.config.logging import get_logger
from canonrepr.core.errors import IntrospectionError
from canonrepr.core.kinds import REFERENCE_KINDS, Kind
from canonrepr.core.types import pointer_to
from canonrepr.rendering.formatters import FORMATTERS, type_text
from canonrepr.rendering.ordering import KeyOrdering

if TYPE_CHECKING:
    from canonrepr.config.logging import CanonreprLogger
    from canonrepr.core.types import Field
    from canonrepr.introspection.base import Introspector, Reflection
    from canonrepr.rendering.addresses import AddressFormatter

logger: CanonreprLogger = get_logger(__name__)


def placeholder(text: str) -> str:
    """Return the placeholder rendered in place of an unreadable value."""
    return f"<unrenderable:{text}>"


def _is_record_reference(r: Reflection) -> bool:
    return r.kind == Kind.STRUCT and r.type.by_reference


def _reference_text(r: Reflection, ptrs: int) -> str:
    if _is_record_reference(r):
        return type_text(ptrs, pointer_to(r.type))
    return type_text(ptrs, r.type)


class Traversal:
    """State of a single render call.

    Attributes:
        introspector (Introspector): Describes values to the formatters.
        address_formatter (AddressFormatter): Renders identity tokens of handles.
        ordering (KeyOrdering): Canonical ordering of map keys and set members.
    """

    def __init__(self, introspector: Introspector, address_formatter: AddressFormatter) -> None:
        self.introspector: Introspector = introspector
        self.address_formatter: AddressFormatter = address_formatter
        self.ordering: KeyOrdering = KeyOrdering(introspector)
        self._path: set[int] = set()

    def render_value(self, value: Any) -> str:
        """Render a top-level value to text.

        Args:
            value (Any): Any value the introspector can reflect.

        Returns:
            str: The canonical representation.
        """
        try:
            r: Reflection = self.introspector.reflect(value)
        except IntrospectionError as exc:
            logger.warning("Cannot introspect top-level value: %s", exc)
            return placeholder(exc.type_text or type(value).__name__)
        return self.render_text(r, False)

    def render_text(self, r: Reflection, implicit: bool) -> str:
        """Render ``r`` into a fresh buffer and return the text."""
        buf: list[str] = []
        self.render(buf, r, 0, implicit)
        return "".join(buf)

    def render(self, buf: list[str], r: Reflection, ptrs: int, implicit: bool) -> None:
        """Append the text of ``r`` to ``buf``.

        Args:
            buf (list[str]): Output buffer.
            r (Reflection): The value to render.
            ptrs (int): Pointer indirections traversed to reach ``r``.
            implicit (bool): Whether the enclosing literal implies the type of ``r``.
        """
        if r.kind == Kind.INVALID:
            buf.append("nil")
            return

        mark: int = len(buf)
        entered: int = 0
        try:
            ident: int = self._reference_identity(r)
            if ident:
                if ident in self._path:
                    logger.trace("Cycle on %s at identity 0x%x", r.type, ident)
                    buf.append(f"<REC({_reference_text(r, ptrs)})>")
                    return
                self._path.add(ident)
                entered = ident
            if _is_record_reference(r):
                # Records held by reference render like pointers to their struct.
                FORMATTERS[r.kind](self, buf, r, ptrs + 1, False)
            else:
                FORMATTERS[r.kind](self, buf, r, ptrs, implicit)
        except (IntrospectionError, RecursionError) as exc:
            del buf[mark:]
            buf.append(placeholder(_reference_text(r, ptrs)))
            logger.warning("Cannot render value of type %s: %s", r.type, exc)
        finally:
            if entered:
                self._path.discard(entered)

    def render_field(self, buf: list[str], r: Reflection, index: int, implicit: bool) -> None:
        """Append the text of field ``index`` of struct ``r``.

        A field that cannot be read renders as a placeholder; its siblings are
        unaffected.
        """
        try:
            child: Reflection = self.introspector.field(r, index)
        except IntrospectionError as exc:
            f: Field = r.type.fields[index]
            buf.append(placeholder(exc.type_text or str(f.type)))
            logger.warning("Cannot read field %s of %s: %s", f.name, r.type, exc)
            return
        self.render(buf, child, 0, implicit)

    def _reference_identity(self, r: Reflection) -> int:
        if r.kind in REFERENCE_KINDS or _is_record_reference(r):
            return self.introspector.identity(r)
        return 0
