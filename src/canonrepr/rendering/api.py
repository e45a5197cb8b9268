# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : api.py
#   file_relpath : src/canonrepr/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Public rendering entry points.

Examples:
    ```python
    >>> from canonrepr import render
    >>> render({"b": [1, 2], "a": None})
    'map[string]any{"a":any(nil), "b":[]int{1, 2}}'
    ```

A [`Renderer`][canonrepr.rendering.api.Renderer] holds no per-call state and
may be shared between threads; every call to ``render`` uses its own
[`Traversal`][canonrepr.rendering.engine.Traversal].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from canonrepr.introspection.native import DefaultIntrospector
from canonrepr.rendering.addresses import hex_address
from canonrepr.rendering.engine import Traversal

if TYPE_CHECKING:
    from canonrepr.config.model import RenderConfig
    from canonrepr.introspection.base import Introspector
    from canonrepr.rendering.addresses import AddressFormatter


class Renderer:
    """Renders values with a fixed introspector and address formatter.

    Args:
        address_formatter (AddressFormatter | None): Renders identity tokens of
            handles; defaults to [`hex_address`][canonrepr.rendering.addresses.hex_address].
        introspector (Introspector | None): Describes values; defaults to
            [`DefaultIntrospector`][canonrepr.introspection.native.DefaultIntrospector].
    """

    def __init__(
        self,
        *,
        address_formatter: AddressFormatter | None = None,
        introspector: Introspector | None = None,
    ) -> None:
        self.address_formatter: AddressFormatter = address_formatter or hex_address
        self.introspector: Introspector = introspector or DefaultIntrospector()

    @classmethod
    def from_config(
        cls, config: RenderConfig, *, introspector: Introspector | None = None
    ) -> Renderer:
        """Return a renderer configured by ``config``."""
        return cls(address_formatter=config.address_formatter(), introspector=introspector)

    def render(self, value: Any) -> str:
        """Return the canonical text of ``value``.

        Args:
            value (Any): Any value; ``None`` renders as ``nil``.

        Returns:
            str: The representation. Never raises for values the introspector
            can describe; unreadable branches render as ``<unrenderable:T>``.
        """
        return Traversal(self.introspector, self.address_formatter).render_value(value)


def render(
    value: Any,
    *,
    address_formatter: AddressFormatter | None = None,
    introspector: Introspector | None = None,
) -> str:
    """Return the canonical text of ``value``.

    Shorthand for ``Renderer(...).render(value)``.
    """
    return Renderer(address_formatter=address_formatter, introspector=introspector).render(value)
