# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : addresses.py
#   file_relpath : src/canonrepr/rendering/addresses.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Address-formatting hooks for identity tokens.

Opaque handles (functions, channels, unsafe pointers) render as
``(Type)(<token>)``. The token text is produced by an
[`AddressFormatter`][canonrepr.rendering.addresses.AddressFormatter]: a pure
function from the integer identity to text. The default is hexadecimal;
tests and golden files replace it with a constant so that output is stable
across processes.
"""

from __future__ import annotations

from typing import Callable, Final

AddressFormatter = Callable[[int], str]

DEFAULT_POINTER_TOKEN: Final[str] = "PTR"


def hex_address(token: int) -> str:
    """Render an identity token as a hexadecimal address (``0x7f3a...``).

    Args:
        token (int): The identity token; ``0`` for nil handles.

    Returns:
        str: The token as ``0x``-prefixed lowercase hexadecimal.
    """
    return f"0x{token:x}"


def constant_address(text: str = DEFAULT_POINTER_TOKEN) -> AddressFormatter:
    """Return a formatter that renders every identity token as ``text``.

    Args:
        text (str): The fixed token text. Defaults to ``"PTR"``.

    Returns:
        AddressFormatter: The constant formatter.
    """

    def _format(_token: int) -> str:
        return text

    return _format
