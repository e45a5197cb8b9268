# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : names.py
#   file_relpath : src/canonrepr/introspection/names.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Qualified names for Python classes."""

from __future__ import annotations

from inspect import getmodule
from typing import Any


def qualified_type_name(cls: type[Any]) -> str:
    """Return a ``module.QualName`` spelling for a class.

    Builtin classes are returned unqualified (``frozenset``, not
    ``builtins.frozenset``). Falls back to the class ``__name__`` when no
    qualified name exists, and uses ``inspect.getmodule`` as a last resort to
    resolve the module name.

    Args:
        cls (type[Any]): The class to name.

    Returns:
        str: A string like ``"package.module.QualifiedName"``, or
        ``"QualifiedName"`` if the module cannot be resolved.
    """
    mod_name: str | None = getattr(cls, "__module__", None)
    call_name: str | None = getattr(cls, "__qualname__", None)

    if call_name is None:
        call_name = getattr(cls, "__name__", None)
    if call_name is None:
        call_name = type(cls).__name__

    if not mod_name:
        mod = getmodule(cls)
        if mod is not None and getattr(mod, "__name__", None):
            mod_name = mod.__name__

    if not mod_name or mod_name == "builtins":
        return call_name
    return f"{mod_name}.{call_name}"
