# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : strategies_canonrepr.py
#   file_relpath : tests/strategies_canonrepr.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

# pyright: strict

"""Hypothesis strategies for generating native values to render.

Values are JSON-like trees extended with the shapes the renderer treats
specially: tuples (arrays), byte strings, sets, complex numbers and hashable
composite keys.
Floats exclude NaN so that generated mappings stay well-formed.
"""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

MAX_LEAVES: int = 25

s_scalars: st.SearchStrategy[Any] = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**63), max_value=2**64),
    st.floats(allow_nan=False),
    st.complex_numbers(allow_nan=False, max_magnitude=1e6),
    st.text(max_size=8),
)

s_keys: st.SearchStrategy[Any] = st.one_of(
    st.booleans(),
    st.integers(min_value=-1000, max_value=1000),
    st.floats(allow_nan=False, allow_infinity=True),
    st.text(max_size=6),
    st.binary(max_size=4),
    st.tuples(st.integers(min_value=0, max_value=9), st.text(max_size=3)),
)


def _containers(children: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    return st.one_of(
        st.lists(children, max_size=4),
        st.lists(children, max_size=3).map(tuple),
        st.dictionaries(s_keys, children, max_size=4),
        st.frozensets(s_keys, max_size=4),
    )


s_values: st.SearchStrategy[Any] = st.recursive(s_scalars, _containers, max_leaves=MAX_LEAVES)

s_dicts: st.SearchStrategy[dict[Any, Any]] = st.dictionaries(
    s_keys, s_values, min_size=1, max_size=8
)


@st.composite
def s_reordered_dict(draw: st.DrawFn) -> tuple[dict[Any, Any], dict[Any, Any]]:
    """Draw a dict and a copy of it built with a different insertion order."""
    original: dict[Any, Any] = draw(s_dicts)
    items: list[tuple[Any, Any]] = draw(st.permutations(list(original.items())))
    return original, dict(items)


@st.composite
def s_cyclic_list(draw: st.DrawFn) -> list[Any]:
    """Draw a list that contains itself at a random position."""
    items: list[Any] = draw(st.lists(s_values, max_size=4))
    position: int = draw(st.integers(min_value=0, max_value=len(items)))
    items.insert(position, items)
    return items
