# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : test_properties.py
#   file_relpath : tests/rendering/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

# pyright: strict

"""Property tests: rendering is deterministic, order-independent and total.

The properties checked here are:
1) rendering the same value twice (or an equal deep copy) yields the same text;
2) the insertion order of a dict never shows in its rendering;
3) self-containing values terminate with a ``<REC(...)>`` marker;
4) nil pointer chains keep one ``*`` per indirection level.
"""

from __future__ import annotations

import copy
from typing import Any

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from canonrepr.core.types import INT, TypeDesc, pointer_to
from canonrepr.core.values import Typed
from tests.conftest import mark_hypothesis_slow, render_ptr
from tests.strategies_canonrepr import s_cyclic_list, s_reordered_dict, s_values


@settings(max_examples=60, deadline=None)
@given(value=s_values)
def test_render_is_deterministic(value: Any) -> None:
    first: str = render_ptr(value)
    assert render_ptr(value) == first
    assert render_ptr(copy.deepcopy(value)) == first


@settings(max_examples=60, deadline=None)
@given(pair=s_reordered_dict())
def test_dict_insertion_order_is_invisible(pair: tuple[dict[Any, Any], dict[Any, Any]]) -> None:
    original, reordered = pair
    assert render_ptr(reordered) == render_ptr(original)


@settings(max_examples=40, deadline=None)
@given(items=s_cyclic_list())
def test_self_containing_list_terminates(items: list[Any]) -> None:
    text: str = render_ptr(items)
    assert "<REC([]any)>" in text
    assert "<unrenderable:" not in text


@settings(max_examples=20, deadline=None)
@given(depth=st.integers(min_value=1, max_value=12))
def test_nil_pointer_chain_keeps_its_depth(depth: int) -> None:
    t: TypeDesc = pointer_to(INT)
    for _ in range(depth - 1):
        t = pointer_to(t)
    assert render_ptr(Typed(t)) == f"({'*' * depth}int)(nil)"


@mark_hypothesis_slow
@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=500,
)
@given(pair=s_reordered_dict())
def test_dict_insertion_order_is_invisible_exhaustive(
    pair: tuple[dict[Any, Any], dict[Any, Any]],
) -> None:
    original, reordered = pair
    assert render_ptr(reordered) == render_ptr(original)
