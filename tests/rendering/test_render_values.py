# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : test_render_values.py
#   file_relpath : tests/rendering/test_render_values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Rendering of typed values: scalars, pointers, containers, structs and handles."""

from __future__ import annotations

from typing import Any

from canonrepr.core.types import (
    ANY,
    BYTES,
    COMPLEX128,
    FLOAT64,
    INT,
    STRING,
    UINT32,
    UINTPTR,
    UNSAFE_POINTER,
    TypeDesc,
    array_of,
    chan_of,
    func_of,
    interface_type,
    map_of,
    named,
    pointer_to,
    slice_of,
    struct_of,
)
from canonrepr.core.values import Typed, new
from canonrepr.rendering.addresses import hex_address
from canonrepr.rendering.api import Renderer, render
from tests.conftest import assert_renders_like, parametrize

TEST_STRUCT: TypeDesc = named(
    "render.testStruct", struct_of(("Name", STRING), ("I", ANY), ("m", STRING))
)
MY_STRING_SLICE: TypeDesc = named("render.myStringSlice", slice_of(STRING))
MY_STRING_MAP: TypeDesc = named("render.myStringMap", map_of(STRING, STRING))
MY_INT_TYPE: TypeDesc = named("render.myIntType", INT)
MY_STRING_TYPE: TypeDesc = named("render.myStringType", STRING)
CHAN_INT: TypeDesc = chan_of(INT)

_s0 = new(STRING, "string0")
_s0p = new(pointer_to(STRING), _s0)
_mit = new(MY_INT_TYPE, 42)
_stringer = new(interface_type("fmt.Stringer"))

LIST_CASES: list[tuple[Any, str]] = [
    (None, "nil"),
    (Typed(CHAN_INT, object()), "(chan int)(PTR)"),
    (_stringer, "(*fmt.Stringer)(nil)"),
    (123, "123"),
    ("hello", '"hello"'),
    (Typed(pointer_to(TEST_STRUCT)), "(*render.testStruct)(nil)"),
    (Typed(pointer_to(pointer_to(TEST_STRUCT))), "(**render.testStruct)(nil)"),
    (
        Typed(slice_of(pointer_to(pointer_to(pointer_to(TEST_STRUCT))))),
        "[]***render.testStruct(nil)",
    ),
    (
        Typed(TEST_STRUCT, {"Name": "foo", "I": new(TEST_STRUCT, {"Name": "baz"})}),
        'render.testStruct{Name:"foo", I:(*render.testStruct){Name:"baz", I:any(nil), m:""}, m:""}',
    ),
    (Typed(BYTES), "[]uint8(nil)"),
    (Typed(BYTES, b""), "[]uint8{}"),
    (Typed(map_of(STRING, STRING)), "map[string]string(nil)"),
    (
        Typed(
            slice_of(pointer_to(TEST_STRUCT)),
            [new(TEST_STRUCT, {"Name": "foo"}), new(TEST_STRUCT, {"Name": "bar"})],
        ),
        '[]*render.testStruct{(*render.testStruct){Name:"foo", I:any(nil), m:""}, '
        '(*render.testStruct){Name:"bar", I:any(nil), m:""}}',
    ),
    (Typed(MY_STRING_SLICE, ["foo", "bar"]), 'render.myStringSlice{"foo", "bar"}'),
    (Typed(MY_STRING_MAP, {"foo": "bar"}), 'render.myStringMap{"foo":"bar"}'),
    (Typed(MY_INT_TYPE, 12), "render.myIntType(12)"),
    (_mit, "(*render.myIntType)(42)"),
    (Typed(MY_STRING_TYPE, "foo"), 'render.myStringType("foo")'),
    (
        Typed(struct_of(("a", INT), ("b", STRING)), {"a": 123, "b": "foo"}),
        'struct { a int; b string }{123, "foo"}',
    ),
    (
        Typed(slice_of(STRING), ["foo", "foo", "bar", "baz", "qux", "qux"]),
        '[]string{"foo", "foo", "bar", "baz", "qux", "qux"}',
    ),
    (Typed(array_of(3, INT), [1, 2, 3]), "[3]int{1, 2, 3}"),
    ({"foo": True, "bar": False}, 'map[string]bool{"bar":false, "foo":true}'),
    ({1: "foo", 2: "bar"}, 'map[int]string{1:"foo", 2:"bar"}'),
    (Typed(UINT32, 1337), "1337"),
    (3.14, "3.14"),
    (complex(3, 0.14), "(3+0.14i)"),
    (_s0, '(*string)("string0")'),
    (_s0p, '(**string)("string0")'),
    ([None, 1, 2, None], "[]any{any(nil), 1, 2, any(nil)}"),
]


@parametrize(("value", "expected"), LIST_CASES)
def test_render_list(value: Any, expected: str) -> None:
    assert_renders_like(value, expected)


def test_readme_example() -> None:
    custom_type: TypeDesc = named("render.customType", INT)
    test_struct: TypeDesc = named(
        "render.testStruct",
        struct_of(("S", STRING), ("V", pointer_to(map_of(STRING, INT))), ("I", ANY)),
    )
    value = Typed(
        test_struct,
        {
            "S": "hello",
            "V": new(map_of(STRING, INT), {"foo": 0, "bar": 1}),
            "I": Typed(custom_type, 42),
        },
    )
    assert_renders_like(
        value,
        'render.testStruct{S:"hello", V:(*map[string]int){"bar":1, "foo":0}, '
        "I:render.customType(42)}",
    )


def test_struct_fields_missing_from_data_render_zero_values() -> None:
    point: TypeDesc = named(
        "geo.Point", struct_of(("X", FLOAT64), ("Y", FLOAT64), ("Tags", slice_of(STRING)))
    )
    assert_renders_like(Typed(point, {"X": 1.5}), "geo.Point{X:1.5, Y:0, Tags:[]string(nil)}")


def test_struct_data_may_be_positional() -> None:
    pair: TypeDesc = named("render.pair", struct_of(("a", INT), ("b", INT)))
    assert_renders_like(Typed(pair, (1, 2)), "render.pair{a:1, b:2}")


def test_typed_interface_renders_concrete_content() -> None:
    assert_renders_like(Typed(ANY, 5), "5")
    assert_renders_like(Typed(ANY), "any(nil)")


def test_nil_slice_in_implicit_position_renders_bare_nil() -> None:
    nested: Typed = Typed(slice_of(slice_of(INT)), [None, [1]])
    assert_renders_like(nested, "[][]int{nil, {1}}")


def test_nil_map_in_implicit_position_renders_bare_nil() -> None:
    nested: Typed = Typed(slice_of(map_of(STRING, INT)), [None, {"a": 1}])
    assert_renders_like(nested, '[]map[string]int{nil, {"a":1}}')


def test_non_builtin_scalar_names_keep_their_prefix() -> None:
    celsius: TypeDesc = named("render.celsius", FLOAT64)
    assert_renders_like(Typed(celsius, 21.5), "render.celsius(21.5)")
    assert_renders_like(new(celsius, 1e6), "(*render.celsius)(1e+06)")
    assert_renders_like(Typed(COMPLEX128, 1j), "(0+1i)")


@parametrize(
    ("value", "expected"),
    [
        (Typed(UNSAFE_POINTER, 0xDEAD), "(unsafe.Pointer)(PTR)"),
        (Typed(func_of()), "(func())(PTR)"),
        (Typed(func_of((INT,), (STRING,)), len), "(func(int) string)(PTR)"),
        (Typed(map_of(CHAN_INT, STRING), {}), "map[(chan int)]string{}"),
        (Typed(UINTPTR, 7), "7"),
    ],
)
def test_handles_render_type_and_token(value: Any, expected: str) -> None:
    assert_renders_like(value, expected)


def test_hex_address_is_the_default_token() -> None:
    handle = object()
    assert render(Typed(CHAN_INT, handle)) == f"(chan int)(0x{id(handle):x})"
    assert render(Typed(CHAN_INT)) == "(chan int)(0x0)"


def test_renderer_is_reusable_and_custom_token_applies() -> None:
    renderer = Renderer(address_formatter=lambda token: "ADDR")
    chan = Typed(CHAN_INT, object())
    assert renderer.render(chan) == "(chan int)(ADDR)"
    assert renderer.render(chan) == "(chan int)(ADDR)"
    assert Renderer(address_formatter=hex_address).render(Typed(CHAN_INT)) == "(chan int)(0x0)"
