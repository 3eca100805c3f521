# -*- coding: utf-8 -*-
"""JSON 编解码: 往返、格式与错误输入"""

from __future__ import annotations

import json

import pytest

import codec
from codec import DecodeError, EncodeError
from specs import Color32


def _weird_style(style):
    """不在编辑器默认范围内的值也必须原样往返"""
    v = style.visuals
    v.override_text_color = Color32(12, 34, 56, 78)
    v.window_rounding.nw = 0.1 + 0.2
    v.window_rounding.se = 1e-7
    v.widgets.active.expansion = -3.25
    v.widgets.open.rounding.sw = 1e20
    v.popup_shadow.offset.y = -0.0
    style.spacing.indent = 123456.789012345
    style.animation_time = 0.1
    style.wrap = False
    return style


@pytest.mark.parametrize("pretty", [True, False])
@pytest.mark.parametrize("variant", ["light", "dark", "weird"])
def test_round_trip(pretty, variant, light, dark):
    style = {"light": light, "dark": dark, "weird": _weird_style(light)}[variant]
    decoded = codec.decode(codec.encode(style, pretty=pretty))
    assert decoded == style
    assert decoded is not style


def test_round_trip_preserves_exact_floats(light):
    _weird_style(light)
    decoded = codec.decode(codec.encode(light))
    assert decoded.visuals.window_rounding.nw == 0.30000000000000004
    assert decoded.visuals.window_rounding.se == 1e-7
    assert decoded.spacing.indent == 123456.789012345


def test_light_default_scenario(light):
    decoded = codec.decode(codec.encode(light))
    assert decoded.visuals.dark_mode is False
    assert decoded.visuals.hyperlink_color == Color32(0, 155, 255, 255)


@pytest.mark.parametrize("wrap", [None, True, False])
def test_wrap_tri_state(wrap, light):
    light.wrap = wrap
    data = json.loads(codec.encode(light))
    assert data["wrap"] is wrap
    assert codec.decode(codec.encode(light)).wrap is wrap


def test_absent_wrap_decodes_as_unset(light):
    light.wrap = True
    data = json.loads(codec.encode(light))
    del data["wrap"]
    assert codec.decode(json.dumps(data).encode()).wrap is None


def test_json_shape(light):
    data = json.loads(codec.encode(light))
    visuals = data["visuals"]
    assert visuals["hyperlink_color"] == [0, 155, 255, 255]
    assert visuals["override_text_color"] is None
    assert visuals["window_rounding"] == {"nw": 6.0, "ne": 6.0, "sw": 6.0, "se": 6.0}
    assert visuals["window_shadow"]["offset"] == {"x": 10.0, "y": 20.0}
    assert data["spacing"]["window_margin"] == {"left": 6.0, "right": 6.0, "top": 6.0, "bottom": 6.0}
    assert set(visuals["widgets"]) == {"noninteractive", "inactive", "hovered", "active", "open"}
    assert list(data) == ["spacing", "interaction", "visuals", "animation_time", "explanation_tooltips", "wrap"]


def test_pretty_only_changes_whitespace(light):
    compact = codec.encode(light, pretty=False)
    pretty = codec.encode(light, pretty=True)
    assert compact.startswith(b'{"spacing":{"item_spacing":{"x":8.0')
    assert pretty.startswith(b'{\n  "spacing": {\n')
    assert json.loads(compact) == json.loads(pretty)


def test_corner_independence_in_data(light):
    before = json.loads(codec.encode(light))
    light.visuals.window_rounding.se = 9.5
    after = json.loads(codec.encode(light))
    assert after["visuals"]["window_rounding"] == {"nw": 6.0, "ne": 6.0, "sw": 6.0, "se": 9.5}
    after["visuals"]["window_rounding"]["se"] = 6.0
    assert after == before


def test_encode_rejects_non_finite(light):
    light.animation_time = float("inf")
    with pytest.raises(EncodeError):
        codec.encode(light)


def test_encode_rejects_out_of_range_channel(light):
    light.visuals.panel_fill = Color32(256, 0, 0, 255)
    with pytest.raises(EncodeError):
        codec.encode(light)


# ==================== 错误输入 ====================


def _light_data(light) -> dict:
    return json.loads(codec.encode(light))


def test_color_with_three_channels_is_rejected(light):
    data = _light_data(light)
    data["visuals"]["hyperlink_color"] = [0, 155, 255]
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(json.dumps(data).encode())
    assert excinfo.value.path is not None
    assert "hyperlink_color" in excinfo.value.path
    assert "4" in str(excinfo.value)


@pytest.mark.parametrize(
    "bad",
    [[0, 0, 0, 256], [0, 0, 0, -1], [0, 0, 0, 1.5], [0, 0, 0, True], "#ffffff", {"r": 0}],
)
def test_color_shape_errors(bad, light):
    data = _light_data(light)
    data["visuals"]["widgets"]["hovered"]["bg_fill"] = bad
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(json.dumps(data).encode())
    assert "bg_fill" in str(excinfo.value)


def test_missing_field_is_rejected(light):
    data = _light_data(light)
    del data["visuals"]["dark_mode"]
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(json.dumps(data).encode())
    assert "dark_mode" in str(excinfo.value)


def test_missing_rounding_corner_is_rejected(light):
    data = _light_data(light)
    del data["visuals"]["widgets"]["open"]["rounding"]["sw"]
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(json.dumps(data).encode())
    assert "sw" in str(excinfo.value)


@pytest.mark.parametrize(
    "path, value",
    [
        (("spacing", "indent"), "18.0"),
        (("spacing", "indent"), True),
        (("spacing", "indent"), None),
        (("interaction", "show_tooltips_only_when_still"), 1),
        (("wrap",), "yes"),
        (("spacing", "item_spacing"), [8.0, 3.0]),
    ],
)
def test_wrong_types_are_rejected(path, value, light):
    data = _light_data(light)
    target = data
    for key in path[:-1]:
        target = target[key]
    target[path[-1]] = value
    with pytest.raises(DecodeError):
        codec.decode(json.dumps(data).encode())


def test_nan_is_rejected(light):
    data = _light_data(light)
    data["animation_time"] = float("nan")
    with pytest.raises(DecodeError):
        codec.decode(json.dumps(data).encode())


def test_malformed_json_reports_offset():
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(b'{"spacing": ')
    assert excinfo.value.offset is not None


def test_deeply_nested_json_is_rejected():
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(b"[" * 200000)
    assert "嵌套过深" in str(excinfo.value)

    with pytest.raises(DecodeError):
        codec.decode(b'{"spacing":' + b"[" * 200000)


def test_invalid_utf8_is_rejected():
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(b"\xff\xfe{}")
    assert excinfo.value.offset == 0


@pytest.mark.parametrize("payload", [b"[]", b"42", b'"style"', b"null"])
def test_root_must_be_object(payload):
    with pytest.raises(DecodeError):
        codec.decode(payload)


def test_unknown_keys_are_ignored(light):
    data = _light_data(light)
    data["override_font_id"] = None
    data["visuals"]["window_highlight_topmost"] = True
    assert codec.decode(json.dumps(data).encode()) == light


def test_decode_accepts_str(light):
    assert codec.decode(codec.encode(light).decode("utf-8")) == light


def test_integer_numbers_decode_as_floats(light):
    data = _light_data(light)
    data["spacing"]["indent"] = 18
    decoded = codec.decode(json.dumps(data).encode())
    assert isinstance(decoded.spacing.indent, float)
    assert decoded == light


def test_structure_unstructure_helpers(light):
    raw = codec.unstructure(light.visuals.selection)
    assert raw == {"bg_fill": [144, 209, 255, 255], "stroke": {"width": 1.0, "color": [0, 83, 125, 255]}}
    assert codec.structure(raw, type(light.visuals.selection)) == light.visuals.selection
