# -*- coding: utf-8 -*-
"""
值渲染规则 (模板 filters)

每个复合类型一条规则，把内存中的值转成 Rust 字面量构造表达式。
规则之间互相组合: widgetvisuals -> stroke -> color32。

所有规则只接受完整的值；遇到无法表示的值 (非有限浮点数、越界通道)
抛出 ValueError，由 CodeGenerator 转换为 TemplateBindingError。
"""

from __future__ import annotations

import math
from typing import Any, Callable

from specs import Color32, Margin, Rounding, Shadow, Stroke, Vec2, WidgetVisuals


# ==================== 标量 ====================

# f32::MAX，超出时 rustc 报 overflowing_literals
F32_MAX = 3.4028234663852886e38


def f32(value: Any) -> str:
    """浮点数 -> Rust 浮点字面量

    使用 repr (最短的可精确往返表示)，不截断精度；整数也输出为 `6.0`。
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"期望数值，实际为 {value!r}")
    try:
        number = float(value)
    except OverflowError as e:
        raise ValueError(f"数值超出 f32 范围: {value!r}") from e
    if not math.isfinite(number):
        raise ValueError(f"无法生成非有限浮点数的字面量: {number!r}")
    if abs(number) > F32_MAX:
        raise ValueError(f"数值超出 f32 范围: {number!r}")
    return repr(number)


def rbool(value: Any) -> str:
    if not isinstance(value, bool):
        raise ValueError(f"期望布尔值，实际为 {value!r}")
    return "true" if value else "false"


def _channel(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"颜色通道必须是 0-255 的整数，实际为 {value!r}")
    return str(value)


# ==================== 复合类型 ====================


def color32(color: Color32) -> str:
    """Color32 -> 预乘构造函数，通道顺序 R, G, B, A"""
    channels = ", ".join(_channel(c) for c in (color.r, color.g, color.b, color.a))
    return f"Color32::from_rgba_premultiplied({channels})"


def vec2(value: Vec2) -> str:
    return f"Vec2 {{ x: {f32(value.x)}, y: {f32(value.y)} }}"


def margin(value: Margin) -> str:
    return (
        f"Margin {{ left: {f32(value.left)}, right: {f32(value.right)}, "
        f"top: {f32(value.top)}, bottom: {f32(value.bottom)} }}"
    )


def stroke(value: Stroke) -> str:
    return f"Stroke {{ width: {f32(value.width)}, color: {color32(value.color)} }}"


def rounding(value: Rounding) -> str:
    """四个角各自输出，即使数值相同也不折叠为 Rounding::same"""
    return (
        f"Rounding {{ nw: {f32(value.nw)}, ne: {f32(value.ne)}, "
        f"sw: {f32(value.sw)}, se: {f32(value.se)} }}"
    )


def shadow(value: Shadow) -> str:
    return (
        f"Shadow {{ spread: {f32(value.spread)}, color: {color32(value.color)}, "
        f"blur: {f32(value.blur)}, offset: {vec2(value.offset)} }}"
    )


def widgetvisuals(value: WidgetVisuals) -> str:
    return (
        "WidgetVisuals { "
        f"bg_fill: {color32(value.bg_fill)}, "
        f"weak_bg_fill: {color32(value.weak_bg_fill)}, "
        f"bg_stroke: {stroke(value.bg_stroke)}, "
        f"rounding: {rounding(value.rounding)}, "
        f"fg_stroke: {stroke(value.fg_stroke)}, "
        f"expansion: {f32(value.expansion)} "
        "}"
    )


# ==================== Option<T> ====================


def option_bool(value: bool | None) -> str:
    if value is None:
        return "None"
    return f"Some({rbool(value)})"


def option_color32(value: Color32 | None) -> str:
    if value is None:
        return "None"
    return f"Some({color32(value)})"


# ==================== 注册表 ====================

# filter 名 -> 渲染规则，模板中以 `{{ value | name }}` 使用
FILTERS: dict[str, Callable[[Any], str]] = {
    "f32": f32,
    "rbool": rbool,
    "color32": color32,
    "vec2": vec2,
    "margin": margin,
    "stroke": stroke,
    "rounding": rounding,
    "shadow": shadow,
    "widgetvisuals": widgetvisuals,
    "option_bool": option_bool,
    "option_color32": option_color32,
}
