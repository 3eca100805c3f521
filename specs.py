# -*- coding: utf-8 -*-
"""
样式规格类型模块

egui `Style` 的逐字段镜像。每个嵌套结构是一个独立的 dataclass，
字段名与 egui 的 serde 字段名完全一致 (JSON 导出/导入直接使用)。

设计原则：
- 导出时每个字段都有值 (没有部分/缺省状态)
- 模型不做范围限制，编辑层负责 clamp
- 颜色通道按原样保存 (预乘 alpha，不重新计算)
- 导出/导入只处理快照 (snapshot)，从不共享可变状态
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field


# ============================================================================
# 基础值类型
# ============================================================================


@dataclass
class Color32:
    """RGBA 颜色，预乘 alpha，每个通道 0-255

    JSON 中序列化为 [r, g, b, a] 数组 (与 egui 相同)。
    """

    r: int
    g: int
    b: int
    a: int

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color32:
        return cls(r, g, b, 255)

    @classmethod
    def from_gray(cls, level: int) -> Color32:
        return cls(level, level, level, 255)

    @classmethod
    def from_black_alpha(cls, a: int) -> Color32:
        return cls(0, 0, 0, a)

    @classmethod
    def from_additive_luminance(cls, level: int) -> Color32:
        """加法混合亮度 (alpha = 0)"""
        return cls(level, level, level, 0)

    @classmethod
    def transparent(cls) -> Color32:
        return cls(0, 0, 0, 0)

    def to_array(self) -> list[int]:
        return [self.r, self.g, self.b, self.a]


@dataclass
class Vec2:
    x: float
    y: float


@dataclass
class Margin:
    """四边内边距"""

    left: float
    right: float
    top: float
    bottom: float

    @classmethod
    def same(cls, margin: float) -> Margin:
        return cls(margin, margin, margin, margin)


@dataclass
class Rounding:
    """四角圆角半径

    模型始终保存四个角。"统一圆角" 只是编辑器里的便利状态，不进入模型。
    """

    nw: float
    ne: float
    sw: float
    se: float

    @classmethod
    def same(cls, radius: float) -> Rounding:
        return cls(radius, radius, radius, radius)


@dataclass
class Stroke:
    width: float
    color: Color32

    @classmethod
    def none(cls) -> Stroke:
        return cls(0.0, Color32.transparent())


@dataclass
class Shadow:
    """窗口/弹窗阴影"""

    offset: Vec2
    blur: float
    spread: float
    color: Color32


@dataclass
class WidgetVisuals:
    """单个交互状态下控件的外观"""

    bg_fill: Color32
    weak_bg_fill: Color32
    bg_stroke: Stroke
    rounding: Rounding
    fg_stroke: Stroke
    expansion: float


# ============================================================================
# Spacing
# ============================================================================


@dataclass
class ScrollStyle:
    bar_width: float
    handle_min_length: float
    bar_inner_margin: float
    bar_outer_margin: float


@dataclass
class Spacing:
    item_spacing: Vec2
    window_margin: Margin
    button_padding: Vec2
    menu_margin: Margin
    indent: float
    interact_size: Vec2
    slider_width: float
    combo_width: float
    text_edit_width: float
    icon_width: float
    icon_width_inner: float
    icon_spacing: float
    tooltip_width: float
    indent_ends_with_horizontal_line: bool
    combo_height: float
    scroll: ScrollStyle


# ============================================================================
# Interaction
# ============================================================================


@dataclass
class Interaction:
    resize_grab_radius_side: float
    resize_grab_radius_corner: float
    show_tooltips_only_when_still: bool


# ============================================================================
# Visuals
# ============================================================================


@dataclass
class Widgets:
    """五种交互状态的控件外观"""

    noninteractive: WidgetVisuals
    inactive: WidgetVisuals
    hovered: WidgetVisuals
    active: WidgetVisuals
    open: WidgetVisuals

    def states(self) -> list[tuple[str, WidgetVisuals]]:
        """按 egui 声明顺序返回 (名称, 外观)"""
        return [
            ("noninteractive", self.noninteractive),
            ("inactive", self.inactive),
            ("hovered", self.hovered),
            ("active", self.active),
            ("open", self.open),
        ]


@dataclass
class Selection:
    bg_fill: Color32
    stroke: Stroke


@dataclass
class TextCursorStyle:
    stroke: Stroke
    preview: bool


@dataclass
class Visuals:
    dark_mode: bool
    override_text_color: Color32 | None
    widgets: Widgets
    selection: Selection
    hyperlink_color: Color32
    faint_bg_color: Color32
    extreme_bg_color: Color32
    code_bg_color: Color32
    warn_fg_color: Color32
    error_fg_color: Color32
    window_rounding: Rounding
    window_shadow: Shadow
    window_fill: Color32
    window_stroke: Stroke
    menu_rounding: Rounding
    panel_fill: Color32
    popup_shadow: Shadow
    resize_corner_size: float
    text_cursor: TextCursorStyle
    clip_rect_margin: float
    button_frame: bool
    collapsing_header_frame: bool
    indent_has_left_vline: bool
    striped: bool
    slider_trailing_fill: bool


# ============================================================================
# Style - 根类型
# ============================================================================


@dataclass
class Style:
    """完整样式

    wrap 是三态: None = 跟随布局, True = 默认换行, False = 默认不换行
    """

    spacing: Spacing
    interaction: Interaction
    visuals: Visuals
    animation_time: float
    explanation_tooltips: bool
    wrap: bool | None = field(default=None)

    def snapshot(self) -> Style:
        """深拷贝快照，导出/导入操作只使用快照"""
        return copy.deepcopy(self)
