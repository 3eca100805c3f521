# -*- coding: utf-8 -*-
"""
预设样式

egui 内置的 Light / Dark 默认值 (Style::default() + Visuals::light()/dark())。
编辑器的 "重置" 按钮和测试夹具都从这里取值。
"""

from __future__ import annotations

from typing import Callable, Literal

from specs import (
    Color32,
    Interaction,
    Margin,
    Rounding,
    ScrollStyle,
    Selection,
    Shadow,
    Spacing,
    Stroke,
    Style,
    TextCursorStyle,
    Vec2,
    Visuals,
    WidgetVisuals,
    Widgets,
)


PresetName = Literal["light", "dark"]

# egui 的 animation_time 是 f32 (1/12 秒)，这里保存其扩展为 f64 后的精确值
ANIMATION_TIME = 0.0833333358168602


# ============================================================================
# 与明暗无关的部分
# ============================================================================


def default_spacing() -> Spacing:
    return Spacing(
        item_spacing=Vec2(8.0, 3.0),
        window_margin=Margin.same(6.0),
        button_padding=Vec2(4.0, 1.0),
        menu_margin=Margin.same(6.0),
        indent=18.0,
        interact_size=Vec2(40.0, 18.0),
        slider_width=100.0,
        combo_width=100.0,
        text_edit_width=280.0,
        icon_width=14.0,
        icon_width_inner=8.0,
        icon_spacing=4.0,
        tooltip_width=500.0,
        indent_ends_with_horizontal_line=False,
        combo_height=200.0,
        scroll=ScrollStyle(
            bar_width=10.0,
            handle_min_length=12.0,
            bar_inner_margin=4.0,
            bar_outer_margin=0.0,
        ),
    )


def default_interaction() -> Interaction:
    return Interaction(
        resize_grab_radius_side=5.0,
        resize_grab_radius_corner=10.0,
        show_tooltips_only_when_still=True,
    )


def _widget(
    bg_fill: Color32,
    weak_bg_fill: Color32,
    bg_stroke: Stroke,
    rounding: float,
    fg_stroke: Stroke,
    expansion: float,
) -> WidgetVisuals:
    return WidgetVisuals(
        bg_fill=bg_fill,
        weak_bg_fill=weak_bg_fill,
        bg_stroke=bg_stroke,
        rounding=Rounding.same(rounding),
        fg_stroke=fg_stroke,
        expansion=expansion,
    )


# ============================================================================
# Visuals
# ============================================================================


def light_widgets() -> Widgets:
    gray = Color32.from_gray
    black = Color32.from_gray(0)
    return Widgets(
        noninteractive=_widget(
            gray(248), gray(248), Stroke(1.0, gray(190)), 2.0, Stroke(1.0, gray(80)), 0.0
        ),
        inactive=_widget(
            gray(230), gray(230), Stroke.none(), 2.0, Stroke(1.0, gray(60)), 0.0
        ),
        hovered=_widget(
            gray(220), gray(220), Stroke(1.0, gray(105)), 3.0, Stroke(1.5, black), 1.0
        ),
        active=_widget(
            gray(165), gray(165), Stroke(1.0, black), 2.0, Stroke(2.0, black), 1.0
        ),
        open=_widget(
            gray(220), gray(220), Stroke(1.0, gray(160)), 2.0, Stroke(1.0, black), 0.0
        ),
    )


def dark_widgets() -> Widgets:
    gray = Color32.from_gray
    white = Color32.from_gray(255)
    return Widgets(
        noninteractive=_widget(
            gray(27), gray(27), Stroke(1.0, gray(60)), 2.0, Stroke(1.0, gray(140)), 0.0
        ),
        inactive=_widget(
            gray(60), gray(60), Stroke.none(), 2.0, Stroke(1.0, gray(180)), 0.0
        ),
        hovered=_widget(
            gray(70), gray(70), Stroke(1.0, gray(150)), 3.0, Stroke(1.5, gray(240)), 1.0
        ),
        active=_widget(
            gray(55), gray(55), Stroke(1.0, white), 2.0, Stroke(2.0, white), 1.0
        ),
        open=_widget(
            gray(27), gray(45), Stroke(1.0, gray(60)), 2.0, Stroke(1.0, gray(210)), 0.0
        ),
    )


def _visuals(
    *,
    dark_mode: bool,
    widgets: Widgets,
    selection: Selection,
    hyperlink_color: Color32,
    extreme_bg_color: Color32,
    code_bg_color: Color32,
    warn_fg_color: Color32,
    fill: Color32,
    stroke: Color32,
    shadow_alpha: int,
) -> Visuals:
    """Light/Dark 共用的 Visuals 骨架，只有颜色不同"""
    return Visuals(
        dark_mode=dark_mode,
        override_text_color=None,
        widgets=widgets,
        selection=selection,
        hyperlink_color=hyperlink_color,
        faint_bg_color=Color32.from_additive_luminance(5),
        extreme_bg_color=extreme_bg_color,
        code_bg_color=code_bg_color,
        warn_fg_color=warn_fg_color,
        error_fg_color=Color32.from_rgb(255, 0, 0),
        window_rounding=Rounding.same(6.0),
        window_shadow=Shadow(
            offset=Vec2(10.0, 20.0),
            blur=15.0,
            spread=0.0,
            color=Color32.from_black_alpha(shadow_alpha),
        ),
        window_fill=fill,
        window_stroke=Stroke(1.0, stroke),
        menu_rounding=Rounding.same(6.0),
        panel_fill=fill,
        popup_shadow=Shadow(
            offset=Vec2(6.0, 10.0),
            blur=8.0,
            spread=0.0,
            color=Color32.from_black_alpha(shadow_alpha),
        ),
        resize_corner_size=12.0,
        text_cursor=TextCursorStyle(stroke=Stroke(2.0, selection.stroke.color), preview=False),
        clip_rect_margin=3.0,
        button_frame=True,
        collapsing_header_frame=False,
        indent_has_left_vline=True,
        striped=False,
        slider_trailing_fill=False,
    )


def light_visuals() -> Visuals:
    return _visuals(
        dark_mode=False,
        widgets=light_widgets(),
        selection=Selection(
            bg_fill=Color32.from_rgb(144, 209, 255),
            stroke=Stroke(1.0, Color32.from_rgb(0, 83, 125)),
        ),
        hyperlink_color=Color32.from_rgb(0, 155, 255),
        extreme_bg_color=Color32.from_gray(255),
        code_bg_color=Color32.from_gray(230),
        warn_fg_color=Color32.from_rgb(255, 100, 0),
        fill=Color32.from_gray(248),
        stroke=Color32.from_gray(190),
        shadow_alpha=25,
    )


def dark_visuals() -> Visuals:
    return _visuals(
        dark_mode=True,
        widgets=dark_widgets(),
        selection=Selection(
            bg_fill=Color32.from_rgb(0, 92, 128),
            stroke=Stroke(1.0, Color32.from_rgb(192, 222, 255)),
        ),
        hyperlink_color=Color32.from_rgb(90, 170, 255),
        extreme_bg_color=Color32.from_gray(10),
        code_bg_color=Color32.from_gray(64),
        warn_fg_color=Color32.from_rgb(255, 143, 0),
        fill=Color32.from_gray(27),
        stroke=Color32.from_gray(60),
        shadow_alpha=96,
    )


# ============================================================================
# 完整 Style
# ============================================================================


def _style(visuals: Visuals) -> Style:
    return Style(
        spacing=default_spacing(),
        interaction=default_interaction(),
        visuals=visuals,
        animation_time=ANIMATION_TIME,
        explanation_tooltips=False,
        wrap=None,
    )


def light_style() -> Style:
    """Style { visuals: Visuals::light(), ..Default::default() }"""
    return _style(light_visuals())


def dark_style() -> Style:
    """Style { visuals: Visuals::dark(), ..Default::default() }"""
    return _style(dark_visuals())


def default_style() -> Style:
    """egui 默认样式 (暗色)"""
    return dark_style()


PRESETS: dict[str, Callable[[], Style]] = {
    "light": light_style,
    "dark": dark_style,
}


def preset(name: PresetName) -> Style:
    """按名称构建预设样式

    Raises:
        KeyError: 未知的预设名
    """
    return PRESETS[name]()
