# -*- coding: utf-8 -*-
"""Rust 源码模板

每个插入点绑定 Style 的一个字段，复合类型通过 helpers 中注册的 filter 渲染。
输出不需要手工排版，生成后统一交给 rustfmt。
"""

STYLE_TEMPLATE = """\
// Generated by egui-themer.

{% if eframe %}use eframe::egui;

{% endif %}use egui::{
    epaint::Shadow,
    style::{Interaction, ScrollStyle, Selection, Spacing, TextCursorStyle, WidgetVisuals, Widgets},
    Color32, Margin, Rounding, Stroke, Style, Vec2, Visuals,
};

pub fn style() -> Style {
    Style {
        // override the text styles here:
        // override_text_style: Option<TextStyle>

        // override the font id here:
        // override_font_id: Option<FontId>

        // set your text styles here:
        // text_styles: BTreeMap<TextStyle, FontId>,

        // set your drag value text style:
        // drag_value_text_style: TextStyle,
        spacing: Spacing {
            item_spacing: {{ style.spacing.item_spacing | vec2 }},
            window_margin: {{ style.spacing.window_margin | margin }},
            button_padding: {{ style.spacing.button_padding | vec2 }},
            menu_margin: {{ style.spacing.menu_margin | margin }},
            indent: {{ style.spacing.indent | f32 }},
            interact_size: {{ style.spacing.interact_size | vec2 }},
            slider_width: {{ style.spacing.slider_width | f32 }},
            combo_width: {{ style.spacing.combo_width | f32 }},
            text_edit_width: {{ style.spacing.text_edit_width | f32 }},
            icon_width: {{ style.spacing.icon_width | f32 }},
            icon_width_inner: {{ style.spacing.icon_width_inner | f32 }},
            icon_spacing: {{ style.spacing.icon_spacing | f32 }},
            tooltip_width: {{ style.spacing.tooltip_width | f32 }},
            indent_ends_with_horizontal_line: {{ style.spacing.indent_ends_with_horizontal_line | rbool }},
            combo_height: {{ style.spacing.combo_height | f32 }},
            scroll: ScrollStyle {
                bar_width: {{ style.spacing.scroll.bar_width | f32 }},
                handle_min_length: {{ style.spacing.scroll.handle_min_length | f32 }},
                bar_inner_margin: {{ style.spacing.scroll.bar_inner_margin | f32 }},
                bar_outer_margin: {{ style.spacing.scroll.bar_outer_margin | f32 }},
                ..Default::default()
            },
            ..Default::default()
        },
        interaction: Interaction {
            resize_grab_radius_side: {{ style.interaction.resize_grab_radius_side | f32 }},
            resize_grab_radius_corner: {{ style.interaction.resize_grab_radius_corner | f32 }},
            show_tooltips_only_when_still: {{ style.interaction.show_tooltips_only_when_still | rbool }},
            ..Default::default()
        },
        visuals: Visuals {
            dark_mode: {{ style.visuals.dark_mode | rbool }},
            override_text_color: {{ style.visuals.override_text_color | option_color32 }},
            widgets: Widgets {
                noninteractive: {{ style.visuals.widgets.noninteractive | widgetvisuals }},
                inactive: {{ style.visuals.widgets.inactive | widgetvisuals }},
                hovered: {{ style.visuals.widgets.hovered | widgetvisuals }},
                active: {{ style.visuals.widgets.active | widgetvisuals }},
                open: {{ style.visuals.widgets.open | widgetvisuals }},
            },
            selection: Selection {
                bg_fill: {{ style.visuals.selection.bg_fill | color32 }},
                stroke: {{ style.visuals.selection.stroke | stroke }},
            },
            hyperlink_color: {{ style.visuals.hyperlink_color | color32 }},
            faint_bg_color: {{ style.visuals.faint_bg_color | color32 }},
            extreme_bg_color: {{ style.visuals.extreme_bg_color | color32 }},
            code_bg_color: {{ style.visuals.code_bg_color | color32 }},
            warn_fg_color: {{ style.visuals.warn_fg_color | color32 }},
            error_fg_color: {{ style.visuals.error_fg_color | color32 }},
            window_rounding: {{ style.visuals.window_rounding | rounding }},
            window_shadow: {{ style.visuals.window_shadow | shadow }},
            window_fill: {{ style.visuals.window_fill | color32 }},
            window_stroke: {{ style.visuals.window_stroke | stroke }},
            menu_rounding: {{ style.visuals.menu_rounding | rounding }},
            panel_fill: {{ style.visuals.panel_fill | color32 }},
            popup_shadow: {{ style.visuals.popup_shadow | shadow }},
            resize_corner_size: {{ style.visuals.resize_corner_size | f32 }},
            text_cursor: TextCursorStyle {
                stroke: {{ style.visuals.text_cursor.stroke | stroke }},
                preview: {{ style.visuals.text_cursor.preview | rbool }},
                ..Default::default()
            },
            clip_rect_margin: {{ style.visuals.clip_rect_margin | f32 }},
            button_frame: {{ style.visuals.button_frame | rbool }},
            collapsing_header_frame: {{ style.visuals.collapsing_header_frame | rbool }},
            indent_has_left_vline: {{ style.visuals.indent_has_left_vline | rbool }},
            striped: {{ style.visuals.striped | rbool }},
            slider_trailing_fill: {{ style.visuals.slider_trailing_fill | rbool }},
            ..Default::default()
        },
        animation_time: {{ style.animation_time | f32 }},
        explanation_tooltips: {{ style.explanation_tooltips | rbool }},
        wrap: {{ style.wrap | option_bool }},
        ..Default::default()
    }
}
"""
