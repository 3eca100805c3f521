# -*- coding: utf-8 -*-
"""
Rust 源码生成器

模板渲染 + 值渲染规则 + rustfmt，把 Style 转成一个 `pub fn style() -> Style`。
纯函数: 相同输入得到逐字节相同的输出，不做任何文件 I/O。
"""

from __future__ import annotations

import logging

import jinja2

from codegen.helpers import FILTERS
from codegen.rustfmt import FormatterFailure, RustFmt, SourceFormatter
from codegen.template import STYLE_TEMPLATE
from specs import Style


logger = logging.getLogger(__name__)


# ============== 错误类型 ==============


class GenError(Exception):
    """源码生成错误基类"""
    pass


class TemplateBindingError(GenError):
    """模板插入点无法绑定到样式字段

    对合法的 Style 不应发生，出现即说明调用方违反了模型约定。
    """
    pass


class FormatError(GenError):
    """格式化器拒绝了渲染结果，消息为格式化器的原始诊断"""
    pass


# ============== 模板环境 ==============


def create_environment() -> jinja2.Environment:
    """创建注册好值渲染规则的模板环境

    StrictUndefined: 任何未绑定的插入点都会报错，而不是渲染成空串。
    """
    env = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )
    env.filters.update(FILTERS)
    return env


_template = create_environment().from_string(STYLE_TEMPLATE)


# ============== Rust 代码生成器 ==============


class CodeGenerator:
    """egui Style Rust 源码生成器

    Args:
        formatter: 源码格式化器，默认使用 rustfmt
    """

    def __init__(self, formatter: SourceFormatter | None = None):
        self.formatter = formatter if formatter is not None else RustFmt()

    def render(self, style: Style, eframe: bool = False) -> str:
        """渲染模板 (未格式化)

        Raises:
            TemplateBindingError: 字段缺失或值无法表示为 Rust 字面量
        """
        try:
            return _template.render(style=style, eframe=eframe)
        except jinja2.UndefinedError as e:
            raise TemplateBindingError(f"模板字段绑定失败: {e.message}") from e
        except (ValueError, TypeError, AttributeError) as e:
            raise TemplateBindingError(f"无法渲染样式值: {e}") from e

    def generate(self, style: Style, eframe: bool = False) -> str:
        """生成格式化后的完整 Rust 源码

        Args:
            style: 完整的样式快照
            eframe: 是否加入 eframe 集成 (`use eframe::egui;`)

        Raises:
            TemplateBindingError: 模板绑定失败
            FormatError: 格式化失败 (不会返回未格式化的文本)
        """
        raw = self.render(style, eframe=eframe)

        try:
            formatted = self.formatter.format_str(raw)
        except FormatterFailure as e:
            raise FormatError(str(e)) from e

        logger.debug("generated %d characters of Rust source (eframe=%s)", len(formatted), eframe)
        return formatted


def generate_source(style: Style, eframe: bool = False) -> str:
    """使用默认格式化器生成 Rust 源码"""
    return CodeGenerator().generate(style, eframe=eframe)
