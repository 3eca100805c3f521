# -*- coding: utf-8 -*-
"""
Rust 源码生成模块

把 Style 渲染成可直接编译的 egui 源码。
"""

from .generator import (
    CodeGenerator,
    FormatError,
    GenError,
    TemplateBindingError,
    generate_source,
)
from .rustfmt import FormatterFailure, RustFmt, SourceFormatter

__all__ = [
    "CodeGenerator",
    "FormatError",
    "FormatterFailure",
    "GenError",
    "RustFmt",
    "SourceFormatter",
    "TemplateBindingError",
    "generate_source",
]
