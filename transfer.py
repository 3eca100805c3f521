# -*- coding: utf-8 -*-
"""
导入/导出入口

GUI 层只调用这里的两个函数:
    data = export_style(style, ExportFormat.RUST_SOURCE, ExportOptions(eframe=True))
    style = import_style(data)

内部组件保留结构化的错误类型；这里是唯一把错误压平为显示字符串的地方。
文件选择和读写由调用方负责，这里不做 I/O。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

import codec
from codegen import CodeGenerator, GenError
from specs import Style


logger = logging.getLogger(__name__)


class TransferError(Exception):
    """导入/导出失败，消息可直接展示给用户"""
    pass


class ExportFormat(Enum):
    RUST_SOURCE = "rust"
    JSON = "json"

    @property
    def label(self) -> str:
        match self:
            case ExportFormat.RUST_SOURCE:
                return "Rust Source"
            case ExportFormat.JSON:
                return "JSON"

    @property
    def extension(self) -> str:
        match self:
            case ExportFormat.RUST_SOURCE:
                return "rs"
            case ExportFormat.JSON:
                return "json"

    @property
    def suggested_name(self) -> str:
        return f"style.{self.extension}"


@dataclass(frozen=True)
class ExportOptions:
    """导出选项

    eframe 只对 Rust 源码有效，json_pretty 只对 JSON 有效。
    """

    eframe: bool = False
    json_pretty: bool = False


def export_style(
    style: Style,
    fmt: ExportFormat,
    options: ExportOptions = ExportOptions(),
    generator: CodeGenerator | None = None,
) -> bytes:
    """导出样式为字节串

    Raises:
        TransferError: 生成或序列化失败
    """
    snapshot = style.snapshot()

    try:
        match fmt:
            case ExportFormat.RUST_SOURCE:
                gen = generator if generator is not None else CodeGenerator()
                data = gen.generate(snapshot, eframe=options.eframe).encode("utf-8")
            case ExportFormat.JSON:
                data = codec.encode(snapshot, pretty=options.json_pretty)
    except (GenError, codec.EncodeError) as e:
        logger.error("export to %s failed: %s", fmt.label, e)
        raise TransferError(f"导出错误: {e}") from e

    logger.info("exported style as %s (%d bytes)", fmt.label, len(data))
    return data


def import_style(data: bytes) -> Style:
    """从 JSON 字节串导入样式 (返回新对象)

    Raises:
        TransferError: 数据无法解析
    """
    try:
        style = codec.decode(data)
    except codec.DecodeError as e:
        logger.error("import failed: %s", e)
        raise TransferError(f"导入错误: {e}") from e

    logger.info("imported style (%d bytes)", len(data))
    return style
