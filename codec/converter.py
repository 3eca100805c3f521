# -*- coding: utf-8 -*-
"""
cattrs Converter 配置

注册 Style 各类型的序列化规则，并提供 JSON 编解码入口。

JSON 结构与 egui 的 serde 输出一致:
- Color32 -> [r, g, b, a]
- Vec2 / Margin / Rounding / Stroke / Shadow -> 字段名对象
- wrap / override_text_color -> null 表示未设置
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Type, TypeVar

import cattrs
from cattrs.v import format_exception

from specs import Color32, Style


logger = logging.getLogger(__name__)

T = TypeVar("T")


# ============================================================================
# 错误类型
# ============================================================================


class CodecError(Exception):
    """编解码错误基类"""
    pass


class EncodeError(CodecError):
    """样式无法序列化 (对合法的 Style 理论上不会发生)"""
    pass


class DecodeError(CodecError):
    """输入数据损坏或不完整

    Attributes:
        path: 出错字段的路径 (如 "$.visuals.hyperlink_color")，未知时为 None
        offset: 出错位置在输入中的字符偏移，未知时为 None
    """

    def __init__(self, message: str, *, path: str | None = None, offset: int | None = None):
        super().__init__(message)
        self.path = path
        self.offset = offset


# ============================================================================
# 严格的标量 hooks
# ============================================================================
# cattrs 默认的 float/bool hook 会做宽松转换 (如 "1.5" -> 1.5, 1 -> True)，
# 导入时必须拒绝形状错误的数据，所以全部替换为严格版本。


def _structure_float(value: Any, _: Type) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"期望数值，实际为 {type(value).__name__}")
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"数值必须是有限的，实际为 {value!r}")
    return result


def _structure_bool(value: Any, _: Type) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"期望布尔值，实际为 {type(value).__name__}")
    return value


def _structure_int(value: Any, _: Type) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"期望整数，实际为 {type(value).__name__}")
    return value


def _check_channel(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"颜色通道必须是整数，实际为 {value!r}")
    if not 0 <= value <= 255:
        raise ValueError(f"颜色通道超出 0-255 范围: {value}")
    return value


# ============================================================================
# Color32: [r, g, b, a]
# ============================================================================


def _unstructure_color(color: Color32) -> list[int]:
    return [_check_channel(channel) for channel in color.to_array()]


def _structure_color(value: Any, _: Type) -> Color32:
    if not isinstance(value, list):
        raise ValueError(f"颜色必须是 [r, g, b, a] 数组，实际为 {type(value).__name__}")
    if len(value) != 4:
        raise ValueError(f"颜色必须有 4 个通道 (r, g, b, a)，实际为 {len(value)} 个")
    r, g, b, a = (_check_channel(channel) for channel in value)
    return Color32(r, g, b, a)


# ============================================================================
# Converter 创建
# ============================================================================


def create_converter() -> cattrs.Converter:
    """创建配置好的 cattrs Converter

    detailed_validation 保持开启，错误会带上字段路径。
    """
    conv = cattrs.Converter(detailed_validation=True)

    conv.register_structure_hook(float, _structure_float)
    conv.register_structure_hook(bool, _structure_bool)
    conv.register_structure_hook(int, _structure_int)

    conv.register_unstructure_hook(Color32, _unstructure_color)
    conv.register_structure_hook(Color32, _structure_color)

    return conv


# ============================================================================
# 全局 Converter 实例
# ============================================================================

_converter = create_converter()


# ============================================================================
# 公共 API
# ============================================================================


def unstructure(obj: Any) -> Any:
    """将对象序列化为 dict/list/primitive"""
    return _converter.unstructure(obj)


def structure(data: Any, cls: Type[T]) -> T:
    """将 dict/list/primitive 反序列化为对象"""
    return _converter.structure(data, cls)


def encode(style: Style, pretty: bool = False) -> bytes:
    """将 Style 编码为 UTF-8 JSON

    Args:
        style: 完整的样式
        pretty: 是否缩进 (只影响空白，不影响内容)

    Raises:
        EncodeError: 样式包含无法表示的值 (非有限浮点数、越界颜色通道等)
    """
    try:
        data = _converter.unstructure(style, Style)
        if pretty:
            text = json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
        else:
            text = json.dumps(
                data, separators=(",", ":"), ensure_ascii=False, allow_nan=False
            )
    except (TypeError, ValueError) as e:
        raise EncodeError(f"样式序列化失败: {e}") from e

    logger.debug("encoded style to %d bytes of JSON (pretty=%s)", len(text), pretty)
    return text.encode("utf-8")


def decode(data: bytes | str) -> Style:
    """从 JSON 解析出新的 Style

    总是构造一个全新的对象，调用方在成功后再替换自己的样式。

    Raises:
        DecodeError: 输入不是合法 JSON、缺少字段或字段形状错误
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(
                f"文件不是有效的 UTF-8 文本 (字节偏移 {e.start})", offset=e.start
            ) from e
    else:
        text = data

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(
            f"JSON 格式错误: {e.msg} (第 {e.lineno} 行, 第 {e.colno} 列)",
            offset=e.pos,
        ) from e
    except RecursionError as e:
        raise DecodeError("JSON 嵌套过深") from e

    if not isinstance(raw, dict):
        raise DecodeError(
            f"样式数据的顶层必须是对象，实际为 {type(raw).__name__}", path="$"
        )

    try:
        return _converter.structure(raw, Style)
    except cattrs.BaseValidationError as e:
        errors = cattrs.transform_error(e, path="$", format_exception=_format_exception)
        raise DecodeError(
            "样式数据无效: " + "; ".join(errors),
            path=_first_path(errors),
        ) from e


# ============================================================================
# 错误消息辅助函数
# ============================================================================


def _format_exception(exc: BaseException, type_: Type | None) -> str:
    """cattrs 错误 -> 可读消息 (保留 hook 自己的描述)"""
    if isinstance(exc, KeyError):
        return "缺少必需字段"
    if isinstance(exc, ValueError) and exc.args:
        return str(exc)
    return format_exception(exc, type_)


def _first_path(errors: list[str]) -> str | None:
    """从 "消息 @ $.a.b" 形式的错误列表中取出第一个路径"""
    for error in errors:
        _, sep, path = error.rpartition(" @ ")
        if sep:
            return path
    return None
