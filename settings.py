# -*- coding: utf-8 -*-
"""导出配置管理

全局导出配置状态，包括 rustfmt 路径和导出默认选项。
"""

import json
import logging
import os

logger = logging.getLogger(__name__)

# ==================== 配置状态 ====================

_rustfmt_path: str = "rustfmt"
_rust_edition: str = "2021"
_export_format: str = "rust"  # "rust" | "json"
_eframe: bool = False
_json_pretty: bool = True

_VALID_FORMATS = ("rust", "json")


# ==================== rustfmt ====================


def get_rustfmt_path() -> str:
    """获取 rustfmt 可执行文件路径"""
    return _rustfmt_path


def set_rustfmt_path(path: str) -> None:
    global _rustfmt_path
    _rustfmt_path = path or "rustfmt"


def get_rust_edition() -> str:
    return _rust_edition


# ==================== 导出默认值 ====================


def get_export_format() -> str:
    """默认导出格式 ("rust" 或 "json")"""
    return _export_format


def set_export_format(name: str) -> None:
    global _export_format
    if name not in _VALID_FORMATS:
        raise ValueError(f"未知的导出格式: {name}")
    _export_format = name


def get_eframe() -> bool:
    return _eframe


def get_json_pretty() -> bool:
    return _json_pretty


def set_export_flags(eframe: bool, json_pretty: bool) -> None:
    global _eframe, _json_pretty
    _eframe = eframe
    _json_pretty = json_pretty


# ==================== 配置文件 ====================

DEFAULT_CONFIG_PATH = "themer.json"


def load_from_file(path: str = DEFAULT_CONFIG_PATH) -> None:
    """从文件加载配置 (文件不存在时保持默认值)"""
    global _rustfmt_path, _rust_edition, _export_format, _eframe, _json_pretty

    if not os.path.exists(path):
        return

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("加载配置失败: %s", e)
        return

    if not isinstance(data, dict):
        logger.warning("配置文件格式错误: %s", path)
        return

    _rustfmt_path = data.get("rustfmt_path", _rustfmt_path) or "rustfmt"
    _rust_edition = str(data.get("rust_edition", _rust_edition))
    export_format = data.get("export_format", _export_format)
    if export_format in _VALID_FORMATS:
        _export_format = export_format
    else:
        logger.warning("忽略未知的导出格式: %r", export_format)
    _eframe = _read_flag(data, "eframe", _eframe)
    _json_pretty = _read_flag(data, "json_pretty", _json_pretty)


def _read_flag(data: dict, key: str, current: bool) -> bool:
    """读取布尔选项，类型不对时保留当前值"""
    value = data.get(key, current)
    if isinstance(value, bool):
        return value
    logger.warning("忽略非布尔值的配置项 %s: %r", key, value)
    return current


def save_to_file(path: str = DEFAULT_CONFIG_PATH) -> None:
    """保存配置到文件"""
    data = {
        "rustfmt_path": _rustfmt_path,
        "rust_edition": _rust_edition,
        "export_format": _export_format,
        "eframe": _eframe,
        "json_pretty": _json_pretty,
    }
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4)
    except OSError as e:
        logger.warning("保存配置失败: %s", e)


def reset() -> None:
    """恢复默认配置"""
    global _rustfmt_path, _rust_edition, _export_format, _eframe, _json_pretty
    _rustfmt_path = "rustfmt"
    _rust_edition = "2021"
    _export_format = "rust"
    _eframe = False
    _json_pretty = True
