# -*- coding: utf-8 -*-
"""对话框模块

提供保存/打开文件对话框，以及对应的文件读写 (Storage 协议的 tkinter 实现)。
"""

from __future__ import annotations

import logging
import tkinter as tk
from pathlib import Path
from tkinter import filedialog

logger = logging.getLogger(__name__)


def _make_root() -> tk.Tk:
    root = tk.Tk()
    root.withdraw()
    root.attributes("-topmost", True)  # type: ignore[call-overload]
    return root


def save_file_dialog(
    suggested_name: str, filter_description: str, filter_extension: str
) -> str:
    """保存文件对话框

    Returns:
        选择的文件路径，取消则返回空字符串

    Raises:
        OSError: 对话框无法创建 (无显示环境等)
    """
    root: tk.Tk | None = None
    try:
        root = _make_root()
        return filedialog.asksaveasfilename(
            initialfile=suggested_name,
            defaultextension=f".{filter_extension}",
            filetypes=[(filter_description, f"*.{filter_extension}")],
        )
    except tk.TclError as e:
        raise OSError(f"无法打开保存对话框: {e}") from e
    finally:
        if root:
            root.destroy()


def open_file_dialog(filter_description: str, filter_extension: str) -> str:
    """打开文件对话框

    Returns:
        选择的文件路径，取消则返回空字符串

    Raises:
        OSError: 对话框无法创建 (无显示环境等)
    """
    root: tk.Tk | None = None
    try:
        root = _make_root()
        return filedialog.askopenfilename(
            filetypes=[(filter_description, f"*.{filter_extension}")],
        )
    except tk.TclError as e:
        raise OSError(f"无法打开文件对话框: {e}") from e
    finally:
        if root:
            root.destroy()


class TkStorage:
    """基于 tkinter 文件对话框的 Storage 实现"""

    def pick_save_destination(
        self, suggested_name: str, filter_description: str, filter_extension: str
    ) -> str | None:
        return save_file_dialog(suggested_name, filter_description, filter_extension) or None

    def write(self, destination: str, data: bytes) -> None:
        Path(destination).write_bytes(data)
        logger.debug("wrote %d bytes to %s", len(data), destination)

    def pick_open_source(self, filter_description: str, filter_extension: str) -> str | None:
        return open_file_dialog(filter_description, filter_extension) or None

    def read(self, source: str) -> bytes:
        return Path(source).read_bytes()
