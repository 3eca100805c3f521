# -*- coding: utf-8 -*-
"""类型协议

会话层只依赖这些协议，具体实现 (tkinter 对话框、控制台通知) 在 ui 的其他模块中。
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Severity(Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class Storage(Protocol):
    """文件存储协作者

    pick_* 返回 None 表示用户取消了对话框。
    read/write 失败时抛出 OSError。
    """

    def pick_save_destination(
        self, suggested_name: str, filter_description: str, filter_extension: str
    ) -> str | None:
        ...

    def write(self, destination: str, data: bytes) -> None:
        ...

    def pick_open_source(self, filter_description: str, filter_extension: str) -> str | None:
        ...

    def read(self, source: str) -> bytes:
        ...


class Notifier(Protocol):
    """向用户展示消息"""

    def notify(self, message: str, severity: Severity) -> None:
        ...
