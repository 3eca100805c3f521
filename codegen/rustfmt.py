# -*- coding: utf-8 -*-
"""rustfmt 格式化

生成的源码必须经过格式化才能返回，保证同一输入得到逐字节相同的输出。
格式化失败时不返回未格式化文本。
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Protocol

import settings


logger = logging.getLogger(__name__)


class FormatterFailure(Exception):
    """格式化器拒绝输入，消息是格式化器的原始诊断"""
    pass


class SourceFormatter(Protocol):
    """源码格式化器接口"""

    def format_str(self, source: str) -> str:
        ...


class RustFmt:
    """调用 rustfmt 可执行文件 (从 stdin 读入，结果写到 stdout)

    Args:
        executable: rustfmt 路径，默认读取 settings
        edition: Rust edition，默认读取 settings
    """

    def __init__(self, executable: str | None = None, edition: str | None = None):
        self.executable = executable or settings.get_rustfmt_path()
        self.edition = edition or settings.get_rust_edition()

    def is_available(self) -> bool:
        return shutil.which(self.executable) is not None

    def format_str(self, source: str) -> str:
        cmd = [self.executable, "--edition", self.edition]
        logger.debug("running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                input=source,
                capture_output=True,
                text=True,
                encoding="utf-8",
            )
        except OSError as e:
            raise FormatterFailure(f"无法运行 {self.executable}: {e}") from e

        if result.returncode != 0:
            raise FormatterFailure(result.stderr.strip() or f"{self.executable} 退出码 {result.returncode}")

        return result.stdout
