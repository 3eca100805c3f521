# -*- coding: utf-8 -*-
"""通知服务

Notifier 协议的控制台实现。会话层把每次导入/导出的结果显式传进来，
这里不保存任何全局消息队列。

使用方式:
    notifier = ConsoleNotifier()
    notifier.notify("导出完成", Severity.SUCCESS)
"""

import logging
import sys
from typing import TextIO

from ui.protocols import Severity

logger = logging.getLogger(__name__)

_PREFIX = {
    Severity.INFO: "[i]",
    Severity.SUCCESS: "[OK]",
    Severity.ERROR: "[X]",
}


class ConsoleNotifier:
    """把通知打印到终端 (错误写到 stderr)"""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        self._out = out
        self._err = err

    def notify(self, message: str, severity: Severity) -> None:
        if severity is Severity.ERROR:
            logger.error(message.split("\n")[0])
            stream = self._err or sys.stderr
        else:
            stream = self._out or sys.stdout
        print(f"{_PREFIX[severity]} {message}", file=stream)
