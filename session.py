# -*- coding: utf-8 -*-
"""
编辑会话

持有唯一的实时样式，并调度耗时的存储操作 (文件对话框、磁盘读写)。

线程模型:
- 生成/序列化是纯计算，在调用线程同步完成
- 存储操作提交到后台 executor，不阻塞渲染循环
- 结果只在 poll() 中合并 (主循环每帧调用一次)，实时样式只有这一个写入点

使用方式:
    session = StyleSession(TkStorage(), ConsoleNotifier())
    session.export_to_storage(ExportFormat.JSON, ExportOptions(json_pretty=True))

    # 主循环中
    session.poll()
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Literal

from codegen import CodeGenerator
from presets import PresetName, default_style, preset
from specs import Style
from transfer import ExportFormat, ExportOptions, TransferError, export_style, import_style
from ui.protocols import Notifier, Severity, Storage


logger = logging.getLogger(__name__)


@dataclass
class _PendingOp:
    """进行中的存储操作"""

    kind: Literal["export", "import"]
    label: str
    future: Future


class StyleSession:
    """样式编辑会话

    Args:
        storage: 文件存储协作者
        notifier: 用户通知协作者
        style: 初始样式，默认 egui 默认样式
        executor: 存储操作的执行器，默认单线程池
        generator: Rust 源码生成器，默认使用 rustfmt
    """

    def __init__(
        self,
        storage: Storage,
        notifier: Notifier,
        style: Style | None = None,
        executor: Executor | None = None,
        generator: CodeGenerator | None = None,
    ):
        self.storage = storage
        self.notifier = notifier
        self.style = style if style is not None else default_style()
        self.generator = generator
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="style-storage"
        )
        self._pending: list[_PendingOp] = []

    # ==================== 编辑 ====================

    def reset(self, name: PresetName) -> None:
        """重置为 Light / Dark 预设"""
        self.style = preset(name)
        logger.info("style reset to %s preset", name)

    @property
    def pending(self) -> int:
        """尚未合并的存储操作数量"""
        return len(self._pending)

    # ==================== 导出 ====================

    def export_to_storage(self, fmt: ExportFormat, options: ExportOptions = ExportOptions()) -> bool:
        """导出当前样式并在后台保存

        生成失败时立即通知用户，不会打开保存对话框。

        Returns:
            是否已提交保存操作
        """
        try:
            data = export_style(self.style, fmt, options, generator=self.generator)
        except TransferError as e:
            self.notifier.notify(str(e), Severity.ERROR)
            return False

        future = self._executor.submit(self._save, data, fmt)
        self._pending.append(_PendingOp("export", fmt.label, future))
        return True

    def _save(self, data: bytes, fmt: ExportFormat) -> str | None:
        """后台线程: 选择位置并写入 (用户取消时返回 None)"""
        destination = self.storage.pick_save_destination(fmt.suggested_name, fmt.label, fmt.extension)
        if destination is None:
            return None
        self.storage.write(destination, data)
        return destination

    # ==================== 导入 ====================

    def import_from_storage(self) -> None:
        """在后台选择并读取 JSON 文件，结果在 poll() 中合并"""
        future = self._executor.submit(self._load)
        self._pending.append(_PendingOp("import", ExportFormat.JSON.label, future))

    def _load(self) -> bytes | None:
        """后台线程: 选择文件并读取 (用户取消时返回 None)"""
        source = self.storage.pick_open_source("JSON file", ExportFormat.JSON.extension)
        if source is None:
            return None
        return self.storage.read(source)

    # ==================== 合并结果 ====================

    def poll(self) -> int:
        """合并已完成的存储操作 (在两帧之间调用)

        Returns:
            本次处理的操作数量
        """
        done = [op for op in self._pending if op.future.done()]
        if not done:
            return 0
        self._pending = [op for op in self._pending if op not in done]

        for op in done:
            try:
                result = op.future.result()
            except Exception as e:
                # 对话框后端的错误 (TclError, RuntimeError) 与 OSError 同样对待
                action = "保存" if op.kind == "export" else "读取"
                logger.exception("%s storage operation failed", op.kind)
                self.notifier.notify(f"{action}文件失败: {e}", Severity.ERROR)
                continue

            if result is None:
                # 用户关闭了对话框
                logger.debug("%s cancelled by user", op.kind)
                continue

            if op.kind == "export":
                self.notifier.notify(f"已导出 {op.label}: {result}", Severity.SUCCESS)
            else:
                self._apply_import(result)

        return len(done)

    def _apply_import(self, data: bytes) -> None:
        try:
            style = import_style(data)
        except TransferError as e:
            self.notifier.notify(str(e), Severity.ERROR)
            return
        self.style = style
        self.notifier.notify("样式已导入", Severity.SUCCESS)

    # ==================== 生命周期 ====================

    def close(self, wait: bool = True) -> None:
        """关闭会话拥有的执行器"""
        if self._owns_executor:
            self._executor.shutdown(wait=wait)
