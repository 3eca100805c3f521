# -*- coding: utf-8 -*-
"""UI 边界模块 - egui 样式编辑器

只包含核心引擎与外部世界之间的协作者，不渲染任何控件。
使用惰性加载，tkinter 在首次访问 dialogs 时才导入。

模块结构：
- protocols.py: 协作者协议 (Storage, Notifier, Severity)
- dialogs.py: 文件对话框与读写 (TkStorage)
- popups.py: 通知服务 (ConsoleNotifier)
"""

from typing import TYPE_CHECKING

# =============================================================================
# 惰性加载映射
# =============================================================================
# 模块名 -> 导入路径
_LAZY_MODULES = {
    'protocols': 'ui.protocols',
    'dialogs': 'ui.dialogs',
    'popups': 'ui.popups',
}

# 属性名 -> (模块路径, 属性名)
_LAZY_ATTRS = {
    'Severity': ('ui.protocols', 'Severity'),
    'Storage': ('ui.protocols', 'Storage'),
    'Notifier': ('ui.protocols', 'Notifier'),
    'TkStorage': ('ui.dialogs', 'TkStorage'),
    'ConsoleNotifier': ('ui.popups', 'ConsoleNotifier'),
}

# 已加载的缓存
_loaded_modules: dict = {}
_loaded_attrs: dict = {}


def __getattr__(name: str):
    """惰性加载模块和属性"""
    # 先检查模块
    if name in _LAZY_MODULES:
        if name not in _loaded_modules:
            import importlib
            _loaded_modules[name] = importlib.import_module(_LAZY_MODULES[name])
        return _loaded_modules[name]

    # 再检查属性
    if name in _LAZY_ATTRS:
        if name not in _loaded_attrs:
            import importlib
            module_path, attr_name = _LAZY_ATTRS[name]
            module = importlib.import_module(module_path)
            _loaded_attrs[name] = getattr(module, attr_name)
        return _loaded_attrs[name]

    raise AttributeError(f"module 'ui' has no attribute {name!r}")


def __dir__():
    """支持自动补全"""
    return list(_LAZY_MODULES.keys()) + list(_LAZY_ATTRS.keys())


# 类型协议（仅用于类型检查，不影响运行时）
if TYPE_CHECKING:
    from ui import dialogs as dialogs
    from ui import popups as popups
    from ui import protocols as protocols
    from ui.dialogs import TkStorage as TkStorage
    from ui.popups import ConsoleNotifier as ConsoleNotifier
    from ui.protocols import Notifier as Notifier, Severity as Severity, Storage as Storage


__all__ = [
    # 子模块
    'protocols', 'dialogs', 'popups',
    # 协议
    'Severity', 'Storage', 'Notifier',
    # 实现
    'TkStorage', 'ConsoleNotifier',
]
