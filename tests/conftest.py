# -*- coding: utf-8 -*-
"""共享测试夹具"""

from __future__ import annotations

import os
import sys
from concurrent.futures import Executor, Future

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import settings
from presets import dark_style, light_style
from ui.protocols import Severity


class PassthroughFormatter:
    """不调用 rustfmt，原样返回渲染结果"""

    def __init__(self):
        self.calls = 0

    def format_str(self, source: str) -> str:
        self.calls += 1
        return source


class InlineExecutor(Executor):
    """在调用线程上立即执行任务"""

    def submit(self, fn, /, *args, **kwargs):
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except BaseException as e:
            future.set_exception(e)
        return future


class FakeStorage:
    """内存中的 Storage，可模拟取消和 I/O 失败"""

    def __init__(self, destination: str | None = "out/style", source: str | None = "in/style.json"):
        self.destination = destination
        self.source = source
        self.files: dict[str, bytes] = {}
        self.fail_io = False
        self.save_requests: list[tuple[str, str, str]] = []

    def pick_save_destination(self, suggested_name, filter_description, filter_extension):
        self.save_requests.append((suggested_name, filter_description, filter_extension))
        return self.destination

    def write(self, destination, data):
        if self.fail_io:
            raise OSError("disk full")
        self.files[destination] = data

    def pick_open_source(self, filter_description, filter_extension):
        return self.source

    def read(self, source):
        if self.fail_io:
            raise OSError("permission denied")
        return self.files[source]


class RecordingNotifier:
    def __init__(self):
        self.messages: list[tuple[str, Severity]] = []

    def notify(self, message, severity):
        self.messages.append((message, severity))

    def severities(self) -> list[Severity]:
        return [s for _, s in self.messages]


@pytest.fixture(autouse=True)
def _reset_settings():
    settings.reset()
    yield
    settings.reset()


@pytest.fixture
def light():
    return light_style()


@pytest.fixture
def dark():
    return dark_style()


@pytest.fixture
def formatter():
    return PassthroughFormatter()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def executor():
    return InlineExecutor()
