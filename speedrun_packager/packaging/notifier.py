# speedrun_packager/packaging/notifier.py
from __future__ import annotations

import sys
from abc import ABC, abstractmethod

from rich.console import Console
from rich.panel import Panel


class Notifier(ABC):
    """
    用户可见的阻塞式提示（与日志流分开）。
    GUI 宿主注入自己的实现（模态对话框）。
    """

    @abstractmethod
    def error(self, title: str, message: str) -> None:
        ...


class ConsoleNotifier(Notifier):
    """终端版：红框提示，连接 TTY 时等待回车。"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    def error(self, title: str, message: str) -> None:
        self.console.print(Panel(message, title=title, border_style="red"))
        if sys.stdin is not None and sys.stdin.isatty():
            self.console.input("[dim]Press Enter to continue...[/dim]")
