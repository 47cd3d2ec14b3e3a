"""
CLI 工具函数 — Rich 输出与统一的错误处理。
"""

from __future__ import annotations

import sys
from typing import NoReturn

from rich.console import Console
from rich.markup import escape

from wordcount.errors import WordCountError

_console: Console | None = None


def create_console() -> Console:
    """
    创建或获取全局 Rich Console 实例。

    # [DX Decision] 全局单例 Console，确保所有 CLI 输出格式一致。
    """
    global _console
    if _console is None:
        _console = Console()
    return _console


def print_error(message: str, exit_code: int = 1) -> NoReturn:
    """
    打印错误信息并退出程序。

    参数:
        message: 错误信息
        exit_code: 退出码（默认 1）
    """
    console = create_console()
    # [DX Decision] 使用 X 而非 ✗，避免 Windows 终端编码问题
    console.print(f"[bold red]X 错误：[/bold red]{escape(message)}")
    sys.exit(exit_code)


def print_plain(text: str) -> None:
    """原样输出文本：不解析 Rich 标记与 emoji 代码，也不自动换行。"""
    create_console().print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


def handle_wordcount_error(error: WordCountError) -> NoReturn:
    """
    统一处理 WordCountError：输出三段式错误信息并以退出码 1 终止。
    """
    console = create_console()
    console.print("[bold red]X 错误[/bold red]")
    console.print(escape(error.full_message))
    sys.exit(1)
