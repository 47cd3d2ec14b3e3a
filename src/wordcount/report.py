"""
统计结果输出（Reporter）。

支持三种格式：
- debug: Python 字典表示，例如 ``{'aa': 1, 'bb': 2}``
- json: JSON 对象，非 ASCII 字符原样输出
- rich: Rich 表格

输出顺序即字典的插入顺序（token 首次出现的顺序），不做排序。
"""

from __future__ import annotations

import json

from rich.markup import escape
from rich.table import Table

from wordcount.counter import FrequencyMap

OUTPUT_FORMATS = ("debug", "json", "rich")


def format_debug(freqs: FrequencyMap) -> str:
    """返回字典的调试表示。"""
    return repr(freqs)


def format_json(freqs: FrequencyMap, indent: int | None = None) -> str:
    """返回 JSON 字符串。"""
    return json.dumps(freqs, ensure_ascii=False, indent=indent)


def format_count(value: int) -> str:
    """
    格式化计数为带千分位分隔符的字符串。

        >>> format_count(128000)
        '128,000'
    """
    return f"{value:,}"


def create_frequency_table(freqs: FrequencyMap, title: str = "频度统计") -> Table:
    """
    创建频度表格。

    参数:
        freqs: 统计结果
        title: 表格标题

    返回:
        Rich Table 对象，最后一行为合计
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Token", style="cyan")
    table.add_column("次数", justify="right", style="blue")

    for token, value in freqs.items():
        # repr 让空白、制表符等不可见 token 也能看清
        table.add_row(escape(repr(token)), format_count(value))

    table.add_section()
    table.add_row(
        f"[bold]合计（{format_count(len(freqs))} 个不同 token）[/bold]",
        f"[bold]{format_count(sum(freqs.values()))}[/bold]",
    )
    return table
