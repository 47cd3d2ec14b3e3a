"""
统计模式（CountOption）与模式选择器。

CountOption 是封闭枚举：统计函数只接受枚举值，字符串到枚举的转换
只发生在边界处（CLI / 配置），无效名称也只会在那里出现。
"""

from __future__ import annotations

from enum import Enum

from wordcount.errors import InvalidCountOptionError


class CountOption(str, Enum):
    """
    统计模式。

    - CHAR: Unicode 单个字符（码点）
    - WORD: 匹配正则 ``\\w+`` 的单词
    - LINE: 以 ``\\n`` 分隔的一整行
    """

    CHAR = "char"
    """Unicode 单个字符"""

    WORD = "word"
    """正则 \\w+ 匹配的单词"""

    LINE = "line"
    """\\n 分隔的一行"""


def valid_option_names() -> list[str]:
    """按声明顺序返回所有合法的模式名称。"""
    return [option.value for option in CountOption]


def parse_count_option(name: str) -> CountOption:
    """
    将模式名称转换为 CountOption。

    名称区分大小写，必须与 "char" / "word" / "line" 之一完全相同。

    参数:
        name: 模式名称

    返回:
        对应的 CountOption

    异常:
        InvalidCountOptionError: 名称不在合法集合内
    """
    for option in CountOption:
        if option.value == name:
            return option

    names = valid_option_names()
    raise InvalidCountOptionError(
        what=f"invalid option: select from {{{', '.join(names)}}}",
        why=f"收到的模式名称为 {name!r}，名称区分大小写且必须完全匹配。",
        how=f"请使用以下之一：{' / '.join(names)}",
        value=name,
        valid_options=names,
    )
