"""
频度统计 — wordcount 的核心。

从行序列中按 CountOption 切分出 token，并统计每个 token 的出现次数：

- CHAR: 行内每个 Unicode 码点（不做字形簇合并）
- WORD: 行内每个极大的 ``\\w+`` 匹配，从左到右
- LINE: 整行作为一个 token

统计函数是纯函数：不做 I/O，不持有全局可变状态。
结果字典在返回前单调增长，计数只增不减。

# [Design Decision] 单词模式使用标准库 re 的 ``\\w``（str 模式下即 Unicode 语义：
# str.isalnum() 为真的字符加下划线）。组合附加符号（Mn/Mc 类别，如 U+0301）
# 不属于 ``\\w``，因此分解形式的 "é" 会被切成 "e" 与后续单词两段。
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import IO, AnyStr

from wordcount.options import CountOption
from wordcount.source import decode_line, iter_lines, split_lines

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"\w+")

FrequencyMap = dict[str, int]
"""token → 出现次数"""

Line = str | bytes


def count(
    lines: Iterable[Line],
    option: CountOption | str = CountOption.WORD,
) -> FrequencyMap:
    """
    统计行序列中各 token 的出现频度。

    参数:
        lines: 已去掉行终止符的行序列。bytes 行按 UTF-8 严格解码。
        option: 统计模式，默认 WORD。也接受枚举值字符串（如 "char"）

    返回:
        token → 次数 的字典；输入为空时返回空字典

    异常:
        InputDecodingError: 任意一行不是合法的 UTF-8，整个统计中止，不返回部分结果
        ValueError: option 不是 CountOption 的成员或其取值

    示例::

        >>> count(["aa bb cc bb"], CountOption.WORD)
        {'aa': 1, 'bb': 2, 'cc': 1}
        >>> count(["aaccddd"], CountOption.CHAR)
        {'a': 2, 'c': 2, 'd': 3}
    """
    option = CountOption(option)
    freqs: FrequencyMap = {}
    total = 0

    for line in lines:
        if isinstance(line, bytes):
            line = decode_line(line)

        if option is CountOption.CHAR:
            tokens: Iterable[str] = line
        elif option is CountOption.WORD:
            tokens = (m.group() for m in WORD_PATTERN.finditer(line))
        else:
            tokens = (line,)

        for token in tokens:
            freqs[token] = freqs.get(token, 0) + 1
            total += 1

    logger.debug(
        "统计完成（%s 模式）：%d 个 token，%d 个不同 token",
        option.value,
        total,
        len(freqs),
    )
    return freqs


def count_text(text: str, option: CountOption = CountOption.WORD) -> FrequencyMap:
    """按行切分一段文本后统计。"""
    return count(split_lines(text), option)


def count_stream(stream: IO[AnyStr], option: CountOption = CountOption.WORD) -> FrequencyMap:
    """
    统计一个二进制或文本流。

    示例::

        >>> import io
        >>> count_stream(io.BytesIO(b"x\\nx"), CountOption.LINE)
        {'x': 2}
    """
    return count(iter_lines(stream), option)
