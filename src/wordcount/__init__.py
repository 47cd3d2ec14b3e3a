"""
wordcount — 字符、单词、行的出现频度统计。

快速上手::

    from wordcount import CountOption, count

    freqs = count(["aa bb cc bb"], CountOption.WORD)
    # → {'aa': 1, 'bb': 2, 'cc': 1}

从文件统计::

    from wordcount import open_lines

    with open_lines("input.txt") as lines:
        freqs = count(lines, CountOption.CHAR)

输入必须是合法的 UTF-8；否则抛出 InputDecodingError，不返回任何结果。
"""

from wordcount.counter import FrequencyMap, count, count_stream, count_text
from wordcount.errors import (
    ConfigLoadError,
    ConfigValidationError,
    InputDecodingError,
    InputFileError,
    InvalidCountOptionError,
    WordCountError,
)
from wordcount.options import CountOption, parse_count_option
from wordcount.source import iter_lines, open_lines, read_lines, split_lines

__version__ = "0.1.0"

__all__ = [
    # 统计
    "CountOption",
    "FrequencyMap",
    "count",
    "count_stream",
    "count_text",
    "parse_count_option",
    # 行读取
    "iter_lines",
    "open_lines",
    "read_lines",
    "split_lines",
    # 异常
    "ConfigLoadError",
    "ConfigValidationError",
    "InputDecodingError",
    "InputFileError",
    "InvalidCountOptionError",
    "WordCountError",
    # 版本
    "__version__",
]
