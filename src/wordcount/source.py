"""
行读取（Line Source）— 把文件或流转换为逐行文本。

行切分规则：
- 以 ``\\n`` 切分，紧贴在 ``\\n`` 前的一个 ``\\r`` 一并去掉（兼容 ``\\r\\n``）
- 末尾没有换行符的最后一行照常产出
- 以换行符结尾的输入不会额外产出一个空行

字节输入严格按 UTF-8 解码。解码失败抛出 InputDecodingError，
绝不替换或跳过出错的字节。
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, AnyStr

from wordcount.errors import InputDecodingError, InputFileError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def strip_terminator(line: str) -> str:
    """去掉行尾的 ``\\n`` 以及紧随其前的一个 ``\\r``。"""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def split_lines(text: str) -> list[str]:
    """
    按行切分一段已解码的文本。

    示例::

        >>> split_lines("x\\nx")
        ['x', 'x']
        >>> split_lines("a\\r\\nb\\n")
        ['a', 'b']
        >>> split_lines("")
        []
    """
    if not text:
        return []
    parts = text.split("\n")
    last = parts.pop()
    lines = [part[:-1] if part.endswith("\r") else part for part in parts]
    # 最后一段后面没有 \n，其中的 \r 不是终止符
    if last:
        lines.append(last)
    return lines


def decode_line(raw: bytes, offset: int = 0) -> str:
    """
    严格按 UTF-8 解码一行字节。

    参数:
        raw: 原始字节
        offset: 该行在整个流中的起始字节偏移，用于错误定位

    异常:
        InputDecodingError: 字节序列不是合法的 UTF-8
    """
    try:
        return raw.decode(ENCODING)
    except UnicodeDecodeError as e:
        position = offset + e.start
        raise InputDecodingError(
            what="输入不是合法的 UTF-8 文本，统计已中止。",
            why=f"第 {position} 字节处：{e.reason}（{raw[e.start:e.end]!r}）",
            how="请确认输入文件的编码，必要时先转换为 UTF-8 再统计。",
            offset=position,
            encoding=ENCODING,
        ) from e


def iter_lines(stream: IO[AnyStr]) -> Iterator[str]:
    """
    从二进制流或文本流逐行读取，产出去掉换行符的文本行。

    二进制流由本函数负责解码；文本流的解码错误同样被转换为
    InputDecodingError。

    参数:
        stream: 以 ``rb`` 或 ``r`` 模式打开的文件，或 BytesIO / StringIO

    产出:
        去掉行终止符的文本行
    """
    offset = 0
    lines = iter(stream)
    while True:
        try:
            raw = next(lines)
        except StopIteration:
            return
        except UnicodeDecodeError as e:
            raise InputDecodingError(
                what="输入不是合法的 UTF-8 文本，统计已中止。",
                why=str(e),
                how="请确认输入文件的编码，必要时先转换为 UTF-8 再统计。",
                encoding=e.encoding,
            ) from e

        if isinstance(raw, bytes):
            line = decode_line(raw, offset)
            offset += len(raw)
        else:
            line = raw
        yield strip_terminator(line)


@contextmanager
def open_lines(path: str | Path) -> Iterator[Iterator[str]]:
    """
    打开输入文件，产出其行迭代器；离开上下文时关闭文件。

    用法::

        with open_lines("input.txt") as lines:
            freqs = count(lines, CountOption.WORD)

    异常:
        InputFileError: 文件不存在或无法打开
    """
    file_path = Path(path)
    try:
        handle = file_path.open("rb")
    except OSError as e:
        raise InputFileError(
            what=f"无法打开输入文件 '{file_path}'。",
            why=e.strerror or str(e),
            how="请检查文件路径是否正确以及是否有读取权限。",
            file_path=str(file_path),
        ) from e

    logger.debug("打开输入文件：%s", file_path)
    with handle:
        yield iter_lines(handle)


def read_lines(path: str | Path) -> Iterator[str]:
    """逐行读取文件，读取完毕后自动关闭。"""
    with open_lines(path) as lines:
        yield from lines
