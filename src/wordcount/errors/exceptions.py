"""
结构化异常体系 — 错误信息即文档。

每条异常遵循"三段式"规范：
1. What went wrong（发生了什么）
2. Why it happened（为什么发生）
3. How to fix it（怎么修）

wordcount 内部不做任何局部恢复：以下异常一旦抛出，整个统计过程即告终止，
不会产生部分结果。

示例::

    InputDecodingError(
        what="输入不是合法的 UTF-8 文本。",
        why="第 1 字节处的序列 0xf0 0x90 0x80 不完整。",
        how="请先将文件转换为 UTF-8 编码。",
        offset=1,
    )
"""

from __future__ import annotations

from typing import Any


class WordCountError(Exception):
    """
    wordcount 异常基类。

    属性:
        what: 发生了什么
        why: 为什么发生
        how: 怎么修复
        details: 额外的上下文信息（用于调试）
    """

    def __init__(
        self,
        what: str,
        why: str = "",
        how: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.what = what
        self.why = why
        self.how = how
        self.details = details or {}

        parts = [what]
        if why:
            parts.append(f"→ 原因：{why}")
        if how:
            parts.append(f"→ 修复建议：{how}")

        self.full_message = "\n".join(parts)
        super().__init__(self.full_message)

    def __str__(self) -> str:
        return self.full_message

    def to_dict(self) -> dict[str, Any]:
        """转换为字典格式，用于 JSON 输出。"""
        result: dict[str, Any] = {
            "error_type": type(self).__name__,
            "what": self.what,
        }
        if self.why:
            result["why"] = self.why
        if self.how:
            result["how"] = self.how
        if self.details:
            result["details"] = self.details
        return result


# === 输入相关异常 ===


class InputDecodingError(WordCountError, ValueError):
    """
    输入解码异常。

    输入字节流无法按 UTF-8 解码时抛出。解码失败从不被替换字符（U+FFFD）
    掩盖，也不会跳过出错的行——整个统计直接中止。

    示例::

        raise InputDecodingError(
            what="输入不是合法的 UTF-8 文本。",
            why="'utf-8' codec can't decode bytes in position 1-3: unexpected end of data",
            how="请确认输入文件的编码，必要时先用 iconv 转换为 UTF-8。",
            offset=1,
        )
    """

    def __init__(
        self,
        what: str,
        why: str = "",
        how: str = "",
        offset: int | None = None,
        encoding: str = "utf-8",
        **kwargs: Any,
    ) -> None:
        details: dict[str, Any] = {"offset": offset, "encoding": encoding}
        details.update(kwargs)
        super().__init__(what=what, why=why, how=how, details=details)
        self.offset = offset
        self.encoding = encoding


class InputFileError(WordCountError):
    """输入文件无法打开或读取。"""

    def __init__(
        self,
        what: str,
        why: str = "",
        how: str = "",
        file_path: str = "",
        **kwargs: Any,
    ) -> None:
        details: dict[str, Any] = {"file_path": file_path}
        details.update(kwargs)
        super().__init__(what=what, why=why, how=how, details=details)
        self.file_path = file_path


# === 配置相关异常 ===


class InvalidCountOptionError(WordCountError):
    """
    统计模式名称无效。

    只在字符串到 CountOption 的边界转换处抛出；统计函数本身只接受枚举值。
    """

    def __init__(
        self,
        what: str,
        why: str = "",
        how: str = "",
        value: str = "",
        valid_options: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        details: dict[str, Any] = {
            "value": value,
            "valid_options": valid_options or [],
        }
        details.update(kwargs)
        super().__init__(what=what, why=why, how=how, details=details)
        self.value = value
        self.valid_options = valid_options or []


class ConfigLoadError(WordCountError):
    """配置文件不存在、无法读取或 YAML 格式无效。"""

    def __init__(
        self,
        what: str,
        why: str = "",
        how: str = "",
        file_path: str = "",
        **kwargs: Any,
    ) -> None:
        details: dict[str, Any] = {"file_path": file_path}
        details.update(kwargs)
        super().__init__(what=what, why=why, how=how, details=details)
        self.file_path = file_path


class ConfigValidationError(WordCountError):
    """
    配置校验异常。

    YAML 内容可以解析，但字段取值不符合 Schema 时抛出。
    """

    def __init__(
        self,
        what: str,
        why: str = "",
        how: str = "",
        config_path: str = "",
        **kwargs: Any,
    ) -> None:
        details: dict[str, Any] = {"config_path": config_path}
        details.update(kwargs)
        super().__init__(what=what, why=why, how=how, details=details)
        self.config_path = config_path
