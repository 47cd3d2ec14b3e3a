"""
wordcount 结构化异常体系。

所有异常遵循"三段式"规范：What / Why / How to fix。
"""

from wordcount.errors.exceptions import (
    ConfigLoadError,
    ConfigValidationError,
    InputDecodingError,
    InputFileError,
    InvalidCountOptionError,
    WordCountError,
)

__all__ = [
    "ConfigLoadError",
    "ConfigValidationError",
    "InputDecodingError",
    "InputFileError",
    "InvalidCountOptionError",
    "WordCountError",
]
