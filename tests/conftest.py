"""
测试套件共享 Fixtures。
"""

from __future__ import annotations

from pathlib import Path

import pytest

# 不完整的 4 字节 UTF-8 序列：'a' 之后缺少最后一个续字节
INVALID_UTF8 = bytes([0x61, 0xF0, 0x90, 0x80])


@pytest.fixture
def sample_text() -> str:
    """多行中英文混合文本。"""
    return (
        "aa bb cc bb\n"
        "你好 世界，你好！\n"
        "snake_case and 42 numbers\n"
        "aa bb cc bb\n"
    )


@pytest.fixture
def sample_file(tmp_path: Path, sample_text: str) -> Path:
    """写入 sample_text 的 UTF-8 文件。"""
    path = tmp_path / "sample.txt"
    path.write_bytes(sample_text.encode("utf-8"))
    return path


@pytest.fixture
def invalid_file(tmp_path: Path) -> Path:
    """第二行包含非法 UTF-8 字节的文件。"""
    path = tmp_path / "invalid.txt"
    path.write_bytes(b"fine line\n" + INVALID_UTF8 + b"\n")
    return path


@pytest.fixture
def missing_file(tmp_path: Path) -> Path:
    """不存在的文件路径。"""
    return tmp_path / "does_not_exist.txt"


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """切换到临时目录，避免读到仓库里的 wordcount.yaml。"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def invalid_utf8() -> bytes:
    """不完整的多字节 UTF-8 序列。"""
    return INVALID_UTF8
