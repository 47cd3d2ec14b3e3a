"""
wordcount CLI — 命令行工具。
"""

from wordcount.cli.app import app, main

__all__ = ["app", "main"]
