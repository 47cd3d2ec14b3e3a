"""
wordcount 配置模块。

提供 YAML 配置加载与 Schema 校验。
"""

from wordcount.config.loader import load_config
from wordcount.config.schema import CountConfig

__all__ = [
    "CountConfig",
    "load_config",
]
