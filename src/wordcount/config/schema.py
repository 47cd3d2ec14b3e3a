"""
配置文件的 Schema 定义与校验。

配置文件是可选的。未找到时全部字段走默认值，命令行参数优先于文件中的取值。

示例（wordcount.yaml）::

    format: json
    log_level: INFO

# [Design Decision] 使用 Pydantic 模型作为 Schema，拼错的字段名直接报错，
# 而不是被静默忽略。
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CountConfig(BaseModel):
    """wordcount 运行配置。"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    format: Literal["debug", "json", "rich"] = Field(
        default="debug",
        description="输出格式：debug（字典表示）/ json / rich（表格）",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="日志级别",
    )
