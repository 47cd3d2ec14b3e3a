"""
YAML 配置文件加载与校验。

加载优先级：
1. 显式指定的路径
2. 当前目录下的默认搜索路径
3. 内置默认值

运行时覆盖项（来自命令行）最后合并。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from wordcount.config.schema import CountConfig
from wordcount.errors import ConfigLoadError, ConfigValidationError

logger = logging.getLogger(__name__)

_SEARCH_PATHS = [
    Path("wordcount.yaml"),
    Path("wordcount.yml"),
    Path(".wordcount.yaml"),
]


def load_config(
    path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> CountConfig:
    """
    加载并校验配置。

    参数:
        path: YAML 文件路径。None 时自动搜索默认路径。
        overrides: 运行时覆盖的配置项，值为 None 的项被忽略

    返回:
        CountConfig 实例

    异常:
        ConfigLoadError: 文件不存在或格式错误
        ConfigValidationError: 配置校验失败
    """
    raw_config: dict[str, Any] = {}
    source = "<default>"

    if path is not None:
        raw_config = _load_yaml_file(Path(path))
        source = str(path)
    else:
        for search_path in _SEARCH_PATHS:
            if search_path.exists():
                logger.info("自动发现配置文件：%s", search_path)
                raw_config = _load_yaml_file(search_path)
                source = str(search_path)
                break
        else:
            logger.debug("未找到配置文件，使用默认配置。")

    if overrides:
        raw_config.update({k: v for k, v in overrides.items() if v is not None})

    return _validate_config(raw_config, source)


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """加载并解析 YAML 文件。"""
    if not path.exists():
        raise ConfigLoadError(
            what=f"配置文件 '{path}' 不存在。",
            why=f"在路径 '{path.absolute()}' 下未找到该文件。",
            how="请检查 --config 指定的路径是否正确。",
            file_path=str(path),
        )

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(
            what=f"无法读取配置文件 '{path}'。",
            why=str(e),
            how="请检查文件权限和编码（需要 UTF-8）。",
            file_path=str(path),
        ) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(
            what=f"配置文件 '{path}' 的 YAML 格式无效。",
            why=str(e),
            how="请使用 YAML 格式校验工具检查文件语法。",
            file_path=str(path),
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            what=f"配置文件 '{path}' 的根元素必须是字典（mapping）。",
            why=f"实际类型为 {type(data).__name__}。",
            how="请确保 YAML 文件的根元素是键值对形式，例如：\n"
                "  format: json\n"
                "  log_level: INFO",
            file_path=str(path),
        )

    return data


def _validate_config(raw: dict[str, Any], source: str) -> CountConfig:
    """使用 Pydantic 校验配置字典。"""
    try:
        return CountConfig.model_validate(raw)
    except ValidationError as e:
        error_details = []
        for err in e.errors():
            field_path = " → ".join(str(loc) for loc in err["loc"])
            error_details.append(f"  字段 '{field_path}': {err['msg']}")

        raise ConfigValidationError(
            what=f"配置 '{source}' 校验失败（{len(e.errors())} 个错误）。",
            why="\n".join(error_details),
            how="合法字段：format（debug / json / rich）、"
                "log_level（DEBUG / INFO / WARNING / ERROR）。",
            config_path=source,
        ) from e
