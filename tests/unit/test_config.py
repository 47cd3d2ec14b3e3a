"""
配置模块单元测试。

覆盖范围:
- config/schema.py: CountConfig
- config/loader.py: load_config(), YAML 加载/校验/覆盖
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from wordcount.config import CountConfig, load_config
from wordcount.errors import ConfigLoadError, ConfigValidationError


class TestCountConfig:
    """CountConfig Schema。"""

    def test_defaults(self) -> None:
        config = CountConfig()
        assert config.format == "debug"
        assert config.log_level == "WARNING"

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(ValidationError):
            CountConfig(format="xml")

    def test_rejects_unknown_field(self) -> None:
        with pytest.raises(ValidationError):
            CountConfig(sort=True)

    def test_immutable(self) -> None:
        config = CountConfig()
        with pytest.raises(ValidationError):
            config.format = "json"  # type: ignore[misc]


class TestLoadConfig:
    """load_config() 加载流程。"""

    def test_no_file_uses_defaults(self, isolated_cwd: Path) -> None:
        assert load_config() == CountConfig()

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("format: json\nlog_level: INFO\n", encoding="utf-8")
        config = load_config(path)
        assert config.format == "json"
        assert config.log_level == "INFO"

    def test_auto_discovery(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "wordcount.yaml").write_text("format: rich\n", encoding="utf-8")
        assert load_config().format == "rich"

    def test_hidden_file_discovery(self, isolated_cwd: Path) -> None:
        (isolated_cwd / ".wordcount.yaml").write_text("log_level: DEBUG\n", encoding="utf-8")
        assert load_config().log_level == "DEBUG"

    def test_overrides_win(self, tmp_path: Path) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("format: json\n", encoding="utf-8")
        config = load_config(path, overrides={"format": "rich"})
        assert config.format == "rich"

    def test_none_overrides_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("format: json\n", encoding="utf-8")
        config = load_config(path, overrides={"format": None, "log_level": None})
        assert config.format == "json"
        assert config.log_level == "WARNING"

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == CountConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(tmp_path / "nope.yaml")
        assert exc_info.value.file_path.endswith("nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("format: [json\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            load_config(path)

    def test_root_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- json\n- rich\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(path)
        assert "list" in exc_info.value.why

    def test_schema_violation(self, tmp_path: Path) -> None:
        path = tmp_path / "wrong.yaml"
        path.write_text("format: xml\n", encoding="utf-8")
        with pytest.raises(ConfigValidationError) as exc_info:
            load_config(path)
        assert "format" in exc_info.value.why
        assert exc_info.value.config_path == str(path)
