from __future__ import annotations

import logging

import pytest

from cssbuilder.config import BuilderConfig, load_config
from cssbuilder.errors import ConfigError


class TestBuilderConfig:
    def test_default_values(self) -> None:
        cfg = BuilderConfig()
        assert cfg.strict_combinators is True
        assert cfg.log_level == "WARNING"
        assert cfg.logging_level == logging.WARNING

    def test_custom_values(self) -> None:
        cfg = BuilderConfig(strict_combinators=False, log_level="debug")
        assert cfg.strict_combinators is False
        assert cfg.logging_level == logging.DEBUG

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            BuilderConfig(log_level="LOUD")

    def test_frozen_immutability(self) -> None:
        cfg = BuilderConfig()
        with pytest.raises(AttributeError):
            cfg.strict_combinators = False  # type: ignore[misc]

    def test_equality(self) -> None:
        assert BuilderConfig() == BuilderConfig()
        assert BuilderConfig(strict_combinators=False) != BuilderConfig()

    def test_hashable(self) -> None:
        cfg = BuilderConfig()
        assert cfg in {cfg}


class TestLoadConfig:
    def test_load(self, tmp_path) -> None:
        path = tmp_path / "cssbuilder.json"
        path.write_text('{"strict_combinators": false, "log_level": "INFO"}', encoding="utf-8")
        cfg = load_config(path)
        assert cfg == BuilderConfig(strict_combinators=False, log_level="INFO")

    def test_partial_file_uses_defaults(self, tmp_path) -> None:
        path = tmp_path / "cssbuilder.json"
        path.write_text("{}", encoding="utf-8")
        assert load_config(path) == BuilderConfig()

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "nope.json")
        assert exc_info.value.path.endswith("nope.json")

    def test_bad_json(self, tmp_path) -> None:
        path = tmp_path / "cssbuilder.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(path)

    def test_unknown_key(self, tmp_path) -> None:
        path = tmp_path / "cssbuilder.json"
        path.write_text('{"colour": "blue"}', encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_object(self, tmp_path) -> None:
        path = tmp_path / "cssbuilder.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_bad_log_level_type(self, tmp_path) -> None:
        path = tmp_path / "cssbuilder.json"
        path.write_text('{"log_level": 10}', encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)
