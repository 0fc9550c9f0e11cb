"""
Test suite for configuration models and validation.
"""

import pytest
from pathlib import Path
from pydantic import ValidationError

from omnicli.config.models import (
    DEFAULT_COMMAND_NAME,
    AppConfig,
    InputConfig,
    LogLevel,
    OmniCLIConfig,
    VimConfig,
)


class TestAppConfig:
    """Test the AppConfig model."""

    def test_defaults(self):
        config = AppConfig()

        assert config.name == "OmniCLI"
        assert config.debug is False
        assert config.log_level == LogLevel.WARNING
        assert config.log_file is None

    def test_log_file_is_expanded(self):
        config = AppConfig(log_file="~/omnicli.log")

        assert config.log_file == str(Path("~/omnicli.log").expanduser())

    def test_log_level_from_string(self):
        assert AppConfig(log_level="DEBUG").log_level == LogLevel.DEBUG

    @pytest.mark.parametrize("field,value", [
        ("name", ""),
        ("log_level", "LOUD"),
        ("max_log_size_mb", 0),
        ("backup_count", 101),
    ])
    def test_rejects_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            AppConfig(**{field: value})


class TestInputConfig:
    """Test the InputConfig model."""

    def test_defaults(self):
        config = InputConfig()

        assert config.prefix == ""
        assert config.default_command == DEFAULT_COMMAND_NAME == "*"
        assert config.list_all_commands is True
        assert config.empty_hint == "Enter a command"

    @pytest.mark.parametrize("name", ["", "two words", " padded"])
    def test_default_command_must_be_one_token(self, name):
        with pytest.raises(ValidationError):
            InputConfig(default_command=name)


class TestVimConfig:
    """Test the VimConfig model."""

    def test_defaults(self):
        config = VimConfig()

        assert config.enabled is True
        assert config.highlight_hint == "[↓j↑k] ↳"
        assert config.key_format.format(key="ac") == "[ac]"

    def test_key_format_needs_placeholder(self):
        with pytest.raises(ValidationError, match="placeholder"):
            VimConfig(key_format="[code]")


class TestOmniCLIConfig:
    """Test the top-level configuration model."""

    def test_sections(self):
        config = OmniCLIConfig()

        assert isinstance(config.app, AppConfig)
        assert isinstance(config.input, InputConfig)
        assert isinstance(config.vim, VimConfig)

    def test_from_nested_dict(self):
        config = OmniCLIConfig(**{
            "input": {"prefix": ":"},
            "vim": {"enabled": False},
        })

        assert config.input.prefix == ":"
        assert config.vim.enabled is False
        assert config.app.name == "OmniCLI"

    def test_assignment_is_validated(self):
        config = OmniCLIConfig()

        with pytest.raises(ValidationError):
            config.input = "not a section"
