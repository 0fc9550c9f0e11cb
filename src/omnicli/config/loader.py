"""
Configuration loading system for OmniCLI.

This module handles loading, merging, and validating configuration from
YAML files and environment variables.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any, Union
import yaml
from pydantic import ValidationError
from dotenv import load_dotenv

from .models import OmniCLIConfig
from ..utils.error_handling import ConfigurationError

ENV_PREFIX = "OMNICLI_"


class ConfigLoader:
    """
    Configuration loader that supports multiple sources and validation.

    Loading priority (highest to lowest):
    1. Environment variables (OMNICLI_*)
    2. Explicitly specified config file
    3. Environment-specific config (e.g., configs/development.yaml)
    4. Default configuration file
    5. Built-in defaults (from Pydantic models)
    """

    def __init__(self):
        self._config: Optional[OmniCLIConfig] = None
        self._config_path: Optional[Path] = None

        env_file = Path(".env")
        if env_file.exists():
            load_dotenv(env_file)

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> OmniCLIConfig:
        """
        Load configuration from multiple sources and validate it.

        Args:
            config_path: Optional path to a specific config file

        Returns:
            Validated OmniCLIConfig instance

        Raises:
            ConfigurationError: If configuration loading or validation fails
        """
        try:
            config_data: Dict[str, Any] = {}

            default_config_path = self._find_default_config()
            if default_config_path:
                default_data = self._load_yaml_file(default_config_path)
                config_data = self._deep_merge(config_data, default_data)

            env_config_path = self._find_environment_config()
            if env_config_path and env_config_path != default_config_path:
                env_data = self._load_yaml_file(env_config_path)
                config_data = self._deep_merge(config_data, env_data)

            if config_path:
                explicit_path = Path(config_path)
                if not explicit_path.exists():
                    raise ConfigurationError(f"Specified config file not found: {config_path}")

                explicit_data = self._load_yaml_file(explicit_path)
                config_data = self._deep_merge(config_data, explicit_data)
                self._config_path = explicit_path

            config_data = self._apply_env_overrides(config_data)

            self._config = OmniCLIConfig(**config_data)
            return self._config

        except ConfigurationError:
            raise
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {self._format_validation_error(e)}"
            ) from e
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e

    def get_config(self) -> OmniCLIConfig:
        """Get the current configuration, loading it if necessary."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def reload_config(self, config_path: Optional[Union[str, Path]] = None) -> OmniCLIConfig:
        """Reload configuration from sources."""
        self._config = None
        return self.load_config(config_path)

    @property
    def config_path(self) -> Optional[Path]:
        return self._config_path

    def _find_default_config(self) -> Optional[Path]:
        possible_paths = [
            Path("configs/omnicli.yaml"),
            Path("configs/omnicli.yml"),
            Path("omnicli.yaml"),
            Path("omnicli.yml"),
        ]

        for path in possible_paths:
            if path.exists():
                return path

        return None

    def _find_environment_config(self) -> Optional[Path]:
        env = os.getenv("OMNICLI_ENV")
        if not env:
            return None

        possible_paths = [
            Path(f"configs/omnicli.{env}.yaml"),
            Path(f"configs/omnicli.{env}.yml"),
            Path(f"omnicli.{env}.yaml"),
            Path(f"omnicli.{env}.yml"),
        ]

        for path in possible_paths:
            if path.exists():
                return path

        return None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse a YAML configuration file.

        Raises:
            ConfigurationError: If file cannot be loaded or parsed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

            if data is None:
                return {}

            if not isinstance(data, dict):
                raise ConfigurationError(
                    f"Configuration file {file_path} must contain a YAML object (dictionary)"
                )

            return data

        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {file_path}: {str(e)}") from e
        except IOError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {str(e)}") from e

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        The first segment after the prefix names the section, the rest the
        field: OMNICLI_INPUT_DEFAULT_COMMAND overrides input.default_command.
        """
        result = config_data.copy()

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(ENV_PREFIX) or env_key == "OMNICLI_ENV":
                continue

            section, _, field = env_key[len(ENV_PREFIX):].lower().partition('_')
            if not section or not field:
                continue

            self._set_nested_value(result, [section, field], self._convert_env_value(env_value))

        return result

    def _convert_env_value(self, value: str) -> Any:
        """
        Convert environment variable string to appropriate Python type.

        Returns:
            Converted value (bool, int, float, list or string)
        """
        if value.lower() in ('true', 'yes', 'on'):
            return True
        elif value.lower() in ('false', 'no', 'off'):
            return False

        try:
            if '.' not in value:
                return int(value)
            else:
                return float(value)
        except ValueError:
            pass

        if ',' in value:
            return [item.strip() for item in value.split(',')]

        return value

    def _set_nested_value(self, data: Dict[str, Any], path: list, value: Any) -> None:
        current = data

        for key in path[:-1]:
            if key not in current:
                current[key] = {}
            elif not isinstance(current[key], dict):
                # Can't navigate further, skip this override
                return
            else:
                current[key] = dict(current[key])
            current = current[key]

        if path:
            current[path[-1]] = value

    def _format_validation_error(self, error: ValidationError) -> str:
        messages = []
        for err in error.errors():
            location = " -> ".join(str(loc) for loc in err['loc'])
            message = err['msg']
            value = err.get('input', 'N/A')
            messages.append(f"  {location}: {message} (got: {value})")

        return "Validation errors:\n" + "\n".join(messages)


_config_loader = ConfigLoader()


def load_config(config_path: Optional[Union[str, Path]] = None) -> OmniCLIConfig:
    """
    Load configuration from multiple sources.

    Raises:
        ConfigurationError: If configuration loading fails
    """
    return _config_loader.load_config(config_path)


def get_config() -> OmniCLIConfig:
    """Get the current configuration, loading it if necessary."""
    return _config_loader.get_config()


def reload_config(config_path: Optional[Union[str, Path]] = None) -> OmniCLIConfig:
    """Reload configuration from sources."""
    return _config_loader.reload_config(config_path)


def validate_config_file(config_path: Union[str, Path]) -> tuple[bool, Optional[str]]:
    """
    Validate a configuration file without loading it globally.

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        temp_loader = ConfigLoader()
        temp_loader.load_config(config_path)
        return True, None
    except ConfigurationError as e:
        return False, str(e)
