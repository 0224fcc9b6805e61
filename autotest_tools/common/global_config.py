"""
================================================================================
Global Configuration for Automation Tools
================================================================================

This module provides centralized configuration management for the UI suite,
including logging setup and configuration file loading.

Features:
    - YAML-based configuration loading (config/config.yaml + config/{ENV}.yaml)
    - `.env` file support (python-dotenv)
    - Environment variable support (BROWSER, BASE_URL, WAIT_TIME, ...)
    - Centralized Loguru logging configuration

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from loguru import logger

# Global configuration storage
_config: Dict[str, Any] = {}
_logger_initialized: bool = False

# Environment variable -> dot-notation config key
ENV_MAPPING: Dict[str, str] = {
    "BROWSER": "ui.browser",
    "BASE_URL": "ui.base_url",
    "WAIT_TIME": "ui.wait_time",
    "SCREENSHOT_DIR": "ui.screenshot_dir",
    "HEADLESS": "ui.headless",
    "CI": "ci",
    "LOG_LEVEL": "logging.level",
    "LOG_FILE": "logging.file",
}


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


def init_logger(level: str = None, format_str: str = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Called once per process (the UI conftest does it at session start).

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    _ensure_config_loaded()

    log_level = level or get_config("logging.level", "INFO")
    log_format = format_str or get_config(
        "logging.format",
        "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    )

    logger.remove()
    logger.add(
        sys.stderr,
        level=str(log_level).upper(),
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=str(log_level).upper(),
            format=log_format.replace("{level: <8}", "{level}"),  # Remove padding for file
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def _ensure_config_loaded() -> None:
    """Ensures the configuration is loaded."""
    if not _config:
        _load_config()


def _find_config_dir() -> Optional[Path]:
    explicit_dir = os.getenv("CONFIG_DIR")
    if explicit_dir:
        return Path(explicit_dir) if Path(explicit_dir).is_dir() else None

    possible_config_dirs = [
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
    ]
    for dir_path in possible_config_dirs:
        if dir_path.is_dir():
            return dir_path
    return None


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file {path}: {e}") from e


def _load_config() -> None:
    """
    Loads configuration from YAML files and environment variables.

    Configuration loading order:
        1. Built-in defaults
        2. Default configuration file (config/config.yaml)
        3. Environment-specific configuration (config/{ENV}.yaml)
        4. `.env` file in the working directory (does not override real env vars)
        5. Mapped environment variables (BROWSER, BASE_URL, ...)
        6. Nested overrides (UI__WAIT_TIME=3000 overrides ui.wait_time)
    """
    global _config

    config = _get_defaults()

    config_dir = _find_config_dir()
    if config_dir is None:
        logger.debug("No configuration directory found. Using defaults.")
    else:
        default_config_path = config_dir / "config.yaml"
        if default_config_path.exists():
            config = _deep_merge(config, _read_yaml(default_config_path))
            logger.debug(f"Loaded configuration from {default_config_path}")

        env = os.getenv("ENVIRONMENT", os.getenv("ENV", "dev"))
        env_config_path = config_dir / f"{env}.yaml"
        if env_config_path.exists():
            config = _deep_merge(config, _read_yaml(env_config_path))
            logger.debug(f"Merged environment config: {env_config_path}")

    load_dotenv(override=False)

    _apply_env_overrides(config)
    _config = config


def _get_defaults() -> Dict[str, Any]:
    """Returns default configuration values."""
    return {
        "logging": {
            "level": "INFO",
            "format": "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
        },
        "ui": {
            "browser": "chromium",
            "base_url": "https://www.brighthorizons.com",
            "wait_time": 5000,
            "screenshot_dir": "./test-results",
            "headless": None,
            "action_timeout": 5000,
            "window": {"width": 1920, "height": 1080},
        },
        "ci": False,
    }


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """Deep merges two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


def is_truthy(value: Optional[str]) -> bool:
    """True for true/1/yes/on (case-insensitive); anything else is False."""
    return (value or "").strip().lower() in TRUE_VALUES


def _convert_type(value: str, reference: Any) -> Any:
    """
    Convert string value to match reference type.

    Used for environment variables which are always strings.
    """
    if isinstance(reference, bool) or reference is None and value.strip().lower() in (
        TRUE_VALUES + FALSE_VALUES
    ):
        return is_truthy(value)
    if isinstance(reference, int):
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(f"Expected an integer, got {value!r}")
    if isinstance(reference, float):
        try:
            return float(value)
        except ValueError:
            raise ConfigurationError(f"Expected a number, got {value!r}")
    return value


def _lookup(keys: list, source: Optional[Dict[str, Any]] = None) -> Any:
    value = _config if source is None else source
    for k in keys:
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return None
    return value


def _apply_env_overrides(config: Dict[str, Any]) -> None:
    """
    Applies environment variable overrides to `config` in place.

    Environment variable naming convention:
        - Mapped names from ENV_MAPPING (BROWSER -> ui.browser)
        - Double underscore separates nested keys: UI__WAIT_TIME -> ui.wait_time
    """
    for env_key, config_key in ENV_MAPPING.items():
        value = os.environ.get(env_key)
        if value is None or value == "":
            continue
        keys = config_key.split(".")
        _set_nested(config, keys, _convert_type(value, _lookup(keys, config)))

    for key, value in os.environ.items():
        if "__" in key:
            parts = [p.lower() for p in key.split("__")]
            _set_nested(config, parts, _convert_type(value, _lookup(parts, config)))


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    """Sets a nested dictionary value using a list of keys."""
    for key in keys[:-1]:
        d = d.setdefault(key, {})
    d[keys[-1]] = value


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieves a configuration value using a dot-separated key path.

    Args:
        key: Dot-separated key path (e.g., "logging.level", "ui.base_url").
        default: Default value to return if key is not found.

    Returns:
        The configuration value, or the default if not found.

    Examples:
        >>> get_config("ui.wait_time", 5000)
        3000
    """
    _ensure_config_loaded()

    value = _lookup(key.split("."))
    return default if value is None else value


def set_config(key: str, value: Any) -> None:
    """
    Sets a configuration value at runtime.

    Args:
        key: Dot-separated key path.
        value: Value to set.
    """
    _ensure_config_loaded()
    _set_nested(_config, key.split("."), value)


def reload_config() -> None:
    """Reloads the configuration from files and the environment."""
    global _config, _logger_initialized
    _config = {}
    _logger_initialized = False
    _load_config()
    logger.debug("Configuration reloaded.")
