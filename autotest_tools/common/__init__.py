"""
================================================================================
Autotest Tools Common Utilities
================================================================================

Shared configuration management and logging setup for the UI suite.

Exports:
    - get_config / set_config / reload_config: dot-notation configuration access
    - init_logger: Loguru logger with standard settings
    - is_truthy: the true/1/yes/on rule shared by config and the runner

Usage:
    from autotest_tools.common import get_config, init_logger

    init_logger()
    base_url = get_config("ui.base_url", "https://www.brighthorizons.com")

================================================================================
"""

from .global_config import (
    ConfigurationError,
    get_config,
    init_logger,
    is_truthy,
    reload_config,
    set_config,
)


__all__ = [
    "ConfigurationError",
    "get_config",
    "set_config",
    "reload_config",
    "init_logger",
    "is_truthy",
]
