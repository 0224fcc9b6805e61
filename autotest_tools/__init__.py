"""
================================================================================
Autotest Tools
================================================================================

Infrastructure utilities shared by the test suites.

Modules:
    - common: Configuration loading (YAML, .env, environment) and logging

Example:
    from autotest_tools.common import get_config, init_logger

    init_logger()
    browser = get_config("ui.browser", "chromium")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
]
