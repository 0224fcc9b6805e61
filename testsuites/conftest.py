"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and gates live-site tests behind RUN_E2E.

================================================================================
"""

import os

import pytest

from autotest_tools.common import is_truthy
from testsuites.ui_testing.framework.settings import UISettings


def _e2e_enabled() -> bool:
    return is_truthy(os.getenv("RUN_E2E"))


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "unit: Offline tests against fake Playwright objects"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against the live site (needs RUN_E2E)"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )


def pytest_collection_modifyitems(config, items):
    """
    Add directory markers and skip live-site tests unless RUN_E2E is set.
    """
    skip_e2e = pytest.mark.skip(reason="live-site test; set RUN_E2E=1 to run")
    run_e2e = _e2e_enabled()

    for item in items:
        # Auto-add 'ui' marker to tests in ui_testing directory
        if "ui_testing" in str(item.fspath):
            item.add_marker(pytest.mark.ui)

        if "unit" in item.nodeid.split("/"):
            item.add_marker(pytest.mark.unit)

        if "e2e" in item.keywords and not run_e2e:
            item.add_marker(skip_e2e)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    settings = UISettings.from_config()
    return [
        "",
        "=" * 60,
        "Bright Horizons UI Automation Suite",
        f"Browser: {settings.browser} | Headless: {settings.headless}",
        f"Base URL: {settings.base_url}",
        f"Live-site tests: {'enabled' if _e2e_enabled() else 'skipped (RUN_E2E unset)'}",
        "=" * 60,
        "",
    ]
