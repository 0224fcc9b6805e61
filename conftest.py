"""
Repository-level pytest configuration.

BROWSER, BASE_URL, WAIT_TIME, SCREENSHOT_DIR, HEADLESS and friends are read
by `autotest_tools.common.global_config` (config/config.yaml, `.env`,
environment); see `.env.example`.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
