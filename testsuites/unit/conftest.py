import pytest

from autotest_tools.common import global_config
from testsuites.ui_testing.framework.driver import Driver
from testsuites.ui_testing.framework.settings import UISettings
from testsuites.unit.fakes import FakePage


@pytest.fixture(autouse=True)
def _reset_driver_registry():
    """Keep the process-wide current Driver from leaking between tests."""
    Driver._instance = None
    Driver._manager = None
    yield
    Driver._instance = None
    Driver._manager = None


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration environment variables and force a fresh load."""
    for env_key in [*global_config.ENV_MAPPING, "CONFIG_DIR", "ENV", "ENVIRONMENT"]:
        monkeypatch.delenv(env_key, raising=False)
    monkeypatch.setattr(global_config, "load_dotenv", lambda **kwargs: False)
    global_config.reload_config()
    yield monkeypatch
    # Next access reloads from the restored environment
    global_config._config = {}


@pytest.fixture
def ui_settings(tmp_path) -> UISettings:
    return UISettings(
        base_url="https://example.test",
        wait_time=250,
        screenshot_dir=tmp_path / "shots",
    )


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def driver(fake_page: FakePage, ui_settings: UISettings) -> Driver:
    return Driver(fake_page, settings=ui_settings)
