from pathlib import Path

import pytest
import yaml

import autotest_tools.common
from autotest_tools.common import ConfigurationError, get_config, global_config, is_truthy, reload_config
from testsuites.ui_testing.framework.settings import UISettings, normalize_browser


def test_defaults(clean_env, tmp_path):
    clean_env.setenv("CONFIG_DIR", str(tmp_path / "missing"))
    reload_config()

    settings = UISettings.from_config()

    assert settings.browser == "chromium"
    assert settings.base_url == "https://www.brighthorizons.com"
    assert settings.wait_time == 5000
    assert str(settings.screenshot_dir) == "test-results"
    assert settings.headless is False
    assert settings.search_result_selectors is None


def test_env_overrides_yaml(clean_env, tmp_path):
    (tmp_path / "config.yaml").write_text(
        yaml.dump({"ui": {"base_url": "https://yaml.example", "wait_time": 1000}}),
        encoding="utf-8",
    )
    clean_env.setenv("CONFIG_DIR", str(tmp_path))
    reload_config()
    assert get_config("ui.base_url") == "https://yaml.example"
    assert get_config("ui.wait_time") == 1000

    clean_env.setenv("BASE_URL", "https://env.example")
    clean_env.setenv("WAIT_TIME", "3000")
    clean_env.setenv("BROWSER", "Safari")
    clean_env.setenv("SCREENSHOT_DIR", str(tmp_path / "shots"))
    reload_config()

    settings = UISettings.from_config()
    assert settings.base_url == "https://env.example"
    assert settings.wait_time == 3000
    assert settings.browser == "webkit"
    assert settings.screenshot_dir == tmp_path / "shots"


def test_headless_follows_ci_unless_set(clean_env):
    clean_env.setenv("CI", "true")
    reload_config()
    assert UISettings.from_config().headless is True

    clean_env.setenv("HEADLESS", "false")
    reload_config()
    assert UISettings.from_config().headless is False


def test_nested_double_underscore_override(clean_env):
    clean_env.setenv("UI__ACTION_TIMEOUT", "7500")
    reload_config()

    assert UISettings.from_config().action_timeout == 7500


def test_non_numeric_wait_time_is_rejected(clean_env):
    clean_env.setenv("WAIT_TIME", "soon")

    with pytest.raises(ConfigurationError):
        reload_config()


def test_invalid_yaml_is_rejected(clean_env, tmp_path):
    (tmp_path / "config.yaml").write_text("ui: [unclosed", encoding="utf-8")
    clean_env.setenv("CONFIG_DIR", str(tmp_path))

    with pytest.raises(ConfigurationError):
        reload_config()


def test_set_config_at_runtime(clean_env):
    global_config.set_config("ui.wait_time", 10)

    assert UISettings.from_config().wait_time == 10


@pytest.mark.parametrize(
    "name, expected",
    [
        ("chromium", "chromium"),
        ("FIREFOX", "firefox"),
        ("webkit", "webkit"),
        ("safari", "webkit"),
        ("edge", "edge"),
        ("opera", "chromium"),
        ("", "chromium"),
    ],
)
def test_normalize_browser(name, expected):
    assert normalize_browser(name) == expected


def test_failed_override_leaves_no_partial_config(clean_env):
    clean_env.setenv("WAIT_TIME", "soon")
    clean_env.setenv("HEADLESS", "true")

    with pytest.raises(ConfigurationError):
        reload_config()

    # Still unloaded: the next access retries and fails the same way
    with pytest.raises(ConfigurationError):
        get_config("ui.headless")

    clean_env.setenv("WAIT_TIME", "3000")
    assert get_config("ui.headless") is True
    assert get_config("ui.wait_time") == 3000


def test_yaml_screenshot_dir_used_without_env(clean_env, project_root):
    clean_env.setenv("CONFIG_DIR", str(project_root / "config"))
    reload_config()

    expected = yaml.safe_load((project_root / "config" / "config.yaml").read_text(encoding="utf-8"))
    assert UISettings.from_config().screenshot_dir == Path(expected["ui"]["screenshot_dir"])


@pytest.mark.parametrize("value", ["azure", "", "false", "0"])
def test_ci_only_recognised_for_truthy_values(clean_env, value):
    clean_env.setenv("CI", value)
    reload_config()

    assert get_config("ci") is False
    assert UISettings.from_config().headless is False
    assert is_truthy(value) is False


@pytest.mark.parametrize("value", ["true", "1", "YES", " on "])
def test_is_truthy_accepts_common_spellings(value):
    assert is_truthy(value) is True


def test_common_public_api():
    assert sorted(autotest_tools.common.__all__) == [
        "ConfigurationError",
        "get_config",
        "init_logger",
        "is_truthy",
        "reload_config",
        "set_config",
    ]
