from testsuites.ui_testing.tests import test_bright_horizons as scenario


def _marks(name):
    return [m for m in scenario.TestBrightHorizons.test_footer_and_search.pytestmark if m.name == name]


def test_scenario_has_two_minute_budget():
    (timeout,) = _marks("timeout")

    assert timeout.args == (120,)


def test_scenario_is_gated_as_live_site_test():
    assert _marks("e2e")
    assert _marks("P0")
