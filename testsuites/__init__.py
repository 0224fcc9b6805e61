"""
Test suites package.

`testsuites` stays importable so that the UI framework and page objects can
be shared between the live-site tests, the unit tests and `run_tests.py`.
"""
