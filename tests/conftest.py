"""Shared pytest configuration for the FillTree test suite."""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: large trees; skipped by run_tests.py unless --all is given"
    )
