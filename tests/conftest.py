"""Pytest configuration and shared fixtures."""

import pytest

from trace_control import TraceFlag, TraceRegistry

TEST_ENV_VAR = "TRACE_CONTROL_TEST_TRACE"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "cli: exercises the trace-control command line")


@pytest.fixture
def registry() -> TraceRegistry:
    """A fresh registry in the accepting state."""
    return TraceRegistry()


@pytest.fixture
def env_var(monkeypatch) -> str:
    """Name of a trace variable that starts out unset."""
    monkeypatch.delenv(TEST_ENV_VAR, raising=False)
    return TEST_ENV_VAR


@pytest.fixture
def set_trace(monkeypatch, env_var):
    """Set the trace variable for the current test."""
    def _set(value: str):
        monkeypatch.setenv(env_var, value)
    return _set


@pytest.fixture
def make_flags(registry: TraceRegistry):
    """Register one flag per name and return them keyed by name."""
    def _make(*names: str) -> dict:
        flags = {}
        for name in names:
            flags[name] = TraceFlag(name)
            registry.register(name, flags[name])
        return flags
    return _make


@pytest.fixture
def diagnostics(caplog):
    """Messages logged for unknown trace tokens."""
    caplog.set_level("ERROR", logger="trace-control")

    def _messages() -> list:
        return [r.getMessage() for r in caplog.records if r.name == "trace-control" and r.levelname == "ERROR"]
    return _messages
