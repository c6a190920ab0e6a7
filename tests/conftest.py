"""Shared fixtures for rtbench tests."""

from io import StringIO

import pytest

from rtbench.utils.logger import Logger


@pytest.fixture(autouse=True)
def log_output():
    """Configure the rtbench logger into a buffer for every test."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    yield output


class FakeClock:
    """Clock that returns scripted timestamps and records each read."""

    def __init__(self, times, events=None):
        self._times = iter(times)
        self.events = events if events is not None else []

    def __call__(self):
        self.events.append("clock")
        return next(self._times)


@pytest.fixture
def fake_clock():
    """Factory for scripted clocks."""
    return FakeClock
