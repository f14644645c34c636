from __future__ import annotations

import logging

import pytest

from sysbar.collectors.base import BaseCollector
from sysbar.errors import MetricUnavailable


class StubCollector(BaseCollector):
    """Collector that returns a fixed record and counts calls."""

    category = "stub"

    def __init__(self) -> None:
        self.collect_count = 0

    def collect(self) -> dict:
        self.collect_count += 1
        return {"value": 42}


class FailingCollector(BaseCollector):
    """Collector whose provider is always unavailable."""

    category = "failing"

    def collect(self) -> dict:
        raise MetricUnavailable(self.category, "provider down")


class BrokenCollector(BaseCollector):
    """Collector with a programming error, not a metric failure."""

    category = "broken"

    def collect(self) -> dict:
        raise KeyError("bug")


def test_base_is_abstract():
    with pytest.raises(TypeError):
        BaseCollector()


def test_safe_collect_returns_record():
    c = StubCollector()
    assert c.safe_collect() == {"value": 42}
    assert c.collect_count == 1


def test_safe_collect_swallows_metric_unavailable():
    assert FailingCollector().safe_collect() is None


def test_failure_logged_at_debug_only(caplog):
    with caplog.at_level(logging.DEBUG, logger="sysbar.collectors.base"):
        FailingCollector().safe_collect()
    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.DEBUG
    assert "failing" in caplog.records[0].getMessage()


def test_unexpected_errors_swallowed():
    assert BrokenCollector().safe_collect() is None


@pytest.mark.parametrize("error", [RuntimeError("x"), AttributeError("cpu_freq"), NotImplementedError()])
def test_any_provider_error_gives_none(error, caplog):
    class RaisingCollector(BaseCollector):
        category = "raising"

        def collect(self) -> dict:
            raise error

    with caplog.at_level(logging.DEBUG, logger="sysbar.collectors.base"):
        assert RaisingCollector().safe_collect() is None
    assert all(r.levelno == logging.DEBUG for r in caplog.records)


def test_metric_unavailable_message():
    exc = MetricUnavailable("disk", "no such mount")
    assert exc.category == "disk"
    assert exc.reason == "no such mount"
    assert str(exc) == "disk metrics unavailable: no such mount"
    assert str(MetricUnavailable("host")) == "host metrics unavailable"
