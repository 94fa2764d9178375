"""Unit tests for logging configuration and the bus's structured log events."""

from __future__ import annotations

import json
import logging
from typing import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from askbus.application.query import BoolAnswer, QueryBus
from askbus.config.settings import QueryBusSettings
from askbus.observability.logging import LoggerFactory, configure_logging, get_logger


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


class TestLoggerFactory:
    @pytest.mark.usefixtures("restore_logging")
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level=logging.DEBUG)
        get_logger("askbus.test", component="registry").info("hello", answer=42)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "hello"
        assert payload["answer"] == 42
        assert payload["component"] == "registry"
        assert payload["level"] == "info"
        assert payload["logger"] == "askbus.test"
        assert "timestamp" in payload

    @pytest.mark.usefixtures("restore_logging")
    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level=logging.WARNING)
        get_logger("askbus.test").info("quiet")
        assert capsys.readouterr().err == ""

    @pytest.mark.usefixtures("restore_logging")
    def test_from_settings_console(self, capsys: pytest.CaptureFixture[str]) -> None:
        LoggerFactory.from_settings(QueryBusSettings(log_level="INFO", json_logs=False))
        get_logger("askbus.test").info("plain")
        assert "plain" in capsys.readouterr().err
        assert logging.getLogger().level == logging.INFO


class TestBusLogEvents:
    def test_queries_are_silent_by_default(self) -> None:
        bus = QueryBus()
        bus.subscribe_number("armor", lambda ctx: 1)
        with capture_logs() as logs:
            for _ in range(3):
                bus.sum_int("armor")
                bus.or_("missing")
        assert logs == []

    def test_from_settings_enables_query_events(self) -> None:
        bus = QueryBus.from_settings(QueryBusSettings(log_queries=True))
        with capture_logs() as logs:
            bus.max_int("armor")
        assert [entry["event"] for entry in logs] == ["query_answered"]
        assert logs[0]["answered"] is False

    def test_subscribe_and_query_events(self) -> None:
        bus = QueryBus(log_queries=True)
        with capture_logs() as logs:
            bus.subscribe_bool("alive", lambda ctx: BoolAnswer.yes())
            bus.or_("alive")

        events = [entry["event"] for entry in logs]
        assert events == ["query_subscribed", "query_answered"]
        assert logs[0]["family"] == "bool"
        assert logs[1]["aggregation"] == "or"
        assert logs[1]["answered"] is True
        assert logs[1]["polled"] == 1

    def test_unsubscribe_event_reports_removal(self) -> None:
        bus = QueryBus()
        with capture_logs() as logs:
            bus.unsubscribe_number("armor", lambda ctx: 1)
        assert logs[0]["event"] == "query_unsubscribed"
        assert logs[0]["removed"] is False
        assert logs[0]["result_type"] == "int"


class TestPublicReExports:
    @pytest.mark.parametrize(
        "module",
        [
            "askbus.observability.logging",
            "askbus.observability.metrics",
            "askbus.application.query",
            "askbus.kernel.errors",
            "askbus.kernel.types",
            "askbus.config.settings",
            "askbus.testing",
        ],
    )
    def test_all_symbols_importable(self, module: str) -> None:
        import importlib

        mod = importlib.import_module(module)
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} missing"
