"""Unit tests for structlog configuration and dispatch context binding."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from mp_mediator.application.mediator import InMemoryHandlerRegistry, Mediator, Request, RequestHandler
from mp_mediator.kernel.cancellation import CancellationToken
from mp_mediator.observability.logging import JsonLoggerFactory, bind_dispatch_context, get_logger


class _Lookup(Request[str]):
    pass


class TestJsonLoggerFactory:
    @pytest.fixture(autouse=True)
    def _restore_logging(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_installs_json_formatter_on_root(self) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_accepts_level_name(self) -> None:
        JsonLoggerFactory.configure("warning")
        assert logging.getLogger().level == logging.WARNING


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("test", component="mediator").info("hello")
        assert logs == [{"component": "mediator", "event": "hello", "log_level": "info"}]


class TestDispatchContext:
    def test_binds_and_unbinds_contextvars(self) -> None:
        with bind_dispatch_context("send", _Lookup()):
            bound = structlog.contextvars.get_contextvars()
            assert bound["dispatch"] == "send"
            assert bound["message_type"] == "_Lookup"
        assert "message_type" not in structlog.contextvars.get_contextvars()

    def test_handler_sees_dispatch_context(self) -> None:
        seen: dict[str, Any] = {}

        class Handler(RequestHandler[_Lookup, str]):
            async def handle(self, request: _Lookup, token: CancellationToken) -> str:
                seen.update(structlog.contextvars.get_contextvars())
                return "ok"

        registry = InMemoryHandlerRegistry().register_request_handler(_Lookup, Handler)
        assert asyncio.run(Mediator(registry).send(_Lookup())) == "ok"
        assert seen["dispatch"] == "send"
        assert seen["message_type"] == "_Lookup"
