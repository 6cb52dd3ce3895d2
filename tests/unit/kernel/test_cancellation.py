"""Unit tests for cooperative cancellation tokens."""

from __future__ import annotations

import asyncio

from mp_mediator.kernel.cancellation import CancellationToken, CancellationTokenSource


class TestCancellationTokenSource:
    def test_starts_uncancelled(self) -> None:
        source = CancellationTokenSource()
        assert not source.is_cancelled
        assert not source.token.is_cancelled

    def test_cancel_is_visible_through_token(self) -> None:
        source = CancellationTokenSource()
        token = source.token
        source.cancel()
        assert token.is_cancelled

    def test_cancel_is_idempotent_and_runs_callbacks_once(self) -> None:
        calls: list[int] = []
        source = CancellationTokenSource()
        source.token.register(lambda: calls.append(1))
        source.cancel()
        source.cancel()
        assert calls == [1]

    def test_register_after_cancel_runs_immediately(self) -> None:
        calls: list[int] = []
        source = CancellationTokenSource()
        source.cancel()
        source.token.register(lambda: calls.append(1))
        assert calls == [1]

    def test_linked_source_follows_parent(self) -> None:
        parent = CancellationTokenSource()
        linked = CancellationTokenSource.linked(parent.token)
        assert not linked.is_cancelled
        parent.cancel()
        assert linked.is_cancelled

    def test_closed_linked_source_no_longer_follows_parent(self) -> None:
        parent = CancellationTokenSource()
        linked = CancellationTokenSource.linked(parent.token)
        linked.close()
        linked.close()
        assert parent._callbacks == []
        parent.cancel()
        assert not linked.is_cancelled

    def test_unregister_removes_callback(self) -> None:
        calls: list[int] = []
        source = CancellationTokenSource()
        unregister = source.token.register(lambda: calls.append(1))
        unregister()
        unregister()
        source.cancel()
        assert calls == []

    def test_linked_source_does_not_cancel_parent(self) -> None:
        parent = CancellationTokenSource()
        linked = CancellationTokenSource.linked(parent.token)
        linked.cancel()
        assert not parent.is_cancelled


class TestCancellationToken:
    def test_none_is_never_cancelled(self) -> None:
        assert not CancellationToken.none().is_cancelled

    def test_wait_resumes_on_cancel(self) -> None:
        async def _run() -> bool:
            source = CancellationTokenSource()
            waiter = asyncio.ensure_future(source.token.wait())
            await asyncio.sleep(0)
            assert not waiter.done()
            source.cancel()
            await asyncio.wait_for(waiter, timeout=1)
            return source.token.is_cancelled

        assert asyncio.run(_run())

    def test_wait_returns_immediately_when_already_cancelled(self) -> None:
        source = CancellationTokenSource()
        source.cancel()
        asyncio.run(asyncio.wait_for(source.token.wait(), timeout=1))

    def test_repr(self) -> None:
        assert repr(CancellationToken.none()) == "CancellationToken(is_cancelled=False)"
