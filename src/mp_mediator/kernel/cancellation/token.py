"""Kernel cancellation – CancellationTokenSource and CancellationToken.

Cancellation is cooperative: a token only *reports* that cancellation was
requested.  Nothing in the mediator interrupts a running handler; code that
observes the token decides whether and how to exit early.
"""
from __future__ import annotations

import asyncio
from typing import Callable

CancelCallback = Callable[[], None]
Unregister = Callable[[], None]


def _noop() -> None:
    pass


class CancellationTokenSource:
    """Owner side of a cancellation signal.

    Usage::

        source = CancellationTokenSource()
        await mediator.send(GetOrder("o-1"), source.token)
        source.cancel()
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._event: asyncio.Event | None = None
        self._callbacks: list[CancelCallback] = []
        self._links: list[Unregister] = []

    @classmethod
    def linked(cls, *tokens: "CancellationToken") -> "CancellationTokenSource":
        """Return a source that is also cancelled when any of *tokens* is.

        Call :meth:`close` once the source is no longer needed so the parent
        tokens stop holding a reference to it.
        """
        source = cls()
        source._links = [token.register(source.cancel) for token in tokens]
        return source

    @property
    def token(self) -> "CancellationToken":
        return CancellationToken(self)

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Signal cancellation; idempotent."""
        if self._cancelled:
            return
        self._cancelled = True
        if self._event is not None:
            self._event.set()
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    def close(self) -> None:
        """Detach from the tokens this source was linked to; idempotent."""
        links, self._links = self._links, []
        for unregister in links:
            unregister()

    def _register(self, callback: CancelCallback) -> Unregister:
        if self._cancelled:
            callback()
            return _noop
        self._callbacks.append(callback)

        def unregister() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unregister

    def _get_event(self) -> asyncio.Event:
        if self._event is None:
            self._event = asyncio.Event()
            if self._cancelled:
                self._event.set()
        return self._event


class CancellationToken:
    """Read-only view of a :class:`CancellationTokenSource`."""

    __slots__ = ("_source",)

    def __init__(self, source: CancellationTokenSource) -> None:
        self._source = source

    @classmethod
    def none(cls) -> "CancellationToken":
        """A token that is never cancelled."""
        return cls(CancellationTokenSource())

    @property
    def is_cancelled(self) -> bool:
        return self._source.is_cancelled

    def register(self, callback: CancelCallback) -> Unregister:
        """Invoke *callback* on cancellation (immediately if already cancelled).

        Returns a function that removes *callback* again.
        """
        return self._source._register(callback)  # noqa: SLF001

    async def wait(self) -> None:
        """Suspend until cancellation is requested."""
        await self._source._get_event().wait()  # noqa: SLF001

    def __repr__(self) -> str:
        return f"CancellationToken(is_cancelled={self.is_cancelled})"


__all__ = ["CancelCallback", "CancellationToken", "CancellationTokenSource", "Unregister"]
