"""Kernel cancellation – cooperative cancellation tokens."""
from mp_mediator.kernel.cancellation.token import (
    CancelCallback,
    CancellationToken,
    CancellationTokenSource,
    Unregister,
)

__all__ = ["CancelCallback", "CancellationToken", "CancellationTokenSource", "Unregister"]
