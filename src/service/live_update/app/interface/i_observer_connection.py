"""
Observer Connection Interface

One live push channel to one client. The broadcast hub only ever calls
deliver(); transports (WebSocket, SSE) drain what was delivered.
"""

from typing import Protocol


class IObserverConnection(Protocol):
    @property
    def connection_id(self) -> str:
        """Opaque id used for hub bookkeeping only (not an auth identity)"""
        ...

    @property
    def is_open(self) -> bool: ...

    def deliver(self, frame: str) -> None:
        """
        Queue one encoded frame without blocking

        Raises:
            DeliveryFailure: connection closed or its outbound buffer is full
        """
        ...

    def close(self) -> None:
        """Mark closed; safe to call more than once"""
        ...
