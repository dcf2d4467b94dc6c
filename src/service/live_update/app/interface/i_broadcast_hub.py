"""
Broadcast Hub Interface

Fans one announcement out to every registered observer connection.
"""

from typing import Protocol

from src.service.live_update.app.interface.i_observer_connection import IObserverConnection
from src.service.live_update.domain.entity.announcement_entity import AnnouncementRecord
from src.service.live_update.domain.entity.delivery_report import DeliveryReport


class IBroadcastHub(Protocol):
    def register(self, connection: IObserverConnection) -> None:
        """Add a connection to the active set (no acknowledgment frame is sent)"""
        ...

    def unregister(self, connection: IObserverConnection) -> None:
        """Remove a connection; removing an absent connection is a no-op"""
        ...

    def push(self, record: AnnouncementRecord) -> DeliveryReport:
        """
        Send the record to every open connection, in call order

        Note:
            - Closed connections are skipped and pruned
            - A failure on one connection never stops delivery to the others
            - Never raises; delivery is best-effort
        """
        ...

    @property
    def connection_count(self) -> int: ...
