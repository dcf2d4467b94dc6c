"""
Broadcast Hub Implementation

Owned by the DI container; one per application.

Architecture:
- PublishAnnouncementUseCase → push() → every open connection's buffer
- push() is synchronous, so two pushes can never interleave
- Closed or failing connections are pruned during push
"""

from typing import Dict

from src.platform.exception.exceptions import DeliveryFailure
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.live_update_metrics import LiveUpdateMetrics
from src.service.live_update.app.interface.i_observer_connection import IObserverConnection
from src.service.live_update.domain.entity.announcement_entity import AnnouncementRecord
from src.service.live_update.domain.entity.delivery_report import DeliveryReport
from src.service.live_update.driven_adapter.codec.live_update_frame_codec import (
    LiveUpdateFrameCodec,
)


class BroadcastHubImpl:
    def __init__(self, *, frame_codec: LiveUpdateFrameCodec, metrics: LiveUpdateMetrics):
        self.frame_codec = frame_codec
        self.metrics = metrics
        # connection_id → connection
        self._connections: Dict[str, IObserverConnection] = {}

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    def register(self, connection: IObserverConnection) -> None:
        if connection.connection_id in self._connections:
            return
        self._connections[connection.connection_id] = connection
        self.metrics.record_observer_registered()
        Logger.base.info(
            f'📡 [HUB] Registered {connection.connection_id} (total: {self.connection_count})'
        )

    def unregister(self, connection: IObserverConnection) -> None:
        if self._connections.pop(connection.connection_id, None) is None:
            return
        self.metrics.record_observer_unregistered()
        Logger.base.info(
            f'📡 [HUB] Unregistered {connection.connection_id} (remaining: {self.connection_count})'
        )

    def push(self, record: AnnouncementRecord) -> DeliveryReport:
        """
        Fan one record out to every registered connection

        Returns:
            DeliveryReport with delivered/skipped/failed counts

        Note:
            - Never raises; one bad connection never blocks the rest
            - Skipped (closed) and failed connections are unregistered
        """
        frame = self.frame_codec.encode_increment(record)
        delivered = 0
        skipped = 0
        failed = 0
        stale = []

        # Iterate over a copy; pruning happens after the loop
        for connection in list(self._connections.values()):
            if not connection.is_open:
                skipped += 1
                stale.append(connection)
                continue

            try:
                connection.deliver(frame)
                delivered += 1
            except DeliveryFailure as e:
                failed += 1
                stale.append(connection)
                Logger.base.warning(f'⚠️ [HUB] Delivery failed for {e.connection_id}: {e.reason}')
            except Exception as e:
                failed += 1
                stale.append(connection)
                connection.close()
                Logger.base.exception(
                    f'❌ [HUB] Unexpected delivery error for {connection.connection_id}: {e}'
                )

        for connection in stale:
            self.unregister(connection)

        self.metrics.record_deliveries(delivered=delivered, skipped=skipped, failed=failed)
        Logger.base.info(
            f'📡 [HUB] Pushed announcement {record.id}: '
            f'delivered={delivered}, skipped={skipped}, failed={failed}'
        )
        return DeliveryReport(delivered=delivered, skipped=skipped, failed=failed)
