"""
Observe Announcements Use Case

Attaches a new observer connection: first the full history as one snapshot
frame, then live increments from the broadcast hub. Both happen without
awaiting, so no record published around connect time is missed or repeated.
"""

from typing import Self

from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.platform.exception.exceptions import DeliveryFailure
from src.platform.logging.loguru_io import Logger
from src.service.live_update.app.interface.i_announcement_store import IAnnouncementStore
from src.service.live_update.app.interface.i_broadcast_hub import IBroadcastHub
from src.service.live_update.app.interface.i_observer_connection import IObserverConnection
from src.service.live_update.driven_adapter.codec.live_update_frame_codec import (
    LiveUpdateFrameCodec,
)


class ObserveAnnouncementsUseCase:
    def __init__(
        self,
        announcement_store: IAnnouncementStore,
        broadcast_hub: IBroadcastHub,
        frame_codec: LiveUpdateFrameCodec,
    ):
        self.announcement_store = announcement_store
        self.broadcast_hub = broadcast_hub
        self.frame_codec = frame_codec

    @classmethod
    def depends(
        cls,
        announcement_store: IAnnouncementStore = Depends(AppProvide[Container.announcement_store]),
        broadcast_hub: IBroadcastHub = Depends(AppProvide[Container.broadcast_hub]),
        frame_codec: LiveUpdateFrameCodec = Depends(AppProvide[Container.frame_codec]),
    ) -> Self:
        return cls(
            announcement_store=announcement_store,
            broadcast_hub=broadcast_hub,
            frame_codec=frame_codec,
        )

    def attach(self, connection: IObserverConnection) -> bool:
        """
        Send the snapshot frame and register with the hub

        Returns:
            False if the snapshot could not be queued (connection is closed
            and never registered)
        """
        snapshot = self.announcement_store.snapshot()
        try:
            connection.deliver(self.frame_codec.encode_snapshot(snapshot))
        except DeliveryFailure as e:
            Logger.base.warning(
                f'⚠️ [OBSERVE] Snapshot not delivered to {e.connection_id}: {e.reason}'
            )
            return False

        self.broadcast_hub.register(connection)
        Logger.base.info(
            f'👀 [OBSERVE] Attached {connection.connection_id} with {len(snapshot)} records'
        )
        return True

    def detach(self, connection: IObserverConnection) -> None:
        connection.close()
        self.broadcast_hub.unregister(connection)
