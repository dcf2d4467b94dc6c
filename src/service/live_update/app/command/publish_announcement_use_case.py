"""
Publish Announcement Use Case

The only way an announcement enters the update store.

Flow:
1. Validate event/update (blank → ValidationError, nothing stored)
2. Append to the update store (commit point)
3. Push to every observer through the broadcast hub
4. Return the stored record

Steps 2 and 3 run without awaiting, so concurrent publishers cannot
interleave and every observer sees records in id order.
"""

from typing import Self

from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.live_update_metrics import LiveUpdateMetrics
from src.service.live_update.app.interface.i_announcement_store import IAnnouncementStore
from src.service.live_update.app.interface.i_broadcast_hub import IBroadcastHub
from src.service.live_update.domain.entity.announcement_entity import AnnouncementRecord
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


class PublishAnnouncementUseCase:
    def __init__(
        self,
        announcement_store: IAnnouncementStore,
        broadcast_hub: IBroadcastHub,
        metrics: LiveUpdateMetrics,
    ):
        self.announcement_store = announcement_store
        self.broadcast_hub = broadcast_hub
        self.metrics = metrics

    @classmethod
    def depends(
        cls,
        announcement_store: IAnnouncementStore = Depends(AppProvide[Container.announcement_store]),
        broadcast_hub: IBroadcastHub = Depends(AppProvide[Container.broadcast_hub]),
        metrics: LiveUpdateMetrics = Depends(AppProvide[Container.metrics]),
    ) -> Self:
        return cls(
            announcement_store=announcement_store,
            broadcast_hub=broadcast_hub,
            metrics=metrics,
        )

    @Logger.io
    def publish(self, *, actor: ClubIdentity, event: str, update: str) -> AnnouncementRecord:
        if not event or not event.strip() or not update or not update.strip():
            raise ValidationError('Event and update are required')

        record = self.announcement_store.append(event=event, update=update)
        self.metrics.record_published()

        # Delivery is best-effort; a partial push never fails the publish
        self.broadcast_hub.push(record)

        Logger.base.info(
            f'📣 [PUBLISH] Club {actor.id} published announcement {record.id} ({record.event})'
        )
        return record
