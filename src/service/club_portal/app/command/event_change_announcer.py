"""
Event Change Announcer

Publishes event lifecycle changes through the live update gateway so
observers learn about new, edited and cancelled events.
"""

from typing import Self

from fastapi import Depends

from src.platform.config.core_setting import settings
from src.service.club_portal.domain.entity.event_entity import EventEntity
from src.service.club_portal.domain.enum.event_change import EventChange
from src.service.live_update.app.command.publish_announcement_use_case import (
    PublishAnnouncementUseCase,
)
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


class EventChangeAnnouncer:
    def __init__(self, publish_announcement: PublishAnnouncementUseCase, enabled: bool = True):
        self.publish_announcement = publish_announcement
        self.enabled = enabled

    @classmethod
    def depends(
        cls,
        publish_announcement: PublishAnnouncementUseCase = Depends(
            PublishAnnouncementUseCase.depends
        ),
    ) -> Self:
        return cls(
            publish_announcement=publish_announcement, enabled=settings.ANNOUNCE_EVENT_CHANGES
        )

    def announce(self, *, actor: ClubIdentity, event: EventEntity, change: EventChange) -> None:
        if not self.enabled:
            return
        self.publish_announcement.publish(actor=actor, event=event.title, update=change.value)
