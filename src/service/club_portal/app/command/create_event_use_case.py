from typing import Self

from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.command.event_change_announcer import EventChangeAnnouncer
from src.service.club_portal.app.interface.i_event_repo import IEventRepo
from src.service.club_portal.domain.entity.event_entity import EventEntity
from src.service.club_portal.domain.enum.event_change import EventChange
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


class CreateEventUseCase:
    def __init__(self, event_repo: IEventRepo, announcer: EventChangeAnnouncer):
        self.event_repo = event_repo
        self.announcer = announcer

    @classmethod
    def depends(
        cls,
        event_repo: IEventRepo = Depends(AppProvide[Container.event_repo]),
        announcer: EventChangeAnnouncer = Depends(EventChangeAnnouncer.depends),
    ) -> Self:
        return cls(event_repo=event_repo, announcer=announcer)

    @Logger.io
    async def create_event(
        self,
        *,
        actor: ClubIdentity,
        title: str,
        date: str = '',
        time: str = '',
        location: str = '',
        description: str = '',
        image: str = '',
        attendees: int = 0,
    ) -> EventEntity:
        EventEntity.validate_title(title)

        event_entity = await self.event_repo.create(
            event_entity=EventEntity(
                club_id=actor.id,
                title=title.strip(),
                date=date,
                time=time,
                location=location,
                description=description,
                image=image,
                attendees=attendees,
            )
        )

        self.announcer.announce(actor=actor, event=event_entity, change=EventChange.CREATED)
        return event_entity
