from typing import Self

from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.command.event_change_announcer import EventChangeAnnouncer
from src.service.club_portal.app.interface.i_event_repo import IEventRepo
from src.service.club_portal.domain.enum.event_change import EventChange
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


class DeleteEventUseCase:
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
    async def delete_event(self, *, actor: ClubIdentity, event_id: str) -> None:
        event_entity = await self.event_repo.get_by_id(event_id=event_id)
        if not event_entity:
            raise NotFoundError('Event not found')
        event_entity.validate_owner(actor.id)

        await self.event_repo.delete(event_id=event_id)
        self.announcer.announce(actor=actor, event=event_entity, change=EventChange.CANCELLED)
