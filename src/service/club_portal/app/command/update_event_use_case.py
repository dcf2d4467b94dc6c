from typing import Any, Dict, Self

import attrs
from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.command.event_change_announcer import EventChangeAnnouncer
from src.service.club_portal.app.interface.i_event_repo import IEventRepo
from src.service.club_portal.domain.entity.event_entity import EventEntity
from src.service.club_portal.domain.enum.event_change import EventChange
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


UPDATABLE_FIELDS = frozenset(
    {'title', 'date', 'time', 'location', 'description', 'image', 'attendees'}
)


class UpdateEventUseCase:
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
    async def update_event(
        self, *, actor: ClubIdentity, event_id: str, changes: Dict[str, Any]
    ) -> EventEntity:
        """
        Apply a partial update; fields that are absent or None are left as they are

        Raises:
            NotFoundError: no such event
            ForbiddenError: actor does not own the event
            ValidationError: title set to blank
        """
        event_entity = await self.event_repo.get_by_id(event_id=event_id)
        if not event_entity:
            raise NotFoundError('Event not found')
        event_entity.validate_owner(actor.id)

        applied = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS and v is not None}
        if 'title' in applied:
            EventEntity.validate_title(applied['title'])
            applied['title'] = applied['title'].strip()

        updated = await self.event_repo.update(event_entity=attrs.evolve(event_entity, **applied))

        self.announcer.announce(actor=actor, event=updated, change=EventChange.UPDATED)
        return updated
