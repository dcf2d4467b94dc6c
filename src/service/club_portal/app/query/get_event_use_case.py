from typing import Self

from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.interface.i_event_repo import IEventRepo
from src.service.club_portal.domain.entity.event_entity import EventEntity


class GetEventUseCase:
    def __init__(self, event_repo: IEventRepo):
        self.event_repo = event_repo

    @classmethod
    def depends(cls, event_repo: IEventRepo = Depends(AppProvide[Container.event_repo])) -> Self:
        return cls(event_repo=event_repo)

    @Logger.io
    async def get_event(self, *, event_id: str) -> EventEntity:
        event_entity = await self.event_repo.get_by_id(event_id=event_id)
        if not event_entity:
            raise NotFoundError('Event not found')
        return event_entity
