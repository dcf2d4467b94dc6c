from typing import List, Self

from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.service.club_portal.app.interface.i_event_repo import IEventRepo
from src.service.club_portal.domain.entity.event_entity import EventEntity


class ListEventsUseCase:
    def __init__(self, event_repo: IEventRepo):
        self.event_repo = event_repo

    @classmethod
    def depends(cls, event_repo: IEventRepo = Depends(AppProvide[Container.event_repo])) -> Self:
        return cls(event_repo=event_repo)

    async def list_events(self) -> List[EventEntity]:
        return await self.event_repo.list_all()
