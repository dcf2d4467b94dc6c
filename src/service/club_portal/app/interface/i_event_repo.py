from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.club_portal.domain.entity.event_entity import EventEntity


class IEventRepo(ABC):
    @abstractmethod
    async def create(self, *, event_entity: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    async def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def list_all(self) -> List[EventEntity]:
        """All events, newest date first"""
        pass

    @abstractmethod
    async def update(self, *, event_entity: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    async def delete(self, *, event_id: str) -> bool:
        pass
