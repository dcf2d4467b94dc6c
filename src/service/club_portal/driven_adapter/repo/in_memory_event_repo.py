"""
In-memory Event Repository

Stands in for the document database; contents are lost on restart.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

import attrs
import uuid_utils

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.interface.i_event_repo import IEventRepo
from src.service.club_portal.domain.entity.event_entity import EventEntity


class InMemoryEventRepo(IEventRepo):
    def __init__(self):
        # event_id → event
        self._events: Dict[str, EventEntity] = {}

    @Logger.io
    async def create(self, *, event_entity: EventEntity) -> EventEntity:
        now = datetime.now(timezone.utc)
        created = attrs.evolve(
            event_entity, id=str(uuid_utils.uuid7()), created_at=now, updated_at=now
        )
        self._events[created.id] = created  # type: ignore[index]
        return created

    async def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        return self._events.get(event_id)

    async def list_all(self) -> List[EventEntity]:
        # Newest date first; insertion order breaks ties
        return sorted(self._events.values(), key=lambda e: e.date, reverse=True)

    @Logger.io
    async def update(self, *, event_entity: EventEntity) -> EventEntity:
        if event_entity.id not in self._events:
            raise NotFoundError('Event not found')

        updated = attrs.evolve(event_entity, updated_at=datetime.now(timezone.utc))
        self._events[updated.id] = updated  # type: ignore[index]
        return updated

    @Logger.io
    async def delete(self, *, event_id: str) -> bool:
        return self._events.pop(event_id, None) is not None
