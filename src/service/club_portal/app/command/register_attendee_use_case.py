"""
Register Attendee Use Case

Public sign-up for an event. No token required; duplicates are detected
by email within one event.
"""

from typing import Self

from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.interface.i_event_repo import IEventRepo
from src.service.club_portal.domain.entity.event_entity import AttendeeRegistration, EventEntity


class RegisterAttendeeUseCase:
    def __init__(self, event_repo: IEventRepo):
        self.event_repo = event_repo

    @classmethod
    def depends(cls, event_repo: IEventRepo = Depends(AppProvide[Container.event_repo])) -> Self:
        return cls(event_repo=event_repo)

    @Logger.io
    async def register(
        self, *, event_id: str, name: str, roll: str, email: str, semester: str, year: str
    ) -> EventEntity:
        event_entity = await self.event_repo.get_by_id(event_id=event_id)
        if not event_entity:
            raise NotFoundError('Event not found')

        event_entity.register_attendee(
            AttendeeRegistration(name=name, roll=roll, email=email, semester=semester, year=year)
        )
        return await self.event_repo.update(event_entity=event_entity)
