"""
In-memory Club Repository

Stands in for the document database; contents are lost on restart.
"""

from datetime import datetime, timezone
from typing import Dict, Optional

import attrs

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.interface.i_club_repo import IClubRepo
from src.service.club_portal.domain.entity.club_entity import ClubEntity


class InMemoryClubRepo(IClubRepo):
    def __init__(self):
        # club_id → club
        self._clubs: Dict[int, ClubEntity] = {}

    @staticmethod
    def _normalize_email(email: str) -> str:
        return email.strip().lower()

    @Logger.io
    async def create(self, *, club_entity: ClubEntity) -> ClubEntity:
        if await self.get_by_email(email=club_entity.email):
            raise ConflictError('Club already exists')

        created = attrs.evolve(
            club_entity,
            id=len(self._clubs) + 1,
            email=self._normalize_email(club_entity.email),
            created_at=datetime.now(timezone.utc),
        )
        self._clubs[created.id] = created  # type: ignore[index]
        return created

    async def get_by_email(self, *, email: str) -> Optional[ClubEntity]:
        normalized = self._normalize_email(email)
        return next((c for c in self._clubs.values() if c.email == normalized), None)

    async def get_by_id(self, *, club_id: int) -> Optional[ClubEntity]:
        return self._clubs.get(club_id)
