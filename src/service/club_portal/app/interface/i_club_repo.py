from abc import ABC, abstractmethod
from typing import Optional

from src.service.club_portal.domain.entity.club_entity import ClubEntity


class IClubRepo(ABC):
    @abstractmethod
    async def create(self, *, club_entity: ClubEntity) -> ClubEntity:
        """
        Persist a new club and assign its id

        Raises:
            ConflictError: email already registered
        """
        pass

    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[ClubEntity]:
        pass

    @abstractmethod
    async def get_by_id(self, *, club_id: int) -> Optional[ClubEntity]:
        pass
