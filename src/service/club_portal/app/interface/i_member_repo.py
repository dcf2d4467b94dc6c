from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.club_portal.domain.entity.member_entity import MemberEntity


class IMemberRepo(ABC):
    @abstractmethod
    async def create(self, *, member_entity: MemberEntity) -> MemberEntity:
        pass

    @abstractmethod
    async def get_by_id(self, *, member_id: str) -> Optional[MemberEntity]:
        pass

    @abstractmethod
    async def list_all(self) -> List[MemberEntity]:
        pass

    @abstractmethod
    async def delete(self, *, member_id: str) -> bool:
        pass
