from typing import List, Self

from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.service.club_portal.app.interface.i_member_repo import IMemberRepo
from src.service.club_portal.domain.entity.member_entity import MemberEntity


class ListMembersUseCase:
    def __init__(self, member_repo: IMemberRepo):
        self.member_repo = member_repo

    @classmethod
    def depends(cls, member_repo: IMemberRepo = Depends(AppProvide[Container.member_repo])) -> Self:
        return cls(member_repo=member_repo)

    async def list_members(self) -> List[MemberEntity]:
        return await self.member_repo.list_all()
