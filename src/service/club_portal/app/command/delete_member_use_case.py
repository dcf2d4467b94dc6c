from typing import Self

from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.interface.i_member_repo import IMemberRepo
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


class DeleteMemberUseCase:
    def __init__(self, member_repo: IMemberRepo):
        self.member_repo = member_repo

    @classmethod
    def depends(cls, member_repo: IMemberRepo = Depends(AppProvide[Container.member_repo])) -> Self:
        return cls(member_repo=member_repo)

    @Logger.io
    async def delete_member(self, *, actor: ClubIdentity, member_id: str) -> None:
        member_entity = await self.member_repo.get_by_id(member_id=member_id)
        if not member_entity:
            raise NotFoundError('Member not found')
        member_entity.validate_owner(actor.id)
        await self.member_repo.delete(member_id=member_id)
