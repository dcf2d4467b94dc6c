from typing import Any, Dict, Optional, Self

from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.interface.i_member_repo import IMemberRepo
from src.service.club_portal.domain.entity.member_entity import MemberEntity
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


class CreateMemberUseCase:
    def __init__(self, member_repo: IMemberRepo):
        self.member_repo = member_repo

    @classmethod
    def depends(cls, member_repo: IMemberRepo = Depends(AppProvide[Container.member_repo])) -> Self:
        return cls(member_repo=member_repo)

    @Logger.io
    async def create_member(
        self,
        *,
        actor: ClubIdentity,
        name: str,
        email: str = '',
        role: Optional[str] = None,
        meta: Optional[Dict[str, Any]] = None,
    ) -> MemberEntity:
        MemberEntity.validate_name(name)
        return await self.member_repo.create(
            member_entity=MemberEntity(
                club_id=actor.id,
                name=name.strip(),
                email=email,
                role=role or 'member',
                meta=dict(meta or {}),
            )
        )
