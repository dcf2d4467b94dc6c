"""
Register Club Use Case

Creates a club account and signs it in immediately.
"""

from typing import Self, Tuple

from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.interface.i_club_repo import IClubRepo
from src.service.club_portal.app.interface.i_password_hasher import IPasswordHasher
from src.service.club_portal.domain.entity.club_entity import ClubEntity
from src.service.club_portal.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class RegisterClubUseCase:
    def __init__(self, club_repo: IClubRepo, password_hasher: IPasswordHasher, jwt_auth: JwtAuth):
        self.club_repo = club_repo
        self.password_hasher = password_hasher
        self.jwt_auth = jwt_auth

    @classmethod
    def depends(
        cls,
        club_repo: IClubRepo = Depends(AppProvide[Container.club_repo]),
        password_hasher: IPasswordHasher = Depends(AppProvide[Container.password_hasher]),
        jwt_auth: JwtAuth = Depends(AppProvide[Container.jwt_auth]),
    ) -> Self:
        return cls(club_repo=club_repo, password_hasher=password_hasher, jwt_auth=jwt_auth)

    @Logger.io
    async def register(self, *, name: str, email: str, password: str) -> Tuple[ClubEntity, str]:
        """
        Returns:
            (created club, signed token)

        Raises:
            ValidationError: a field is blank
            ConflictError: email already registered
        """
        ClubEntity.validate_registration(name=name, email=email, password=password)

        club_entity = ClubEntity(name=name.strip(), email=email.strip())
        club_entity.set_password(password, self.password_hasher)
        created = await self.club_repo.create(club_entity=club_entity)

        Logger.base.info(f'🏛️ [CLUB] Registered club {created.id} ({created.name})')
        return created, self.jwt_auth.create_token(created)
