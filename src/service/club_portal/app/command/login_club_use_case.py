from typing import Self, Tuple

from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.interface.i_club_repo import IClubRepo
from src.service.club_portal.app.interface.i_password_hasher import IPasswordHasher
from src.service.club_portal.domain.entity.club_entity import ClubEntity
from src.service.club_portal.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class LoginClubUseCase:
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
    async def login(self, *, email: str, password: str) -> Tuple[ClubEntity, str]:
        """Unknown email and wrong password fail the same way"""
        club_entity = ClubEntity.validate_club_exists(
            await self.club_repo.get_by_email(email=email)
        )
        club_entity.verify_password(password, self.password_hasher)
        return club_entity, self.jwt_auth.create_token(club_entity)
