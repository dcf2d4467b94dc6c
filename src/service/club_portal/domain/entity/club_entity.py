from datetime import datetime
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import UnauthorizedError, ValidationError
from src.service.club_portal.app.interface.i_password_hasher import IPasswordHasher
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


@attrs.define
class ClubEntity:
    name: str = ''
    email: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @staticmethod
    def validate_registration(*, name: str, email: str, password: str) -> None:
        if not name.strip() or not email.strip() or not password:
            raise ValidationError('All fields are required')

    @staticmethod
    def validate_club_exists(club_entity: Optional['ClubEntity']) -> 'ClubEntity':
        if not club_entity:
            raise UnauthorizedError('Invalid credentials')
        return club_entity

    def set_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    def verify_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        if not password_hasher.verify_password(
            plain_password=SecretStr(plain_password), hashed_password=self.hashed_password
        ):
            raise UnauthorizedError('Invalid credentials')

    def to_identity(self) -> ClubIdentity:
        return ClubIdentity(id=self.id or 0, name=self.name, email=self.email)
