"""
Club Authentication (authorization collaborator)

Issues and verifies signed club tokens. A verified token is rebuilt into a
ClubIdentity without touching the club repository.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import UnauthorizedError
from src.service.club_portal.domain.entity.club_entity import ClubEntity
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_hours = settings.ACCESS_TOKEN_EXPIRE_HOURS

    @property
    def token_max_age_seconds(self) -> int:
        return self.token_expire_hours * 60 * 60

    def create_token(self, club_entity: ClubEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(club_entity.id),
            'exp': now + timedelta(hours=self.token_expire_hours),
            'iat': now,
            'club_id': club_entity.id,
            'email': club_entity.email,
            'name': club_entity.name,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise UnauthorizedError('Token expired')
        except jwt.PyJWTError:
            raise UnauthorizedError('Invalid token')

    def verify(self, token: Optional[str]) -> ClubIdentity:
        """
        Turn a bearer token into the acting club

        Raises:
            UnauthorizedError: token missing, malformed, badly signed or expired
        """
        if not token:
            raise UnauthorizedError('Not authenticated')

        payload = self.decode_token(token)

        club_id = payload.get('club_id')
        email = payload.get('email')
        name = payload.get('name')
        if not club_id or not email or name is None:
            raise UnauthorizedError('Invalid token')

        return ClubIdentity(id=club_id, name=name, email=email)


def extract_token(authorization: Optional[str], cookie_token: Optional[str]) -> Optional[str]:
    """Bearer header wins over the auth cookie"""
    if authorization:
        scheme, _, credentials = authorization.partition(' ')
        if scheme.lower() == 'bearer' and credentials.strip():
            return credentials.strip()
    return cookie_token


