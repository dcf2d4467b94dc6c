from typing import Optional

from fastapi import Cookie, Depends, Header

from src.platform.config.core_setting import settings
from src.platform.config.di import AppProvide, Container
from src.service.club_portal.driving_adapter.http_controller.auth.jwt_auth import (
    JwtAuth,
    extract_token,
)
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


async def get_current_club(
    jwt_auth: JwtAuth = Depends(AppProvide[Container.jwt_auth]),
    authorization: Optional[str] = Header(None),
    token: Optional[str] = Cookie(None, alias=settings.AUTH_COOKIE_NAME),
) -> ClubIdentity:
    """
    Get current club from the JWT (stateless, no repo query)

    Raises UnauthorizedError before any handler body runs, so a rejected
    request never mutates anything.
    """
    return jwt_auth.verify(extract_token(authorization, token))
