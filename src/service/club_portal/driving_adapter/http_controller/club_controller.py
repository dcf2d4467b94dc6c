from fastapi import APIRouter, Depends, Response, status

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.command.login_club_use_case import LoginClubUseCase
from src.service.club_portal.app.command.register_club_use_case import RegisterClubUseCase
from src.service.club_portal.domain.entity.club_entity import ClubEntity
from src.service.club_portal.driving_adapter.http_controller.auth.club_auth import (
    get_current_club,
)
from src.service.club_portal.driving_adapter.schema.club_schema import (
    ClubAuthResponse,
    ClubDashboardResponse,
    ClubLoginRequest,
    ClubRegisterRequest,
    ClubResponse,
)
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


router = APIRouter()


def _set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_HOURS * 60 * 60,
        httponly=True,
        samesite='lax',
        secure=False,  # Set to True in production
    )


def _to_club_response(club_entity: ClubEntity) -> ClubResponse:
    return ClubResponse(id=club_entity.id or 0, name=club_entity.name, email=club_entity.email)


@router.post('/club-register', status_code=status.HTTP_201_CREATED)
@Logger.io
async def register_club(
    response: Response,
    request: ClubRegisterRequest,
    use_case: RegisterClubUseCase = Depends(RegisterClubUseCase.depends),
) -> ClubAuthResponse:
    club_entity, token = await use_case.register(
        name=request.name,
        email=str(request.email),
        password=request.password.get_secret_value(),
    )
    _set_auth_cookie(response, token)
    return ClubAuthResponse(
        message='Club registered successfully', token=token, club=_to_club_response(club_entity)
    )


@router.post('/club-login')
@Logger.io
async def login_club(
    response: Response,
    request: ClubLoginRequest,
    use_case: LoginClubUseCase = Depends(LoginClubUseCase.depends),
) -> ClubAuthResponse:
    club_entity, token = await use_case.login(
        email=str(request.email), password=request.password.get_secret_value()
    )
    _set_auth_cookie(response, token)
    return ClubAuthResponse(
        message='Login successful', token=token, club=_to_club_response(club_entity)
    )


@router.get('/club-dashboard')
async def club_dashboard(
    current_club: ClubIdentity = Depends(get_current_club),
) -> ClubDashboardResponse:
    return ClubDashboardResponse(
        message=f'Welcome {current_club.name}!',
        club=ClubResponse(id=current_club.id, name=current_club.name, email=current_club.email),
    )
