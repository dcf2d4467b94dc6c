from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.command.create_member_use_case import CreateMemberUseCase
from src.service.club_portal.app.command.delete_member_use_case import DeleteMemberUseCase
from src.service.club_portal.app.query.list_members_use_case import ListMembersUseCase
from src.service.club_portal.driving_adapter.http_controller.auth.club_auth import (
    get_current_club,
)
from src.service.club_portal.driving_adapter.schema.event_schema import MessageResponse
from src.service.club_portal.driving_adapter.schema.member_schema import (
    MemberCreateRequest,
    MemberResponse,
)
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
async def list_members(
    use_case: ListMembersUseCase = Depends(ListMembersUseCase.depends),
) -> List[MemberResponse]:
    return [MemberResponse.from_entity(member) for member in await use_case.list_members()]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_member(
    request: MemberCreateRequest,
    current_club: ClubIdentity = Depends(get_current_club),
    use_case: CreateMemberUseCase = Depends(CreateMemberUseCase.depends),
) -> MemberResponse:
    member_entity = await use_case.create_member(
        actor=current_club,
        name=request.name,
        email=request.email,
        role=request.role,
        meta=request.meta,
    )
    return MemberResponse.from_entity(member_entity)


@router.delete('/{member_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_member(
    member_id: str,
    current_club: ClubIdentity = Depends(get_current_club),
    use_case: DeleteMemberUseCase = Depends(DeleteMemberUseCase.depends),
) -> MessageResponse:
    await use_case.delete_member(actor=current_club, member_id=member_id)
    return MessageResponse(message='Member removed')
