from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.command.create_event_use_case import CreateEventUseCase
from src.service.club_portal.app.command.delete_event_use_case import DeleteEventUseCase
from src.service.club_portal.app.command.register_attendee_use_case import (
    RegisterAttendeeUseCase,
)
from src.service.club_portal.app.command.update_event_use_case import UpdateEventUseCase
from src.service.club_portal.app.query.get_event_use_case import GetEventUseCase
from src.service.club_portal.app.query.list_events_use_case import ListEventsUseCase
from src.service.club_portal.driving_adapter.http_controller.auth.club_auth import (
    get_current_club,
)
from src.service.club_portal.driving_adapter.schema.event_schema import (
    AttendeeRegisterRequest,
    AttendeeRegisterResponse,
    EventCreateRequest,
    EventResponse,
    EventUpdateRequest,
    MessageResponse,
)
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
async def list_events(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    return [EventResponse.from_entity(event) for event in await use_case.list_events()]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    current_club: ClubIdentity = Depends(get_current_club),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> EventResponse:
    event_entity = await use_case.create_event(actor=current_club, **request.model_dump())
    return EventResponse.from_entity(event_entity)


@router.get('/{event_id}', status_code=status.HTTP_200_OK)
async def get_event(
    event_id: str,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    return EventResponse.from_entity(await use_case.get_event(event_id=event_id))


@router.put('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_event(
    event_id: str,
    request: EventUpdateRequest,
    current_club: ClubIdentity = Depends(get_current_club),
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> EventResponse:
    event_entity = await use_case.update_event(
        actor=current_club, event_id=event_id, changes=request.model_dump(exclude_unset=True)
    )
    return EventResponse.from_entity(event_entity)


@router.delete('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_event(
    event_id: str,
    current_club: ClubIdentity = Depends(get_current_club),
    use_case: DeleteEventUseCase = Depends(DeleteEventUseCase.depends),
) -> MessageResponse:
    await use_case.delete_event(actor=current_club, event_id=event_id)
    return MessageResponse(message='Event deleted')


@router.post('/{event_id}/register', status_code=status.HTTP_201_CREATED)
@Logger.io
async def register_attendee(
    event_id: str,
    request: AttendeeRegisterRequest,
    use_case: RegisterAttendeeUseCase = Depends(RegisterAttendeeUseCase.depends),
) -> AttendeeRegisterResponse:
    event_entity = await use_case.register(
        event_id=event_id,
        name=request.name,
        roll=request.roll,
        email=str(request.email),
        semester=request.semester,
        year=request.year,
    )
    return AttendeeRegisterResponse(
        message='Registered successfully', attendees=event_entity.attendees
    )
