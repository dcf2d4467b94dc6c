"""
Live Update Controller

HTTP ingress for announcements plus the two push transports:
- WebSocket /ws/updates (primary)
- SSE /api/updates/stream (same frames, event name = frame kind)
"""

import asyncio
from collections.abc import AsyncGenerator
from typing import List

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from sse_starlette.sse import EventSourceResponse

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.club_portal.driving_adapter.http_controller.auth.club_auth import (
    get_current_club,
)
from src.service.live_update.app.command.publish_announcement_use_case import (
    PublishAnnouncementUseCase,
)
from src.service.live_update.app.query.list_announcements_use_case import (
    ListAnnouncementsUseCase,
)
from src.service.live_update.app.query.observe_announcements_use_case import (
    ObserveAnnouncementsUseCase,
)
from src.service.live_update.driven_adapter.hub.queued_observer_connection import (
    QueuedObserverConnection,
)
from src.service.live_update.driving_adapter.schema.live_update_schema import (
    AnnouncementCreateRequest,
    AnnouncementCreateResponse,
    AnnouncementResponse,
)
from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity


router = APIRouter()
ws_router = APIRouter()


@router.post('/add-update', status_code=status.HTTP_200_OK)
@Logger.io
async def add_update(
    request: AnnouncementCreateRequest,
    current_club: ClubIdentity = Depends(get_current_club),
    use_case: PublishAnnouncementUseCase = Depends(PublishAnnouncementUseCase.depends),
) -> AnnouncementCreateResponse:
    record = use_case.publish(actor=current_club, event=request.event, update=request.update)
    return AnnouncementCreateResponse(
        success=True, update=AnnouncementResponse(**record.to_dict())
    )


@router.get('/updates', status_code=status.HTTP_200_OK)
async def list_updates(
    use_case: ListAnnouncementsUseCase = Depends(ListAnnouncementsUseCase.depends),
) -> List[AnnouncementResponse]:
    return [AnnouncementResponse(**record.to_dict()) for record in use_case.list_all()]


@router.get('/updates/stream', status_code=status.HTTP_200_OK)
async def stream_updates(
    use_case: ObserveAnnouncementsUseCase = Depends(ObserveAnnouncementsUseCase.depends),
) -> EventSourceResponse:
    """SSE push of the snapshot followed by every new announcement."""
    connection = QueuedObserverConnection(
        max_buffer_size=settings.LIVE_UPDATE_OUTBOUND_BUFFER, label='sse'
    )
    frame_codec = use_case.frame_codec

    async def event_generator() -> AsyncGenerator[dict, None]:
        # Attached only once streaming starts, so detach always follows
        try:
            if not use_case.attach(connection):
                return
            async for frame in connection.frames():
                # The frame kind doubles as the SSE event name
                yield {'event': frame_codec.kind_of(frame).value, 'data': frame}
        finally:
            use_case.detach(connection)

    return EventSourceResponse(event_generator())


async def _pump_frames(websocket: WebSocket, connection: QueuedObserverConnection) -> None:
    async for frame in connection.frames():
        await websocket.send_text(frame)


async def _wait_for_disconnect(websocket: WebSocket) -> None:
    # Observers never send anything meaningful; read only to notice the close
    while True:
        message = await websocket.receive()
        if message['type'] == 'websocket.disconnect':
            return


async def _close_quietly(websocket: WebSocket) -> None:
    try:
        await websocket.close()
    except (RuntimeError, WebSocketDisconnect):
        pass


@ws_router.websocket('/updates')
async def observe_updates(
    websocket: WebSocket,
    use_case: ObserveAnnouncementsUseCase = Depends(ObserveAnnouncementsUseCase.depends),
) -> None:
    await websocket.accept()
    connection = QueuedObserverConnection(
        max_buffer_size=settings.LIVE_UPDATE_OUTBOUND_BUFFER, label='ws'
    )

    # Snapshot + register happen together, before any other publish can run
    if not use_case.attach(connection):
        await websocket.close()
        return

    pump_task = asyncio.create_task(_pump_frames(websocket, connection))
    disconnect_task = asyncio.create_task(_wait_for_disconnect(websocket))
    try:
        done, pending = await asyncio.wait(
            {pump_task, disconnect_task}, return_when=asyncio.FIRST_COMPLETED
        )
        for task in pending:
            task.cancel()
        if pump_task in done:
            # Closed by the hub (outbound buffer overflow); end the socket too
            await _close_quietly(websocket)
        for task in done:
            if not task.cancelled() and (error := task.exception()) is not None:
                Logger.base.warning(
                    f'⚠️ [WS] Observer {connection.connection_id} ended with error: {error!r}'
                )
    finally:
        use_case.detach(connection)
        Logger.base.info(f'🔌 [WS] Observer {connection.connection_id} disconnected')
