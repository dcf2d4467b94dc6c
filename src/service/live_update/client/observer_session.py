"""
Observer Session

Client-side state for one live update connection. Transport-agnostic: a
driver (see websocket_transport) feeds it open/message/error/close events
and it folds frames into a newest-first view.

State machine:
    CONNECTING → OPEN → CLOSED
    CONNECTING → CLOSED (connection refused)

There is no automatic reconnection; a closed session stays closed.
"""

from typing import List, Optional, Tuple, Union

from src.platform.logging.loguru_io import Logger
from src.service.live_update.domain.entity.announcement_entity import AnnouncementRecord
from src.service.live_update.domain.enum.frame_kind import FrameKind
from src.service.live_update.domain.enum.observer_state import ObserverState, ObserverStatus
from src.service.live_update.driven_adapter.codec.live_update_frame_codec import (
    LiveUpdateFrameCodec,
)


class ObserverSession:
    def __init__(self, frame_codec: Optional[LiveUpdateFrameCodec] = None):
        self.frame_codec = frame_codec or LiveUpdateFrameCodec()
        self.state = ObserverState.CONNECTING
        self.status = ObserverStatus.CONNECTING
        self.last_error: Optional[BaseException] = None
        # newest first
        self._view: List[AnnouncementRecord] = []

    @property
    def view(self) -> Tuple[AnnouncementRecord, ...]:
        return tuple(self._view)

    def on_open(self) -> None:
        if self.state != ObserverState.CONNECTING:
            return
        self.state = ObserverState.OPEN
        self.status = ObserverStatus.CONNECTED
        Logger.base.info('🔗 [OBSERVER] Connected to live updates')

    def on_message(self, raw_data: Union[str, bytes]) -> None:
        """
        Fold one frame into the view

        Note:
            - Snapshot replaces the view (reversed to newest-first)
            - Increment is prepended; records are not de-duplicated
            - Undecodable frames are logged and skipped, the session stays open
        """
        if self.state != ObserverState.OPEN:
            Logger.base.debug(f'[OBSERVER] Ignoring frame while {self.state.value}')
            return

        try:
            kind, records = self.frame_codec.decode(raw_data)
        except ValueError as e:
            Logger.base.warning(f'⚠️ [OBSERVER] Skipping bad frame: {e}')
            return

        if kind == FrameKind.SNAPSHOT:
            self._view = list(reversed(records))
        else:
            self._view[:0] = records

    def on_error(self, error: BaseException) -> None:
        if self.state == ObserverState.CLOSED:
            return
        self.last_error = error
        self.state = ObserverState.CLOSED
        self.status = ObserverStatus.ERROR
        Logger.base.error(f'❌ [OBSERVER] Live update connection failed: {error!r}')

    def on_close(self) -> None:
        if self.state == ObserverState.CLOSED:
            return
        self.state = ObserverState.CLOSED
        self.status = ObserverStatus.DISCONNECTED
        Logger.base.info('🔌 [OBSERVER] Disconnected from live updates')
