from unittest.mock import patch

import pytest
import websockets
from websockets.exceptions import ConnectionClosedError

from src.service.live_update.client.observer_session import ObserverSession
from src.service.live_update.client.websocket_transport import run_observer_session
from src.service.live_update.domain.entity.announcement_entity import AnnouncementRecord
from src.service.live_update.domain.enum.observer_state import ObserverState, ObserverStatus
from src.service.live_update.driven_adapter.codec.live_update_frame_codec import (
    LiveUpdateFrameCodec,
)


URL = 'ws://testserver/ws/updates'


class FakeWebSocket:
    """Async-iterable stand-in for a websockets client connection"""

    def __init__(self, messages: list[str], error: Exception | None = None):
        self.messages = messages
        self.error = error

    async def __aenter__(self) -> 'FakeWebSocket':
        return self

    async def __aexit__(self, *exc_info) -> bool:
        return False

    async def _iterate(self):
        for message in self.messages:
            yield message
        if self.error:
            raise self.error

    def __aiter__(self):
        return self._iterate()


@pytest.mark.unit
class TestRunObserverSession:
    @pytest.fixture
    def frames(self) -> list[str]:
        codec = LiveUpdateFrameCodec()
        return [
            codec.encode_snapshot((AnnouncementRecord(id=1, event='Seminar', update='5 PM'),)),
            codec.encode_increment(AnnouncementRecord(id=2, event='Chess', update='Finals')),
        ]

    @pytest.mark.asyncio
    async def test_clean_close_ends_disconnected(self, frames):
        with patch.object(websockets, 'connect', return_value=FakeWebSocket(frames)):
            session = await run_observer_session(URL, ObserverSession())

        assert session.status == ObserverStatus.DISCONNECTED
        assert [r.id for r in session.view] == [2, 1]

    @pytest.mark.asyncio
    async def test_abnormal_close_ends_in_error(self, frames):
        error = ConnectionClosedError(None, None)
        with patch.object(websockets, 'connect', return_value=FakeWebSocket(frames, error)):
            session = await run_observer_session(URL, ObserverSession())

        assert session.state == ObserverState.CLOSED
        assert session.status == ObserverStatus.ERROR
        assert session.last_error is error
        assert len(session.view) == 2

    @pytest.mark.asyncio
    async def test_refused_connection_never_opens(self):
        with patch.object(websockets, 'connect', side_effect=ConnectionRefusedError()):
            session = await run_observer_session(URL, ObserverSession())

        assert session.status == ObserverStatus.ERROR
        assert session.view == ()
