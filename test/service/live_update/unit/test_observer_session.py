"""
Unit tests for ObserverSession

The client-side fold: snapshot replaces, increments prepend, bad frames
are skipped, and the state machine never leaves CLOSED.
"""

import pytest

from src.service.live_update.domain.entity.announcement_entity import AnnouncementRecord
from src.service.live_update.domain.enum.observer_state import ObserverState, ObserverStatus
from src.service.live_update.driven_adapter.codec.live_update_frame_codec import (
    LiveUpdateFrameCodec,
)
from src.service.live_update.client.observer_session import ObserverSession


SEMINAR = AnnouncementRecord(id=1, event='Seminar', update='Starts at 5 PM')
PHOTO = AnnouncementRecord(id=2, event='Photography Club', update='New event announced')
CHESS = AnnouncementRecord(id=3, event='Chess', update='Finals today')


@pytest.mark.unit
class TestObserverSession:
    @pytest.fixture
    def codec(self) -> LiveUpdateFrameCodec:
        return LiveUpdateFrameCodec()

    @pytest.fixture
    def session(self) -> ObserverSession:
        session = ObserverSession()
        session.on_open()
        return session

    def test_initial_state_is_connecting(self):
        session = ObserverSession()

        assert session.state == ObserverState.CONNECTING
        assert session.status == ObserverStatus.CONNECTING
        assert session.view == ()

    def test_open_sets_connected_status(self, session):
        assert session.state == ObserverState.OPEN
        assert session.status.value == 'Connected'

    def test_snapshot_is_shown_newest_first(self, session, codec):
        session.on_message(codec.encode_snapshot((SEMINAR, PHOTO)))

        assert session.view == (PHOTO, SEMINAR)

    def test_increment_is_prepended(self, session, codec):
        session.on_message(codec.encode_snapshot((SEMINAR, PHOTO)))
        session.on_message(codec.encode_increment(CHESS))

        assert session.view == (CHESS, PHOTO, SEMINAR)

    def test_second_snapshot_replaces_view(self, session, codec):
        session.on_message(codec.encode_snapshot((SEMINAR,)))
        session.on_message(codec.encode_increment(PHOTO))

        session.on_message(codec.encode_snapshot((CHESS,)))

        assert session.view == (CHESS,)

    def test_repeated_increment_is_not_deduplicated(self, session, codec):
        session.on_message(codec.encode_increment(SEMINAR))
        session.on_message(codec.encode_increment(SEMINAR))

        assert session.view == (SEMINAR, SEMINAR)

    @pytest.mark.parametrize(
        'raw',
        [
            'not json',
            '{"kind": "heartbeat"}',
            '{"id": 1, "event": "x", "update": "y"}',
            '{"kind": "increment", "record": {"id": 2, "event": null, "update": "y"}}',
        ],
    )
    def test_bad_frames_are_skipped(self, session, codec, raw):
        session.on_message(codec.encode_snapshot((SEMINAR,)))

        session.on_message(raw)

        assert session.view == (SEMINAR,)
        assert session.state == ObserverState.OPEN

    def test_frames_before_open_are_ignored(self, codec):
        session = ObserverSession()

        session.on_message(codec.encode_snapshot((SEMINAR,)))

        assert session.view == ()

    def test_error_closes_session_and_keeps_view(self, session, codec):
        session.on_message(codec.encode_snapshot((SEMINAR,)))
        error = ConnectionResetError('reset by peer')

        session.on_error(error)

        assert session.state == ObserverState.CLOSED
        assert session.status == ObserverStatus.ERROR
        assert session.last_error is error
        assert session.view == (SEMINAR,)

    def test_close_sets_disconnected(self, session):
        session.on_close()

        assert session.state == ObserverState.CLOSED
        assert session.status.value == 'Disconnected'

    def test_closed_session_stays_closed(self, session, codec):
        session.on_close()

        session.on_open()
        session.on_message(codec.encode_increment(CHESS))
        session.on_error(RuntimeError('late'))

        assert session.state == ObserverState.CLOSED
        assert session.status == ObserverStatus.DISCONNECTED
        assert session.view == ()
        assert session.last_error is None

    def test_connection_refused_goes_straight_to_closed(self):
        session = ObserverSession()

        session.on_error(ConnectionRefusedError())

        assert session.state == ObserverState.CLOSED
        assert session.status == ObserverStatus.ERROR
