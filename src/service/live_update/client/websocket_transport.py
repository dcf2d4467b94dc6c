"""
WebSocket transport for ObserverSession

Drives a session over the /ws/updates endpoint with the websockets client.
Returns when the server closes the socket or the connection fails; it
never reconnects.
"""

import websockets

from src.platform.logging.loguru_io import Logger
from src.service.live_update.client.observer_session import ObserverSession


async def run_observer_session(url: str, session: ObserverSession) -> ObserverSession:
    try:
        async with websockets.connect(url, ping_interval=30, ping_timeout=10) as ws:
            session.on_open()
            async for message in ws:
                session.on_message(message)
    except websockets.exceptions.ConnectionClosedOK:
        session.on_close()
    except (websockets.exceptions.WebSocketException, OSError) as e:
        session.on_error(e)
    else:
        session.on_close()

    Logger.base.info(
        f'[OBSERVER] Session ended: {session.status.value} ({len(session.view)} announcements)'
    )
    return session
