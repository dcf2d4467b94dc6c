"""
Queued Observer Connection

One observer's outbound buffer. The broadcast hub calls deliver() without
awaiting; the transport (WebSocket or SSE) drains frames() in its own
writer task, so each connection receives frames in the order they were
delivered.

Memory Management:
- Buffer size: LIVE_UPDATE_OUTBOUND_BUFFER frames
- Full buffer: the connection is closed instead of dropping one frame,
  so a slow client sees a disconnect rather than a view with a gap
"""

from typing import AsyncIterator

from anyio import BrokenResourceError, ClosedResourceError, WouldBlock, create_memory_object_stream
import uuid_utils

from src.platform.exception.exceptions import DeliveryFailure
from src.platform.logging.loguru_io import Logger


class QueuedObserverConnection:
    def __init__(self, *, max_buffer_size: int = 100, label: str = 'observer'):
        self._connection_id = f'{label}-{uuid_utils.uuid7()}'
        self._send_stream, self._receive_stream = create_memory_object_stream[str](
            max_buffer_size=max_buffer_size
        )
        self._is_open = True

    @property
    def connection_id(self) -> str:
        return self._connection_id

    @property
    def is_open(self) -> bool:
        return self._is_open

    def deliver(self, frame: str) -> None:
        if not self._is_open:
            raise DeliveryFailure(self._connection_id, 'connection closed')

        try:
            # Non-blocking send (raises WouldBlock if full)
            self._send_stream.send_nowait(frame)
        except WouldBlock:
            self.close()
            raise DeliveryFailure(self._connection_id, 'outbound buffer full') from None
        except (ClosedResourceError, BrokenResourceError) as e:
            self.close()
            raise DeliveryFailure(self._connection_id, 'outbound stream closed') from e

    def close(self) -> None:
        if not self._is_open:
            return
        self._is_open = False
        # Closing the send side lets the writer drain what is already queued, then stop
        self._send_stream.close()
        Logger.base.debug(f'🔌 [CONNECTION] Closed {self._connection_id}')

    async def frames(self) -> AsyncIterator[str]:
        """Yield queued frames in delivery order until the connection is closed"""
        async with self._receive_stream:
            async for frame in self._receive_stream:
                yield frame
