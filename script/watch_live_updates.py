#!/usr/bin/env python3
"""
Live update watcher
Connects to /ws/updates and prints the newest-first view after every frame

Usage:
    uv run python -m script.watch_live_updates [ws://localhost:8000/ws/updates]
"""

import asyncio
import sys

from src.platform.constant.route_constant import LIVE_UPDATE_WS
from src.service.live_update.client.observer_session import ObserverSession
from src.service.live_update.client.websocket_transport import run_observer_session


DEFAULT_URL = f'ws://localhost:8000{LIVE_UPDATE_WS}'


class PrintingObserverSession(ObserverSession):
    def on_open(self) -> None:
        super().on_open()
        print(f'✅ {self.status.value}')

    def on_message(self, raw_data: str | bytes) -> None:
        super().on_message(raw_data)
        print('=' * 80)
        print(f'📣 {len(self.view)} announcements (newest first)')
        for record in self.view[:10]:
            print(f'  #{record.id:<4} {record.event}: {record.update}')

    def on_close(self) -> None:
        super().on_close()
        print(f'🔌 {self.status.value}')

    def on_error(self, error: BaseException) -> None:
        super().on_error(error)
        print(f'❌ {self.status.value}: {error}')


async def watch(url: str) -> None:
    print(f'🔗 Connecting to live updates: {url}')
    await run_observer_session(url, PrintingObserverSession())


if __name__ == '__main__':
    try:
        asyncio.run(watch(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_URL))
    except KeyboardInterrupt:
        print('\n🛑 Stopped by user')
