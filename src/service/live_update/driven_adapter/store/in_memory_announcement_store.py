"""
In-memory Announcement Store

The update store behind the live update channel. Append-only while the
process runs; contents are lost on restart.
"""

from typing import Iterable, List, Tuple

from src.platform.logging.loguru_io import Logger
from src.service.live_update.app.interface.i_announcement_store import IAnnouncementStore
from src.service.live_update.domain.entity.announcement_entity import AnnouncementRecord


# Sample announcements loaded when LIVE_UPDATE_SEED_ENABLED is set
SAMPLE_ANNOUNCEMENTS: Tuple[Tuple[str, str], ...] = (
    ('Seminar', 'Starts at 5 PM'),
    ('Photography Club', 'New event announced'),
)


class InMemoryAnnouncementStore(IAnnouncementStore):
    def __init__(self, seed: Iterable[Tuple[str, str]] = ()):
        self._records: List[AnnouncementRecord] = []
        for event, update in seed:
            self.append(event=event, update=update)

    def append(self, *, event: str, update: str) -> AnnouncementRecord:
        record = AnnouncementRecord(id=len(self._records) + 1, event=event, update=update)
        self._records.append(record)
        Logger.base.debug(f'🗂️ [STORE] Appended announcement {record.id} ({record.event})')
        return record

    def snapshot(self) -> Tuple[AnnouncementRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)
