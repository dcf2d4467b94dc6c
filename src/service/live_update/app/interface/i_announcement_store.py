from abc import ABC, abstractmethod
from typing import Tuple

from src.service.live_update.domain.entity.announcement_entity import AnnouncementRecord


class IAnnouncementStore(ABC):
    """Ordered, append-only sequence of announcements for the life of the process"""

    @abstractmethod
    def append(self, *, event: str, update: str) -> AnnouncementRecord:
        """Assign the next id (current length + 1), append at the tail and return the record"""
        pass

    @abstractmethod
    def snapshot(self) -> Tuple[AnnouncementRecord, ...]:
        """All records in insertion order; mutating the result cannot touch the store"""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass
