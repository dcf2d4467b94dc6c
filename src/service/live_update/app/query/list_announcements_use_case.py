from typing import List, Self

from fastapi import Depends

from src.platform.config.di import AppProvide, Container
from src.service.live_update.app.interface.i_announcement_store import IAnnouncementStore
from src.service.live_update.domain.entity.announcement_entity import AnnouncementRecord


class ListAnnouncementsUseCase:
    def __init__(self, announcement_store: IAnnouncementStore):
        self.announcement_store = announcement_store

    @classmethod
    def depends(
        cls,
        announcement_store: IAnnouncementStore = Depends(AppProvide[Container.announcement_store]),
    ) -> Self:
        return cls(announcement_store=announcement_store)

    def list_all(self) -> List[AnnouncementRecord]:
        """All announcements, oldest first"""
        return list(self.announcement_store.snapshot())
