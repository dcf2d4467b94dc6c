from datetime import datetime, timezone
from typing import Dict, List, Optional

import attrs
import uuid_utils

from src.platform.logging.loguru_io import Logger
from src.service.club_portal.app.interface.i_member_repo import IMemberRepo
from src.service.club_portal.domain.entity.member_entity import MemberEntity


class InMemoryMemberRepo(IMemberRepo):
    def __init__(self):
        # member_id → member
        self._members: Dict[str, MemberEntity] = {}

    @Logger.io
    async def create(self, *, member_entity: MemberEntity) -> MemberEntity:
        created = attrs.evolve(
            member_entity, id=str(uuid_utils.uuid7()), created_at=datetime.now(timezone.utc)
        )
        self._members[created.id] = created  # type: ignore[index]
        return created

    async def get_by_id(self, *, member_id: str) -> Optional[MemberEntity]:
        return self._members.get(member_id)

    async def list_all(self) -> List[MemberEntity]:
        return list(self._members.values())

    @Logger.io
    async def delete(self, *, member_id: str) -> bool:
        return self._members.pop(member_id, None) is not None
