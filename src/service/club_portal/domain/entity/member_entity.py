from datetime import datetime
from typing import Any, Dict, Optional

import attrs

from src.platform.exception.exceptions import ForbiddenError, ValidationError


@attrs.define
class MemberEntity:
    club_id: int
    name: str
    email: str = ''
    role: str = 'member'
    # roll number, department, status, year, branch
    meta: Dict[str, Any] = attrs.field(factory=dict)
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    @staticmethod
    def validate_name(name: Optional[str]) -> None:
        if not name or not name.strip():
            raise ValidationError('Member name is required')

    def validate_owner(self, club_id: int) -> None:
        if self.club_id != club_id:
            raise ForbiddenError('Only the owning club can remove this member')
