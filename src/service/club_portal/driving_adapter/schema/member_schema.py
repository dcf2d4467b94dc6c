from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from src.service.club_portal.domain.entity.member_entity import MemberEntity


class MemberCreateRequest(BaseModel):
    name: str
    email: str = ''
    role: Optional[str] = None
    meta: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Ravi',
                'email': 'ravi@campus.edu',
                'role': 'member',
                'meta': {
                    'rollNumber': 'EE22-017',
                    'department': 'EE',
                    'status': 'active',
                    'year': '2',
                    'branch': 'Electrical',
                },
            }
        }


class MemberResponse(BaseModel):
    id: str
    club_id: int
    name: str
    email: str
    role: str
    meta: Dict[str, Any]
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, member_entity: MemberEntity) -> 'MemberResponse':
        return cls(
            id=member_entity.id or '',
            club_id=member_entity.club_id,
            name=member_entity.name,
            email=member_entity.email,
            role=member_entity.role,
            meta=member_entity.meta,
            created_at=member_entity.created_at,
        )
