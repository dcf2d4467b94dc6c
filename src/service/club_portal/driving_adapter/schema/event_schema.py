from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from src.service.club_portal.domain.entity.event_entity import EventEntity


class EventCreateRequest(BaseModel):
    title: str
    date: str = ''
    time: str = ''
    location: str = ''
    description: str = ''
    image: str = ''
    attendees: int = Field(default=0, ge=0)

    class Config:
        json_schema_extra = {
            'example': {
                'title': 'Photo Walk',
                'date': '2026-11-02',
                'time': '17:00',
                'location': 'Main Quad',
                'description': 'Bring a camera',
                'image': '',
            }
        }


class EventUpdateRequest(BaseModel):
    title: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    attendees: Optional[int] = Field(default=None, ge=0)


class AttendeeRegisterRequest(BaseModel):
    name: str
    roll: str
    email: EmailStr
    semester: str
    year: str

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Asha',
                'roll': 'CS21-042',
                'email': 'asha@campus.edu',
                'semester': '5',
                'year': '3',
            }
        }


class EventResponse(BaseModel):
    id: str
    club_id: int
    title: str
    date: str
    time: str
    location: str
    description: str
    image: str
    attendees: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, event_entity: EventEntity) -> 'EventResponse':
        return cls(
            id=event_entity.id or '',
            club_id=event_entity.club_id,
            title=event_entity.title,
            date=event_entity.date,
            time=event_entity.time,
            location=event_entity.location,
            description=event_entity.description,
            image=event_entity.image,
            attendees=event_entity.attendees,
            created_at=event_entity.created_at,
            updated_at=event_entity.updated_at,
        )


class AttendeeRegisterResponse(BaseModel):
    message: str
    attendees: int


class MessageResponse(BaseModel):
    message: str
