from datetime import datetime, timezone
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import ConflictError, ForbiddenError, ValidationError


@attrs.define
class AttendeeRegistration:
    name: str
    roll: str
    email: str
    semester: str
    year: str
    registered_at: datetime = attrs.field(factory=lambda: datetime.now(timezone.utc))

    def validate(self) -> None:
        if not all(
            value.strip() for value in (self.name, self.roll, self.email, self.semester, self.year)
        ):
            raise ValidationError('All registration fields are required')


@attrs.define
class EventEntity:
    club_id: int
    title: str
    date: str = ''
    time: str = ''
    location: str = ''
    description: str = ''
    image: str = ''
    attendees: int = attrs.field(default=0, validator=attrs.validators.ge(0))
    registrations: List[AttendeeRegistration] = attrs.field(factory=list)
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @staticmethod
    def validate_title(title: Optional[str]) -> None:
        if not title or not title.strip():
            raise ValidationError('Event title is required')

    def validate_owner(self, club_id: int) -> None:
        if self.club_id != club_id:
            raise ForbiddenError('Only the organizing club can modify this event')

    def register_attendee(self, registration: AttendeeRegistration) -> int:
        """Add one attendee and return the new attendee count"""
        registration.validate()
        email = registration.email.strip().lower()
        if any(r.email.strip().lower() == email for r in self.registrations):
            raise ConflictError('Already registered for this event')

        self.registrations.append(registration)
        self.attendees += 1
        return self.attendees
