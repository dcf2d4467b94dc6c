from enum import StrEnum


class EventChange(StrEnum):
    """Announcement text published on the live update channel"""

    CREATED = 'New event announced'
    UPDATED = 'Event details updated'
    CANCELLED = 'Event cancelled'
