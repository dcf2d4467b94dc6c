from typing import Any, Dict

import attrs


@attrs.frozen
class AnnouncementRecord:
    """One published announcement. Immutable once appended to the update store."""

    id: int
    event: str
    update: str

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'event': self.event, 'update': self.update}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnnouncementRecord':
        """
        Raises:
            KeyError: id missing
            ValueError: id is not an integer, or event/update is not a string
        """
        record_id = data['id']
        # bool is an int subclass
        if not isinstance(record_id, int) or isinstance(record_id, bool):
            raise ValueError(f'Announcement id must be an integer, got {record_id!r}')

        # Older clients posted the body under 'message'
        update = data['update'] if 'update' in data else data.get('message', '')
        event = data.get('event', '')
        if not isinstance(event, str) or not isinstance(update, str):
            raise ValueError('Announcement event and update must be strings')

        return cls(id=record_id, event=event, update=update)
