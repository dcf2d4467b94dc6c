"""
Live Update Frame Codec

Encodes announcements into tagged JSON text frames and decodes them back.

Wire format:
    {"kind": "snapshot", "records": [{"id": 1, "event": "...", "update": "..."}, ...]}
    {"kind": "increment", "record": {"id": 2, "event": "...", "update": "..."}}
"""

from typing import Any, Dict, Iterable, Tuple, Union

import orjson

from src.service.live_update.domain.entity.announcement_entity import AnnouncementRecord
from src.service.live_update.domain.enum.frame_kind import FrameKind


DecodedFrame = Tuple[FrameKind, Tuple[AnnouncementRecord, ...]]


class LiveUpdateFrameCodec:
    @staticmethod
    def encode_snapshot(records: Iterable[AnnouncementRecord]) -> str:
        frame = {
            'kind': FrameKind.SNAPSHOT.value,
            'records': [record.to_dict() for record in records],
        }
        return orjson.dumps(frame).decode('utf-8')

    @staticmethod
    def encode_increment(record: AnnouncementRecord) -> str:
        frame = {'kind': FrameKind.INCREMENT.value, 'record': record.to_dict()}
        return orjson.dumps(frame).decode('utf-8')

    @staticmethod
    def decode(raw_data: Union[str, bytes]) -> DecodedFrame:
        """
        Decode one frame.

        Returns:
            (kind, records) - a snapshot carries every record oldest-first,
            an increment carries exactly one

        Raises:
            ValueError: not JSON, unknown kind, or malformed records
        """
        try:
            frame: Dict[str, Any] = orjson.loads(raw_data)
        except orjson.JSONDecodeError as e:
            raise ValueError(f'Failed to decode frame: {e}') from e

        if not isinstance(frame, dict):
            raise ValueError('Frame must be a JSON object')

        try:
            kind = FrameKind(frame.get('kind'))
        except ValueError as e:
            raise ValueError(f'Unknown frame kind: {frame.get("kind")!r}') from e

        try:
            if kind == FrameKind.SNAPSHOT:
                records = tuple(AnnouncementRecord.from_dict(r) for r in frame['records'])
            else:
                records = (AnnouncementRecord.from_dict(frame['record']),)
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f'Malformed {kind.value} frame: {e}') from e

        return kind, records

    @staticmethod
    def kind_of(raw_data: Union[str, bytes]) -> FrameKind:
        """Read only the discriminant of an already-encoded frame"""
        return FrameKind(orjson.loads(raw_data)['kind'])
