"""
Live update frame kinds

Every frame pushed to an observer carries one of these in its 'kind' field,
so clients never have to guess a frame's meaning from its shape.
"""

from enum import StrEnum


class FrameKind(StrEnum):
    SNAPSHOT = 'snapshot'
    INCREMENT = 'increment'
