from enum import StrEnum


class ObserverState(StrEnum):
    CONNECTING = 'connecting'
    OPEN = 'open'
    CLOSED = 'closed'


class ObserverStatus(StrEnum):
    """Display text for the session status line."""

    CONNECTING = 'Connecting...'
    CONNECTED = 'Connected'
    ERROR = 'Error'
    DISCONNECTED = 'Disconnected'
