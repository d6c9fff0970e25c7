"""Error kinds raised by the event detail retrieval service."""

from enum import Enum


class ErrorKind(Enum):
    """Retrieval error codes."""

    # Slight sea-level change expected, no damage. Real event, not surfaced.
    SLIGHT_SEA_LEVEL_CHANGE = "SLIGHT_SEA_LEVEL_CHANGE"
    NOT_FOUND = "NOT_FOUND"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    TIMEOUT = "TIMEOUT"
    MALFORMED_RECORD = "MALFORMED_RECORD"
    UNSUPPORTED_EVENT = "UNSUPPORTED_EVENT"

    @property
    def is_suppressed(self) -> bool:
        return self is ErrorKind.SLIGHT_SEA_LEVEL_CHANGE


class RetrievalError(Exception):
    """Raised by a retriever when no detail payload can be produced."""

    def __init__(self, kind: ErrorKind, message: str = "") -> None:
        super().__init__(message or kind.value)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        if self.message:
            return f"{self.kind.value}: {self.message}"
        return self.kind.value


class SlightSeaLevelChangeError(RetrievalError):
    """Raised for records whose only tsunami assessment is a slight sea-level change."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            ErrorKind.SLIGHT_SEA_LEVEL_CHANGE,
            "Slight sea-level change is not supported",
        )
        self.event_id = event_id
