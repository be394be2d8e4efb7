"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class MentorId:
    """Opaque, non-empty identifier for a mentor."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Mentor ID cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


class Decision(Enum):
    """Staff decision on a pending mentor request."""

    APPROVE = "approve"
    DECLINE = "decline"


class MentorStatus(Enum):
    """A mentor's relationship to one event."""

    NONE = "none"
    REQUESTING = "requesting"
    ACCEPTED = "accepted"
    DECLINED = "declined"
