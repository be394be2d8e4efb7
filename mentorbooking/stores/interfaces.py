"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from mentorbooking.domain import Event, EventId, MembershipSets

MembershipMutation = Callable[[Event], MembershipSets]


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by starts_at ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def mutate_membership(
        self, event_id: EventId, mutation: MembershipMutation
    ) -> Event | None:
        """Apply ``mutation`` to the committed state of an event atomically.

        The mutation receives the event as currently committed and returns
        the new membership sets. Read, mutation and write form one unit with
        respect to other callers. If the mutation raises, nothing is written
        and the exception propagates. Returns the updated event, or None if
        the event does not exist.
        """
        ...


class AcceptanceSnapshotStore(ABC):
    """Interface for the per-viewer accepted-events snapshot."""

    @abstractmethod
    def load(self, viewer_id: str) -> list[str] | None:
        """Return the stored event IDs, or None if no snapshot exists."""
        ...

    @abstractmethod
    def save(self, viewer_id: str, event_ids: Sequence[str]) -> None:
        """Overwrite the snapshot for the viewer."""
        ...
