"""Tracks which events a mentor has been newly accepted to.

Each recompute diffs the currently accepted events against the snapshot
from the previous recompute, then overwrites the snapshot. An absent
snapshot counts as empty, so after the snapshot is cleared every accepted
event shows up as new once.
"""

import logging
from collections.abc import Iterable

from mentorbooking.domain import Caller, Event, MentorId
from mentorbooking.domain.projections import accepted_event_ids, visible_events
from mentorbooking.stores.interfaces import AcceptanceSnapshotStore

logger = logging.getLogger(__name__)


class AcceptanceTracker:
    def __init__(self, snapshots: AcceptanceSnapshotStore) -> None:
        self._snapshots = snapshots
        self._newly_accepted: list[str] = []

    @property
    def newly_accepted(self) -> tuple[str, ...]:
        return tuple(self._newly_accepted)

    def recompute(self, caller: Caller, events: Iterable[Event]) -> tuple[str, ...]:
        """Diff accepted events against the stored snapshot and replace it.

        Only mentors are tracked; for any other role this returns an empty
        result and leaves the snapshot alone.
        Events the mentor was not selected for are ignored.
        """
        if not caller.is_mentor:
            self._newly_accepted = []
            return ()

        current = accepted_event_ids(visible_events(events, caller), MentorId(caller.viewer_id))
        previous = set(self._snapshots.load(caller.viewer_id) or ())
        self._newly_accepted = [event_id for event_id in current if event_id not in previous]
        self._snapshots.save(caller.viewer_id, current)

        if self._newly_accepted:
            logger.debug(
                "Viewer %s newly accepted to %d event(s)",
                caller.viewer_id,
                len(self._newly_accepted),
            )
        return self.newly_accepted

    def clear(self, event_id: str) -> None:
        """Drop one event from the current result. The snapshot is untouched."""
        self._newly_accepted = [e for e in self._newly_accepted if e != event_id]
