"""Accepted-events snapshot kept in the viewer's session.

Layout: one entry per viewer under ``acceptedEvents_<viewerId>``, holding a
JSON array of event ID strings.
"""

import json
import logging
from collections.abc import MutableMapping, Sequence
from typing import Any

from mentorbooking.stores.interfaces import AcceptanceSnapshotStore

logger = logging.getLogger(__name__)

KEY_PREFIX = "acceptedEvents_"


def snapshot_key(viewer_id: str) -> str:
    return f"{KEY_PREFIX}{viewer_id}"


class SessionSnapshotStore(AcceptanceSnapshotStore):
    """Snapshot store over any mutable mapping, usually ``request.session``."""

    def __init__(self, session: MutableMapping[str, Any]) -> None:
        self._session = session

    def load(self, viewer_id: str) -> list[str] | None:
        raw = self._session.get(snapshot_key(viewer_id))
        if raw is None:
            return None
        try:
            event_ids = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Discarding unreadable acceptance snapshot for viewer %s", viewer_id)
            return None
        if not isinstance(event_ids, list):
            logger.warning("Discarding malformed acceptance snapshot for viewer %s", viewer_id)
            return None
        return [str(event_id) for event_id in event_ids]

    def save(self, viewer_id: str, event_ids: Sequence[str]) -> None:
        self._session[snapshot_key(viewer_id)] = json.dumps(list(event_ids))
