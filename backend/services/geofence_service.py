"""In-memory geofence store.

``GeofenceService`` owns an ordered list of ``Geofence`` records for the
lifetime of the application. Lookups scan the list front to back and
always act on the first record with a matching id, so duplicate ids are
accepted but only the earliest one is reachable by id.

Every value handed back is a snapshot dict; callers never receive the
stored objects. The service does no locking and must be driven from a
single thread (the event loop in the running app).
"""

import logging
from typing import Any, Dict, List, Optional

from core.errors import GeofenceNotFound
from models.geofence import Geofence

logger = logging.getLogger(__name__)


class GeofenceService:
    def __init__(self):
        self._geofences: List[Geofence] = []

    def __len__(self):
        return len(self._geofences)

    def _index_of(self, geofence_id: int) -> int:
        for index, geofence in enumerate(self._geofences):
            if geofence.id == geofence_id:
                return index
        raise GeofenceNotFound(geofence_id)

    def create(self, id: int, name: Optional[str], longitude: Optional[float], latitude: Optional[float]) -> Dict[str, Any]:
        geofence = Geofence(id, name, longitude, latitude)
        self._geofences.append(geofence)
        logger.info("Created geofence %s (%s)", id, name)
        return geofence.snapshot()

    def list(self) -> List[Dict[str, Any]]:
        return [g.snapshot() for g in self._geofences]

    def get(self, geofence_id: int) -> Dict[str, Any]:
        return self._geofences[self._index_of(geofence_id)].snapshot()

    def update(self, geofence_id: int, name: Optional[str], longitude: Optional[float], latitude: Optional[float]) -> Dict[str, Any]:
        geofence = self._geofences[self._index_of(geofence_id)]
        geofence.rename(name)
        geofence.set_coordinates(longitude, latitude)
        logger.info("Updated geofence %s", geofence_id)
        return geofence.snapshot()

    def delete(self, geofence_id: int) -> None:
        del self._geofences[self._index_of(geofence_id)]
        logger.info("Deleted geofence %s", geofence_id)

    def clear(self) -> None:
        logger.debug("Clearing %d geofences", len(self._geofences))
        self._geofences.clear()
