from typing import Any, Dict, Optional


class Geofence:
    """One stored geofence: a named longitude/latitude point.

    Values are kept exactly as given; id uniqueness and coordinate ranges
    are the caller's concern.
    """

    def __init__(self, id: int, name: Optional[str], longitude: Optional[float], latitude: Optional[float]):
        self.id = id
        self.name = name
        self.longitude = longitude
        self.latitude = latitude

    def snapshot(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "longitude": self.longitude,
            "latitude": self.latitude,
        }

    def set_coordinates(self, longitude: Optional[float], latitude: Optional[float]) -> None:
        self.longitude = longitude
        self.latitude = latitude

    def rename(self, name: Optional[str]) -> None:
        self.name = name

    def __repr__(self):
        return f"Geofence(id={self.id!r}, name={self.name!r}, longitude={self.longitude!r}, latitude={self.latitude!r})"
