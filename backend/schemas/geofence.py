from pydantic import BaseModel, Field
from typing import Optional
from pydantic import ConfigDict

CENTRAL_PARK = {"id": 1, "name": "Central Park", "longitude": -73.968285, "latitude": 40.785091}


class GeofenceOut(BaseModel):
    id: int = Field(description="The id of the geofence")
    name: Optional[str] = Field(description="The name of the geofence")
    longitude: Optional[float] = Field(description="The longitude of the geofence")
    latitude: Optional[float] = Field(description="The latitude of the geofence")

    model_config = ConfigDict(json_schema_extra={"example": CENTRAL_PARK})


class GeofenceCreate(BaseModel):
    # only the id is required; the rest is stored as given, null included
    id: int = Field(description="The caller-assigned id of the geofence")
    name: Optional[str] = Field(default=None, description="The name of the geofence")
    longitude: Optional[float] = Field(default=None, description="The longitude of the geofence")
    latitude: Optional[float] = Field(default=None, description="The latitude of the geofence")

    model_config = ConfigDict(json_schema_extra={"example": CENTRAL_PARK})


class GeofenceUpdate(BaseModel):
    # no partial updates: an omitted field overwrites the stored value with null
    name: Optional[str] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Central Park South", "longitude": -73.97, "latitude": 40.78}}
    )


class Message(BaseModel):
    message: str

    model_config = ConfigDict(json_schema_extra={"example": {"message": "Geofence not found"}})
