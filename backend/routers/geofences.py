from fastapi import APIRouter, Body, Depends, Path, Response, status
from typing import List, Optional

from core.dependencies import get_geofence_service
from schemas.geofence import GeofenceCreate, GeofenceOut, GeofenceUpdate, Message
from services.geofence_service import GeofenceService

router = APIRouter(tags=["Geofences"])

NOT_FOUND = {404: {"model": Message, "description": "The geofence was not found"}}

# Handlers are async and never await while touching the store, so each one
# runs to completion on the event loop without interleaving with another.


@router.post(
    "/geofence",
    response_model=GeofenceOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new geofence",
    response_description="The geofence was successfully created",
)
async def create_geofence(data: GeofenceCreate, service: GeofenceService = Depends(get_geofence_service)):
    return service.create(data.id, data.name, data.longitude, data.latitude)


@router.get(
    "/geofences",
    response_model=List[GeofenceOut],
    summary="Returns the list of all the geofences",
    response_description="The list of the geofences",
)
async def list_geofences(service: GeofenceService = Depends(get_geofence_service)):
    return service.list()


@router.get(
    "/geofence/{geofence_id}",
    response_model=GeofenceOut,
    summary="Get the geofence by id",
    response_description="The geofence description by id",
    responses=NOT_FOUND,
)
async def get_geofence(
    geofence_id: int = Path(description="The geofence id"),
    service: GeofenceService = Depends(get_geofence_service),
):
    return service.get(geofence_id)


@router.put(
    "/geofence/{geofence_id}",
    response_model=GeofenceOut,
    summary="Update the geofence by the id",
    response_description="The geofence was updated",
    responses=NOT_FOUND,
)
async def update_geofence(
    data: Optional[GeofenceUpdate] = Body(default=None),
    geofence_id: int = Path(description="The geofence id"),
    service: GeofenceService = Depends(get_geofence_service),
):
    # a missing body overwrites every field with null, like an empty one
    if data is None:
        data = GeofenceUpdate()
    return service.update(geofence_id, data.name, data.longitude, data.latitude)


@router.delete(
    "/geofence/{geofence_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove the geofence by id",
    response_description="The geofence was deleted",
    responses=NOT_FOUND,
)
async def delete_geofence(
    geofence_id: int = Path(description="The geofence id"),
    service: GeofenceService = Depends(get_geofence_service),
):
    service.delete(geofence_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
