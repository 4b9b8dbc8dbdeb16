from fastapi import Request

from services.geofence_service import GeofenceService


# Dependency: the store attached to the running app by create_app
def get_geofence_service(request: Request) -> GeofenceService:
    return request.app.state.geofence_service
