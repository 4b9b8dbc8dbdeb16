from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Geofence not found"
# name of the path parameter used by every /geofence/{id} route
ID_PATH_PARAM = "geofence_id"


class GeofenceNotFound(Exception):
    """Raised when no stored geofence matches the requested id."""

    def __init__(self, geofence_id):
        self.geofence_id = geofence_id
        super().__init__(f"Geofence {geofence_id!r} not found")


def not_found_response() -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": NOT_FOUND_MESSAGE})


def _is_id_path_error(error: dict) -> bool:
    loc = error.get("loc") or ()
    return len(loc) >= 2 and loc[0] == "path" and loc[1] == ID_PATH_PARAM


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(GeofenceNotFound)
    async def geofence_not_found_handler(request: Request, exc: GeofenceNotFound):
        logger.info("%s %s: geofence %s not found", request.method, request.url.path, exc.geofence_id)
        return not_found_response()

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # an id that is not an integer can never match a stored record
        if any(_is_id_path_error(err) for err in exc.errors()):
            logger.info("%s %s: non-integer geofence id", request.method, request.url.path)
            return not_found_response()
        return await request_validation_exception_handler(request, exc)
