"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from travel_log.api.place_models import LandmarkBody, NotesBody, PlaceCreate, RatingBody
from travel_log.app_logging import configure_logging
from travel_log.containers import AppContainer
from travel_log.domain.errors import (
    PersistenceError,
    QuotaExceededError,
    SerializationError,
)
from travel_log.domain.places import Place
from travel_log.services.gallery import SortOption, build_card, build_detail


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    # Handlers are async and never await, so each request runs to completion
    # on the event loop and access to the container is serialised.
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(
        request: Request, exc: PersistenceError
    ) -> JSONResponse:
        logger.exception("Storage failure on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=_persistence_status(exc),
            content={"detail": str(exc), "error": type(exc).__name__},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/places")
    async def list_places(
        request: Request,
        country: str | None = None,
        season: str | None = None,
        sort: SortOption | None = None,
    ) -> dict[str, object]:
        """Return gallery cards filtered by country and season."""
        state_container: AppContainer = request.app.state.container
        places = state_container.place_service.gallery(country, season, sort)
        return {"places": [asdict(build_card(place)) for place in places]}

    @app.post("/places", status_code=status.HTTP_201_CREATED)
    async def create_place(payload: PlaceCreate, request: Request) -> dict[str, object]:
        """Record a new place."""
        state_container: AppContainer = request.app.state.container
        try:
            place = state_container.place_service.record_place(
                location=payload.location,
                country=payload.country,
                time_of_year=payload.time_of_year,
                date_visited=payload.date_visited,
                landmarks=payload.landmarks,
                notes=payload.notes,
                rating=payload.rating,
            )
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        return asdict(build_detail(place))

    @app.get("/places/{place_id}")
    async def place_detail(place_id: str, request: Request) -> dict[str, object]:
        """Return the detail view of a place."""
        state_container: AppContainer = request.app.state.container
        return asdict(build_detail(_require_place(state_container, place_id)))

    @app.delete("/places/{place_id}")
    async def delete_place(place_id: str, request: Request) -> dict[str, str]:
        """Delete a place from the travel log."""
        state_container: AppContainer = request.app.state.container
        if not state_container.place_service.delete_place(place_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"status": "deleted"}

    @app.post("/places/{place_id}/landmarks")
    async def add_landmark(
        place_id: str, payload: LandmarkBody, request: Request
    ) -> dict[str, object]:
        """Append a landmark to a place."""
        state_container: AppContainer = request.app.state.container
        result = state_container.place_service.add_landmark(place_id, payload.landmark)
        return _mutation_response(state_container, place_id, result, "Invalid landmark")

    @app.delete("/places/{place_id}/landmarks")
    async def remove_landmark(
        place_id: str, landmark: str, request: Request
    ) -> dict[str, object]:
        """Remove a landmark from a place."""
        state_container: AppContainer = request.app.state.container
        result = state_container.place_service.remove_landmark(place_id, landmark)
        return _mutation_response(
            state_container, place_id, result, "Landmark not found"
        )

    @app.put("/places/{place_id}/rating")
    async def update_rating(
        place_id: str, payload: RatingBody, request: Request
    ) -> dict[str, object]:
        """Change the rating of a place."""
        state_container: AppContainer = request.app.state.container
        result = state_container.place_service.update_rating(place_id, payload.rating)
        return _mutation_response(
            state_container, place_id, result, "Rating must be between 0 and 5"
        )

    @app.put("/places/{place_id}/notes")
    async def update_notes(
        place_id: str, payload: NotesBody, request: Request
    ) -> dict[str, object]:
        """Replace the notes of a place."""
        state_container: AppContainer = request.app.state.container
        result = state_container.place_service.update_notes(place_id, payload.notes)
        return _mutation_response(state_container, place_id, result, "Invalid notes")

    @app.get("/stats")
    async def stats(request: Request) -> dict[str, object]:
        """Return totals and the average rating."""
        state_container: AppContainer = request.app.state.container
        places = state_container.place_service.collection.all()
        return asdict(state_container.stats_service.compute(places))

    @app.get("/countries")
    async def countries(request: Request) -> dict[str, list[str]]:
        """Return the options for the country filter."""
        state_container: AppContainer = request.app.state.container
        return {"countries": state_container.place_service.countries()}

    return app


def _require_place(container: AppContainer, place_id: str) -> Place:
    place = container.place_service.get_place(place_id)
    if place is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return place


def _mutation_response(
    container: AppContainer, place_id: str, result: bool | None, message: str
) -> dict[str, object]:
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    if not result:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=message
        )
    return asdict(build_detail(_require_place(container, place_id)))


def _persistence_status(exc: PersistenceError) -> int:
    if isinstance(exc, QuotaExceededError):
        return status.HTTP_507_INSUFFICIENT_STORAGE
    if isinstance(exc, SerializationError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_503_SERVICE_UNAVAILABLE
