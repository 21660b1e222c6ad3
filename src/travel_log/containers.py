"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from travel_log.adapters.json_file_place_repository import JsonFilePlaceRepository
from travel_log.adapters.supabase_place_repository import SupabasePlaceRepository
from travel_log.config import Settings
from travel_log.services.places import PlaceRepository, PlaceService
from travel_log.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    place_service: PlaceService
    stats_service: StatsService


def build_repository(settings: Settings) -> PlaceRepository:
    """Create the place repository for the configured backend."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase storage requires a URL and a service key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabasePlaceRepository(client, table=settings.supabase_table)
    return JsonFilePlaceRepository(settings.storage_path)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    place_service = PlaceService(build_repository(resolved_settings))
    place_service.load()
    return AppContainer(
        settings=resolved_settings,
        place_service=place_service,
        stats_service=StatsService(),
    )
