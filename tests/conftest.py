"""Shared test fixtures."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from itertools import count

import pytest

from travel_log.config import Settings
from travel_log.containers import AppContainer
from travel_log.domain.errors import PersistenceError
from travel_log.domain.places import Place, PlaceSnapshot
from travel_log.services.places import PlaceRepository, PlaceService
from travel_log.services.stats import StatsService


@dataclass
class InMemoryPlaceRepository(PlaceRepository):
    """In-memory place repository for tests."""

    stored: list[PlaceSnapshot] = field(default_factory=list)
    save_calls: int = 0
    fail_with: PersistenceError | None = None

    def save(self, snapshots: Sequence[PlaceSnapshot]) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.save_calls += 1
        self.stored = list(snapshots)

    def load(self) -> list[PlaceSnapshot]:
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.stored)


def sequential_ids(prefix: str = "place") -> Callable[[], str]:
    counter = count(1)
    return lambda: f"{prefix}-{next(counter)}"


def make_place(  # noqa: PLR0913
    location: str = "Paris",
    country: str = "France",
    time_of_year: str = "Summer",
    date_visited: str = "2024-07-14",
    landmarks: Sequence[str] = ("Eiffel Tower",),
    notes: str = "",
    rating: int = 0,
    place_id: str | None = None,
) -> Place:
    place = Place.create(
        location=location,
        country=country,
        time_of_year=time_of_year,
        date_visited=date_visited,
        landmarks=landmarks,
        notes=notes,
        rating=rating,
    )
    if place_id is not None:
        place.id = place_id
    return place


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(storage_path=tmp_path / "places.json")


@pytest.fixture
def place_repository() -> InMemoryPlaceRepository:
    return InMemoryPlaceRepository()


@pytest.fixture
def container(
    settings: Settings, place_repository: InMemoryPlaceRepository
) -> AppContainer:
    place_service = PlaceService(place_repository, id_factory=sequential_ids())
    return AppContainer(
        settings=settings,
        place_service=place_service,
        stats_service=StatsService(),
    )
