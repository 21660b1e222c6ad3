"""Services for recording and querying visited places."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from travel_log.domain.errors import PersistenceError
from travel_log.domain.places import Place, PlaceSnapshot, new_place_id
from travel_log.services.collection import PlaceCollection
from travel_log.services.gallery import SortOption, gallery_view

logger = logging.getLogger(__name__)


class PlaceRepository(Protocol):
    """Persistence interface for the travel log."""

    def save(self, snapshots: Sequence[PlaceSnapshot]) -> None:
        """Replace the stored places with the given snapshots."""

    def load(self) -> list[PlaceSnapshot]:
        """Return stored places in order, or an empty list."""


@dataclass
class PlaceService:
    """Application service that keeps the collection and storage in step."""

    repository: PlaceRepository
    collection: PlaceCollection = field(default_factory=PlaceCollection)
    id_factory: Callable[[], str] = new_place_id

    def load(self) -> int:
        """Replace the collection with the stored places."""
        snapshots = self.repository.load()
        self.collection.clear()
        for snapshot in snapshots:
            if not self.collection.add(Place.from_snapshot(snapshot)):
                logger.warning("Skipping malformed stored place %s", snapshot.id)
        logger.info("Loaded %s places", self.collection.count())
        return self.collection.count()

    def save(self) -> None:
        """Persist the current collection."""
        self.repository.save(self.collection.snapshots())

    def record_place(  # noqa: PLR0913
        self,
        location: str,
        country: str,
        time_of_year: str,
        date_visited: str,
        landmarks: Sequence[str] = (),
        notes: str = "",
        rating: int = 0,
    ) -> Place:
        """Create a place, add it to the collection and persist."""
        place = Place.create(
            location=location,
            country=country,
            time_of_year=time_of_year,
            date_visited=date_visited,
            landmarks=landmarks,
            notes=notes,
            rating=rating,
            id_factory=self.id_factory,
        )
        self.collection.add(place)
        try:
            self.save()
        except PersistenceError:
            self.collection.remove_by_id(place.id)
            raise
        logger.info("Recorded place %s", place.id)
        return place

    def delete_place(self, place_id: str) -> bool:
        """Remove a place and persist when it existed."""
        place = self.collection.get_by_id(place_id)
        index = self.collection.index_of(place_id)
        if place is None or index is None:
            return False
        self.collection.remove_by_id(place_id)
        try:
            self.save()
        except PersistenceError:
            self.collection.insert(index, place)
            raise
        logger.info("Deleted place %s", place_id)
        return True

    def get_place(self, place_id: str) -> Place | None:
        return self.collection.get_by_id(place_id)

    def add_landmark(self, place_id: str, landmark: object) -> bool | None:
        """Add a landmark; None when the place is unknown."""
        return self._mutate(place_id, lambda place: place.add_landmark(landmark))

    def remove_landmark(self, place_id: str, landmark: object) -> bool | None:
        """Remove a landmark; None when the place is unknown."""
        return self._mutate(place_id, lambda place: place.remove_landmark(landmark))

    def update_rating(self, place_id: str, rating: object) -> bool | None:
        """Update a rating; None when the place is unknown."""
        return self._mutate(place_id, lambda place: place.update_rating(rating))

    def update_notes(self, place_id: str, notes: object) -> bool | None:
        """Update notes; None when the place is unknown."""
        return self._mutate(place_id, lambda place: place.update_notes(notes))

    def gallery(
        self,
        country: str | None = None,
        season: str | None = None,
        sort: SortOption | str | None = None,
    ) -> list[Place]:
        """Return the filtered and ordered places for the gallery."""
        return gallery_view(self.collection.all(), country, season, sort)

    def countries(self) -> list[str]:
        return self.collection.countries()

    def _mutate(
        self, place_id: str, operation: Callable[[Place], bool]
    ) -> bool | None:
        place = self.collection.get_by_id(place_id)
        if place is None:
            return None
        before = place.snapshot()
        if not operation(place):
            return False
        try:
            self.save()
        except PersistenceError:
            place.restore(before)
            raise
        return True
