"""In-memory collection of visited places."""

from dataclasses import dataclass, field

from travel_log.domain.places import Place, PlaceSnapshot, is_valid_rating

_TEXT_FIELDS = ("id", "location", "country", "time_of_year", "date_visited", "notes")


@dataclass
class PlaceCollection:
    """Ordered list of places with lookup and query helpers."""

    _places: list[Place] = field(default_factory=list)

    def add(self, place: Place) -> bool:
        """Append a place when it carries every required field."""
        if not is_well_formed(place):
            return False
        self._places.append(place)
        return True

    def remove_by_id(self, place_id: str) -> bool:
        """Remove the place with the given id."""
        index = self.index_of(place_id)
        if index is None:
            return False
        del self._places[index]
        return True

    def index_of(self, place_id: str) -> int | None:
        """Return the position of a place, if present."""
        for index, place in enumerate(self._places):
            if place.id == place_id:
                return index
        return None

    def insert(self, index: int, place: Place) -> bool:
        """Put a place back at a given position."""
        if not is_well_formed(place):
            return False
        self._places.insert(index, place)
        return True

    def get_by_id(self, place_id: str) -> Place | None:
        """Return a place by id, if present."""
        return next((place for place in self._places if place.id == place_id), None)

    def all(self) -> list[Place]:
        """Return a copy of the ordered places."""
        return list(self._places)

    def by_country(self, country: str) -> list[Place]:
        """Return places whose country matches, ignoring case."""
        wanted = country.lower()
        return [place for place in self._places if place.country.lower() == wanted]

    def by_season(self, season: str) -> list[Place]:
        """Return places visited during the given season."""
        return [place for place in self._places if place.is_visited_in_season(season)]

    def count(self) -> int:
        return len(self._places)

    def __len__(self) -> int:
        return len(self._places)

    def sorted_by_rating(self) -> list[Place]:
        """Return places by rating, highest first, keeping insertion order on ties."""
        return sort_by_rating(self._places)

    def countries(self) -> list[str]:
        """Return the distinct countries, sorted."""
        return sorted({place.country for place in self._places})

    def snapshots(self) -> list[PlaceSnapshot]:
        """Return snapshots of every place in order."""
        return [place.snapshot() for place in self._places]

    def clear(self) -> None:
        self._places.clear()


def sort_by_rating(places: list[Place]) -> list[Place]:
    """Stable sort by rating, descending."""
    return sorted(places, key=lambda place: place.rating, reverse=True)


def is_well_formed(place: object) -> bool:
    """Check that an object has the shape of a place."""
    for name in _TEXT_FIELDS:
        if not isinstance(getattr(place, name, None), str):
            return False
    if not place.id or not place.location.strip():
        return False
    landmarks = getattr(place, "landmarks", None)
    if not isinstance(landmarks, list) or not all(
        isinstance(item, str) and item.strip() for item in landmarks
    ):
        return False
    if not is_valid_rating(getattr(place, "rating", None)):
        return False
    return callable(getattr(place, "is_visited_in_season", None))
