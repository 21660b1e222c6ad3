"""Domain models for visited places."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import uuid4

MIN_RATING = 0
MAX_RATING = 5


def new_place_id() -> str:
    """Return a collision-resistant place identifier."""
    return f"place-{uuid4().hex}"


@dataclass(frozen=True)
class PlaceSnapshot:
    """Immutable copy of a place, safe for persistence and display."""

    id: str
    location: str
    country: str
    time_of_year: str
    date_visited: str
    landmarks: tuple[str, ...]
    notes: str
    rating: int


@dataclass
class Place:
    """A visited place with its landmarks, notes and rating.

    Mutators validate their input and return False, leaving the place
    untouched, when the input is rejected.
    """

    id: str
    location: str
    country: str
    time_of_year: str
    date_visited: str
    landmarks: list[str] = field(default_factory=list)
    notes: str = ""
    rating: int = MIN_RATING

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        location: str,
        country: str,
        time_of_year: str,
        date_visited: str,
        landmarks: Iterable[str] = (),
        notes: str = "",
        rating: int = MIN_RATING,
        id_factory: Callable[[], str] = new_place_id,
    ) -> "Place":
        """Create a new place with a freshly assigned id."""
        if not isinstance(location, str) or not location.strip():
            raise ValueError("Place location must not be empty")
        return cls(
            id=id_factory(),
            location=location.strip(),
            country=country.strip(),
            time_of_year=time_of_year.strip(),
            date_visited=date_visited.strip(),
            landmarks=_clean_landmarks(landmarks),
            notes=notes.strip() if isinstance(notes, str) else "",
            rating=rating if is_valid_rating(rating) else MIN_RATING,
        )

    @classmethod
    def from_snapshot(cls, snapshot: PlaceSnapshot) -> "Place":
        """Rebuild a place from a snapshot, keeping its id."""
        return cls(
            id=snapshot.id,
            location=snapshot.location,
            country=snapshot.country,
            time_of_year=snapshot.time_of_year,
            date_visited=snapshot.date_visited,
            landmarks=list(snapshot.landmarks),
            notes=snapshot.notes,
            rating=snapshot.rating,
        )

    def restore(self, snapshot: PlaceSnapshot) -> None:
        """Reset landmarks, notes and rating to the values of a snapshot."""
        self.landmarks = list(snapshot.landmarks)
        self.notes = snapshot.notes
        self.rating = snapshot.rating

    def add_landmark(self, landmark: object) -> bool:
        """Append a trimmed landmark; duplicates are allowed."""
        if not isinstance(landmark, str) or not landmark.strip():
            return False
        self.landmarks.append(landmark.strip())
        return True

    def remove_landmark(self, landmark: object) -> bool:
        """Remove the first exact match of a landmark."""
        try:
            self.landmarks.remove(landmark)
        except ValueError:
            return False
        return True

    def update_rating(self, rating: object) -> bool:
        """Set the rating when it is an integer between 0 and 5."""
        if not is_valid_rating(rating):
            return False
        self.rating = rating
        return True

    def update_notes(self, notes: object) -> bool:
        """Replace the notes with trimmed text."""
        if not isinstance(notes, str):
            return False
        self.notes = notes.strip()
        return True

    def is_visited_in_season(self, season: str) -> bool:
        """Return True when the season appears in the time of year."""
        return season.lower() in self.time_of_year.lower()

    def summary(self) -> str:
        return f"{self.location}, {self.country} - Visited in {self.time_of_year}"

    def visited_on(self) -> date | None:
        """Return the visit date, or None when it cannot be parsed."""
        return parse_visit_date(self.date_visited)

    def snapshot(self) -> PlaceSnapshot:
        """Return an immutable copy of the place."""
        return PlaceSnapshot(
            id=self.id,
            location=self.location,
            country=self.country,
            time_of_year=self.time_of_year,
            date_visited=self.date_visited,
            landmarks=tuple(self.landmarks),
            notes=self.notes,
            rating=self.rating,
        )


def is_valid_rating(value: object) -> bool:
    """Return True for integers in the 0-5 range, excluding booleans."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and MIN_RATING <= value <= MAX_RATING
    )


def parse_visit_date(raw: str) -> date | None:
    """Parse an ISO-8601 date or datetime string."""
    if not raw:
        return None
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        return None


def _clean_landmarks(landmarks: Iterable[str]) -> list[str]:
    return [
        item.strip() for item in landmarks if isinstance(item, str) and item.strip()
    ]
