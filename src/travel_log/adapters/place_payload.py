"""Serialized form of places shared by the storage adapters."""

import logging
from collections.abc import Iterable

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from travel_log.domain.places import MAX_RATING, MIN_RATING, PlaceSnapshot

logger = logging.getLogger(__name__)


class PlacePayload(BaseModel):
    """Stored place object: ``{id, location, landmarks, timeOfYear, ...}``."""

    model_config = ConfigDict(populate_by_name=True)

    id: StrictStr = Field(min_length=1)
    location: StrictStr = Field(min_length=1)
    landmarks: list[StrictStr]
    time_of_year: StrictStr = Field(alias="timeOfYear")
    notes: StrictStr
    country: StrictStr
    date_visited: StrictStr = Field(alias="dateVisited")
    rating: StrictInt = Field(ge=MIN_RATING, le=MAX_RATING)

    @field_validator("location")
    @classmethod
    def _location_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("location must not be blank")
        return value

    @field_validator("landmarks")
    @classmethod
    def _drop_blank_landmarks(cls, value: list[str]) -> list[str]:
        return [item.strip() for item in value if item.strip()]

    @classmethod
    def from_snapshot(cls, snapshot: PlaceSnapshot) -> "PlacePayload":
        return cls(
            id=snapshot.id,
            location=snapshot.location,
            landmarks=list(snapshot.landmarks),
            time_of_year=snapshot.time_of_year,
            notes=snapshot.notes,
            country=snapshot.country,
            date_visited=snapshot.date_visited,
            rating=snapshot.rating,
        )

    def to_snapshot(self) -> PlaceSnapshot:
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


def dump_snapshot(snapshot: PlaceSnapshot) -> dict[str, object]:
    """Encode a snapshot as a JSON-ready dict with camelCase keys."""
    return PlacePayload.from_snapshot(snapshot).model_dump(by_alias=True)


def parse_snapshots(rows: Iterable[object]) -> list[PlaceSnapshot]:
    """Decode stored rows, skipping the ones that are malformed."""
    snapshots: list[PlaceSnapshot] = []
    for index, row in enumerate(rows):
        try:
            payload = PlacePayload.model_validate(row)
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed place at index %s (%s errors)",
                index,
                exc.error_count(),
            )
            continue
        snapshots.append(payload.to_snapshot())
    return snapshots
