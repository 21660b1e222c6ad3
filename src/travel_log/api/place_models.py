"""Pydantic models for the travel log API payloads."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlaceCreate(BaseModel):
    """Form payload for recording a new place."""

    location: str
    country: str
    time_of_year: str = Field(alias="timeOfYear")
    date_visited: str = Field(alias="dateVisited")
    landmarks: list[str] = Field(default_factory=list)
    notes: str = ""
    rating: int = 0

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("landmarks", mode="before")
    @classmethod
    def _split_landmarks(cls, value: object) -> object:
        # The form sends landmarks as one comma-separated field.
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


class LandmarkBody(BaseModel):
    """Landmark to add to a place."""

    landmark: str


class RatingBody(BaseModel):
    """New rating for a place."""

    rating: int


class NotesBody(BaseModel):
    """New notes for a place."""

    notes: str
