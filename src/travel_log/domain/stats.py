"""Domain models for travel statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TravelStats:
    """Aggregate figures shown above the gallery."""

    total_places: int
    total_countries: int
    average_rating: float
