"""Statistics service for the travel log."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from travel_log.domain.places import Place
from travel_log.domain.stats import TravelStats

_ONE_DECIMAL = Decimal("0.1")


@dataclass
class StatsService:
    """Service for computing travel log statistics."""

    def compute(self, places: list[Place]) -> TravelStats:
        """Return totals and the average rating for the given places."""
        total = len(places)
        if total == 0:
            return TravelStats(total_places=0, total_countries=0, average_rating=0.0)
        countries = {place.country for place in places}
        average = Decimal(sum(place.rating for place in places)) / Decimal(total)
        return TravelStats(
            total_places=total,
            total_countries=len(countries),
            average_rating=float(average.quantize(_ONE_DECIMAL, ROUND_HALF_UP)),
        )
