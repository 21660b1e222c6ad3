"""Derived gallery views: filtering, sorting and card data."""

import unicodedata
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from travel_log.domain.places import MAX_RATING, Place
from travel_log.services.collection import sort_by_rating

PREVIEW_LENGTH = 100


class SortOption(StrEnum):
    """Orderings offered by the gallery."""

    RATING = "rating"
    ALPHABETICAL = "alphabetical"
    RECENT = "recent"


@dataclass(frozen=True)
class PlaceCard:
    """Summary data for one gallery card."""

    id: str
    location: str
    country: str
    date_label: str
    stars: str
    preview: str
    time_of_year: str
    rating: int


@dataclass(frozen=True)
class PlaceDetail:
    """Full data for the detail view of a place."""

    id: str
    location: str
    country: str
    date_visited: str
    date_label: str
    time_of_year: str
    rating: int
    stars: str
    landmarks: tuple[str, ...]
    notes: str
    summary: str


def gallery_view(
    places: list[Place],
    country: str | None = None,
    season: str | None = None,
    sort: SortOption | str | None = None,
) -> list[Place]:
    """Filter places by country and season, then order them."""
    sort = SortOption(sort) if sort else None
    selected = list(places)
    if country:
        wanted = country.lower()
        selected = [place for place in selected if place.country.lower() == wanted]
    if season:
        selected = [place for place in selected if place.is_visited_in_season(season)]
    if sort is SortOption.RATING:
        return sort_by_rating(selected)
    if sort is SortOption.ALPHABETICAL:
        return sorted(selected, key=lambda place: _collation_key(place.location))
    if sort is SortOption.RECENT:
        return sorted(selected, key=_recency_key, reverse=True)
    return selected


def build_card(place: Place) -> PlaceCard:
    """Build the card shown in the gallery grid."""
    return PlaceCard(
        id=place.id,
        location=place.location,
        country=place.country,
        date_label=format_visit_date(place),
        stars=render_stars(place.rating),
        preview=notes_preview(place.notes),
        time_of_year=place.time_of_year,
        rating=place.rating,
    )


def build_detail(place: Place) -> PlaceDetail:
    """Build the detail view for a place."""
    snapshot = place.snapshot()
    return PlaceDetail(
        id=snapshot.id,
        location=snapshot.location,
        country=snapshot.country,
        date_visited=snapshot.date_visited,
        date_label=format_visit_date(place),
        time_of_year=snapshot.time_of_year,
        rating=snapshot.rating,
        stars=render_stars(snapshot.rating),
        landmarks=snapshot.landmarks,
        notes=snapshot.notes,
        summary=place.summary(),
    )


def render_stars(rating: int) -> str:
    """Render a rating as filled and empty stars."""
    return "★" * rating + "☆" * (MAX_RATING - rating)


def notes_preview(notes: str) -> str:
    """Truncate notes for the card preview."""
    if len(notes) <= PREVIEW_LENGTH:
        return notes
    return notes[:PREVIEW_LENGTH] + "..."


def format_visit_date(place: Place) -> str:
    """Format the visit date as 'July 5, 2024', or return the raw text."""
    visited = place.visited_on()
    if visited is None:
        return place.date_visited
    return f"{visited.strftime('%B')} {visited.day}, {visited.year}"


def _collation_key(text: str) -> tuple[str, str]:
    # Accent- and case-insensitive first, raw text as the tiebreaker.
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return folded.casefold(), text


def _recency_key(place: Place) -> tuple[bool, date]:
    # Unparsable dates rank before every valid date.
    visited = place.visited_on()
    if visited is None:
        return False, date.min
    return True, visited
