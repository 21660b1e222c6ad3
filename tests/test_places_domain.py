"""Tests for the place domain model."""

import pytest

from travel_log.domain.places import Place, PlaceSnapshot
from tests.conftest import make_place


@pytest.mark.parametrize("rating", [0, 1, 3, 5])
def test_update_rating_accepts_integers_in_range(rating) -> None:
    place = make_place(rating=2)

    assert place.update_rating(rating) is True
    assert place.rating == rating


@pytest.mark.parametrize("rating", [-1, 6, 2.5, "3", None, True])
def test_update_rating_rejects_invalid_values(rating) -> None:
    place = make_place(rating=2)

    assert place.update_rating(rating) is False
    assert place.rating == 2


def test_add_landmark_stores_trimmed_text() -> None:
    place = make_place(landmarks=())

    assert place.add_landmark("  Louvre  ") is True
    assert place.add_landmark("Louvre") is True
    assert place.landmarks == ["Louvre", "Louvre"]


@pytest.mark.parametrize("landmark", ["", "   ", None, 42])
def test_add_landmark_rejects_blank_or_non_text(landmark) -> None:
    place = make_place(landmarks=("Louvre",))

    assert place.add_landmark(landmark) is False
    assert place.landmarks == ["Louvre"]


def test_remove_landmark_removes_first_match_only() -> None:
    place = make_place(landmarks=("A", "B", "A", "C"))

    assert place.remove_landmark("A") is True
    assert place.landmarks == ["B", "A", "C"]


def test_remove_missing_landmark_is_noop() -> None:
    place = make_place(landmarks=("A",))

    assert place.remove_landmark("Z") is False
    assert place.landmarks == ["A"]


def test_update_notes_trims_and_rejects_non_text() -> None:
    place = make_place(notes="old")

    assert place.update_notes("  lovely trip \n") is True
    assert place.notes == "lovely trip"
    assert place.update_notes(None) is False
    assert place.notes == "lovely trip"


def test_is_visited_in_season_is_case_insensitive_substring() -> None:
    place = make_place(time_of_year="Late Summer")

    assert place.is_visited_in_season("summer") is True
    assert place.is_visited_in_season("SUMMER") is True
    assert place.is_visited_in_season("winter") is False


def test_summary_format() -> None:
    place = make_place(location="Kyoto", country="Japan", time_of_year="Spring")

    assert place.summary() == "Kyoto, Japan - Visited in Spring"


def test_snapshot_copies_landmarks() -> None:
    place = make_place(landmarks=("Louvre",))

    snapshot = place.snapshot()
    place.add_landmark("Orsay")

    assert isinstance(snapshot, PlaceSnapshot)
    assert snapshot.landmarks == ("Louvre",)


def test_create_assigns_unique_ids_and_cleans_input() -> None:
    first = Place.create(
        location=" Rome ",
        country="Italy",
        time_of_year="Autumn",
        date_visited="2023-10-01",
        landmarks=["Colosseum", " ", "  Forum "],
        notes="  pasta  ",
        rating=9,
    )
    second = Place.create(
        location="Rome",
        country="Italy",
        time_of_year="Autumn",
        date_visited="2023-10-01",
    )

    assert first.id != second.id
    assert first.id.startswith("place-")
    assert first.location == "Rome"
    assert first.landmarks == ["Colosseum", "Forum"]
    assert first.notes == "pasta"
    assert first.rating == 0


def test_create_uses_injected_id_factory() -> None:
    place = Place.create(
        location="Oslo",
        country="Norway",
        time_of_year="Winter",
        date_visited="2022-01-05",
        id_factory=lambda: "fixed-id",
    )

    assert place.id == "fixed-id"


def test_create_rejects_empty_location() -> None:
    with pytest.raises(ValueError, match="location"):
        Place.create(
            location="  ",
            country="Italy",
            time_of_year="Autumn",
            date_visited="2023-10-01",
        )


def test_from_snapshot_keeps_id_and_does_not_alias() -> None:
    original = make_place(place_id="place-abc", landmarks=("Louvre",))
    snapshot = original.snapshot()

    restored = Place.from_snapshot(snapshot)
    restored.add_landmark("Orsay")

    assert restored.id == "place-abc"
    assert snapshot.landmarks == ("Louvre",)


def test_visited_on_handles_dates_and_garbage() -> None:
    assert make_place(date_visited="2024-07-14").visited_on().isoformat() == (
        "2024-07-14"
    )
    assert make_place(date_visited="2024-07-14T09:30:00").visited_on() is not None
    assert make_place(date_visited="").visited_on() is None
    assert make_place(date_visited="last summer").visited_on() is None
