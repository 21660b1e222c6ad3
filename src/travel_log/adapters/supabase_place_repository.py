"""Supabase implementation of the place repository."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from travel_log.adapters.place_payload import PlacePayload, parse_snapshots
from travel_log.domain.errors import StorageUnavailableError
from travel_log.domain.places import PlaceSnapshot
from travel_log.services.places import PlaceRepository

logger = logging.getLogger(__name__)


@dataclass
class SupabasePlaceRepository(PlaceRepository):
    """Supabase-backed repository storing one row per place."""

    client: Client
    table: str = "places"

    def save(self, snapshots: Sequence[PlaceSnapshot]) -> None:
        """Upsert the given snapshots, then drop rows no longer present."""
        rows = [
            {**PlacePayload.from_snapshot(snapshot).model_dump(), "position": index}
            for index, snapshot in enumerate(snapshots)
        ]
        ids = [row["id"] for row in rows]
        try:
            if rows:
                response = self.client.table(self.table).upsert(rows).execute()
                if not response.data:
                    raise StorageUnavailableError("Failed to store places")
                self.client.table(self.table).delete().not_.in_("id", ids).execute()
            else:
                self.client.table(self.table).delete().neq("id", "").execute()
        except (APIError, httpx.HTTPError) as exc:
            raise StorageUnavailableError(
                f"Supabase rejected write to {self.table}"
            ) from exc
        logger.debug("Saved %s places to %s", len(rows), self.table)

    def load(self) -> list[PlaceSnapshot]:
        """Return stored places ordered by position."""
        try:
            response = (
                self.client.table(self.table)
                .select("*")
                .order("position")
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StorageUnavailableError(
                f"Supabase rejected read from {self.table}"
            ) from exc
        return parse_snapshots(response.data or [])
