"""Local JSON file implementation of the place repository."""

import errno
import json
import logging
import os
import tempfile
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from travel_log.adapters.place_payload import dump_snapshot, parse_snapshots
from travel_log.domain.errors import (
    PersistenceError,
    QuotaExceededError,
    SerializationError,
    StorageUnavailableError,
)
from travel_log.domain.places import PlaceSnapshot
from travel_log.services.places import PlaceRepository

logger = logging.getLogger(__name__)

_QUOTA_ERRNOS = {errno.ENOSPC, errno.EDQUOT}


@dataclass
class JsonFilePlaceRepository(PlaceRepository):
    """Stores the travel log as a JSON array in a single file."""

    path: Path

    def save(self, snapshots: Sequence[PlaceSnapshot]) -> None:
        """Write every snapshot, replacing the previous file atomically."""
        try:
            document = json.dumps(
                [dump_snapshot(snapshot) for snapshot in snapshots],
                ensure_ascii=False,
                indent=2,
            ).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError("Failed to encode places") from exc
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "wb") as handle:
                    handle.write(document)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise _storage_error(exc, f"Failed to write {self.path}") from exc
        logger.debug("Saved %s places to %s", len(snapshots), self.path)

    def load(self) -> list[PlaceSnapshot]:
        """Read stored places, skipping malformed entries."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except UnicodeDecodeError as exc:
            raise SerializationError(f"{self.path} is not UTF-8 text") from exc
        except OSError as exc:
            raise _storage_error(exc, f"Failed to read {self.path}") from exc
        if not raw.strip():
            return []
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SerializationError(f"{self.path} is not valid JSON") from exc
        if not isinstance(document, list):
            raise SerializationError(f"{self.path} does not hold a list of places")
        return parse_snapshots(document)


def _storage_error(exc: OSError, message: str) -> PersistenceError:
    if exc.errno in _QUOTA_ERRNOS:
        return QuotaExceededError(message)
    return StorageUnavailableError(message)
