"""JSON-file backed record store for registrations."""
import json
import logging
import os
from typing import Any, Dict, Iterable, List, Optional

from src.core.config import settings
from src.services.storage_service import ensure_json_file, load_json, lock_file, save_json
from src.utils.date_utils import parse_timestamp
from src.utils.exceptions import StoreFailureError

logger = logging.getLogger(__name__)

# Data file path
REGISTRATIONS_FILE = settings.registrations_file

ID_PREFIX = "reg_"

Filter = Optional[Dict[str, Any]]


def _matches(record: Dict[str, Any], filter_: Filter) -> bool:
    """Exact-match every key of the filter against the record."""
    if not filter_:
        return True
    return all(record.get(key) == value for key, value in filter_.items())


def _id_number(record_id: str) -> int:
    """Numeric part of a "reg_000042" style id, 0 if it has none."""
    try:
        return int(str(record_id).split("_", 1)[1])
    except (IndexError, ValueError):
        return 0


def _sort_key(record: Dict[str, Any]) -> tuple:
    """Order by created_at, then by insertion order (id number)."""
    return (parse_timestamp(record["created_at"]), _id_number(record.get("id", "")))


class RegistrationStore:
    """
    Record store holding registration documents in a single JSON file.

    File layout:
        {"registrations": [{"id": "reg_000001", ...}, ...]}

    Writes are serialised with an exclusive lock and saved atomically; reads
    take no lock and always see a complete file. Any I/O or decode problem is
    raised as StoreFailureError.
    """

    def __init__(self, file_path: str):
        self.file_path = file_path

    def _load_records(self) -> List[Dict[str, Any]]:
        if not os.path.exists(self.file_path):
            return []

        try:
            data = load_json(self.file_path)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreFailureError(f"Cannot read registrations from {self.file_path}: {e}") from e
        return data.get("registrations", [])

    def insert(self, record: Dict[str, Any]) -> str:
        """
        Append a new record and assign its id.

        Args:
            record: Record fields without "id"

        Returns:
            str: The new record id (e.g. "reg_000001")

        Raises:
            StoreFailureError: If the file cannot be locked, read or written
        """
        try:
            with lock_file(self.file_path):
                ensure_json_file(self.file_path, {"registrations": []})
                data = load_json(self.file_path)
                records = data.get("registrations", [])

                max_id = max((_id_number(r.get("id", "")) for r in records), default=0)
                new_id = f"{ID_PREFIX}{max_id + 1:06d}"

                records.append({"id": new_id, **record})
                data["registrations"] = records
                save_json(self.file_path, data)
        except (OSError, TimeoutError, json.JSONDecodeError) as e:
            raise StoreFailureError(f"Cannot write registration to {self.file_path}: {e}") from e

        return new_id

    def count(self, filter_: Filter = None) -> int:
        """
        Count records matching the filter.

        Args:
            filter_: Field/value pairs that must match exactly; None counts all
        """
        return sum(1 for record in self._load_records() if _matches(record, filter_))

    def find(
        self,
        filter_: Filter = None,
        descending: bool = True,
        fields: Optional[Iterable[str]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Return matching records ordered by creation time.

        Args:
            filter_: Field/value pairs that must match exactly; None matches all
            descending: True for newest first (default), False for oldest first
            fields: Projection; only these keys are returned when given

        Returns:
            List of record dictionaries. Records created at the same instant
            keep insertion order (reversed when descending).

        Raises:
            StoreFailureError: If the file cannot be read or holds a bad timestamp
        """
        matching = [record for record in self._load_records() if _matches(record, filter_)]

        try:
            matching.sort(key=_sort_key, reverse=descending)
        except (KeyError, ValueError) as e:
            raise StoreFailureError(f"Corrupt registration record in {self.file_path}: {e}") from e

        if fields is None:
            return matching

        wanted = tuple(fields)
        return [{key: record[key] for key in wanted if key in record} for record in matching]


def get_store() -> RegistrationStore:
    """Store bound to the configured registrations file."""
    return RegistrationStore(REGISTRATIONS_FILE)
