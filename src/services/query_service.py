"""Query service for dashboard statistics and registration listings."""
import logging
from typing import Dict, List, Optional

from src.models.registration import REGISTRATION_FIELDS, Registration
from src.services.record_store import RegistrationStore, get_store
from src.utils.exceptions import StoreFailureError
from src.utils.validation import REGISTRATION_TYPES

logger = logging.getLogger(__name__)

TYPE_FILTERS = ("all",) + REGISTRATION_TYPES
SORT_ORDERS = ("asc", "desc")
DEFAULT_TYPE_FILTER = "all"
DEFAULT_SORT_ORDER = "desc"


def normalize_type_filter(type_filter: Optional[str]) -> str:
    """Unknown or missing type filters fall back to "all"."""
    return type_filter if type_filter in TYPE_FILTERS else DEFAULT_TYPE_FILTER


def normalize_sort_order(sort_order: Optional[str]) -> str:
    """Unknown or missing sort orders fall back to "desc"."""
    return sort_order if sort_order in SORT_ORDERS else DEFAULT_SORT_ORDER


def get_stats(store: Optional[RegistrationStore] = None) -> Dict[str, int]:
    """
    Aggregate registration counts for the dashboard.

    Returns:
        {"total": int, "students": int, "professionals": int}

    Behavior:
        - Three independent counts; under concurrent inserts total may
          briefly differ from students + professionals

    Raises:
        StoreFailureError: if the store cannot be read
    """
    store = store or get_store()

    total = store.count()
    students = store.count({"registration_type": "student"})
    professionals = store.count({"registration_type": "professional"})

    return {
        "total": total,
        "students": students,
        "professionals": professionals,
    }


def matches_search(registration: Registration, search: Optional[str]) -> bool:
    """
    Case-insensitive substring match on name or email.

    Empty or missing search text matches every registration.
    """
    query = (search or "").strip().lower()
    if not query:
        return True
    return query in registration.name.lower() or query in registration.email.lower()


def list_registrations(
    type_filter: Optional[str] = DEFAULT_TYPE_FILTER,
    sort_order: Optional[str] = DEFAULT_SORT_ORDER,
    search: Optional[str] = None,
    store: Optional[RegistrationStore] = None,
) -> List[Registration]:
    """
    List registrations for the admin dashboard.

    Args:
        type_filter: "all", "student" or "professional" (default "all")
        sort_order: "asc" (oldest first) or "desc" (newest first, default)
        search: Optional name/email substring
        store: Record store to read from (default: configured store)

    Returns:
        List[Registration]: every matching registration, no pagination

    Behavior:
        - Unrecognized type_filter / sort_order are treated as the defaults
        - Equal created_at values keep insertion order (reversed for "desc")

    Raises:
        StoreFailureError: if the store cannot be read
    """
    store = store or get_store()

    type_filter = normalize_type_filter(type_filter)
    sort_order = normalize_sort_order(sort_order)

    logger.debug("Listing registrations type=%s sort=%s search=%r", type_filter, sort_order, search)

    filter_ = {} if type_filter == "all" else {"registration_type": type_filter}
    records = store.find(filter_, descending=(sort_order == "desc"), fields=REGISTRATION_FIELDS)

    try:
        registrations = [Registration.from_dict(record) for record in records]
    except (KeyError, ValueError) as e:
        raise StoreFailureError(f"Corrupt registration record: {e}") from e

    return [r for r in registrations if matches_search(r, search)]
