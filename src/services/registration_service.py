"""Registration service for handling conference sign-ups."""
import logging
from typing import Any, Dict, Mapping, Optional

from src.models.registration import Registration
from src.services.record_store import RegistrationStore, get_store
from src.utils.date_utils import now_iso
from src.utils.exceptions import MissingCompanyError, MissingRequiredFieldError
from src.utils.validation import is_valid_registration_type, normalize_email, normalize_text

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Name, email, and registration type are required"
INVALID_TYPE_MESSAGE = "Registration type must be either student or professional"
MISSING_COMPANY_MESSAGE = "Company is required for professional registration"
STORE_FAILURE_MESSAGE = "Server error while registering user"
SUCCESS_MESSAGE = "Registration successful"


def _text(candidate: Mapping[str, Any], key: str) -> Optional[str]:
    """Read a text field; non-string values count as missing."""
    value = candidate.get(key)
    return value if isinstance(value, str) else None


def build_registration_record(candidate: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate a submission and build the record to persist.

    Args:
        candidate: Raw submission with name, email, registration_type,
            optional company and optional phone

    Returns:
        Record dictionary without "id" (normalized, created_at set to now)

    Raises:
        MissingRequiredFieldError: name, email or registration type missing,
            or registration type not student/professional
        MissingCompanyError: professional submission without a company

    Behavior:
        - Fails fast on the first violated rule, in field order
        - company kept only for professionals, whatever was sent
        - phone kept only if non-empty after trim
    """
    name = normalize_text(_text(candidate, "name"))
    email = normalize_email(_text(candidate, "email"))
    registration_type = normalize_text(_text(candidate, "registration_type"))

    if not name or not email or not registration_type:
        raise MissingRequiredFieldError(REQUIRED_FIELDS_MESSAGE)

    if not is_valid_registration_type(registration_type):
        raise MissingRequiredFieldError(INVALID_TYPE_MESSAGE)

    record: Dict[str, Any] = {
        "name": name,
        "email": email,
        "registration_type": registration_type,
    }

    if registration_type == "professional":
        company = normalize_text(_text(candidate, "company"))
        if not company:
            raise MissingCompanyError(MISSING_COMPANY_MESSAGE)
        record["company"] = company

    phone = normalize_text(_text(candidate, "phone"))
    if phone:
        record["phone"] = phone

    record["created_at"] = now_iso()
    return record


def submit_registration(
    candidate: Mapping[str, Any],
    store: Optional[RegistrationStore] = None,
) -> Registration:
    """
    Validate and persist a registration.

    Args:
        candidate: Raw submission (see build_registration_record)
        store: Record store to write to (default: configured store)

    Returns:
        The created Registration

    Raises:
        MissingRequiredFieldError, MissingCompanyError: on validation failure;
            nothing is written
        StoreFailureError: if the record could not be persisted

    Behavior:
        - Exactly one record inserted on success
        - Duplicate emails are accepted
    """
    record = build_registration_record(candidate)

    store = store or get_store()
    record_id = store.insert(record)

    registration = Registration.from_dict({"id": record_id, **record})
    logger.info("Registered %s as %s (%s)", registration.email, registration.registration_type, record_id)
    return registration
