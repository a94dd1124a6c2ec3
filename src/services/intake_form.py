"""Client-side state machine for a single registration form."""
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from src.services.api_client import GENERIC_FAILURE_MESSAGE
from src.utils.exceptions import ApiClientError
from src.utils.validation import REGISTRATION_TYPES, validate_field

logger = logging.getLogger(__name__)

# Form states
IDLE = "idle"
EDITING = "editing"
VALIDATING = "validating"
SUBMITTING = "submitting"
SUCCESS = "success"
FAILED = "failed"

FORM_FIELDS = ("name", "email", "company", "phone")

# Seconds a success message stays up before the form returns to idle
SUCCESS_RESET_SECONDS = 4.0

SELECT_TYPE_MESSAGE = "Please select a registration type"
REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"
COMPANY_REQUIRED_MESSAGE = "Company name is required for professional registration"
FIX_FIELDS_MESSAGE = "Please correct the highlighted fields"


def _empty_values() -> Dict[str, str]:
    return {name: "" for name in FORM_FIELDS}


@dataclass
class IntakeFormController:
    """
    Registration form state: field values, per-field feedback and the
    submission lifecycle.

    Transitions:
        idle --select_type/edit_field--> editing
        editing --submit--> validating --gate fails--> editing
                                       --gate passes--> submitting
        submitting --accepted--> success --tick after 4s--> idle
        submitting --rejected/network error--> failed
        failed --edit_field/submit--> editing

    Invariant: for every field, `errors[field]` and `valid[field]` are never
    both set.
    """

    state: str = IDLE
    registration_type: Optional[str] = None
    values: Dict[str, str] = field(default_factory=_empty_values)
    errors: Dict[str, str] = field(default_factory=dict)
    valid: Dict[str, bool] = field(default_factory=dict)
    message: str = ""
    succeeded_at: Optional[float] = None

    @property
    def is_professional(self) -> bool:
        return self.registration_type == "professional"

    @property
    def can_submit(self) -> bool:
        """Submit action is disabled while a request is in flight."""
        return self.state != SUBMITTING

    def _validate(self, field_name: str) -> None:
        value = self.values.get(field_name, "")
        is_valid, error = validate_field(field_name, value, self.registration_type)
        self.errors[field_name] = "" if is_valid else error
        self.valid[field_name] = is_valid and value.strip() != ""

    def select_type(self, registration_type: str) -> None:
        """
        Choose student or professional.

        Raises:
            ValueError: If registration_type is not supported
        """
        if registration_type not in REGISTRATION_TYPES:
            raise ValueError(f"Unknown registration type: {registration_type}")
        if self.state == SUBMITTING:
            return

        self.registration_type = registration_type
        self.message = ""
        self.succeeded_at = None
        self.state = EDITING

        # Company rule depends on the type
        if self.values["company"] or "company" in self.errors:
            self._validate("company")

    def edit_field(self, field_name: str, value: str) -> None:
        """
        Update a field and re-run its rule.

        Raises:
            KeyError: If field_name is not a form field
        """
        if field_name not in FORM_FIELDS:
            raise KeyError(field_name)
        if self.state == SUBMITTING:
            return

        self.values[field_name] = value or ""
        self._validate(field_name)

        if self.state in (IDLE, FAILED, SUCCESS):
            self.state = EDITING
            self.message = ""
            self.succeeded_at = None

    def field_feedback(self, field_name: str) -> Tuple[Optional[str], str]:
        """
        Display state of a field.

        Returns:
            ("error", message), ("valid", "") or (None, "") when untouched/empty
        """
        error = self.errors.get(field_name)
        if error:
            return "error", error
        if self.valid.get(field_name):
            return "valid", ""
        return None, ""

    def check_submission(self) -> Optional[str]:
        """
        Re-validate every field before sending.

        Returns:
            Blocking message, or None if the form may be submitted

        Behavior:
            - company is skipped unless professional, phone is skipped when empty
            - failing fields get their error set even when a blocking
              required-field message is returned
        """
        if self.registration_type not in REGISTRATION_TYPES:
            return SELECT_TYPE_MESSAGE

        failed_fields = []
        for field_name in FORM_FIELDS:
            if field_name == "company" and not self.is_professional:
                continue
            if field_name == "phone" and not self.values["phone"]:
                continue
            self._validate(field_name)
            if self.errors[field_name]:
                failed_fields.append(field_name)

        if not self.values["name"] or not self.values["email"]:
            return REQUIRED_FIELDS_MESSAGE

        if self.is_professional and not self.values["company"]:
            return COMPANY_REQUIRED_MESSAGE

        if failed_fields:
            return FIX_FIELDS_MESSAGE

        return None

    def payload(self) -> Dict[str, Any]:
        """Request body; company only for professionals, phone only when given."""
        body: Dict[str, Any] = {
            "name": self.values["name"],
            "email": self.values["email"],
            "registration_type": self.registration_type,
        }
        if self.is_professional:
            body["company"] = self.values["company"]
        if self.values["phone"]:
            body["phone"] = self.values["phone"]
        return body

    def submit(self, client, now: Optional[float] = None) -> bool:
        """
        Run the submission gate and send the form.

        Args:
            client: Object with register(payload) -> (success, message),
                raising ApiClientError when the server is unreachable
            now: Monotonic timestamp of the attempt (default: time.monotonic())

        Returns:
            True if the registration was accepted
        """
        if not self.can_submit:
            return False

        self.state = VALIDATING
        self.message = ""

        blocking = self.check_submission()
        if blocking:
            self.message = blocking
            self.state = EDITING
            return False

        self.state = SUBMITTING
        try:
            success, message = client.register(self.payload())
        except ApiClientError as e:
            logger.warning("Registration request failed: %s", e)
            success, message = False, GENERIC_FAILURE_MESSAGE

        if not success:
            self.message = message
            self.state = FAILED
            return False

        self.values = _empty_values()
        self.errors = {}
        self.valid = {}
        self.message = message
        self.succeeded_at = time.monotonic() if now is None else now
        self.state = SUCCESS
        return True

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Expire the success state.

        Returns:
            True if the form was reset to idle
        """
        if self.state != SUCCESS or self.succeeded_at is None:
            return False

        now = time.monotonic() if now is None else now
        if now - self.succeeded_at < SUCCESS_RESET_SECONDS:
            return False

        self.reset()
        return True

    def reset(self) -> None:
        """Clear values, feedback and selection."""
        self.state = IDLE
        self.registration_type = None
        self.values = _empty_values()
        self.errors = {}
        self.valid = {}
        self.message = ""
        self.succeeded_at = None
