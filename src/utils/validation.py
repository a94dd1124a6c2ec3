"""Data validation utilities."""
import re
from typing import Callable, Dict, Optional, Tuple

REGISTRATION_TYPES = ("student", "professional")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]+$")

NAME_TOO_SHORT = "Name must be at least 2 characters"
INVALID_EMAIL = "Invalid email address"
COMPANY_REQUIRED = "Company name is required"
INVALID_PHONE = "Invalid phone number"

FieldRule = Callable[[str, Optional[str]], Tuple[bool, str]]


def validate_name(name: str, registration_type: Optional[str] = None) -> Tuple[bool, str]:
    """
    Validate attendee name.

    Args:
        name: Name to validate
        registration_type: Unused, keeps the rule signature uniform

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if trimmed name has at least 2 characters
        - (False, "Name must be at least 2 characters") otherwise
    """
    if not name or len(name.strip()) < 2:
        return False, NAME_TOO_SHORT
    return True, ""


def validate_email(email: str, registration_type: Optional[str] = None) -> Tuple[bool, str]:
    """
    Validate email shape (local@domain.tld).

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if email matches
        - (False, "Invalid email address") otherwise
    """
    if not email or not EMAIL_PATTERN.match(email):
        return False, INVALID_EMAIL
    return True, ""


def validate_company(company: str, registration_type: Optional[str] = None) -> Tuple[bool, str]:
    """
    Validate company name.

    Only professionals need a company; for any other type the value is ignored.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if not professional or trimmed company has at least 2 characters
        - (False, "Company name is required") otherwise
    """
    if registration_type != "professional":
        return True, ""
    if not company or len(company.strip()) < 2:
        return False, COMPANY_REQUIRED
    return True, ""


def validate_phone(phone: str, registration_type: Optional[str] = None) -> Tuple[bool, str]:
    """
    Validate optional phone number.

    Digits, spaces, "-", parentheses and a leading "+" are accepted.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if empty or matches
        - (False, "Invalid phone number") otherwise
    """
    if phone and not PHONE_PATTERN.match(phone):
        return False, INVALID_PHONE
    return True, ""


FIELD_RULES: Dict[str, FieldRule] = {
    "name": validate_name,
    "email": validate_email,
    "company": validate_company,
    "phone": validate_phone,
}


def validate_field(field_name: str, value: str, registration_type: Optional[str] = None) -> Tuple[bool, str]:
    """
    Run the rule registered for a form field.

    Args:
        field_name: One of FIELD_RULES keys
        value: Raw field value
        registration_type: Currently selected registration type

    Returns:
        Tuple of (is_valid: bool, error_message: str); unknown fields are always valid
    """
    rule = FIELD_RULES.get(field_name)
    if rule is None:
        return True, ""
    return rule(value or "", registration_type)


def is_valid_registration_type(value: Optional[str]) -> bool:
    """Check if value is one of the supported registration types."""
    return value in REGISTRATION_TYPES


def normalize_text(value: Optional[str]) -> str:
    """Trim surrounding whitespace, treating None as empty."""
    if value is None:
        return ""
    return value.strip()


def normalize_email(email: Optional[str]) -> str:
    """
    Normalize email for storage.

    Behavior:
        - Trims leading/trailing whitespace
        - Converts to lowercase
        - Example: "  Al@Example.COM " → "al@example.com"
    """
    return normalize_text(email).lower()
