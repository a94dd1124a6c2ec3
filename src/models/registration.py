"""Registration data model for conference sign-ups."""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.utils.date_utils import parse_timestamp
from src.utils.validation import REGISTRATION_TYPES

REGISTRATION_FIELDS = ("id", "name", "email", "registration_type", "company", "phone", "created_at")


@dataclass(frozen=True)
class Registration:
    """One submitted conference sign-up. Immutable once created."""

    id: str
    name: str
    email: str
    registration_type: str
    created_at: str  # ISO 8601 format
    company: Optional[str] = None
    phone: Optional[str] = None

    def __post_init__(self):
        """Validate registration data."""
        if not self.id or not self.id.strip():
            raise ValueError("Registration ID cannot be empty")

        if not self.name or not self.name.strip():
            raise ValueError("Name cannot be empty")

        if not self.email or not self.email.strip():
            raise ValueError("Email cannot be empty")

        if self.registration_type not in REGISTRATION_TYPES:
            raise ValueError(
                f"Registration type must be one of {list(REGISTRATION_TYPES)}, got: {self.registration_type}"
            )

        if self.registration_type == "professional" and (not self.company or not self.company.strip()):
            raise ValueError("Company is required for professional registration")

        if self.registration_type == "student" and self.company is not None:
            raise ValueError("Student registrations cannot carry a company")

        try:
            parse_timestamp(self.created_at)
        except ValueError as e:
            raise ValueError(f"Invalid timestamp format: {self.created_at}") from e

    @property
    def is_professional(self) -> bool:
        """Check if this is a professional registration."""
        return self.registration_type == "professional"

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize for storage and JSON responses.

        Returns:
            Dictionary with every field; optional fields left out when absent
        """
        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "registration_type": self.registration_type,
        }
        if self.company is not None:
            data["company"] = self.company
        if self.phone is not None:
            data["phone"] = self.phone
        data["created_at"] = self.created_at
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Registration":
        """Build a Registration from a stored record."""
        return cls(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            registration_type=data["registration_type"],
            created_at=data["created_at"],
            company=data.get("company"),
            phone=data.get("phone"),
        )
