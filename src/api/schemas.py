"""
Pydantic models for the registration API.

Request fields are all optional strings so that missing or empty values
reach the registration service, which owns the validation rules and their
user-facing messages.  Responses share the ``{success, message|data}``
envelope used by the registration form and the admin dashboard.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RegistrationCreate(BaseModel):
    """Body of ``POST /register``."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(default=None, examples=["Ada Lovelace"])
    email: Optional[str] = Field(default=None, examples=["ada@example.com"])
    registration_type: Optional[str] = Field(default=None, examples=["student"])
    company: Optional[str] = Field(default=None, description="Required for professional registrations")
    phone: Optional[str] = Field(default=None, examples=["+1 (555) 010-0000"])


class RegistrationRead(BaseModel):
    """A stored registration; company and phone are omitted when absent."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    registration_type: str
    company: Optional[str] = None
    phone: Optional[str] = None
    created_at: str  # ISO 8601 format


class Stats(BaseModel):
    total: int
    students: int
    professionals: int


class MessageResponse(BaseModel):
    success: bool
    message: str


class StatsResponse(BaseModel):
    success: bool = True
    data: Stats


class RegistrationListResponse(BaseModel):
    success: bool = True
    data: List[RegistrationRead]
