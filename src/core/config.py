"""Application settings loaded from environment variables."""
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

# Pick up a local .env before the dataclass defaults are evaluated.
load_dotenv()


def _split_origins(raw: str) -> List[str]:
    """Split a comma-separated origin list, dropping blanks."""
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Runtime configuration for the API server and the Streamlit pages."""

    project_name: str = os.getenv("PROJECT_NAME", "Conference Registration API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # JSON file backing the record store
    registrations_file: str = os.getenv("REGISTRATIONS_FILE", "data/registrations.json")

    # Browser origins allowed by CORS; requests without an Origin header always pass
    allowed_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("ALLOWED_ORIGINS", ""))
    )

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Used by the Streamlit pages to reach the API
    api_base_url: str = os.getenv("API_BASE_URL", "http://localhost:5000")
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "10"))


settings = Settings()
