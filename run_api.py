"""Start the registration API with Uvicorn.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``5000``).

Usage:
    python run_api.py
"""
import logging

import uvicorn

from src.core.config import settings
from src.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve ``src.api.main:app`` until interrupted."""
    setup_logging(settings.log_level, settings.log_file or None)
    logger.info("Server running on port %s", settings.port)
    uvicorn.run("src.api.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
