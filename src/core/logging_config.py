"""Root logger configuration shared by the API server and the Streamlit app."""
import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    Configure the root logger once.

    Args:
        level: Logging level name, case insensitive (e.g. "DEBUG", "INFO")
        logfile: Optional path of a file to mirror log output into

    Behavior:
        - Does nothing if the root logger already has handlers
          (uvicorn reloads, Streamlit reruns and pytest all call this repeatedly)
        - Unknown level names fall back to INFO
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
