"""Low-level JSON file I/O operations with locking."""
import json
import logging
import os
import sys
import tempfile
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator

if sys.platform == "win32":
    import msvcrt
else:
    import fcntl

logger = logging.getLogger(__name__)


def ensure_json_file(file_path: str, default: Dict[str, Any]) -> None:
    """
    Create a JSON file holding `default` if it does not exist yet.

    Args:
        file_path: Path to JSON file
        default: Initial content

    Raises:
        IOError: If the file cannot be created
    """
    if os.path.exists(file_path):
        return

    logger.info("Creating data file %s", file_path)
    save_json(file_path, default)


def load_json(file_path: str, retry_count: int = 3, retry_delay: float = 0.1) -> Dict[str, Any]:
    """
    Load and parse JSON file with UTF-8 encoding.

    Args:
        file_path: Path to JSON file
        retry_count: Number of retry attempts for permission errors (default: 3)
        retry_delay: Delay in seconds between retries (default: 0.1)

    Returns:
        dict: Parsed JSON content

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        PermissionError: If file not readable after retries
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    for attempt in range(retry_count):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except PermissionError:
            if attempt < retry_count - 1:
                time.sleep(retry_delay)
                continue
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(f"Malformed JSON in {file_path}: {e.msg}", e.doc, e.pos)

    raise PermissionError(f"Cannot read file after {retry_count} attempts: {file_path}")


def save_json(file_path: str, data: Dict[str, Any]) -> None:
    """
    Save data to JSON file atomically with UTF-8 encoding.

    The content is written to a temporary file in the same directory and
    renamed over the target, so readers never observe a partial file.

    Args:
        file_path: Path to JSON file
        data: Dictionary to save

    Raises:
        IOError: If write operation fails
    """
    dir_path = os.path.dirname(file_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    temp_fd, temp_path = tempfile.mkstemp(
        dir=dir_path if dir_path else ".",
        prefix=".tmp_",
        suffix=".json"
    )

    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())

        os.replace(temp_path, file_path)

    except (OSError, TypeError, ValueError) as e:
        if os.path.exists(temp_path):
            try:
                os.remove(temp_path)
            except OSError:
                logger.warning("Could not remove temporary file %s", temp_path)
        raise IOError(f"Failed to write file {file_path}: {e}") from e


@contextmanager
def lock_file(file_path: str, timeout: float = 5.0) -> Iterator[None]:
    """
    Context manager for an exclusive lock guarding `file_path`.

    The lock is taken on a sidecar "<file_path>.lock" file rather than the
    data file itself, because save_json replaces the data file's inode.

    Args:
        file_path: Path of the data file to guard
        timeout: Maximum seconds to wait for lock acquisition (default: 5.0)

    Usage:
        with lock_file('data/registrations.json'):
            data = load_json('data/registrations.json')
            data['registrations'].append(record)
            save_json('data/registrations.json', data)

    Raises:
        TimeoutError: If unable to acquire lock within timeout
    """
    lock_path = f"{file_path}.lock"
    dir_path = os.path.dirname(lock_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    lock_fd = open(lock_path, "a+")
    try:
        start_time = time.time()
        while True:
            try:
                if sys.platform == "win32":
                    lock_fd.seek(0)
                    msvcrt.locking(lock_fd.fileno(), msvcrt.LK_NBLCK, 1)
                else:
                    fcntl.flock(lock_fd.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                break
            except OSError:
                if time.time() - start_time > timeout:
                    raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
                time.sleep(0.05)

        yield

    finally:
        try:
            if sys.platform == "win32":
                lock_fd.seek(0)
                msvcrt.locking(lock_fd.fileno(), msvcrt.LK_UNLCK, 1)
            else:
                fcntl.flock(lock_fd.fileno(), fcntl.LOCK_UN)
        except OSError:
            logger.warning("Failed to release lock on %s", file_path)
        lock_fd.close()
