"""Local key-value store: one JSON file per slot under DATA_DIR."""
import json
import os
import tempfile
import shutil
from typing import Any

from domain.errors import PersistenceWriteFailure

DATA_DIR = os.getenv('LIFELINK_DATA_DIR') or os.path.join(os.path.dirname(
    os.path.abspath(__file__)), '..', 'data')
DATA_DIR = os.path.normpath(DATA_DIR)


def _path(key: str) -> str:
    return os.path.join(DATA_DIR, f"{key}.json")


def dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def load_value(key: str, default: Any = None) -> Any:
    """Return the decoded slot, or `default` if it is missing or unreadable."""
    file_path = _path(key)
    if not os.path.exists(file_path):
        return default
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, ValueError):
        return default


def atomic_write(key: str, data: Any):
    """Overwrite a slot. Raises PersistenceWriteFailure on any I/O or encoding error."""
    file_path = _path(key)
    try:
        os.makedirs(os.path.dirname(file_path), exist_ok=True)
        payload = dumps(data)
        tmp_fd, tmp_path = tempfile.mkstemp(
            prefix='tmp_', suffix='.json', dir=os.path.dirname(file_path))
        with os.fdopen(tmp_fd, 'w', encoding='utf-8') as f:
            f.write(payload)
        shutil.move(tmp_path, file_path)
    except (OSError, TypeError, ValueError) as e:
        raise PersistenceWriteFailure(f"write to slot '{key}' failed: {e}") from e


def read_raw(key: str) -> str:
    """Exact persisted text of a slot ('' when absent)."""
    file_path = _path(key)
    if not os.path.exists(file_path):
        return ''
    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()
