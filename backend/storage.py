"""Flat-file JSON persistence for record collections.

Each collection lives in its own file under the data directory and is stored
as a JSON array of flat objects.
"""
import json
import logging
from pathlib import Path
from typing import Any

from backend.core import config

logger = logging.getLogger(__name__)


class StoreWriteError(Exception):
    """Raised when a collection could not be written to disk."""


class FileStore:
    def __init__(self, data_dir: Path | str | None = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR

    def path_for(self, name: str) -> Path:
        if not name or '/' in name or '\\' in name or name in {'.', '..'}:
            raise ValueError(f'Invalid collection name: {name!r}')
        return self.data_dir / name

    def load(self, name: str) -> list[dict[str, Any]]:
        file_path = self.path_for(name)

        if not file_path.exists():
            logger.warning('File %s does not exist.', file_path)
            return []

        try:
            data = json.loads(file_path.read_text(encoding='utf-8'))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            logger.exception('Error reading JSON from %s', name)
            return []

        if not isinstance(data, list):
            logger.warning('File %s does not contain a JSON array.', name)
            return []

        return data

    def save(self, name: str, records: list[dict[str, Any]]) -> None:
        file_path = self.path_for(name)

        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(json.dumps(records, indent=2), encoding='utf-8')
        except OSError as exc:
            logger.exception('Error writing to file %s', name)
            raise StoreWriteError(f'Could not write {name}') from exc

        logger.info('File %s updated successfully.', name)
