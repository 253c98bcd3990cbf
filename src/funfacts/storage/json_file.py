"""Key-value store persisted as a single JSON file."""

import json
import logging
from pathlib import Path

from funfacts.errors import StorageError

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Persist string values in one JSON object on disk.

    The whole file is re-read on every access and rewritten on every change,
    which is fine for the handful of keys a score history needs. The parent
    directory is created on first write. Writes go to a sibling temp file
    that then replaces the original, so a cut-off write never leaves a
    half-written file behind. An unreadable file still fails reads, but the
    next write starts over from an empty object.

    Args:
        path: Location of the JSON file.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def get(self, key: str) -> str | None:
        return self._load().get(key)

    async def set(self, key: str, value: str) -> None:
        data = self._load_for_write()
        data[key] = value
        self._dump(data)

    async def delete(self, key: str) -> None:
        data = self._load_for_write()
        if key in data:
            del data[key]
            self._dump(data)

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read {self._path}: {e}") from e
        if not isinstance(raw, dict):
            raise StorageError(f"Expected a JSON object in {self._path}")
        return raw

    def _load_for_write(self) -> dict[str, str]:
        try:
            return self._load()
        except StorageError as e:
            logger.warning(f"Discarding unreadable store, starting empty: {e}")
            return {}

    def _dump(self, data: dict[str, str]) -> None:
        tmp_path = self._path.with_name(f"{self._path.name}.tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as e:
            raise StorageError(f"Cannot write {self._path}: {e}") from e
        logger.debug("Wrote %d keys to %s", len(data), self._path)
