"""JSON file storage for the profile and the workout log."""

import json
import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile

from pydantic import TypeAdapter

from wendler_mcp.wendler.exceptions import StoreError
from wendler_mcp.wendler.models import UserProfile, WorkoutLogEntry

logger = logging.getLogger(__name__)

PROFILE_FILE = "profile.json"
LOGS_FILE = "logs.json"

_logs_adapter = TypeAdapter(list[WorkoutLogEntry])


def default_data_dir() -> Path:
    override = os.environ.get("WENDLER_DATA_DIR")
    return Path(override).expanduser() if override else Path.home() / ".wendler-mcp"


class JsonStore:
    """Key-value store keeping the profile and the append-only log as JSON files.

    Corrupt files are discarded and read back as empty.
    """

    def __init__(self, data_dir: Path | str | None = None):
        self.data_dir = Path(data_dir) if data_dir is not None else default_data_dir()

    @property
    def profile_path(self) -> Path:
        return self.data_dir / PROFILE_FILE

    @property
    def logs_path(self) -> Path:
        return self.data_dir / LOGS_FILE

    def _write(self, path: Path, payload: str) -> None:
        temp_path = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile("w", dir=path.parent, delete=False, encoding="utf-8") as tmp:
                temp_path = Path(tmp.name)
                tmp.write(payload)
            temp_path.replace(path)
        except OSError as exc:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise StoreError(f"Could not write {path}: {exc}") from exc

    def _discard(self, path: Path, exc: Exception) -> None:
        logger.warning("Discarding corrupt %s: %s", path, exc)
        path.unlink(missing_ok=True)

    def load_profile(self) -> UserProfile | None:
        if not self.profile_path.exists():
            return None
        try:
            return UserProfile.model_validate_json(self.profile_path.read_text(encoding="utf-8"))
        except ValueError as exc:
            self._discard(self.profile_path, exc)
            return None

    def save_profile(self, profile: UserProfile) -> None:
        self._write(self.profile_path, profile.model_dump_json(indent=2) + "\n")

    def load_logs(self) -> list[WorkoutLogEntry]:
        if not self.logs_path.exists():
            return []
        try:
            return _logs_adapter.validate_json(self.logs_path.read_text(encoding="utf-8") or "[]")
        except ValueError as exc:
            self._discard(self.logs_path, exc)
            return []

    def _save_logs(self, logs: list[WorkoutLogEntry]) -> None:
        payload = json.dumps(_logs_adapter.dump_python(logs, mode="json"), indent=2)
        self._write(self.logs_path, payload + "\n")

    def append_log(self, entry: WorkoutLogEntry) -> list[WorkoutLogEntry]:
        logs = self.load_logs()
        logs.append(entry)
        self._save_logs(logs)
        return logs

    def clear_logs(self) -> None:
        self._save_logs([])
