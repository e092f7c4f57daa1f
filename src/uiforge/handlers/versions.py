"""Append-only version history."""

import threading
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field

from ..agents.models import UINode


class Version(BaseModel):
    """One immutable entry of the history."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(ge=0)
    tree: UINode
    explanation: str
    user_text: str = Field(alias="userText")
    timestamp: str


class VersionStore:
    """In-memory history; ids are sequential from 0 and appends are serialized."""

    def __init__(self) -> None:
        self._versions: list[Version] = []
        self._lock = threading.Lock()

    def append(self, tree: UINode, explanation: str, user_text: str) -> Version:
        with self._lock:
            version = Version(
                id=len(self._versions),
                tree=tree,
                explanation=explanation,
                user_text=user_text,
                timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            )
            self._versions.append(version)
            return version

    def latest(self) -> Version | None:
        with self._lock:
            return self._versions[-1] if self._versions else None

    def get(self, version_id: int) -> Version | None:
        with self._lock:
            if 0 <= version_id < len(self._versions):
                return self._versions[version_id]
            return None

    def all(self) -> list[Version]:
        with self._lock:
            return list(self._versions)

    def __len__(self) -> int:
        with self._lock:
            return len(self._versions)
