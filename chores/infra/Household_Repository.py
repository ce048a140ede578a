"""Household repositories: the persistence boundary behind the in-memory Household.

The core never touches storage. A repository loads a Household on start and, once
attached with autosave(), writes it back after every applied change.

Persisted layout (JSON):
    {
      "last_distribution_date": "2026-10-11T09:30:00" | null,
      "chores": [ {...}, ... ],
      "household_members": [ {...}, ... ],
      "weekly_chore_templates": [ {...}, ... ]
    }
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from chores.domain.Household import Household
from chores.events.Event_Bus import HOUSEHOLD_EVENTS
from chores.infra.paths import HOUSEHOLD_FILE
from chores.utilities.config import STORAGE_BACKEND

logger = logging.getLogger(__name__)


class HouseholdRepository:
    def __init__(self):
        self._autosave_callbacks = {}

    @property
    def is_empty(self) -> bool:
        """True when nothing has been stored yet (a fresh install)."""
        return False

    def load(self) -> Household:
        raise NotImplementedError

    def save(self, household: Household) -> None:
        raise NotImplementedError

    def autosave(self, household: Household) -> Household:
        """Save the household after every change it publishes on its event bus."""
        def _on_change(event_name, payload):
            if isinstance(payload, dict) and payload.get("household") is household:
                self.save(household)

        household.event_bus.subscribe_many(HOUSEHOLD_EVENTS, _on_change)
        self._autosave_callbacks[id(household)] = _on_change
        return household

    def detach(self, household: Household) -> None:
        callback = self._autosave_callbacks.pop(id(household), None)
        if callback is None:
            return
        for name in HOUSEHOLD_EVENTS:
            household.event_bus.unsubscribe(name, callback)


class MemoryHouseholdRepository(HouseholdRepository):
    """Keeps the last saved state in memory only; nothing survives the process."""

    def __init__(self):
        super().__init__()
        self._data: Optional[dict] = None

    def load(self) -> Household:
        household = Household()
        if self._data is not None:
            household.from_dict(self._data)
        return household

    def save(self, household: Household) -> None:
        self._data = household.to_dict()

    @property
    def is_empty(self) -> bool:
        return self._data is None


class JsonHouseholdRepository(HouseholdRepository):
    def __init__(self, path: Path = HOUSEHOLD_FILE):
        super().__init__()
        self.path = Path(path)

    @property
    def is_empty(self) -> bool:
        return not self.path.exists()

    def load(self) -> Household:
        """Read the household from the JSON file; missing or corrupt files give an empty household."""
        household = Household()
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f) or {}
        except FileNotFoundError:
            logger.warning(f"Household file not found: {self.path}. Starting with an empty household.")
            return household
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in household file {self.path}: {e}")
            return household
        if not isinstance(data, dict):
            logger.error(f"Unexpected household file layout in {self.path}: {type(data).__name__}")
            return household
        household.from_dict(data)
        logger.info("Loaded household from %s: %s", self.path, household)
        return household

    def save(self, household: Household) -> None:
        """Atomic write: dump to a temp file in the same directory, then move it over the target."""
        data = household.to_dict()
        os.makedirs(self.path.parent, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".household_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(data, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)


def get_repository(backend: str = STORAGE_BACKEND) -> HouseholdRepository:
    if backend == "json":
        return JsonHouseholdRepository()
    if backend != "memory":
        logger.warning("Unknown STORAGE_BACKEND %r, falling back to memory", backend)
    return MemoryHouseholdRepository()
