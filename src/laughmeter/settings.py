"""User settings loader.

Loads the people quick-pick list from ~/.laughmeter/settings.json and
provides helpers for editing it.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".laughmeter" / "settings.json"

DEFAULT_PEOPLE = ["Friends", "Partner", "Family", "Work", "Self"]


@dataclass
class Settings:
    """User-editable settings.

    Attributes:
        people: Quick-pick labels offered when logging a laugh, in display order.
    """

    people: list[str] = field(default_factory=lambda: list(DEFAULT_PEOPLE))

    def add_person(self, name: str) -> bool:
        """Append a label. Empty names and duplicates are ignored.

        Returns:
            True if the label was added.
        """
        name = name.strip()
        if not name or name in self.people:
            return False
        self.people.append(name)
        return True

    def remove_person(self, name: str) -> bool:
        """Remove a label by name.

        Returns:
            True if the label was present.
        """
        if name not in self.people:
            return False
        self.people.remove(name)
        return True

    def move_person(self, source: int, destination: int) -> None:
        """Move the label at ``source`` so it ends up at index ``destination``.

        Raises:
            IndexError: If ``source`` is out of range.
        """
        if not 0 <= source < len(self.people):
            raise IndexError(f"No person at position {source}")
        name = self.people.pop(source)
        destination = max(0, min(destination, len(self.people)))
        self.people.insert(destination, name)


def load_settings(settings_path: Path | None = None) -> Settings:
    """Load Settings from a JSON file.

    The file has this structure:
    ```json
    {
      "people": ["Friends", "Partner", "Grandma"]
    }
    ```

    The default people list is used only when no list has been saved.

    Args:
        settings_path: Path to the settings file. Uses DEFAULT_SETTINGS_PATH if None.

    Returns:
        Settings instance with loaded values.
    """
    path = settings_path or DEFAULT_SETTINGS_PATH

    if not path.exists():
        logger.debug("No settings file at %s, using defaults", path)
        return Settings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.warning("Invalid JSON in %s: %s. Using defaults.", path, e)
        return Settings()
    except OSError as e:
        logger.warning("Cannot read %s: %s. Using defaults.", path, e)
        return Settings()

    return _parse_settings(data)


def _parse_settings(data: Any) -> Settings:
    """Parse a settings dictionary into Settings."""
    if not isinstance(data, dict):
        return Settings()

    people = data.get("people")
    if not isinstance(people, list):
        return Settings()

    # A saved empty list is a deliberate choice and is kept.
    return Settings(people=[p for p in people if isinstance(p, str) and p])


def save_settings(settings: Settings, settings_path: Path | None = None) -> None:
    """Save Settings to a JSON file.

    Args:
        settings: The settings to save.
        settings_path: Path to write to. Uses DEFAULT_SETTINGS_PATH if None.
    """
    path = settings_path or DEFAULT_SETTINGS_PATH

    path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {"people": settings.people}

    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error("Failed to save settings to %s: %s", path, e)
        raise
