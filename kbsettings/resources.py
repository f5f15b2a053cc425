"""String resources.

Built-in English text keyed by resource id. A YAML file mapping ids to text can
override any entry (for translations or rebranding).
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

import yaml

from kbsettings.logging import get_logger

logger = get_logger(__name__)

DEFAULT_STRINGS: dict[str, str] = {
    "settings__home__title": "Settings",
    "settings__home__ime_not_enabled": "The keyboard is not enabled in the system. Select this to enable it.",
    "settings__home__ime_not_selected": "The keyboard is not selected as the active input method. Select this to choose it.",
    "settings__localization__title": "Languages & Layouts",
    "settings__theme__title": "Theme",
    "settings__keyboard__title": "Keyboard",
    "settings__smartbar__title": "Smartbar",
    "settings__typing__title": "Typing",
    "settings__spelling__title": "Spelling",
    "settings__dictionary__title": "Dictionary",
    "settings__gestures__title": "Gestures",
    "settings__clipboard__title": "Clipboard",
    "settings__advanced__title": "Advanced",
    "devtools__title": "Developer Tools",
    "about__title": "About",
    "section__placeholder": "This section is not available in this build yet.",
}


class StringResources:
    """Resolves resource ids to display text."""

    def __init__(self, overrides: Optional[Mapping[str, str]] = None) -> None:
        self._strings = dict(DEFAULT_STRINGS)
        if overrides:
            self._strings.update({str(key): str(value) for key, value in overrides.items()})

    @classmethod
    def from_file(cls, path: Optional[Path]) -> "StringResources":
        """Load overrides from a YAML mapping. Missing ``path`` gives defaults."""
        if path is None:
            return cls()
        try:
            raw = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Could not load strings from %s: %s", path, exc)
            return cls()
        if not isinstance(raw, dict):
            logger.warning("Strings file %s is not a mapping; ignoring it", path)
            return cls()
        return cls(raw)

    def resolve(self, resource_id: str) -> str:
        """Return text for ``resource_id``; unknown ids resolve to themselves."""
        text = self._strings.get(resource_id)
        if text is None:
            logger.debug("Missing string resource '%s'", resource_id)
            return resource_id
        return text

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._strings
