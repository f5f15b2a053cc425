"""Persisted boolean preference flags.

The store keeps every flag in memory and mirrors them to a flat JSON object on
disk. Writes are committed before observers run, so a read issued from an
observer (or right after ``set`` returns) always sees the new value.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional

from kbsettings.logging import get_logger
from kbsettings.observable import Observable

logger = get_logger(__name__)

HOME_INFO_COLLAPSED = "internal.home_info_collapsed"

DEFAULT_PREFERENCES: dict[str, bool] = {
    HOME_INFO_COLLAPSED: False,
}


class UnknownPreferenceError(KeyError):
    """Raised when a preference key was never defined on the store."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown preference key: {self.key}"


class PreferenceFlag(Observable[bool]):
    """A single persisted boolean setting."""

    def __init__(self, store: "PreferenceStore", key: str, default: bool) -> None:
        super().__init__(bool(default), name=key)
        self._store = store
        self.key = key
        self.default = bool(default)

    def set(self, value: bool) -> None:
        """Commit a new value through the owning store."""
        self._store.set(self.key, value)

    def toggle(self) -> bool:
        """Flip the flag and return the committed value."""
        new_value = not self.value
        self.set(new_value)
        return new_value

    def __repr__(self) -> str:
        return f"PreferenceFlag(key={self.key!r}, value={self.value!r}, default={self.default!r})"


class PreferenceStore:
    """Key/value store of boolean flags backed by a JSON file.

    Usage:
        store = PreferenceStore(path)
        store.define("internal.home_info_collapsed", False)
        flag = store.observe("internal.home_info_collapsed")
        handle = flag.subscribe(lambda value: ...)
        store.set("internal.home_info_collapsed", True)
        handle.release()
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        *,
        defaults: Optional[Mapping[str, bool]] = None,
    ) -> None:
        """Open the store and load any persisted values.

        Args:
            path: JSON file to mirror values to. ``None`` keeps the store in
                memory only.
            defaults: Flags to define at open time. Defaults to
                ``DEFAULT_PREFERENCES``.
        """
        self._path = Path(path) if path is not None else None
        self._flags: dict[str, PreferenceFlag] = {}
        self._loaded: dict[str, Any] = self._read_file()
        for key, default in (DEFAULT_PREFERENCES if defaults is None else defaults).items():
            self.define(key, default)

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def define(self, key: str, default: bool) -> PreferenceFlag:
        """Declare a flag. Re-defining an existing key returns the existing flag."""
        existing = self._flags.get(key)
        if existing is not None:
            return existing

        flag = PreferenceFlag(self, key, default)
        raw = self._loaded.pop(key, None)
        if isinstance(raw, bool):
            flag._value = raw
        elif raw is not None:
            logger.warning(
                "Ignoring non-boolean value %r for preference '%s'; using default %s",
                raw,
                key,
                flag.default,
            )
        self._flags[key] = flag
        return flag

    def observe(self, key: str) -> PreferenceFlag:
        """Return the observable flag for ``key``."""
        try:
            return self._flags[key]
        except KeyError:
            raise UnknownPreferenceError(key) from None

    def get(self, key: str) -> bool:
        return self.observe(key).value

    def set(self, key: str, value: bool) -> None:
        """Commit ``value`` for ``key``, persist it, then notify observers."""
        flag = self.observe(key)
        value = bool(value)
        if flag.value == value:
            return
        self._write(self._payload({key: value}))
        flag._publish(value)
        logger.debug("Preference '%s' set to %s", key, value)

    def keys(self) -> list[str]:
        return sorted(self._flags)

    def items(self) -> Iterator[tuple[str, bool]]:
        for key in self.keys():
            yield key, self._flags[key].value

    def save(self) -> None:
        """Write all values to disk atomically. No-op for in-memory stores."""
        self._write(self._payload())

    def _payload(self, overrides: Optional[Mapping[str, bool]] = None) -> dict[str, Any]:
        # Keys no flag claimed in this session are carried through untouched.
        payload: dict[str, Any] = dict(self._loaded)
        payload.update({key: flag.value for key, flag in self._flags.items()})
        payload.update(overrides or {})
        return payload

    def _write(self, payload: Mapping[str, Any]) -> None:
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.",
            suffix=".tmp",
            dir=str(self._path.parent),
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2, sort_keys=True)
                handle.write("\n")
            os.replace(tmp_name, self._path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise

    def _read_file(self) -> dict[str, Any]:
        if self._path is None or not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read preferences from %s: %s; using defaults", self._path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Preferences file %s is not a JSON object; using defaults", self._path)
            return {}
        return {str(key): value for key, value in raw.items()}
