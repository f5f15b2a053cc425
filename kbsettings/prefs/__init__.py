"""Persisted preference flags."""

from __future__ import annotations

from .store import (
    DEFAULT_PREFERENCES,
    HOME_INFO_COLLAPSED,
    PreferenceFlag,
    PreferenceStore,
    UnknownPreferenceError,
)

__all__ = [
    "DEFAULT_PREFERENCES",
    "HOME_INFO_COLLAPSED",
    "PreferenceFlag",
    "PreferenceStore",
    "UnknownPreferenceError",
]
