from __future__ import annotations

import pytest

from kbsettings.config import ConfigError, PlatformConfig
from kbsettings.platform import (
    BACKEND_REGISTRY,
    IBusInputMethodBackend,
    StaticInputMethodBackend,
    create_backend,
)


def test_registry_names() -> None:
    assert set(BACKEND_REGISTRY) == {"static", "ibus"}


def test_create_static_backend_uses_config_values() -> None:
    backend = create_backend(PlatformConfig(backend="static", enabled=True, selected=False))
    assert isinstance(backend, StaticInputMethodBackend)
    assert backend.is_enabled() is True
    assert backend.is_selected() is False


def test_create_ibus_backend() -> None:
    backend = create_backend(PlatformConfig(backend="ibus", engine_id="my-engine"))
    assert isinstance(backend, IBusInputMethodBackend)
    assert backend.engine_id == "my-engine"


def test_env_override_selects_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KBSETTINGS_BACKEND", "IBus")
    monkeypatch.setenv("KBSETTINGS_ENGINE_ID", "from-env")
    backend = create_backend(PlatformConfig())
    assert isinstance(backend, IBusInputMethodBackend)
    assert backend.engine_id == "from-env"


def test_unknown_backend_raises() -> None:
    with pytest.raises(ConfigError, match="Unsupported platform backend"):
        create_backend(PlatformConfig(backend="wayland"))
