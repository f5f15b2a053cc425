"""Input-method backends answering "is the keyboard enabled / selected".

``StaticInputMethodBackend`` serves fixed values (from config, or set at
runtime) and is what tests and headless runs use. ``IBusInputMethodBackend``
asks the IBus daemon through its command-line tools.
"""

from __future__ import annotations

import ast
import subprocess
from typing import Optional, Protocol, Sequence

from kbsettings.logging import get_logger

logger = get_logger(__name__)

DEFAULT_QUERY_TIMEOUT_S = 2.0


class PlatformQueryError(RuntimeError):
    """Raised when the platform cannot answer a status query."""


class InputMethodBackend(Protocol):
    """OS collaborator for input-method status and system dialogs."""

    def is_enabled(self) -> bool:
        ...

    def is_selected(self) -> bool:
        ...

    def open_enabler(self) -> None:
        ...

    def open_picker(self) -> None:
        ...


class StaticInputMethodBackend:
    """Backend with in-process state.

    Opening the enabler marks the keyboard enabled and opening the picker
    marks it selected, mirroring what a user would do in the system dialogs.
    """

    def __init__(self, *, enabled: bool = True, selected: bool = True) -> None:
        self.enabled = bool(enabled)
        self.selected = bool(selected)
        self.query_count = 0
        self.actions: list[str] = []

    def is_enabled(self) -> bool:
        self.query_count += 1
        return self.enabled

    def is_selected(self) -> bool:
        self.query_count += 1
        return self.enabled and self.selected

    def set_state(self, *, enabled: Optional[bool] = None, selected: Optional[bool] = None) -> None:
        if enabled is not None:
            self.enabled = bool(enabled)
        if selected is not None:
            self.selected = bool(selected)

    def open_enabler(self) -> None:
        self.actions.append("open_enabler")
        self.enabled = True

    def open_picker(self) -> None:
        self.actions.append("open_picker")
        self.selected = True


class IBusInputMethodBackend:
    """Backend talking to IBus through ``gsettings`` and ``ibus``."""

    def __init__(
        self,
        engine_id: str,
        *,
        timeout_s: float = DEFAULT_QUERY_TIMEOUT_S,
        enabler_command: Optional[Sequence[str]] = None,
        picker_command: Optional[Sequence[str]] = None,
    ) -> None:
        self.engine_id = engine_id
        self.timeout_s = timeout_s
        self.enabler_command = list(enabler_command or ["ibus-setup"])
        self.picker_command = list(picker_command or ["ibus", "engine", engine_id])

    def is_enabled(self) -> bool:
        output = self._run(["gsettings", "get", "org.freedesktop.ibus.general", "preload-engines"])
        return self.engine_id in parse_gsettings_list(output)

    def is_selected(self) -> bool:
        output = self._run(["ibus", "engine"])
        return output.strip() == self.engine_id

    def open_enabler(self) -> None:
        self._spawn(self.enabler_command)

    def open_picker(self) -> None:
        self._spawn(self.picker_command)

    def _run(self, command: list[str]) -> str:
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout_s,
                check=True,
            )
        except FileNotFoundError as exc:
            raise PlatformQueryError(f"{command[0]} is not installed") from exc
        except subprocess.TimeoutExpired as exc:
            raise PlatformQueryError(f"{' '.join(command)} timed out after {self.timeout_s}s") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise PlatformQueryError(f"{' '.join(command)} failed: {detail}") from exc
        return completed.stdout

    def _spawn(self, command: list[str]) -> None:
        logger.info("Launching %s", " ".join(command))
        try:
            subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            logger.warning("Could not launch %s: %s", command[0], exc)


def parse_gsettings_list(output: str) -> list[str]:
    """Parse a GVariant string array as printed by ``gsettings get``.

    Examples: ``['xkb:us::eng', 'anthy']`` or ``@as []``.
    """
    text = (output or "").strip()
    if text.startswith("@as"):
        text = text[3:].strip()
    if not text:
        return []
    try:
        value = ast.literal_eval(text)
    except (ValueError, SyntaxError) as exc:
        raise PlatformQueryError(f"Unexpected gsettings output: {text!r}") from exc
    if not isinstance(value, (list, tuple)):
        raise PlatformQueryError(f"Unexpected gsettings output: {text!r}")
    return [str(item) for item in value]
