"""User interfaces for the keyboard settings app.

- tui: Textual-based terminal UI
"""

from __future__ import annotations

__all__ = ["tui"]
