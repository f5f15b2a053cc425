"""Text of the collapsible info panel on the home screen."""

from __future__ import annotations

from dataclasses import dataclass

INFO_PANEL_TITLE = "Beta-access to new Settings UI"
FEEDBACK_BUTTON_LABEL = "Open Feedback Thread"

INTRO_PARAGRAPHS: tuple[str, ...] = (
    "You are currently testing out the new Settings of FlorisBoard.",
    "This beta release contains a completely rewritten keyboard logic and UI backend, "
    "thus some features are still missing. These will get re-added in later beta "
    "versions (see below).",
    "If you want to give feedback on the development of the new prefs and keyboard "
    "logic, please do so in below linked feedback thread:",
)

# (feature, when it returns)
UNAVAILABLE_FEATURES: tuple[tuple[str, str], ...] = (
    ("Smartbar", "beta07"),
    ("Password autofill on Android11+", "beta07"),
    ("Clipboard manager / clipboard row", "beta07"),
    ("Theme customization (new theme engine and look)", "beta08"),
    ("Glide typing", "beta09"),
    ("Emoji view", "beta09 or beta10"),
    ("Landscape fullscreen input", "beta09 or beta10"),
    ("Word suggestions", "beta10+, new suggestion algorithm 0.3.15/16"),
)

CLOSING_NOTE = (
    "Please do not file issues that these features do not work while the current "
    "version is below the intended re-implementation version. Thank you!"
)


@dataclass(frozen=True)
class InfoPanelContent:
    """Everything the expanded panel body shows."""

    title: str
    intro: tuple[str, ...]
    feedback_label: str
    feedback_url: str
    version_line: str
    features_heading: str
    features: tuple[str, ...]
    closing_note: str


def build_info_panel_content(version: str, feedback_url: str) -> InfoPanelContent:
    return InfoPanelContent(
        title=INFO_PANEL_TITLE,
        intro=INTRO_PARAGRAPHS,
        feedback_label=FEEDBACK_BUTTON_LABEL,
        feedback_url=feedback_url,
        version_line=f"Current version: {version}",
        features_heading="List of unavailable features (and when they will get re-implemented):",
        features=tuple(f" - {name} ({release})" for name, release in UNAVAILABLE_FEATURES),
        closing_note=CLOSING_NOTE,
    )
