"""Plain-text outline of a home screen render pass.

Mirrors what ``HomeScreen`` composes so the conditional layout can be printed
from the CLI and checked without a terminal.
"""

from __future__ import annotations

from kbsettings.resources import StringResources
from kbsettings.ui.tui.state.home_view_model import BANNER_TEXT_KEYS, BannerState, HomeSnapshot
from kbsettings.ui.tui.state.info_panel import InfoPanelContent
from kbsettings.ui.tui.state.menu import MenuEntry, icon_glyph

_BANNER_TAGS = {
    BannerState.ERROR: "[error]",
    BannerState.WARNING: "[warning]",
}


def format_banner(snapshot: HomeSnapshot, strings: StringResources) -> list[str]:
    """Banner line for the snapshot, or nothing when no banner applies."""
    state = snapshot.banner
    if state is BannerState.NONE:
        return []
    return [f"{_BANNER_TAGS[state]} {strings.resolve(BANNER_TEXT_KEYS[state])}"]


def format_info_panel(snapshot: HomeSnapshot, content: InfoPanelContent) -> list[str]:
    lines = [f"{content.title}  {icon_glyph(snapshot.toggle_icon)}"]
    if not snapshot.body_visible:
        return lines
    lines.extend(content.intro)
    lines.append(f"<{content.feedback_label}> {content.feedback_url}")
    lines.append(content.version_line)
    lines.append(content.features_heading)
    lines.extend(content.features)
    lines.append(content.closing_note)
    return lines


def format_menu(entries: tuple[MenuEntry, ...], strings: StringResources) -> list[str]:
    return [f"{icon_glyph(entry.icon)} {strings.resolve(entry.label_key)}" for entry in entries]


def format_home_outline(
    snapshot: HomeSnapshot,
    entries: tuple[MenuEntry, ...],
    content: InfoPanelContent,
    strings: StringResources,
) -> str:
    """Render the whole home screen as indented text."""
    sections: list[list[str]] = []
    sections.append([strings.resolve("settings__home__title"), "=" * 40])
    banner = format_banner(snapshot, strings)
    if banner:
        sections.append(banner)
    sections.append(format_info_panel(snapshot, content))
    sections.append(format_menu(entries, strings))
    return "\n\n".join("\n".join(section) for section in sections)
