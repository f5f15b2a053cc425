"""
Main CLI entry point.

Runs the settings TUI by default; subcommands inspect status and preferences
without starting the full-screen interface.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from kbsettings import __version__
from kbsettings.config import AppConfig, ConfigError, default_config, load_config_from_file
from kbsettings.logging import configure_logging_from_args, get_logger
from kbsettings.paths import get_default_config_path


def build_parser() -> argparse.ArgumentParser:
    """
    Build the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="kbsettings",
        description="Keyboard settings - terminal settings home for the keyboard",
        epilog="Use 'kbsettings <command> --help' for more information on a specific command.",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file (default: <home>/config.yaml)",
    )
    parser.add_argument(
        "--home",
        type=Path,
        help="Application home folder (default: $KBSETTINGS_HOME or ~/.kbsettings)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output (DEBUG level)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (overrides --verbose)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
        required=False,  # No command runs the TUI
    )

    subparsers.add_parser(
        "status",
        help="Print input-method status and the banner it produces",
    )
    subparsers.add_parser(
        "outline",
        help="Print a plain-text outline of the home screen",
    )

    prefs_parser = subparsers.add_parser(
        "prefs",
        help="Inspect or change preference flags",
    )
    prefs_subparsers = prefs_parser.add_subparsers(
        dest="prefs_command",
        title="prefs commands",
        required=True,
    )
    prefs_subparsers.add_parser("list", help="List all preference flags")
    set_parser = prefs_subparsers.add_parser("set", help="Set a preference flag")
    set_parser.add_argument("key", help="Preference key")
    set_parser.add_argument("value", choices=["true", "false"], help="New value")

    return parser


def resolve_config(config_path: Optional[Path], home: Optional[Path]) -> AppConfig:
    """
    Load configuration from ``config_path`` or the default location.

    A missing explicit path is an error; a missing default file means
    built-in defaults.

    Raises:
        FileNotFoundError: If an explicit config path does not exist
        ConfigError: If configuration is invalid
    """
    if config_path is not None:
        return load_config_from_file(config_path, home_folder=home)

    default_path = get_default_config_path(home)
    if default_path.exists():
        return load_config_from_file(default_path, home_folder=home)
    return default_config(home)


def run_status(config: AppConfig) -> int:
    from kbsettings.platform import SystemStatusProbe, create_backend
    from kbsettings.ui.tui.state import banner_state

    probe = SystemStatusProbe(create_backend(config.platform))
    enabled = probe.observe_enabled(foreground_only=False).value
    selected = probe.observe_selected(foreground_only=False).value
    print(f"enabled:  {str(enabled).lower()}")
    print(f"selected: {str(selected).lower()}")
    print(f"banner:   {banner_state(enabled, selected).value}")
    return 0


def run_outline(config: AppConfig) -> int:
    from kbsettings.platform import SystemStatusProbe, create_backend
    from kbsettings.prefs import HOME_INFO_COLLAPSED, PreferenceStore
    from kbsettings.resources import StringResources
    from kbsettings.ui.tui.presenters import format_home_outline
    from kbsettings.ui.tui.state import HOME_MENU_ENTRIES, HomeSnapshot, build_info_panel_content

    probe = SystemStatusProbe(create_backend(config.platform))
    store = PreferenceStore(config.preferences.path)
    snapshot = HomeSnapshot(
        ime_enabled=probe.observe_enabled(foreground_only=False).value,
        ime_selected=probe.observe_selected(foreground_only=False).value,
        is_collapsed=store.get(HOME_INFO_COLLAPSED),
    )
    print(
        format_home_outline(
            snapshot,
            HOME_MENU_ENTRIES,
            build_info_panel_content(__version__, config.home.feedback_url),
            StringResources.from_file(config.home.strings_file),
        )
    )
    return 0


def run_prefs(config: AppConfig, args: argparse.Namespace) -> int:
    from kbsettings.prefs import PreferenceStore, UnknownPreferenceError

    store = PreferenceStore(config.preferences.path)
    if args.prefs_command == "list":
        for key, value in store.items():
            print(f"{key} = {str(value).lower()}")
        return 0

    try:
        store.set(args.key, args.value == "true")
    except UnknownPreferenceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(f"Known keys: {', '.join(store.keys())}", file=sys.stderr)
        return 1
    print(f"{args.key} = {args.value}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (for testing)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # The full-screen TUI owns stdout; only a log file may receive records.
    configure_logging_from_args(
        verbose=args.verbose,
        log_level=args.log_level,
        log_file=str(args.log_file) if args.log_file else None,
        console=bool(args.command),
    )

    logger = get_logger(__name__)
    logger.debug(f"Parsed arguments: {args}")

    try:
        config = resolve_config(args.config, args.home)
    except FileNotFoundError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        print("Create a config file or omit --config to use built-in defaults.", file=sys.stderr)
        return 1
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        if not args.command:
            logger.info("Starting TUI interface")
            from kbsettings.ui.tui.app import run_tui
            return run_tui(config)
        if args.command == "status":
            return run_status(config)
        if args.command == "outline":
            return run_outline(config)
        if args.command == "prefs":
            return run_prefs(config, args)

        parser.print_help()
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nInterrupted by user.")
        return 130  # Standard exit code for SIGINT

    except Exception as e:
        logger.exception("Unhandled exception in main")
        print(f"\nError: {e}", file=sys.stderr)
        if args.verbose:
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
