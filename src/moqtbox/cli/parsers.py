#!/usr/bin/env python3
"""
Argument parsers for moqtbox CLI.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from moqtbox import __version__, paths
from moqtbox.cli.commands import cmd_init, cmd_profiles, cmd_settings, cmd_vagrantfile
from moqtbox.cli.utils import console, print_banner
from moqtbox.logging import bind_cli_context, configure_logging
from moqtbox.settings import SettingsError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moqtbox", description="Declare the MoQT development VMs"
    )
    parser.add_argument("--version", action="version", version=f"moqtbox {__version__}")
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root holding settings.yml(.example) (default: $MOQTBOX_ROOT or cwd)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write JSON logs here")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Settings command
    settings_parser = subparsers.add_parser("settings", help="Show merged settings")
    settings_parser.add_argument(
        "--format", "-f", choices=["yaml", "json"], default="yaml", help="Output format"
    )
    settings_parser.set_defaults(func=cmd_settings)

    # Profiles command
    profiles_parser = subparsers.add_parser("profiles", help="Show declared VM profiles")
    profiles_parser.add_argument(
        "--format",
        "-f",
        choices=["table", "yaml", "json"],
        default="table",
        help="Output format (default: table)",
    )
    profiles_parser.set_defaults(func=cmd_profiles)

    # Vagrantfile command
    vagrantfile_parser = subparsers.add_parser(
        "vagrantfile", help="Render a Vagrantfile for the declared profiles"
    )
    vagrantfile_parser.add_argument("--output", "-o", help="Write to file instead of stdout")
    vagrantfile_parser.set_defaults(func=cmd_vagrantfile)

    # Init command
    init_parser = subparsers.add_parser(
        "init", help="Create settings.yml from settings.yml.example"
    )
    init_parser.add_argument("--force", action="store_true", help="Overwrite existing settings.yml")
    init_parser.set_defaults(func=cmd_init)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        level=args.log_level,
        json_output=args.json_logs,
        log_file=args.log_file,
    )
    bind_cli_context(args.command, paths.project_root(args.root))

    if not hasattr(args, "func"):
        print_banner()
        parser.print_help()
        return 0

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/]")
        return 1
    except SettingsError as e:
        console.print(f"[red]❌ {escape(str(e))}[/]", highlight=False, soft_wrap=True)
        return 1
    except OSError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/]", highlight=False, soft_wrap=True)
        return 1
