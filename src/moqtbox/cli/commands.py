#!/usr/bin/env python3
"""
Commands for moqtbox CLI.
"""

import json
import shutil
from pathlib import Path

import yaml
from rich.markup import escape
from rich.panel import Panel

from moqtbox import paths
from moqtbox.cli.utils import console, load_settings, notify_stderr, notify_stdout
from moqtbox.exporter import dump_json, dump_yaml, print_profiles_table, render_vagrantfile
from moqtbox.profiles import declare_profiles


def cmd_settings(args):
    """Show the merged settings."""
    settings = load_settings(args.root, notify=notify_stderr)

    if args.format == "json":
        print(json.dumps(settings.to_dict(), indent=2, default=str))
        return 0

    sources = "\n".join(escape(str(s)) for s in settings.sources)
    console.print(Panel(sources, title="Settings sources", border_style="cyan"), highlight=False)
    if settings:
        print(yaml.dump(settings.to_dict(), default_flow_style=False, sort_keys=False), end="")
    else:
        console.print("[dim]No settings defined[/]")
    return 0


def cmd_profiles(args):
    """Show the declared VM profiles."""
    settings = load_settings(args.root)

    if args.format == "table":
        profiles = declare_profiles(settings, notify=notify_stdout)
        print_profiles_table(profiles, console)
        return 0

    profiles = declare_profiles(settings, notify=notify_stderr)
    if args.format == "json":
        print(dump_json(profiles))
    else:
        print(dump_yaml(profiles), end="")
    return 0


def cmd_vagrantfile(args):
    """Render the Vagrantfile for the declared profiles."""
    settings = load_settings(args.root)
    profiles = declare_profiles(settings, notify=notify_stderr)
    content = render_vagrantfile(profiles)

    if args.output:
        output = Path(args.output)
        output.write_text(content)
        notify_stderr(f"Wrote {output}")
    else:
        print(content, end="")
    return 0


def cmd_init(args):
    """Create settings.yml from the shipped defaults."""
    default_path = paths.default_settings_path(args.root)
    override_path = paths.override_settings_path(args.root)

    if not default_path.exists():
        console.print(f"[red]❌ Default settings not found: {escape(str(default_path))}[/]")
        return 1

    if override_path.exists() and not args.force:
        console.print(f"[red]❌ Settings already exist: {escape(str(override_path))}[/]")
        console.print("[dim]Use --force to overwrite[/]")
        return 1

    shutil.copyfile(default_path, override_path)

    console.print(f"[green]✅ Created {escape(str(override_path))}[/]")
    console.print("\n[dim]Next steps:[/]")
    console.print(f"  1. Edit the settings: [cyan]nano {escape(str(override_path))}[/]")
    console.print("  2. Check the result: [cyan]moqtbox profiles[/]")
    return 0
