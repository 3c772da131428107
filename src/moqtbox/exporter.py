#!/usr/bin/env python3
"""
Export declared profiles for the VM runtime and for humans.
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from moqtbox import __version__
from moqtbox.models import ProfileSet, VMProfile


def profiles_to_dict(profiles: ProfileSet) -> Dict[str, Any]:
    """Plain-data form of the declaration."""
    return {"profiles": [p.model_dump() for p in profiles.profiles]}


def dump_yaml(profiles: ProfileSet) -> str:
    return yaml.dump(profiles_to_dict(profiles), default_flow_style=False, sort_keys=False)


def dump_json(profiles: ProfileSet) -> str:
    return json.dumps(profiles_to_dict(profiles), indent=2)


def _ruby_str(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("#{", "\\#{")
    return f'"{escaped}"'


def _ruby_bool(value: bool) -> str:
    return "true" if value else "false"


def _render_profile(profile: VMProfile) -> List[str]:
    var = profile.name
    lines = [
        f"  config.vm.define {_ruby_str(profile.name)} do |{var}|",
        f"    {var}.vm.box = {_ruby_str(profile.box)}",
    ]
    for step in profile.provisioners:
        lines.append(
            f"    {var}.vm.provision {_ruby_str(step.name)}, type: {_ruby_str(step.kind)}, "
            f"path: {_ruby_str(step.path)}, privileged: {_ruby_bool(step.privileged)}"
        )
    for folder in profile.synced_folders:
        lines.append(
            f"    {var}.vm.synced_folder {_ruby_str(folder.host_path)}, "
            f"{_ruby_str(folder.guest_path)}"
        )
    lines.append("  end")
    return lines


def render_vagrantfile(profiles: ProfileSet) -> str:
    """Render the declaration as a Vagrantfile."""
    lines = [
        "# -*- mode: ruby -*-",
        "# vi: set ft=ruby :",
        f"# Generated by moqtbox {__version__}. Edit settings.yml instead.",
        "",
        'Vagrant.configure("2") do |config|',
    ]
    for idx, profile in enumerate(profiles.profiles):
        if idx:
            lines.append("")
        lines.extend(_render_profile(profile))
    lines.append("end")
    return "\n".join(lines) + "\n"


def print_profiles_table(profiles: ProfileSet, console: Console) -> None:
    table = Table(title="VM Profiles", border_style="cyan")
    table.add_column("Profile", style="bold")
    table.add_column("Box")
    table.add_column("Provisioning")
    table.add_column("Shared Folders")

    for profile in profiles.profiles:
        steps = "\n".join(
            f"{i}. {s.name} ({escape(s.path)}{', privileged' if s.privileged else ''})"
            for i, s in enumerate(profile.provisioners, 1)
        )
        folders = "\n".join(
            f"{escape(f.host_path)} → {escape(f.guest_path)}" for f in profile.synced_folders
        )
        table.add_row(profile.name, profile.box, steps or "[dim]-[/]", folders or "[dim]-[/]")

    console.print(table)
