#!/usr/bin/env python3
"""
Shared utilities for moqtbox CLI.
"""

from pathlib import Path
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from moqtbox import __version__, paths
from moqtbox.logging import get_logger, log_operation
from moqtbox.settings import MergedSettings, resolve_project_settings

console = Console()
err_console = Console(stderr=True)

log = get_logger("moqtbox.cli")


def print_banner():
    """Print the moqtbox banner."""
    console.print("[bold cyan]moqtbox[/] [dim]- MoQT development VMs[/]")
    console.print(f"  Version {__version__}\n", style="dim")


def notify_stdout(message: str) -> None:
    console.print(f"[yellow]ℹ️  {escape(message)}[/]", soft_wrap=True)


def notify_stderr(message: str) -> None:
    err_console.print(f"[yellow]ℹ️  {escape(message)}[/]", soft_wrap=True)


def load_settings(
    root: Optional[Path], notify: Optional[Callable[[str], None]] = None
) -> MergedSettings:
    """Resolve the project settings, logging the operation."""
    with log_operation(log, "resolve_settings", root=str(paths.project_root(root))):
        return resolve_project_settings(root, notify=notify)
