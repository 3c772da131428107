"""
Canonical path helpers for moqtbox settings documents and provisioning scripts.

Every module that needs to locate a settings file or a provisioning script
should import from here instead of computing paths inline.
"""

import os
from pathlib import Path
from typing import Optional

import structlog

log = structlog.get_logger(__name__)


DEFAULT_SETTINGS_FILE = "settings.yml.example"
OVERRIDE_SETTINGS_FILE = "settings.yml"
SCRIPTS_DIR = "scripts"


# ── project root ─────────────────────────────────────────────────────────────

def project_root(root: Optional[Path] = None) -> Path:
    """Return the project root.

    Resolution order:
      1. explicit *root* argument
      2. ``MOQTBOX_ROOT`` environment variable
      3. current working directory
    """
    if root is not None:
        return Path(root).expanduser()
    env_root = os.getenv("MOQTBOX_ROOT")
    if env_root:
        log.debug("project_root_from_env", root=env_root)
        return Path(env_root).expanduser()
    return Path.cwd()


# ── settings documents ───────────────────────────────────────────────────────

def default_settings_path(root: Optional[Path] = None) -> Path:
    """Shipped baseline settings (must exist)."""
    return project_root(root) / DEFAULT_SETTINGS_FILE


def override_settings_path(root: Optional[Path] = None) -> Path:
    """User-local overrides (optional, never committed)."""
    return project_root(root) / OVERRIDE_SETTINGS_FILE


# ── provisioning scripts ─────────────────────────────────────────────────────

def script_path(name: str) -> str:
    """Script path relative to the project root, as the VM runtime expects it."""
    return f"{SCRIPTS_DIR}/{name}"
