"""
Settings resolution: shipped defaults overlaid with optional user overrides.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, Mapping, Optional, Tuple

import structlog
import yaml

from moqtbox import paths

log = structlog.get_logger(__name__)

WORKSPACE_PATH_KEY = "moqt_workspace_path"


class SettingsError(ValueError):
    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class SettingsNotFoundError(SettingsError):
    pass


class SettingsParseError(SettingsError):
    pass


class MergedSettings(Mapping[str, Any]):
    """Read-only view of the merged settings documents.

    ``sources`` lists the files that contributed, in load order. Equality
    only compares the key/value content.
    """

    def __init__(self, values: Mapping[str, Any], sources: Iterable[Path] = ()):
        self._values = MappingProxyType(dict(values))
        self.sources: Tuple[Path, ...] = tuple(sources)

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"MergedSettings({dict(self._values)!r})"

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)


def load_settings_document(path: Path, required: bool = True) -> Optional[Dict[str, Any]]:
    """Load one YAML settings document.

    Returns None for a missing optional document. An empty file is an empty
    mapping.
    """
    path = Path(path)
    if not path.exists():
        if required:
            raise SettingsNotFoundError(f"Settings file not found: {path}", path)
        log.debug("settings_override_absent", path=str(path))
        return None

    try:
        raw = yaml.safe_load(path.read_text())
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise SettingsParseError(f"Failed to read settings file {path}: {e}", path) from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise SettingsParseError(
            f"Settings file {path} must be a YAML mapping, got {type(raw).__name__}", path
        )

    bad_keys = [k for k in raw if not isinstance(k, str)]
    if bad_keys:
        raise SettingsParseError(
            f"Settings file {path} has non-string keys: {', '.join(map(repr, bad_keys))}", path
        )

    log.debug("settings_loaded", path=str(path), keys=len(raw))
    return raw


def overlay(defaults: Mapping[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge *overrides* OVER *defaults* (override wins, per key).

    Keys missing from *overrides* keep their default value. Neither input is
    modified.
    """
    merged: Dict[str, Any] = dict(defaults)
    for key, value in overrides.items():
        merged[key] = value
    return merged


def resolve(
    default_path: Path,
    override_path: Path,
    expected_keys: Iterable[str] = (),
    notify: Optional[Callable[[str], None]] = None,
) -> MergedSettings:
    """Resolve the effective settings from the default and override documents.

    Each key of *expected_keys* absent from the result is logged and, when
    *notify* is given, reported through it. Missing keys never abort.
    """
    default_path = Path(default_path)
    override_path = Path(override_path)

    defaults = load_settings_document(default_path, required=True)
    sources = [default_path]

    overrides = load_settings_document(override_path, required=False)
    if overrides is not None:
        sources.append(override_path)
        merged = overlay(defaults, overrides)
    else:
        merged = dict(defaults)

    for key in expected_keys:
        if key not in merged:
            log.info("settings_key_missing", key=key, sources=[str(s) for s in sources])
            if notify is not None:
                notify(f"{key} is not set in any settings file")

    return MergedSettings(merged, sources)


def resolve_project_settings(
    root: Optional[Path] = None,
    expected_keys: Iterable[str] = (WORKSPACE_PATH_KEY,),
    notify: Optional[Callable[[str], None]] = None,
) -> MergedSettings:
    """Resolve settings from the fixed locations under the project root."""
    return resolve(
        paths.default_settings_path(root),
        paths.override_settings_path(root),
        expected_keys=expected_keys,
        notify=notify,
    )
