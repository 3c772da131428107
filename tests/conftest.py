"""
Pytest fixtures and configuration for moqtbox tests.
"""
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """Empty project root; MOQTBOX_ROOT is cleared so cwd is not consulted."""
    monkeypatch.delenv("MOQTBOX_ROOT", raising=False)
    return tmp_path


@pytest.fixture
def write_settings(project_dir):
    """Write settings.yml.example / settings.yml into the project root."""

    def _write(defaults=None, overrides=None):
        default_path = project_dir / "settings.yml.example"
        override_path = project_dir / "settings.yml"
        if defaults is not None:
            default_path.write_text(
                defaults if isinstance(defaults, str) else yaml.dump(defaults)
            )
        if overrides is not None:
            override_path.write_text(
                overrides if isinstance(overrides, str) else yaml.dump(overrides)
            )
        return default_path, override_path

    return _write


@pytest.fixture
def notices():
    """Collects informational notices; pass ``notices.append`` as notify."""
    return []


@pytest.fixture(autouse=True)
def _reset_structlog(monkeypatch):
    """Keep structlog configuration from one test leaking into the next.

    Module-level loggers that cache their configuration on first use would
    otherwise bypass ``capture_logs`` in every later test.
    """
    import structlog

    real_configure = structlog.configure

    def _configure_uncached(*args, **kwargs):
        kwargs["cache_logger_on_first_use"] = False
        return real_configure(*args, **kwargs)

    monkeypatch.setattr(structlog, "configure", _configure_uncached)
    yield
    structlog.reset_defaults()
