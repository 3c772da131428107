from pathlib import Path

from moqtbox import paths


def test_project_root_prefers_argument(tmp_path, monkeypatch):
    monkeypatch.setenv("MOQTBOX_ROOT", "/somewhere/else")
    assert paths.project_root(tmp_path) == tmp_path


def test_project_root_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("MOQTBOX_ROOT", str(tmp_path))
    assert paths.project_root() == tmp_path


def test_project_root_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.delenv("MOQTBOX_ROOT", raising=False)
    monkeypatch.chdir(tmp_path)
    assert paths.project_root() == Path.cwd()


def test_settings_locations(tmp_path):
    assert paths.default_settings_path(tmp_path) == tmp_path / "settings.yml.example"
    assert paths.override_settings_path(tmp_path) == tmp_path / "settings.yml"


def test_script_path_is_relative():
    assert paths.script_path("moqt_setup.sh") == "scripts/moqt_setup.sh"
