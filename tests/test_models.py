#!/usr/bin/env python3
"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from moqtbox.models import ProfileSet, ProvisionStep, SharedFolder, VMProfile


class TestProvisionStep:
    """Test ProvisionStep model."""

    def test_default_values(self):
        step = ProvisionStep(name="setup", path="scripts/setup.sh")
        assert step.kind == "shell"
        assert step.privileged is False

    @pytest.mark.parametrize("name,valid", [
        ("setup", True),
        ("  padded  ", True),
        ("", False),
        ("   ", False),
    ])
    def test_name_validation(self, name, valid):
        if valid:
            step = ProvisionStep(name=name, path="scripts/setup.sh")
            assert step.name == name.strip()
        else:
            with pytest.raises(ValueError):
                ProvisionStep(name=name, path="scripts/setup.sh")

    def test_only_shell_kind(self):
        with pytest.raises(ValidationError):
            ProvisionStep(name="setup", kind="ansible", path="playbook.yml")

    def test_frozen(self):
        step = ProvisionStep(name="setup", path="scripts/setup.sh")
        with pytest.raises(ValidationError):
            step.privileged = True


class TestSharedFolder:
    """Test SharedFolder model."""

    def test_guest_path_must_be_absolute(self):
        with pytest.raises(ValueError, match="Guest path must be absolute"):
            SharedFolder(host_path="/home/user/work", guest_path="relative/dest")

    def test_host_path_cannot_be_empty(self):
        with pytest.raises(ValueError, match="Host path cannot be empty"):
            SharedFolder(host_path="  ", guest_path="/mnt/work")

    def test_host_path_stripped(self):
        folder = SharedFolder(host_path=" /home/user/work ", guest_path="/mnt/work")
        assert folder.host_path == "/home/user/work"


class TestVMProfile:
    """Test VMProfile model."""

    def test_minimal_profile(self):
        profile = VMProfile(name="osx", box="ramsey/macos-catalina")
        assert profile.provisioners == []
        assert profile.synced_folders == []

    def test_duplicate_step_names_rejected(self):
        step = ProvisionStep(name="setup", path="scripts/setup.sh")
        with pytest.raises(ValueError, match="Duplicate provisioning steps: setup"):
            VMProfile(name="linux", box="ubuntu/jammy64", provisioners=[step, step])

    def test_empty_box_rejected(self):
        with pytest.raises(ValueError):
            VMProfile(name="linux", box="")


class TestProfileSet:
    """Test ProfileSet model."""

    def test_duplicate_profile_names_rejected(self):
        profile = VMProfile(name="linux", box="ubuntu/jammy64")
        with pytest.raises(ValueError, match="Profile names must be unique"):
            ProfileSet(profiles=[profile, profile])

    def test_lookup_by_name(self):
        osx = VMProfile(name="osx", box="ramsey/macos-catalina")
        linux = VMProfile(name="linux", box="ubuntu/jammy64")
        profiles = ProfileSet(profiles=[osx, linux])

        assert profiles.names() == ["osx", "linux"]
        assert profiles["linux"] is linux
        assert profiles.get("osx") is osx
