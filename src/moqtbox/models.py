#!/usr/bin/env python3
"""
Pydantic models for moqtbox VM declarations.
"""

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProvisionStep(BaseModel):
    """One post-boot setup step run by the VM runtime."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Step identifier")
    kind: Literal["shell"] = Field(default="shell", description="Execution kind")
    path: str = Field(description="Script path relative to the project root")
    privileged: bool = Field(default=False, description="Run with elevated privileges")

    @field_validator("name", "path")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


class SharedFolder(BaseModel):
    """Host directory exposed to the guest."""

    model_config = ConfigDict(frozen=True)

    host_path: str = Field(description="Directory on the host")
    guest_path: str = Field(description="Mount point inside the guest")

    @field_validator("host_path")
    @classmethod
    def host_path_must_be_set(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Host path cannot be empty")
        return str(Path(v).expanduser())

    @field_validator("guest_path")
    @classmethod
    def guest_path_must_be_absolute(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"Guest path must be absolute: {v}")
        return v


class VMProfile(BaseModel):
    """A named VM: base box, ordered provisioning steps and shared folders."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Profile name")
    box: str = Field(description="Base image identifier")
    provisioners: List[ProvisionStep] = Field(default_factory=list)
    synced_folders: List[SharedFolder] = Field(default_factory=list)

    @field_validator("name", "box")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @field_validator("provisioners")
    @classmethod
    def step_names_must_be_unique(cls, v: List[ProvisionStep]) -> List[ProvisionStep]:
        names = [step.name for step in v]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate provisioning steps: {', '.join(duplicates)}")
        return v


class ProfileSet(BaseModel):
    """Declared profiles in declaration order."""

    model_config = ConfigDict(frozen=True)

    profiles: List[VMProfile] = Field(default_factory=list)

    @field_validator("profiles")
    @classmethod
    def names_must_be_unique(cls, v: List[VMProfile]) -> List[VMProfile]:
        names = [p.name for p in v]
        if len(names) != len(set(names)):
            raise ValueError(f"Profile names must be unique: {names}")
        return v

    def names(self) -> List[str]:
        return [p.name for p in self.profiles]

    def get(self, name: str) -> Optional[VMProfile]:
        for profile in self.profiles:
            if profile.name == name:
                return profile
        return None

    def __getitem__(self, name: str) -> VMProfile:
        profile = self.get(name)
        if profile is None:
            raise KeyError(name)
        return profile
