"""
Static VM profile declarations.

"osx" is a bare box. "linux" installs dependencies, runs the MoQT setup and,
when ``moqt_workspace_path`` is set, mounts the host workspace into the guest.
"""

from typing import Any, Callable, Mapping, Optional

import structlog

from moqtbox.models import ProfileSet, ProvisionStep, SharedFolder, VMProfile
from moqtbox.paths import script_path
from moqtbox.settings import WORKSPACE_PATH_KEY

log = structlog.get_logger(__name__)

OSX_BOX = "ramsey/macos-catalina"
LINUX_BOX = "ubuntu/jammy64"
WORKSPACE_GUEST_PATH = "/home/vagrant/moqt_workspace"

Notify = Callable[[str], None]


def _console_notify(message: str) -> None:
    from moqtbox.cli.utils import notify_stdout

    notify_stdout(message)


def declare_osx_profile() -> VMProfile:
    return VMProfile(name="osx", box=OSX_BOX)


def declare_linux_profile(
    settings: Mapping[str, Any], notify: Optional[Notify] = None
) -> VMProfile:
    """Declare the "linux" profile, mounting the workspace when configured."""
    notify = notify or _console_notify

    provisioners = [
        ProvisionStep(
            name="install_dependencies",
            path=script_path("install_dependencies.sh"),
            privileged=False,
        ),
        ProvisionStep(
            name="moqt_setup",
            path=script_path("moqt_setup.sh"),
            privileged=False,
        ),
    ]

    synced_folders = []
    workspace = settings.get(WORKSPACE_PATH_KEY)
    if isinstance(workspace, str) and workspace.strip():
        synced_folders.append(
            SharedFolder(host_path=workspace, guest_path=WORKSPACE_GUEST_PATH)
        )
        log.debug("workspace_mount_declared", host_path=workspace)
    elif workspace is not None and not isinstance(workspace, str):
        log.warning(
            "workspace_path_not_a_string",
            key=WORKSPACE_PATH_KEY,
            value_type=type(workspace).__name__,
        )
        notify(
            f"{WORKSPACE_PATH_KEY} must be a directory path, got "
            f"{type(workspace).__name__}; no shared folder will be mounted"
        )
    else:
        log.info("workspace_mount_skipped", key=WORKSPACE_PATH_KEY)
        notify(f"{WORKSPACE_PATH_KEY} is not set; no shared folder will be mounted")

    return VMProfile(
        name="linux",
        box=LINUX_BOX,
        provisioners=provisioners,
        synced_folders=synced_folders,
    )


def declare_profiles(
    settings: Mapping[str, Any], notify: Optional[Notify] = None
) -> ProfileSet:
    """Declare every profile, in order."""
    return ProfileSet(
        profiles=[
            declare_osx_profile(),
            declare_linux_profile(settings, notify=notify),
        ]
    )
