"""Project-wide constants shared by every other module."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

PROJECT_VERSION = "v3.5.0"
K3S_VERSION = "v0.0.1"
KUBESPRAY_VERSION = "v2.26.0"
KUBERNETES_VERSION = "v1.30.4"
TERRAFORM_VERSION = "1.5.2"

# Applications that must be available on PATH.
PROJECT_REQUIRED_APPS: list[str] = [
    "virtualenv",
    "python3",
    "git",
]

# Files and directories copied from bundled resources into a new cluster.
PROJECT_REQUIRED_FILES: list[str] = [
    "ansible/",
    "terraform/",
]

# Choices accepted by "apply --action".
PROJECT_APPLY_ACTIONS: tuple[str, ...] = ("create", "upgrade", "scale")

# Supported Kubernetes version ranges.
PROJECT_K8S_VERSIONS: list[str] = [
    "v1.30.0 - v1.30.4",
    "v1.29.0 - v1.29.7",
    "v1.28.0 - v1.28.12",
]


@dataclass(frozen=True)
class OsPreset:
    """A cloud image of an operating system and its primary network interface."""

    image: str
    network_interface: str


OS_PRESETS = MappingProxyType(
    {
        "ubuntu20": OsPreset("ubuntu-20.04-server-cloudimg-amd64.img", "ens3"),
        "ubuntu22": OsPreset("ubuntu-22.04-server-cloudimg-amd64.img", "ens3"),
        "debian11": OsPreset("debian-11-genericcloud-amd64.qcow2", "ens3"),
        "debian12": OsPreset("debian-12-genericcloud-amd64.qcow2", "ens3"),
        "centos9": OsPreset(
            "CentOS-Stream-GenericCloud-9-latest.x86_64.qcow2", "eth0"
        ),
        "rocky9": OsPreset("Rocky-9-GenericCloud-Base.latest.x86_64.qcow2", "eth0"),
    }
)


def os_preset(name: str) -> OsPreset:
    """Return the OS preset with the given name."""
    try:
        return OS_PRESETS[name]
    except KeyError:
        known = ", ".join(sorted(OS_PRESETS))
        raise ValueError(f"unknown OS preset {name!r}; known presets: {known}") from None