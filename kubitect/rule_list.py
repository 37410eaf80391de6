"""Rule sets that decide which configuration changes each apply action permits."""

from __future__ import annotations

from kubitect.rules import ALLOW, ERROR, WARN, ActionType, ChangeType, Rule

_ANY = ChangeType.ANY
_CREATE = ChangeType.CREATE
_MODIFY = ChangeType.MODIFY
_DELETE = ChangeType.DELETE

_NODE_TYPES = "{master, worker, loadBalancer}"

_UPGRADE_RULES = (
    Rule(type=ALLOW, match_change_type=_MODIFY, match_path="kubernetes.version"),
    # Default rule.
    Rule(
        type=ERROR,
        match_change_type=_ANY,
        match_path="@",
        message=(
            "Change is not allowed. Upgrade action allows changing only "
            "'kubernetes.version'."
        ),
    ),
)

_SCALE_RULES = (
    Rule(
        type=ALLOW,
        match_change_type=_DELETE,
        match_path="cluster.nodes.worker.instances.@",
        action_type=ActionType.SCALE_DOWN,
    ),
    Rule(
        type=ALLOW,
        match_change_type=_CREATE,
        match_path="cluster.nodes.worker.instances.@",
        action_type=ActionType.SCALE_UP,
    ),
    Rule(
        type=ALLOW,
        match_change_type=_DELETE,
        match_path="cluster.nodes.loadBalancer.instances.@",
        action_type=ActionType.SCALE_DOWN,
    ),
    Rule(
        type=ALLOW,
        match_change_type=_CREATE,
        match_path="cluster.nodes.loadBalancer.instances.@",
        action_type=ActionType.SCALE_UP,
    ),
    Rule(
        type=ERROR,
        match_change_type=_CREATE,
        match_path="cluster.nodes.master.instances.@",
        message="Currently, control plane cannot be scaled.",
    ),
    Rule(
        type=ALLOW,
        match_change_type=_DELETE,
        match_path="cluster.nodes.master.instances.@",
        message="Currently, control plane cannot be scaled.",
    ),
    # Hosts may be added and removed.
    Rule(type=ALLOW, match_change_type=_CREATE, match_path="hosts.@"),
    Rule(type=ALLOW, match_change_type=_DELETE, match_path="hosts.@"),
    # Default rule.
    Rule(
        type=ERROR,
        match_change_type=_ANY,
        match_path="*",
        message=(
            "Change is not allowed. Scale action allows only addition and "
            "removal of worker and load balancer nodes."
        ),
    ),
)

_MODIFY_RULES = (
    Rule(
        type=WARN,
        match_change_type=_MODIFY,
        match_path="hosts.*.mainResourcePoolPath",
        message=(
            "Changing main resource pool location will trigger recreation of all "
            "resources bound to that resource pool, such as virtual machines and "
            "data disks."
        ),
    ),
    Rule(
        type=WARN,
        match_change_type=_DELETE,
        match_path="hosts.*.dataResourcePools.*",
        message="Removing data resource pool will destroy all the data on that location.",
    ),
    Rule(
        type=WARN,
        match_change_type=_MODIFY,
        match_path="hosts.*.dataResourcePools.*.path",
        message=(
            "Changing data resource pool location will trigger recreation of all "
            "resources bound to that resource pool, such as virtual machines and "
            "data disks"
        ),
    ),
    Rule(type=ALLOW, match_change_type=_ANY, match_path="hosts.*.dataResourcePools.*"),
    Rule(
        type=ERROR,
        match_change_type=_ANY,
        match_path="cluster.network",
        message=(
            "Once the cluster is created, further changes to the network properties "
            "are not allowed. Such action may render the cluster unusable."
        ),
    ),
    Rule(
        type=ERROR,
        match_change_type=_ANY,
        match_path="cluster.nodeTemplate",
        message=(
            "Once the cluster is created, further changes to the nodeTemplate "
            "properties are not allowed. Such action may render the cluster unusable."
        ),
    ),
    Rule(
        type=ERROR,
        match_change_type=_DELETE,
        match_path=f"cluster.nodes.{_NODE_TYPES}.instances.@",
        message="To remove existing nodes run apply command with '--action scale' flag.",
    ),
    Rule(
        type=ERROR,
        match_change_type=_CREATE,
        match_path=f"cluster.nodes.{_NODE_TYPES}.instances.@",
        message="To add new nodes run apply command with '--action scale' flag.",
    ),
    Rule(
        type=ERROR,
        match_change_type=_ANY,
        match_path=f"cluster.nodes.{_NODE_TYPES}.default.{{cpu, ram, mainDiskSize}}",
        message=(
            "Changing any default physical properties of nodes (cpu, ram, "
            "mainDiskSize) is not allowed. Such action may render the cluster unusable."
        ),
    ),
    Rule(
        type=ERROR,
        match_change_type=_MODIFY,
        match_path=f"cluster.nodes.{_NODE_TYPES}.instances.@.{{cpu, ram, mainDiskSize}}",
        message=(
            "Changing any physical properties of nodes (cpu, ram, mainDiskSize) is "
            "not allowed. Such action will recreate the node."
        ),
    ),
    Rule(
        type=ERROR,
        match_change_type=_MODIFY,
        match_path=f"cluster.nodes.{_NODE_TYPES}.instances.@.{{ip, mac}}",
        message=(
            "Changing IP or MAC address of the node is not allowed. Such action may "
            "render the cluster unusable."
        ),
    ),
    Rule(
        type=WARN,
        match_change_type=_MODIFY,
        match_path="cluster.nodes.{master, worker}.instances.*.dataDisks.*",
        message=(
            "Changing data disk properties, will recreate the disk (removing all of "
            "its content in the process)."
        ),
    ),
    Rule(
        type=WARN,
        match_change_type=_DELETE,
        match_path="cluster.nodes.{master, worker}.instances.*.dataDisks.*",
        message="One or more data disks will be removed.",
    ),
    Rule(
        type=ALLOW,
        match_change_type=_ANY,
        match_path="cluster.nodes.loadBalancer.forwardPorts.*",
    ),
    Rule(
        type=ERROR,
        match_change_type=_ANY,
        match_path="cluster.nodes.loadBalancer.vip",
        message=(
            "Once the cluster is created, changing virtual IP (VIP) is not allowed. "
            "Such action may render the cluster unusable."
        ),
    ),
    Rule(
        type=ALLOW,
        match_change_type=_ANY,
        match_path=f"cluster.nodes.{_NODE_TYPES}.instances.*",
    ),
    Rule(
        type=ERROR,
        match_change_type=_ANY,
        match_path="kubernetes.version",
        message=(
            "Changing Kubernetes is allowed only when upgrading the cluster.\n"
            "To upgrade the cluster run apply command with '--action upgrade' flag."
        ),
    ),
    Rule(type=ALLOW, match_change_type=_ANY, match_path="addons"),
    # Default rule.
    Rule(
        type=ERROR,
        match_change_type=_ANY,
        match_path="@",
        message="Change is not allowed.",
    ),
)


def upgrade_rules() -> list[Rule]:
    """Rules of the upgrade action: only the Kubernetes version may change."""
    return list(_UPGRADE_RULES)


def scale_rules() -> list[Rule]:
    """Rules of the scale action: nodes and hosts may be added or removed."""
    return list(_SCALE_RULES)


def modify_rules() -> list[Rule]:
    """Rules of the create action when it modifies an existing cluster."""
    return list(_MODIFY_RULES)