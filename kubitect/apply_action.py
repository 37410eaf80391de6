"""Actions of the apply command and the rule set each of them uses."""

from __future__ import annotations

from enum import Enum

from kubitect.rule_list import modify_rules, scale_rules, upgrade_rules
from kubitect.rules import Rule


class ApplyAction(str, Enum):
    """What the apply command does with the cluster."""

    UNKNOWN = "unknown"
    CREATE = "create"
    UPGRADE = "upgrade"
    SCALE = "scale"

    def __str__(self) -> str:
        return self.value

    def rules(self) -> list[Rule]:
        """Rules that decide which configuration changes the action permits."""
        if self is ApplyAction.CREATE:
            return modify_rules()
        if self is ApplyAction.SCALE:
            return scale_rules()
        if self is ApplyAction.UPGRADE:
            return upgrade_rules()
        return []


def to_apply_action(value: str) -> ApplyAction:
    """Parse an action name; an empty name means create."""
    if value in ("", ApplyAction.CREATE.value):
        return ApplyAction.CREATE
    if value == ApplyAction.UPGRADE.value:
        return ApplyAction.UPGRADE
    if value == ApplyAction.SCALE.value:
        return ApplyAction.SCALE
    raise ValueError(f"unknown cluster action: {value}")