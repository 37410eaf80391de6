"""Events: detected configuration changes paired with the rules they matched."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from kubitect.rules import (
    PATH_SEPARATOR,
    ActionType,
    ChangeType,
    Rule,
    rule_type_name,
)


@dataclass
class Change:
    """A single change between two configurations."""

    type: ChangeType
    path: str
    value_before: Any = None
    value_after: Any = None

    @property
    def value_type(self) -> type:
        """Type of the changed value (the old one, or the new one if created)."""
        value = self.value_after if self.value_before is None else self.value_before
        return type(value)


@dataclass(eq=False)
class DiffNode:
    """A node of a comparison tree; its path is built from the keys above it."""

    key: str = ""
    change_type: ChangeType = ChangeType.NONE
    value_before: Any = None
    value_after: Any = None
    children: list[DiffNode] = field(default_factory=list)
    parent: DiffNode | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.children = list(self.children)
        for child in self.children:
            child.parent = self

    @property
    def path(self) -> str:
        """Dot-separated path of the node from the root."""
        if self.parent is None:
            return self.key
        parent_path = self.parent.path
        if parent_path == "":
            return self.key
        return f"{parent_path}{PATH_SEPARATOR}{self.key}"

    def is_leaf(self) -> bool:
        return not self.children

    def has_changed(self) -> bool:
        return self.change_type is not ChangeType.NONE

    def parent_by_path(self, path: str) -> DiffNode | None:
        """Return the closest node, this one or an ancestor, with the given path."""
        node: DiffNode | None = self
        while node is not None:
            if node.path == path:
                return node
            node = node.parent
        return None

    def to_change(self) -> Change:
        return Change(
            type=self.change_type,
            path=self.path,
            value_before=self.value_before,
            value_after=self.value_after,
        )


@dataclass
class Event:
    """A detected change and the rule it matched."""

    rule: Rule
    change: Change
    # Paths of the changes that matched the rule.
    matched_change_paths: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"({rule_type_name(self.rule.type)}) "
            f"Change: [Type: {self.change.type}, Path: {self.change.path}]"
        )


class Events(list):
    """A list of events with filtering helpers."""

    def filter(self, predicate: Callable[[Event], bool]) -> Events:
        return Events(e for e in self if predicate(e))

    def filter_by_rule_type(self, rule_type: int) -> Events:
        return self.filter(lambda e: e.rule.type == rule_type)

    def filter_by_action(self, action: ActionType) -> Events:
        return self.filter(lambda e: e.rule.action_type == action)


def generate_events(node: DiffNode | None, rules: Iterable[Rule]) -> Events:
    """Match the changed leaves of a comparison tree against the rules.

    Every rule is validated first. A change matches at most one rule and
    so produces at most one event.
    """
    rules = list(rules)
    for rule in rules:
        rule.validate()

    events = Events()
    _collect(node, rules, events)
    return events


def _collect(node: DiffNode | None, rules: list[Rule], events: Events) -> None:
    if node is None:
        return

    if node.is_leaf() and node.has_changed():
        rule = _match_rule(node, rules)
        if rule is not None:
            _add_event(node, rule, events)

    for child in node.children:
        _collect(child, rules, events)


def _add_event(node: DiffNode, rule: Rule, events: Events) -> None:
    """Add an event, grouping anchored events with an existing equal one."""
    target = node
    rule_path = rule.match_path
    anchored = rule_path.is_anchor_path()

    if anchored:
        anchor_node = node.parent_by_path(rule_path.find_anchor_path(node.path))
        if anchor_node is not None:
            target = anchor_node

    event = Event(rule=rule, change=target.to_change(), matched_change_paths=[node.path])

    if anchored:
        for existing in events:
            if (
                existing.rule.type == event.rule.type
                and existing.change.type == event.change.type
                and existing.rule.match_path.path == event.rule.match_path.path
            ):
                existing.matched_change_paths.append(node.path)
                return

    events.append(event)


def _match_rule(node: DiffNode, rules: list[Rule]) -> Rule | None:
    best: Rule | None = None
    for rule in rules:
        if rule.match_change_type not in (node.change_type, ChangeType.ANY):
            continue
        if rule.match_path.matches(node.path):
            if best is None or _is_better_match(rule, best):
                best = rule
    return best


def _is_better_match(r1: Rule, r2: Rule) -> bool:
    """Longer paths win, then paths with fewer wildcards, then higher types."""
    len1, len2 = len(r1.match_path), len(r2.match_path)
    if len1 != len2:
        return len1 > len2

    wc1, wc2 = r1.match_path.wildcard_count(), r2.match_path.wildcard_count()
    if wc1 != wc2:
        return wc1 < wc2

    return r1.type > r2.type