"""Rules that classify configuration changes, and the paths they match on."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum

# Reserved characters of a rule path. Spaces are stripped from rule paths
# when they are created.
PATH_SEPARATOR = "."
PATH_TERMINATOR = "!"
OPTION_PREFIX = "{"
OPTION_SUFFIX = "}"
OPTION_SEPARATOR = ","
WILDCARD = "*"
ANCHOR = "@"

# Every form a wildcard segment can take.
WILDCARDS = (WILDCARD, ANCHOR, ANCHOR + WILDCARD)

# Rule types. A higher value means greater importance, except IGNORE,
# which always takes the highest priority.
ALLOW = 0
WARN = 100
ERROR = 200
IGNORE = 255


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


class RuleValidationError(ValueError):
    """Raised when a rule, a rule path or one of its segments is malformed."""


def normalize_rule_type(rule_type: int) -> int:
    """Map a rule type to the closest known type of lower or equal priority."""
    if rule_type == IGNORE:
        return IGNORE
    if rule_type >= ERROR:
        return ERROR
    if rule_type >= WARN:
        return WARN
    return ALLOW


def rule_type_name(rule_type: int) -> str:
    """Return the name of the known type the given rule type normalizes to."""
    return {
        IGNORE: "Ignore",
        ERROR: "Error",
        WARN: "Warn",
        ALLOW: "Allow",
    }[normalize_rule_type(rule_type)]


class ChangeType(str, Enum):
    """Kind of a detected configuration change."""

    ANY = "any"
    NONE = "none"
    CREATE = "create"
    MODIFY = "modify"
    DELETE = "delete"

    def __str__(self) -> str:
        return self.value


class ActionType(str, Enum):
    """Follow-up action that an event triggers."""

    SCALE_UP = "scale_up"
    SCALE_DOWN = "scale_down"

    def __str__(self) -> str:
        return self.value


class RulePathSegment:
    """One segment of a rule path: a name, a wildcard, an anchor or options."""

    __slots__ = ("path", "options", "is_anchor", "is_wildcard")

    def __init__(self, path: str) -> None:
        self.path = path
        self.is_anchor = path.startswith(ANCHOR)
        self.is_wildcard = path in WILDCARDS
        self.options: tuple[str, ...] = ()

        if self.is_wildcard:
            return

        body = path.removeprefix(ANCHOR)
        options: list[str] = []
        if body.startswith(OPTION_PREFIX) and body.endswith(OPTION_SUFFIX):
            body = body.removeprefix(OPTION_PREFIX).removesuffix(OPTION_SUFFIX).strip()
            options = body.split(OPTION_SEPARATOR)

        # A non-wildcard anchor without options is a single option itself.
        if self.is_anchor and not options:
            options = [path.removeprefix(ANCHOR)]

        self.options = tuple(options)

    def _error(self, message: str) -> RuleValidationError:
        return RuleValidationError(f"Rule path segment {_quote(self.path)}: {message}")

    def validate(self) -> None:
        """Raise RuleValidationError if the segment is malformed."""
        p = self.path

        if p == "":
            raise self._error("Segment must not be empty")

        if PATH_TERMINATOR in p:
            raise self._error(
                f"Path terminator {_quote(PATH_TERMINATOR)} is only allowed "
                "at the end of last segment"
            )

        if (ANCHOR in p and not self.is_anchor) or p.count(ANCHOR) > 1:
            raise self._error(
                f"Only a single anchor {_quote(ANCHOR)} is allowed, "
                "and it must be at start"
            )

        if WILDCARD in p and not self.is_wildcard:
            raise self._error(
                f"Wildcard {_quote(WILDCARD)} can only be prefixed "
                f"with an anchor {_quote(ANCHOR)}"
            )

        prefix_index = p.find(OPTION_PREFIX)
        suffix_index = p.rfind(OPTION_SUFFIX)

        if p.count(OPTION_PREFIX) > 1:
            raise self._error(
                f"Multiple option prefixes {_quote(OPTION_PREFIX)} are not allowed"
            )
        if p.count(OPTION_SUFFIX) > 1:
            raise self._error(
                f"Multiple option suffixes {_quote(OPTION_SUFFIX)} are not allowed"
            )
        if prefix_index < 0 <= suffix_index:
            raise self._error(f"Option prefix {_quote(OPTION_PREFIX)} is missing")
        if suffix_index < 0 <= prefix_index:
            raise self._error(f"Option suffix {_quote(OPTION_SUFFIX)} is missing")
        if prefix_index > suffix_index:
            raise self._error(
                f"Option prefix {_quote(OPTION_PREFIX)} must precede "
                f"its suffix {_quote(OPTION_SUFFIX)}"
            )

        if prefix_index >= 0 and suffix_index >= 0:
            if not p.endswith(OPTION_SUFFIX):
                raise self._error(
                    f"Option suffix {_quote(OPTION_SUFFIX)} must terminate the segment"
                )
            if any(option == "" for option in self.options):
                raise self._error("Options must not be empty")
        elif OPTION_SEPARATOR in p:
            raise self._error(
                f"Separator {_quote(OPTION_SEPARATOR)} is only allowed "
                "inside an option block"
            )

    def matches(self, change_path_segment: str) -> bool:
        """Return True if the segment matches a segment of a change path."""
        return (
            self.path == change_path_segment
            or self.is_wildcard
            or self.contains_option(change_path_segment)
        )

    def contains_option(self, option: str) -> bool:
        """Return True if the segment lists the given option."""
        return option in self.options

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RulePathSegment):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"RulePathSegment({self.path!r})"


class RulePath:
    """A rule's path, split into segments, used to match change paths."""

    __slots__ = ("path", "segments", "_exact", "_wildcards", "_anchors")

    def __init__(self, path: str) -> None:
        path = path.replace(" ", "")
        self._exact = path.endswith(PATH_TERMINATOR)
        if self._exact:
            path = path.removesuffix(PATH_TERMINATOR)
        self.path = path
        self.segments = tuple(
            RulePathSegment(part) for part in path.split(PATH_SEPARATOR)
        )
        self._wildcards = sum(1 for s in self.segments if s.is_wildcard)
        self._anchors = sum(1 for s in self.segments if s.is_anchor)

    def _error(self, message: str) -> RuleValidationError:
        return RuleValidationError(f"Rule path {_quote(self.path)}: {message}")

    def validate(self) -> None:
        """Raise RuleValidationError if the path is malformed."""
        if self.path == "":
            raise self._error("Path must not be empty")

        if self._anchors > 1:
            raise self._error(f"Only one anchor {_quote(ANCHOR)} is allowed in a rule path")

        for segment in self.segments:
            try:
                segment.validate()
            except RuleValidationError as exc:
                raise self._error(str(exc)) from exc

    def matches(self, change_path: str) -> bool:
        """Return True if every rule segment matches the change path's segment."""
        parts = change_path.split(PATH_SEPARATOR)
        if len(parts) < len(self):
            return False
        if len(parts) != len(self) and self._exact:
            return False
        return all(seg.matches(part) for seg, part in zip(self.segments, parts))

    def find_anchor_path(self, change_path: str) -> str:
        """Return the part of the change path up to the anchored segment."""
        parts = change_path.split(PATH_SEPARATOR)
        if len(parts) < len(self):
            return change_path

        for i, seg in enumerate(self.segments):
            if seg.is_anchor and (seg.is_wildcard or seg.contains_option(parts[i])):
                return PATH_SEPARATOR.join(parts[: i + 1])

        return change_path

    def wildcard_count(self) -> int:
        """Number of wildcard segments in the path."""
        return self._wildcards

    def is_anchor_path(self) -> bool:
        """True if the path contains an anchor segment."""
        return self._anchors > 0

    def is_exact_path(self) -> bool:
        """True if the path was terminated and only matches paths of its length."""
        return self._exact

    def __len__(self) -> int:
        return len(self.segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RulePath):
            return NotImplemented
        return self.path == other.path and self._exact == other._exact

    def __hash__(self) -> int:
        return hash((self.path, self._exact))

    def __str__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        suffix = PATH_TERMINATOR if self._exact else ""
        return f"RulePath({self.path + suffix!r})"


@dataclass(frozen=True)
class Rule:
    """Conditions under which a detected change produces an event."""

    match_path: RulePath
    type: int = ALLOW
    match_change_type: ChangeType = ChangeType.ANY
    action_type: ActionType | None = None
    message: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.match_path, str):
            object.__setattr__(self, "match_path", RulePath(self.match_path))

    def validate(self) -> None:
        """Raise RuleValidationError if the change type or path is invalid."""
        if not isinstance(self.match_change_type, ChangeType):
            valid = " ".join(t.value for t in ChangeType)
            raise RuleValidationError(
                f"Rule {_quote(self.match_path.path)}: Invalid change type "
                f"{_quote(str(self.match_change_type))}. "
                f"Valid change types are: [{valid}]"
            )
        self.match_path.validate()

    def is_of_type(self, rule_type: int) -> bool:
        """Compare this rule's type with the given one after normalizing both."""
        return normalize_rule_type(self.type) == normalize_rule_type(rule_type)