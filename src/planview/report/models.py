"""Records produced by the plan report parser."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from planview.report.errors import UnrecognizedTypeSymbol


class ActionType(Enum):
    """Kind of change, keyed by the 4-character field of the detail line."""

    CREATE = "  + "
    UPDATE = "  ~ "
    DESTROY = "  - "
    DESTROY_THEN_CREATE = "-/+ "
    DUPLICATE_THEN_REMOVE = "+/- "

    @classmethod
    def from_field(cls, text: str, lineno: int | None = None) -> ActionType:
        """Decode the type field of a detail line (exact match only)."""
        try:
            return cls(text)
        except ValueError:
            raise UnrecognizedTypeSymbol(repr(text), lineno) from None

    @property
    def symbol(self) -> str:
        """Display symbol, e.g. ``"  +"`` or ``"-/+"``."""
        return self.value[:3]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ActionType.CREATE: "will be created",
    ActionType.UPDATE: "will be updated in-place",
    ActionType.DESTROY: "will be destroyed",
    ActionType.DESTROY_THEN_CREATE: "must be replaced (destroy, then create)",
    ActionType.DUPLICATE_THEN_REMOVE: "must be replaced (create, then destroy)",
}


@dataclass(frozen=True)
class Action:
    """A single proposed resource change."""

    typ: ActionType
    reference: str  # e.g. module.abc.aws_iam_policy.name["key"]
    resource: str  # e.g. aws_iam_policy
    name: str  # e.g. name
    content: str = ""  # Body lines verbatim, newlines kept

    @property
    def summary(self) -> str:
        return f"{self.typ.symbol} {self.resource} {self.name}"


@dataclass
class PlanReport:
    """Everything extracted from one plan report."""

    actions: list[Action] = field(default_factory=list)
    summary: str | None = None  # The "Plan: ..." line, if one was reached
    no_changes: bool = False

    def counts(self) -> dict[ActionType, int]:
        """Number of actions per type, in enumeration order, zeros omitted."""
        tally = Counter(action.typ for action in self.actions)
        return {typ: tally[typ] for typ in ActionType if tally[typ]}

    def find(self, reference: str) -> Action | None:
        for action in self.actions:
            if action.reference == reference:
                return action
        return None
