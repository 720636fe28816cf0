"""Plan report parsing: records, errors, the detail-line decoder and the scanner."""

from planview.report.errors import (
    MalformedQuoting,
    MissingDetailLine,
    MissingHeader,
    MissingReferenceToken,
    MissingResourceOrName,
    PlanParseError,
    UnrecognizedTypeSymbol,
)
from planview.report.models import Action, ActionType, PlanReport
from planview.report.scanner import PlanScanner, read_plan, scan_plan

__all__ = [
    "Action",
    "ActionType",
    "MalformedQuoting",
    "MissingDetailLine",
    "MissingHeader",
    "MissingReferenceToken",
    "MissingResourceOrName",
    "PlanParseError",
    "PlanReport",
    "PlanScanner",
    "UnrecognizedTypeSymbol",
    "read_plan",
    "scan_plan",
]
