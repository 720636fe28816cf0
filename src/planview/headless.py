"""Headless (non-interactive) mode — print the parsed plan and exit.

Usage: terraform plan -no-color | planview --list | grep aws_iam

Action lines go to stdout (pipeable), everything else to stderr.
"""

from __future__ import annotations

import sys

from planview.report.models import PlanReport


def run_list(report: PlanReport, show_reference: bool = False) -> int:
    """Print one summary line per action.

    Returns:
        Exit code (always 0, the report has already been parsed).
    """
    for action in report.actions:
        if show_reference:
            print(f"{action.summary}  {action.reference}", flush=True)
        else:
            print(action.summary, flush=True)

    if report.summary:
        _err(report.summary)
    return 0


def run_show(report: PlanReport, reference: str) -> int:
    """Print the body of the action with the given reference.

    Returns:
        Exit code (0 = found, 1 = no such action).
    """
    action = report.find(reference)
    if action is None:
        _err(f"No action with reference {reference!r}")
        return 1

    _err(f"# {action.reference} {action.typ.description}")
    sys.stdout.write(action.content)
    sys.stdout.flush()
    return 0


def _err(msg: str) -> None:
    """Print a message to stderr."""
    print(msg, file=sys.stderr, flush=True)
