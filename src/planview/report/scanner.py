"""Plan scanner — a single forward pass over the lines of a plan report.

The scanner skips the preamble, enters the actions block at the first
``  # `` header and emits one Action per body closed by ``    }``.  It stops
at the ``Plan: `` summary line or at end of input, whichever comes first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace
from typing import TextIO

from planview.report.decoder import decode_action
from planview.report.errors import MissingHeader
from planview.report.models import Action, PlanReport

logger = logging.getLogger(__name__)

ACTIONS_START = "Terraform will perform the following actions:"
NO_CHANGES = "No changes. Infrastructure is up-to-date."
HEADER_MARKER = "  # "
BODY_CLOSE = "    }"
PLAN_SUMMARY = "Plan: "


class PlanScanner:
    """Iterator over the Actions of a plan report, yielded as they close.

    After iteration finishes, ``summary`` holds the ``Plan:`` line (if one
    was reached) and ``no_changes`` tells whether the report announced
    that there is nothing to do.  A scanner is single-use: iterating it
    again continues where the previous iteration stopped.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._source = iter(lines)
        self._lines = self._numbered()
        self._actions = self._scan()
        self.lineno = 0
        self.summary: str | None = None
        self.no_changes = False

    def _numbered(self) -> Iterator[str]:
        for line in self._source:
            self.lineno += 1
            yield line

    def __iter__(self) -> Iterator[Action]:
        # One pass only: later iterations resume the same scan
        return self._actions

    def _scan(self) -> Iterator[Action]:
        lines = self._lines

        for line in lines:
            if line.startswith(ACTIONS_START):
                break
            if line.startswith(NO_CHANGES):
                logger.debug("No changes reported at line %d", self.lineno)
                self.no_changes = True
                return
        else:
            raise MissingHeader("input ended before the actions block", self.lineno or None)

        logger.debug("Actions block starts at line %d", self.lineno)

        for line in lines:
            if line.startswith(HEADER_MARKER):
                break
        else:
            raise MissingHeader("input ended before the first action", self.lineno or None)

        current = decode_action(line, lines, self.lineno)
        body: list[str] = []

        for line in lines:
            if line.startswith(HEADER_MARKER):
                if current is not None:
                    logger.debug("Dropping unclosed action %s", current.reference)
                current = decode_action(line, lines, self.lineno)
                body = []
            elif line.startswith(PLAN_SUMMARY):
                self.summary = line.rstrip("\n")
                logger.debug("Plan summary at line %d: %s", self.lineno, self.summary)
                return
            elif current is None:
                # Between a close marker and the next header
                continue
            elif line.startswith(BODY_CLOSE):
                action = replace(current, content="".join(body))
                logger.debug("Parsed %s %s", action.typ.name, action.reference)
                current = None
                yield action
            else:
                body.append(line)

        logger.debug("Input ended at line %d without a plan summary", self.lineno)


def scan_plan(lines: Iterable[str]) -> PlanReport:
    """Parse all lines of a plan report.

    Raises:
        PlanParseError: On any decoding failure; no partial result is returned.
    """
    scanner = PlanScanner(lines)
    actions = list(scanner)
    return PlanReport(actions=actions, summary=scanner.summary, no_changes=scanner.no_changes)


def read_plan(stream: TextIO) -> PlanReport:
    """Parse a plan report from an open text stream (e.g. ``sys.stdin``)."""
    return scan_plan(stream)
