"""Errors raised while parsing a plan report.

Every error aborts the whole parse; no partial result is returned.
"""

from __future__ import annotations


class PlanParseError(ValueError):
    """Base class for all plan report parsing failures."""

    stage = "plan report"

    def __init__(self, message: str, lineno: int | None = None) -> None:
        self.message = message
        self.lineno = lineno
        where = f" (line {lineno})" if lineno is not None else ""
        super().__init__(f"{self.stage}: {message}{where}")


class MissingHeader(PlanParseError):
    """Input ended before the first ``  # `` action header."""

    stage = "expecting first action header"


class MissingReferenceToken(PlanParseError):
    """Header line has fewer than two whitespace-separated tokens."""

    stage = "expecting resource reference"


class MissingDetailLine(PlanParseError):
    """Stream ended (or the read failed) before the detail line."""

    stage = "expecting action detail line"


class UnrecognizedTypeSymbol(PlanParseError):
    """The 4-character type field is not one of the known symbols."""

    stage = "unexpected action type"


class MalformedQuoting(PlanParseError):
    """Detail line lacks the opening quote or the ``" {`` suffix."""

    stage = "expecting quoted resource and name"


class MissingResourceOrName(PlanParseError):
    """Fewer than two quoted parts in the detail line."""

    stage = "expecting resource and name"
