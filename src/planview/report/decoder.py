"""Action decoder — turns a header line and its detail line into an Action.

A change in the report is introduced by two lines::

      # module.iam.aws_iam_policy.reader["ci"] will be created
      + resource "aws_iam_policy" "reader" {

The detail line has a fixed layout: a 4-column type field, a 9-column
keyword field, then the quoted resource type and name ending in ``" {``.
"""

from __future__ import annotations

from collections.abc import Iterator

from planview.report.errors import (
    MalformedQuoting,
    MissingDetailLine,
    MissingReferenceToken,
    MissingResourceOrName,
)
from planview.report.models import Action, ActionType

SYMBOL_WIDTH = 4
KEYWORD_WIDTH = 9  # "resource "

_PLURAL_KEYWORD = "resources "
_OPEN_QUOTE = '"'
_CLOSE_SUFFIX = '" {'
_SEPARATOR = '" "'


def decode_header(header: str, lineno: int | None = None) -> str:
    """Return the reference (second whitespace token) of a header line."""
    tokens = header.split()
    if len(tokens) < 2:
        raise MissingReferenceToken(repr(header.rstrip("\n")), lineno)
    return tokens[1]


def decode_detail(detail: str, reference: str, lineno: int | None = None) -> Action:
    """Decode a detail line into an Action skeleton with empty content."""
    typ = ActionType.from_field(detail[:SYMBOL_WIDTH], lineno)

    rest = detail[SYMBOL_WIDTH:]
    if rest.startswith(_PLURAL_KEYWORD):
        rest = rest[len(_PLURAL_KEYWORD):]
    else:
        rest = rest[KEYWORD_WIDTH:]
    rest = rest.strip()

    if not rest.startswith(_OPEN_QUOTE):
        raise MalformedQuoting("missing beginning quote", lineno)
    if not rest.endswith(_CLOSE_SUFFIX) or len(rest) < len(_OPEN_QUOTE + _CLOSE_SUFFIX):
        raise MalformedQuoting("missing ending quote", lineno)
    inner = rest[len(_OPEN_QUOTE):-len(_CLOSE_SUFFIX)]

    parts = inner.split(_SEPARATOR)
    if not parts[0]:
        raise MissingResourceOrName("missing resource type", lineno)
    if len(parts) < 2 or not parts[1]:
        raise MissingResourceOrName("missing resource name", lineno)

    return Action(typ=typ, reference=reference, resource=parts[0], name=parts[1])


def decode_action(
    header: str,
    lines: Iterator[str],
    lineno: int | None = None,
) -> Action:
    """Decode a header line, reading its detail line from *lines*.

    *lineno* is the 1-based line number of the header, used in error
    messages only.

    Raises:
        MissingReferenceToken: Header has fewer than two tokens.
        MissingDetailLine: *lines* is exhausted or the read fails.
        UnrecognizedTypeSymbol, MalformedQuoting, MissingResourceOrName:
            The detail line does not have the expected layout.
    """
    reference = decode_header(header, lineno)
    detail_lineno = lineno + 1 if lineno is not None else None

    try:
        detail = next(lines)
    except StopIteration:
        raise MissingDetailLine(f"end of input after {reference}", detail_lineno) from None
    except (OSError, UnicodeDecodeError) as exc:
        raise MissingDetailLine(f"read failed after {reference}: {exc}", detail_lineno) from exc

    return decode_detail(detail, reference, detail_lineno)
