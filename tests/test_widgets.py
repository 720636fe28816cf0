"""Tests for widget formatting helpers (pure functions, no Textual app needed)."""

from __future__ import annotations

from planview.report.models import Action, ActionType
from planview.ui.widgets import _color_body, _escape, _format_content, _format_entry


def _action(content: str = "", **kw) -> Action:
    fields = dict(
        typ=ActionType.CREATE,
        reference='module.iam.aws_iam_policy.reader["ci"]',
        resource="aws_iam_policy",
        name="reader",
        content=content,
    )
    fields.update(kw)
    return Action(**fields)


# ─── _escape ────────────────────────────────────────────────────────────────


class TestEscape:
    def test_escapes_brackets(self):
        assert _escape('tags = ["a"]') == 'tags = \\["a"]'

    def test_plain_text_unchanged(self):
        assert _escape("hello world") == "hello world"


# ─── _format_entry ──────────────────────────────────────────────────────────


class TestFormatEntry:
    def test_symbol_resource_name(self):
        entry = _format_entry(_action())
        assert "  +" in entry
        assert "aws_iam_policy reader" in entry
        assert "module.iam" not in entry

    def test_colors_by_type(self):
        assert "[bold green]" in _format_entry(_action())
        assert "[bold red]" in _format_entry(_action(typ=ActionType.DESTROY))
        assert "[bold yellow]" in _format_entry(_action(typ=ActionType.UPDATE))

    def test_reference_shown_escaped(self):
        entry = _format_entry(_action(), show_reference=True)
        assert 'reader\\["ci"]' in entry


# ─── _color_body / _format_content ──────────────────────────────────────────


class TestColorBody:
    def test_added_lines_green(self):
        assert "[green]" in _color_body(['      + name = "x"'])

    def test_removed_lines_red(self):
        assert "[red]" in _color_body(['      - name = "x" -> null'])

    def test_changed_lines_yellow(self):
        assert "[yellow]" in _color_body(['      ~ name = "x" -> "y"'])

    def test_unchanged_lines_not_colored(self):
        result = _color_body(['        id = "sg-123"'])
        assert "[green]" not in result
        assert "[red]" not in result
        assert "[yellow]" not in result


class TestFormatContent:
    def test_empty_body(self):
        assert "no attributes" in _format_content(_action())

    def test_plain_when_not_colorized(self):
        result = _format_content(_action('      + tags = [\n        ]\n'), colorize=False)
        assert result == "      + tags = \\[\n        ]"

    def test_keeps_every_line(self):
        content = '      + a = 1\n\n      + b = 2\n'
        result = _format_content(_action(content))
        assert result.count("\n") == 2
