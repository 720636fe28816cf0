"""Tests for the Textual application, driven through the test pilot."""

from __future__ import annotations

from unittest.mock import patch

from textual.widgets import Static

from planview.app import PlanViewApp, format_counts
from planview.config import PlanViewConfig, UIConfig
from planview.report.models import Action, ActionType, PlanReport
from planview.ui.widgets import ActionItem


def _report() -> PlanReport:
    return PlanReport(
        actions=[
            Action(ActionType.CREATE, "aws_s3_bucket.logs", "aws_s3_bucket", "logs",
                   '      + bucket = "logs"\n'),
            Action(ActionType.UPDATE, "aws_instance.web", "aws_instance", "web",
                   '      ~ tags = {\n          + "env" = "prod"\n        }\n'),
            Action(ActionType.DESTROY, "aws_eip.old", "aws_eip", "old", ""),
        ],
        summary="Plan: 1 to add, 1 to change, 1 to destroy.",
    )


# ─── format_counts ──────────────────────────────────────────────────────────


class TestFormatCounts:
    def test_counts_in_type_order(self):
        assert format_counts(_report()) == "1 to create, 1 to update, 1 to destroy"

    def test_empty(self):
        assert format_counts(PlanReport()) == "no actions"


# ─── PlanViewApp ────────────────────────────────────────────────────────────


class TestPlanViewApp:
    async def test_one_item_per_action(self):
        app = PlanViewApp(report=_report())
        async with app.run_test() as pilot:
            await pilot.pause()
            items = list(app.query(ActionItem))
            assert [item.action.reference for item in items] == [
                "aws_s3_bucket.logs",
                "aws_instance.web",
                "aws_eip.old",
            ]

    async def test_first_action_selected_on_start(self):
        app = PlanViewApp(report=_report())
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.selected_action.reference == "aws_s3_bucket.logs"
            assert app.sub_title == "Plan: 1 to add, 1 to change, 1 to destroy."

    async def test_cursor_moves_selection(self):
        app = PlanViewApp(report=_report())
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("down")
            await pilot.pause()
            assert app.selected_action.reference == "aws_instance.web"
            await pilot.press("down")
            await pilot.pause()
            assert app.selected_action.reference == "aws_eip.old"

    async def test_copy_selected_content(self):
        app = PlanViewApp(report=_report())
        with patch("planview.app.clipboard.copy", return_value=True) as mock_copy:
            async with app.run_test() as pilot:
                await pilot.pause()
                await pilot.press("c")
                await pilot.pause()
        mock_copy.assert_called_once()
        assert mock_copy.call_args.args[0] == '      + bucket = "logs"\n'

    async def test_quit_key(self):
        app = PlanViewApp(report=_report())
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("q")
        assert app.return_code == 0

    async def test_empty_report_shows_message(self):
        app = PlanViewApp(report=PlanReport())
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one("#empty-message", Static) is not None
            assert app.selected_action is None
            assert app.sub_title == "no actions"

    async def test_light_theme_from_config(self):
        config = PlanViewConfig(ui=UIConfig(theme="light"))
        app = PlanViewApp(report=_report(), config=config)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.theme == "textual-light"
