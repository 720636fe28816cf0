"""planview TUI application — action list on the left, body on the right."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header, ListView, Static

from planview.config import PlanViewConfig
from planview.report.models import Action, ActionType, PlanReport
from planview.ui import clipboard
from planview.ui.widgets import ActionDetail, ActionItem, ActionList

logger = logging.getLogger(__name__)

_THEMES = {"dark": "textual-dark", "light": "textual-light"}

_COUNT_LABELS = {
    ActionType.CREATE: "to create",
    ActionType.UPDATE: "to update",
    ActionType.DESTROY: "to destroy",
    ActionType.DESTROY_THEN_CREATE: "to replace",
    ActionType.DUPLICATE_THEN_REMOVE: "to replace (create first)",
}


def format_counts(report: PlanReport) -> str:
    """Per-type tally for the header, e.g. ``"2 to create, 1 to update"``."""
    if not report.actions:
        return "no actions"
    return ", ".join(f"{n} {_COUNT_LABELS[typ]}" for typ, n in report.counts().items())


class PlanViewApp(App):
    """Browse the actions of a parsed plan report."""

    TITLE = "planview"
    CSS_PATH = Path("ui/styles.tcss")

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("c", "copy_content", "Copy"),
        Binding("ctrl+y", "copy_content", "Copy", show=False),
    ]

    def __init__(self, report: PlanReport, config: PlanViewConfig | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.report = report
        self._config = config or PlanViewConfig()
        self.selected_action: Action | None = None

    def compose(self) -> ComposeResult:
        ui = self._config.ui
        yield Header()
        with Horizontal(id="panes"):
            if self.report.actions:
                yield ActionList(self.report.actions, show_reference=ui.show_reference, id="actions")
                yield ActionDetail(colorize=ui.colorize, id="detail")
            else:
                yield Static("The plan contains no actions.", id="empty-message")
        yield Footer()

    def on_mount(self) -> None:
        self.theme = _THEMES.get(self._config.ui.theme, "textual-dark")
        self.sub_title = self.report.summary or format_counts(self.report)
        if not self.report.actions:
            return
        actions = self.query_one("#actions", ActionList)
        actions.styles.width = f"{self._config.ui.list_width}%"
        actions.focus()
        self._select(self.report.actions[0])

    @on(ListView.Highlighted, "#actions")
    def on_action_highlighted(self, event: ListView.Highlighted) -> None:
        if isinstance(event.item, ActionItem):
            self._select(event.item.action)

    def _select(self, action: Action) -> None:
        self.selected_action = action
        self.query_one("#detail", ActionDetail).show(action)

    def action_copy_content(self) -> None:
        """Copy the highlighted action's body to the clipboard."""
        if self.selected_action is None:
            return
        if clipboard.copy(self.selected_action.content, self):
            self.notify(f"Copied {self.selected_action.reference}", timeout=2)
        else:
            logger.debug("Clipboard copy failed for %s", self.selected_action.reference)
            self.notify("Copy failed — no clipboard tool found", severity="error", timeout=3)
