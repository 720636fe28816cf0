"""Custom Textual widgets for the planview TUI."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import ScrollableContainer
from textual.widgets import Label, ListItem, ListView, Static

from planview.report.models import Action, ActionType

_SYMBOL_COLORS = {
    ActionType.CREATE: "green",
    ActionType.UPDATE: "yellow",
    ActionType.DESTROY: "red",
    ActionType.DESTROY_THEN_CREATE: "magenta",
    ActionType.DUPLICATE_THEN_REMOVE: "magenta",
}

_LINE_COLORS = {"+": "green", "-": "red", "~": "yellow"}


def _escape(text: str) -> str:
    """Escape Rich markup characters in untrusted text."""
    return text.replace("[", "\\[")


def _format_entry(action: Action, show_reference: bool = False) -> str:
    """List entry markup: ``<symbol> <resource> <name>``."""
    color = _SYMBOL_COLORS[action.typ]
    entry = f"[bold {color}]{_escape(action.typ.symbol)}[/] {_escape(action.resource)} {_escape(action.name)}"
    if show_reference:
        entry += f"  [dim]{_escape(action.reference)}[/]"
    return entry


def _color_body(lines: list[str]) -> str:
    """Color attribute lines by their leading +/-/~ marker."""
    out = []
    for line in lines:
        marker = line.lstrip()[:1]
        color = _LINE_COLORS.get(marker)
        if color:
            out.append(f"[{color}]{_escape(line)}[/]")
        else:
            out.append(_escape(line))
    return "\n".join(out)


def _format_content(action: Action, colorize: bool = True) -> str:
    """Detail pane markup for an action's body."""
    if not action.content:
        return "[dim](no attributes)[/]"
    lines = action.content.splitlines()
    if colorize:
        return _color_body(lines)
    return _escape("\n".join(lines))


class ActionItem(ListItem):
    """One row of the action list."""

    def __init__(self, action: Action, show_reference: bool = False) -> None:
        super().__init__()
        self.action = action
        self._show_reference = show_reference

    def compose(self) -> ComposeResult:
        yield Label(_format_entry(self.action, self._show_reference))


class ActionList(ListView):
    """Left-hand list of parsed actions, in report order."""

    def __init__(self, actions: list[Action], show_reference: bool = False, **kwargs) -> None:
        super().__init__(
            *(ActionItem(action, show_reference) for action in actions),
            **kwargs,
        )


class ActionDetail(ScrollableContainer):
    """Right-hand pane showing the body of the highlighted action."""

    def __init__(self, colorize: bool = True, **kwargs) -> None:
        super().__init__(**kwargs)
        self._colorize = colorize

    def compose(self) -> ComposeResult:
        yield Static("", id="detail-title")
        yield Static("", id="detail-content")

    def show(self, action: Action | None) -> None:
        """Display *action* (or clear the pane when None)."""
        title = self.query_one("#detail-title", Static)
        content = self.query_one("#detail-content", Static)
        if action is None:
            title.update("")
            content.update("")
            return
        title.update(f"[bold]# {_escape(action.reference)}[/] [dim]{action.typ.description}[/]")
        content.update(_format_content(action, self._colorize))
        self.scroll_home(animate=False)
