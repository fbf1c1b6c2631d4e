from rich.console import Console
from rich.markup import escape

from stripper.errors import StripperError
from stripper.selection import SelectionReport
from stripper.tui.enums import UIStyle
from stripper.tui.sections import UISection
from stripper.tui.tables import SummaryTable


class SelectionConsoleUI:
    """Diagnostics for a selection run; selected paths themselves go to stdout."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def render_summary(self, report: SelectionReport, root: str) -> None:
        style = UIStyle.GREEN.value if report.is_valid() else UIStyle.YELLOW.value
        self.console.print(
            UISection.wrap("selection", SummaryTable.build(report, root), style=style)
        )

    def render_errors(self, errors: list[StripperError]) -> None:
        if not errors:
            return
        body = "\n".join(f"- {escape(str(item))}" for item in errors)
        self.console.print(UISection.note("errors", body, style=UIStyle.RED.value))

    def render_fatal(self, error: StripperError) -> None:
        self.console.print(
            UISection.note("fatal", escape(str(error)), style=UIStyle.RED.value)
        )
