from rich.console import RenderableType
from rich.panel import Panel

from stripper.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(title: str, body: RenderableType, style: str = UIStyle.BLUE.value) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def note(title: str, body: str, style: str = UIStyle.RED.value) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))
