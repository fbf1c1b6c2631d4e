from stripper.tui.renderers import SelectionConsoleUI

__all__ = ["SelectionConsoleUI"]
