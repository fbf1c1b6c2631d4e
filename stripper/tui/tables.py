from rich.table import Table

from stripper.selection import SelectionReport


class SummaryTable:
    @staticmethod
    def build(report: SelectionReport, root: str) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Root", root)
        for key, value in report.summary().items():
            table.add_row(key.capitalize(), str(value))
        return table
