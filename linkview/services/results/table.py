from typing import Iterable
from rich.table import Table
from .presenter import BAD, GOOD, ResultRow

STYLES = {GOOD: "green", BAD: "red"}

def results_table(rows: Iterable[ResultRow], title: str = "URLS FOUND") -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Link")
    table.add_column("Status")
    for row in rows:
        style = STYLES.get(row.status, "")
        table.add_row(str(row.ordinal), row.link, row.status, style=style)
    return table
