import asyncio
import typer
from rich import print
from linkview.core import logging as log
from linkview.services.form.controller import InvalidOperation, Operation
from linkview.services.results.report import write_report
from linkview.services.results.table import results_table
from linkview.services.session.root import RootController
from linkview.services.transport.client import Transport

app = typer.Typer()

@app.command("run")
def run(
    website: str = typer.Argument(..., help="Target website"),
    option: str = typer.Option(Operation.RETRIEVE_URLS.label, "--option", help="Operation"),
    endpoint: str = typer.Option(None, help="Crawl service URL (overrides LINKVIEW_* settings)"),
    json_out: str = typer.Option(None, "--json", help="Output JSON file name or absolute path"),
    out_dir: str = typer.Option(None, "--out-dir", help="Directory to store reports"),
):
    _ = log.setup()
    failures = []
    root = RootController(Transport(endpoint), notify=failures.append)
    try:
        root.form.set_operation(option)
    except InvalidOperation as e:
        print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=2)
    root.form.set_target_url(website)

    outcome = asyncio.run(root.submit())
    if outcome is None:
        print(f"[yellow]• {root.form.state.operation.label} is not available yet.[/yellow]")
        return
    if failures:
        print(f"[red]✗ Request failed[/red]: {failures[0]}")
        raise typer.Exit(code=1)

    presenter = root.presenter
    log.get_logger(__name__).debug("Rendering %d links for %r", len(presenter.links), website)
    print(results_table(presenter.render()))
    good, bad = presenter.summary()
    print(f"• [green]{good} good[/green], [red]{bad} bad[/red]")
    if json_out or out_dir:
        path = write_report(presenter, website, root.transport.endpoint, out_dir, json_out)
        print(f"💾 Report saved to: {path}")
