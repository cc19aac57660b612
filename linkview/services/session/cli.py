import asyncio
import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from linkview.core import logging as log
from linkview.services.form.controller import Operation
from linkview.services.results.report import write_report
from linkview.services.results.table import results_table
from linkview.services.transport.client import Transport
from .root import RootController, ShowingForm

app = typer.Typer()
console = Console()

def alert(reason: str) -> None:
    console.print(
        Panel.fit(f"[bold red]✗ Request failed[/bold red]\n{reason}", border_style="red")
    )
    console.input("[dim]Press Enter to continue[/dim] ")

def show_form(root: RootController, failures: list) -> None:
    form = root.form
    website = Prompt.ask(
        "Website",
        default=form.state.target_url,
        show_default=bool(form.state.target_url),
        console=console,
    )
    option = Prompt.ask(
        "Option",
        choices=[op.label for op in Operation],
        default=form.state.operation.label,
        console=console,
    )
    form.set_target_url(website)
    form.set_operation(option)
    if form.state.operation is not Operation.RETRIEVE_URLS:
        console.print(f"[yellow]• {form.state.operation.label} is not available yet.[/yellow]")
        asyncio.run(root.submit())
        return
    with console.status(f"Crawling {website or '(empty)'} …"):
        asyncio.run(root.submit())
    # alert once the spinner is gone
    while failures:
        alert(failures.pop(0))

def show_results(root: RootController) -> bool:
    presenter = root.presenter
    console.print(results_table(presenter.render()))
    good, bad = presenter.summary()
    console.print(f"• [green]{good} good[/green], [red]{bad} bad[/red]")
    while True:
        action = Prompt.ask(
            "Action", choices=["back", "save", "quit"], default="back", console=console
        )
        if action == "save":
            path = write_report(presenter, root.view.target, root.transport.endpoint)
            console.print(f"💾 Report saved to: {path}")
            continue
        if action == "quit":
            return False
        root.go_back()
        return True

@app.command("run")
def run(
    endpoint: str = typer.Option(None, help="Crawl service URL (overrides LINKVIEW_* settings)"),
):
    _ = log.setup()
    failures = []
    root = RootController(Transport(endpoint), notify=failures.append)
    console.print(f"[bold]🔗 linkview[/bold] → {root.transport.endpoint}")
    try:
        while True:
            if isinstance(root.view, ShowingForm):
                show_form(root, failures)
            elif not show_results(root):
                break
    except (EOFError, KeyboardInterrupt):
        root.reset()
        console.print()
    console.print("Bye.")
