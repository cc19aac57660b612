from linkview.core.logging import setup as setup_logging
import typer
from linkview.services.session.cli import app as session_app
from linkview.services.links.cli import app as links_app

app = typer.Typer(help="linkview – crawl a website and review its links")

app.add_typer(session_app, name="session", help="Interactive form / results session")
app.add_typer(links_app, name="links", help="Retrieve the links of one website")

def main():
    setup_logging()
    app()
