"""Command line entry point: ``commentboard run``."""
import logging
from typing import Optional

import click

from commentboard.app import create_app

logger = logging.getLogger(__name__)


@click.group()
def main():
    """Stored XSS demo: a vulnerable and a safe comment board."""


@main.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option(
    "--port",
    type=int,
    default=None,
    help="Listening port. Default: PORT environment variable, or 3003.",
)
@click.option("--debug/--no-debug", default=False)
def run(host: str, port: Optional[int], debug: bool):
    """Run the development server."""
    app = create_app()
    if port is None:
        port = app.config["PORT"]

    logger.info("XSS demo running at http://localhost:%d", port)
    click.echo(f"XSS demo running at http://localhost:{port}")
    try:
        # the reloader would run a second process with its own comment log
        app.run(host=host, port=port, debug=debug, use_reloader=False)
    finally:
        with app.app_context():
            app.stop_services()
