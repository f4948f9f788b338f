"""
Command-line interface for musicctl.

    musicctl [-d] [-i NAME] [list|play|stop|next|prev|info|vinfo|mute]
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import Settings, load_settings
from .constants import APP_NAME
from .dbus import session_bus
from .errors import MusicCtlError
from .models import Command
from .notifications import Notifier
from .plugins import get_all
from .service import PlayerService

console = Console()
logger = logging.getLogger(__name__)


def configure_logging(settings: Settings, debug: bool) -> None:
    level = logging.DEBUG if debug else getattr(logging, settings.log_level, logging.WARNING)
    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=False, markup=False, show_path=False)
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name=APP_NAME)
@click.option("-d", "--debug", is_flag=True, help="Verbose listing and debug logging.")
@click.option("-i", "--instance", metavar="NAME", help="Only act on the player with this display name.")
@click.argument("command", type=click.Choice(Command.names()), default=Command.default().value)
def cli(debug, instance, command):
    """Looks for running music player and issues appropriate command to it."""
    try:
        settings = load_settings()
    except MusicCtlError as e:
        raise click.ClickException(str(e)) from e
    configure_logging(settings, debug)

    try:
        connection = session_bus()
        players = get_all(connection, timeout_ms=settings.dbus_timeout_ms)
        service = PlayerService(
            players,
            notifier=Notifier(connection, timeout_ms=settings.dbus_timeout_ms),
            notify_timeout_ms=settings.notify_timeout_ms,
        )
        lines = service.execute(Command(command), instance=instance or settings.instance, debug=debug)
    except MusicCtlError as e:
        logger.debug("command failed", exc_info=True)
        raise click.ClickException(str(e)) from e

    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def main():
    cli(prog_name=APP_NAME)


if __name__ == '__main__':
    main()
