"""CLI interface for rustman using Typer.

Lists the Cargo projects in ~/rust (or another scan directory) and lets
the user pick one to see where its release build lives.

Usage:
    rustman                 # List projects and open the menu
    rustman --list          # Same as above
    rustman --dir ~/code    # Scan another directory
    rustman --help          # Show usage

The CLI is structured as:
- app: Main Typer application
- menu.py: Interactive menu controller
- signals.py: Interrupt handling for the menu loop
- common.py: Shared output helpers
- main.py: Entry point that runs the app
"""

import logging
import threading
from pathlib import Path
from typing import Optional

import typer

from rustman import __version__
from rustman.errors import DirectoryAccessError
from rustman.global_config import PROJECTS_DIR_ENVVAR, get_global_config
from rustman.infrastructure.storage.scanner import ProjectScanner
from rustman.interfaces.cli.common import print_error
from rustman.interfaces.cli.menu import INTERRUPTED, MenuController
from rustman.interfaces.cli.signals import interrupt_handler

logger = logging.getLogger(__name__)

# Create the main Typer application
app = typer.Typer(
    name="rustman",
    help="A manual and manager of my Rust projects",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rustman version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    list_projects: bool = typer.Option(
        False,
        "--list",
        "-l",
        help="Lists all available projects (the default action)",
    ),
    directory: Optional[Path] = typer.Option(
        None,
        "--dir",
        "-d",
        help="Directory to scan (default: ~/rust)",
        envvar=PROJECTS_DIR_ENVVAR,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """List the Rust projects in the scan directory and show details on request.

    Each subdirectory with a Cargo.toml is listed with its package name and
    description. Enter a number to see the project's path and release build
    location, or 'q' to quit.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    # Listing is the only action, so --list and no flags behave the same
    stop = threading.Event()
    with interrupt_handler(stop):
        try:
            config = get_global_config()
            root = config.resolve_projects_dir(directory)
            logger.debug(f"Scanning {root}")
            projects = ProjectScanner(config).scan(root)
        except DirectoryAccessError as e:
            print_error(str(e))
            raise typer.Exit(1)
        except KeyboardInterrupt:
            typer.echo(f"\n{INTERRUPTED}")
            return

        MenuController(projects, stop=stop).run()


__all__ = ["app"]
