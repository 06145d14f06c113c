"""Interactive project menu.

Renders the numbered project listing once, then reads one line at a
time until the user quits, input ends, or the stop flag is set by an
interrupt. Invalid input prints a short message and re-prompts without
repeating the listing.

Example session:
    1. project_one - My first Rust project
    2. project_two - No description

    Enter the number of the project to view details, or 'q' to quit:
    > 1
    Project Name: project_one
    ...
"""

import threading
from collections.abc import Callable, Sequence
from typing import Optional

import typer

from rustman.domain.menu import (
    Index,
    Invalid,
    MenuState,
    Quit,
    Selection,
    classify_selection,
)
from rustman.domain.project import Project

PROMPT = "> "
INSTRUCTIONS = "Enter the number of the project to view details, or 'q' to quit:"
NO_PROJECTS = "No Rust projects found."
EXITING = "Exiting program..."
INTERRUPTED = "Program interrupted. Exiting..."


def format_listing_line(number: int, project: Project) -> str:
    """Format one listing row as ``<number>. <name> - <description>``."""
    return f"{number}. {project.name} - {project.display_description}"


def format_detail(project: Project) -> list[str]:
    """Format the detail view of a project, one line per field."""
    return [
        f"Project Name: {project.name}",
        f"Description: {project.display_description}",
        f"Path: {project.path}",
        f"You can run this project from: {project.build_output_path}",
    ]


class MenuController:
    """Read-render loop over a fixed sequence of projects.

    Input and output are injectable so the loop can be driven without
    a terminal. The stop flag is shared with the interrupt handler and
    checked before every read.
    """

    def __init__(
        self,
        projects: Sequence[Project],
        stop: Optional[threading.Event] = None,
        read_line: Optional[Callable[[str], str]] = None,
        echo: Optional[Callable[[str], None]] = None,
    ) -> None:
        """Initialize the controller.

        Args:
            projects: Projects in display order.
            stop: Flag that ends the loop when set. A private one is
                created if not provided.
            read_line: Prompting line reader, ``input`` by default.
            echo: Line writer, ``typer.echo`` by default.
        """
        self._projects = list(projects)
        self._stop = stop or threading.Event()
        self._read_line = read_line or input
        self._echo = echo or typer.echo
        self.state = MenuState.LISTING

    def render_listing(self) -> None:
        """Print the numbered listing followed by the instructions."""
        for number, project in enumerate(self._projects, start=1):
            self._echo(format_listing_line(number, project))
        self._echo("")
        self._echo(INSTRUCTIONS)

    def read_selection(self) -> Selection:
        """Block for one line of input and classify it.

        Raises:
            EOFError: If input is exhausted.
            KeyboardInterrupt: If an interrupt arrives while waiting.
        """
        return classify_selection(self._read_line(PROMPT), len(self._projects))

    def show_detail(self, project: Project) -> None:
        """Print the detail view for one project."""
        for line in format_detail(project):
            self._echo(line)

    def run(self) -> MenuState:
        """Drive the menu until it terminates.

        Returns:
            The final state, always MenuState.TERMINATED.
        """
        if not self._projects:
            self._echo(NO_PROJECTS)
            return self._terminate()

        self.state = MenuState.LISTING
        self.render_listing()
        self.state = MenuState.AWAITING_SELECTION

        try:
            while not self._stop.is_set():
                try:
                    selection = self.read_selection()
                except EOFError:
                    selection = Quit()

                if isinstance(selection, Quit):
                    self._echo(EXITING)
                    return self._terminate()

                if isinstance(selection, Invalid):
                    self._echo(selection.reason)
                    continue

                self._handle_index(selection)
        except KeyboardInterrupt:
            self._stop.set()

        self._echo(f"\n{INTERRUPTED}")
        return self._terminate()

    def _handle_index(self, selection: Index) -> None:
        self.state = MenuState.SHOWING_DETAIL
        self.show_detail(self._projects[selection.offset])
        self.state = MenuState.AWAITING_SELECTION

    def _terminate(self) -> MenuState:
        self.state = MenuState.TERMINATED
        return self.state
