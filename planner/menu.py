"""Interaktives Hauptmenü des Kursplaners.

Optionen: 1 = Kursdatei laden, 2 = Kursliste, 3 = einzelner Kurs, 9 = Ende.
Nutzt rich für Ein- und Ausgabe.
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt

from planner.render import format_course_detail, format_course_list, format_not_found
from planner.session import PlannerSession

MENU_LOAD = 1
MENU_LIST = 2
MENU_SHOW = 3
MENU_EXIT = 9

_NO_DATA = "\n[red]Error: No data loaded. Please load data first (Option 1).[/red]"


def _show_menu(console: Console) -> None:
    console.print(Panel(
        "Welcome to the course planner.\n\n"
        f"  [bold]{MENU_LOAD}.[/bold] Load Data Structure\n"
        f"  [bold]{MENU_LIST}.[/bold] Print Course List\n"
        f"  [bold]{MENU_SHOW}.[/bold] Print Course\n\n"
        f"  [bold]{MENU_EXIT}.[/bold] Exit",
        border_style="cyan",
        expand=False,
    ))


def _plain(console: Console, text: str) -> None:
    # Kurstitel können eckige Klammern enthalten → kein Markup
    console.print(text, markup=False, highlight=False)


def _do_load(session: PlannerSession, console: Console) -> None:
    default_file = session.config.source.default_file
    if default_file:
        filename = Prompt.ask("Enter the file name", console=console, default=default_file)
    else:
        filename = Prompt.ask("Enter the file name", console=console)
    result = session.load(filename.strip())
    result.print_rich()


def _do_list(session: PlannerSession, console: Console) -> None:
    if not session.data_loaded:
        console.print(_NO_DATA)
        return
    console.print(f"\n{session.config.display.list_heading}\n", markup=False)
    for line in format_course_list(session.course_list()):
        _plain(console, line)


def _do_show(session: PlannerSession, console: Console) -> None:
    if not session.data_loaded:
        console.print(_NO_DATA)
        return
    raw = Prompt.ask(
        "What course do you want to know about? (Enter course number)",
        console=console,
    )
    console.print()
    identifier, course = session.lookup(raw)
    if course is None:
        _plain(console, format_not_found(identifier))
        return
    for line in format_course_detail(course):
        _plain(console, line)


def run_menu(
    session: PlannerSession,
    console: Optional[Console] = None,
    initial_file: Optional[str] = None,
) -> None:
    """Startet die Menüschleife, bis der Nutzer 9 wählt oder die Eingabe endet."""
    console = console or Console()
    console.print("\n[bold]ABCU Course Planner[/bold]")

    if initial_file:
        session.load(initial_file).print_rich()

    while True:
        _show_menu(console)
        try:
            raw = Prompt.ask("What would you like to do?", console=console)
        except EOFError:
            break

        try:
            choice = int(raw.strip())
        except ValueError:
            console.print("\n[yellow]Invalid input. Please enter a number.[/yellow]")
            continue

        try:
            if choice == MENU_LOAD:
                _do_load(session, console)
            elif choice == MENU_LIST:
                _do_list(session, console)
            elif choice == MENU_SHOW:
                _do_show(session, console)
            elif choice == MENU_EXIT:
                console.print("\nThank you for using the course planner!")
                break
            else:
                console.print(f"\n[yellow]{choice} is not a valid option.[/yellow]")
        except EOFError:
            break
