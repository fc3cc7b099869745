"""
Person Registry - Command Line Interface

Load people from delimited text, look them up and tidy their names.

Usage:
    python main.py                                  # Interactive shell
    python main.py load people.txt --normalize      # Load and show a table
    python main.py find people.txt "Elon Musk"      # Look someone up
    python main.py --help                           # Show help
"""

import json
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.markdown import Markdown
from rich.table import Table

from person_registry import __version__
from person_registry.config import Config
from person_registry.core.builder import PersonBuilder
from person_registry.core.registry import PersonRegistry
from person_registry.entities.person import Person
from person_registry.exceptions import MalformedRecordError
from person_registry.utils.logger import setup_logger, get_logger
from person_registry.utils.text import capitalize_words

app = typer.Typer(add_completion=False)
console = Console()
logger = get_logger("cli")

POLICY_HELP = "Malformed-record policy: raise, skip or pad"


@app.callback()
def main():
    """Track people, find them by name and normalize their names."""
    try:
        Config.validate()
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)

    setup_logger(Config.effective_log_level())


def print_people(people: List[Person], title: str = "People"):
    """Pretty print people as a table."""
    if not people:
        console.print("  [dim]No people yet[/dim]")
        return

    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Age", justify="right")
    table.add_column("Company")

    for i, person in enumerate(people, start=1):
        table.add_row(str(i), person.name, person.age or "-", person.company or "-")

    console.print(table)


def load_file(registry: PersonRegistry, path: Path, policy: Optional[str] = None) -> List[Person]:
    """Load a file into the registry, exiting with an error message on failure."""
    builder = PersonBuilder(registry, policy=policy)
    try:
        people = builder.create_from_file(path)
    except FileNotFoundError:
        console.print(f"[bold red]Error:[/bold red] File not found: {path}")
        raise typer.Exit(code=1)
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] Cannot read {path}: {e.strerror or e}")
        raise typer.Exit(code=1)
    except (MalformedRecordError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)

    logger.debug("Loaded %d person(s) from %s", len(people), path)
    return people


@app.command()
def load(
    path: Path = typer.Argument(..., help="Text file with one 'name, age, company' record per line"),
    normalize: bool = typer.Option(False, "--normalize", "-n", help="Capitalize every name after loading"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
    policy: Optional[str] = typer.Option(None, "--policy", "-p", help=POLICY_HELP),
):
    """Load people from a file and show them."""
    registry = PersonRegistry()
    load_file(registry, path, policy)

    if normalize:
        registry.normalize_names()

    people = registry.all()
    if as_json:
        typer.echo(json.dumps([p.to_dict() for p in people], indent=2))
    else:
        print_people(people, title=str(path))


@app.command()
def find(
    path: Path = typer.Argument(..., help="Text file with one 'name, age, company' record per line"),
    name: str = typer.Argument(..., help="Exact name to look up"),
    normalize: bool = typer.Option(False, "--normalize", "-n", help="Capitalize every name before looking up"),
    policy: Optional[str] = typer.Option(None, "--policy", "-p", help=POLICY_HELP),
):
    """Find the first person with exactly this name."""
    registry = PersonRegistry()
    load_file(registry, path, policy)

    if normalize:
        registry.normalize_names()

    person = registry.find_by_name(name)
    if person is None:
        console.print(f"[yellow]Not found:[/yellow] {name}")
        raise typer.Exit(code=1)

    print_people([person], title="Match")


@app.command()
def normalize(text: str = typer.Argument(..., help="Name to normalize")):
    """Show how a name looks after normalization."""
    typer.echo(capitalize_words(text))


def print_shell_help():
    """Print the shell's command list."""
    help_text = """
# Person Registry shell

- `add NAME, AGE, COMPANY` - create a person (one record)
- `load PATH` - create people from a file
- `find NAME` - look someone up by exact name
- `list` - show everyone
- `normalize` - capitalize every name
- `clear` - forget everyone
- `quit` - leave
    """
    console.print(Panel(Markdown(help_text), border_style="cyan", title="Person Registry"))


def run_shell_command(registry: PersonRegistry, builder: PersonBuilder, line: str) -> bool:
    """
    Run one shell command against the registry.

    Returns:
        False when the shell should stop
    """
    command, _, arg = line.strip().partition(" ")
    command = command.lower()
    arg = arg.strip()

    if command in ("quit", "exit", "q"):
        return False

    if command == "help":
        print_shell_help()
    elif command == "add":
        if not arg:
            console.print("[yellow]Usage:[/yellow] add NAME, AGE, COMPANY")
            return True
        people = builder.create_from_text(arg)
        for person in people:
            console.print(f"[OK] Added: {person.name}")
    elif command == "load":
        people = builder.create_from_file(arg)
        console.print(f"[OK] Loaded {len(people)} person(s) from {arg}")
    elif command == "find":
        person = registry.find_by_name(arg)
        if person:
            print_people([person], title="Match")
        else:
            console.print(f"[yellow]Not found:[/yellow] {arg}")
    elif command == "list":
        print_people(registry.all())
    elif command == "normalize":
        changed = registry.normalize_names()
        console.print(f"[OK] Normalized {changed} name(s)")
    elif command == "clear":
        registry.destroy_all()
        console.print("[OK] Registry cleared")
    else:
        console.print(f"[yellow]Unknown command:[/yellow] {command} (type 'help')")

    return True


@app.command()
def shell():
    """
    Interactive session over a single registry.

    Examples:
        python main.py shell
        python main.py        # same thing
    """
    registry = PersonRegistry()
    builder = PersonBuilder(registry)

    print_shell_help()

    while True:
        try:
            user_input = Prompt.ask("\n[bold cyan]registry[/bold cyan]")

            if not user_input.strip():
                continue

            if not run_shell_command(registry, builder, user_input):
                console.print("\n[bold]Goodbye![/bold]\n")
                break

        except (KeyboardInterrupt, EOFError):
            console.print("\n\n[bold]Goodbye![/bold]\n")
            break
        except (MalformedRecordError, OSError, ValueError) as e:
            console.print(f"\n[bold red]Error:[/bold red] {e}\n")


@app.command()
def info():
    """Show configuration."""
    console.print(f"\n[bold cyan]Person Registry v{__version__}[/bold cyan]\n")
    console.print(f"Malformed policy: {Config.MALFORMED_POLICY}")
    console.print(f"Trim fields: {Config.TRIM_FIELDS}")
    console.print(f"Log level: {Config.effective_log_level()}")
    console.print()


if __name__ == "__main__":
    # Default to the shell if no command specified
    if len(sys.argv) == 1:
        sys.argv.append("shell")
    app()
