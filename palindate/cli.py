"""CLI entry point for palindate."""

import typer

from palindate.commands.admin import init_command
from palindate.commands.dates import check_command, next_command, palindrome_command
from palindate.commands.search import search_command
from palindate.domain.models import DateText

app = typer.Typer(
    name="palindate",
    help="Gregorian DD/MM/YYYY dates and palindromic date search",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Gregorian DD/MM/YYYY dates and palindromic date search."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the palindate configuration file."""
    init_command(force)


@app.command()
def check(date: str) -> None:
    """Check whether a DD/MM/YYYY date is a real calendar date."""
    check_command(DateText(date))


@app.command(name="next")
def next_date(
    date: str,
    days: int = typer.Option(1, "--days", "-d", help="Number of days to advance"),
) -> None:
    """Show the date that follows a DD/MM/YYYY date."""
    next_command(DateText(date), days)


@app.command()
def palindrome(date: str) -> None:
    """Check whether a date's DDMMYYYY digits read the same both ways."""
    palindrome_command(DateText(date))


@app.command()
def search(
    start: str,
    count: int = typer.Option(None, "--count", "-n", help="Palindromic dates to find (overrides config)"),
    max_iterations: int = typer.Option(
        None, "--max-iterations", help="Days to scan before giving up (overrides config)"
    ),
) -> None:
    """Find the next palindromic dates after a start date."""
    search_command(DateText(start), count, max_iterations)


if __name__ == "__main__":
    app()
