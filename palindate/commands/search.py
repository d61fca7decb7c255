"""Search command for finding upcoming palindromic dates."""

import sys
import tomllib

from rich.console import Console
from rich.table import Table

from palindate.commands.dates import reject_invalid
from palindate.config import SearchSettings, get_config_path, load_search_settings
from palindate.domain.models import DateText
from palindate.domain.palindromes import next_palindromic_dates, palindrome_digits

console = Console()


def resolve_settings(count: int | None, max_iterations: int | None) -> SearchSettings:
    """Merge command-line options over config file defaults.

    Args:
        count: Count from the command line, if given.
        max_iterations: Iteration ceiling from the command line, if given.

    Returns:
        Effective search settings.
    """
    try:
        settings = load_search_settings()
    except (ValueError, tomllib.TOMLDecodeError) as e:
        console.print(f"[red]Invalid config: {e}[/red]", style="bold")
        console.print(f"[dim]Config: {get_config_path()}[/dim]")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not read config: {e}[/red]", style="bold")
        sys.exit(1)

    return SearchSettings(
        count=settings.count if count is None else count,
        max_iterations=settings.max_iterations if max_iterations is None else max_iterations,
    )


def search_command(
    start: DateText,
    count: int | None = None,
    max_iterations: int | None = None,
) -> None:
    """Find and display the next palindromic dates after a start date."""
    reject_invalid(start)

    settings = resolve_settings(count, max_iterations)
    if settings.count < 1:
        console.print("[red]Count must be at least 1[/red]", style="bold")
        sys.exit(1)
    if settings.max_iterations < 1:
        console.print("[red]Max iterations must be at least 1[/red]", style="bold")
        sys.exit(1)

    palindromes = next_palindromic_dates(settings.count, start, settings.max_iterations)

    if palindromes is None:
        console.print(
            f"[yellow]Could not find {settings.count} palindromic date(s) after {start} "
            f"within {settings.max_iterations:,} days[/yellow]"
        )
        sys.exit(1)

    table = Table(title=f"Palindromic dates after {start}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Digits", style="magenta")

    for position, palindrome in enumerate(palindromes, start=1):
        table.add_row(str(position), palindrome, palindrome_digits(palindrome) or "")

    console.print(table)
