"""Commands for checking, advancing and inspecting single dates."""

import sys

from rich.console import Console
from rich.markup import escape

from palindate.domain.calendar import advance_days
from palindate.domain.models import DateText
from palindate.domain.palindromes import is_palindrome_date, palindrome_digits
from palindate.domain.validation import date_issue

console = Console()


def reject_invalid(date: DateText) -> None:
    """Print why a date is invalid and exit, or return if it is valid."""
    issue = date_issue(date)
    if issue is None:
        return

    console.print(f"[red]Invalid date '{escape(date)}': {issue.message}[/red]", style="bold")
    console.print("[dim]Expected format: DD/MM/YYYY[/dim]")
    sys.exit(1)


def check_command(date: DateText) -> None:
    """Report whether a date is a valid DD/MM/YYYY calendar date."""
    reject_invalid(date)
    console.print(f"[green]✓[/green] {date} is a valid date")


def next_command(date: DateText, days: int = 1) -> None:
    """Print the date a number of days after the given one."""
    reject_invalid(date)

    if days < 0:
        console.print("[red]Days must be zero or more[/red]", style="bold")
        sys.exit(1)

    console.print(advance_days(date, days))


def palindrome_command(date: DateText) -> None:
    """Show a date's digits and whether they form a palindrome."""
    reject_invalid(date)

    digits = palindrome_digits(date)
    if is_palindrome_date(date):
        console.print(f"[green]✓[/green] {date} is a palindrome [dim]({digits})[/dim]")
    else:
        console.print(f"[yellow]○[/yellow] {date} is not a palindrome [dim]({digits})[/dim]")
