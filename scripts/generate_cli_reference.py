#!/usr/bin/env python3
"""Generate the palindate CLI reference, with real output for each command.

The date format section is built from the parser and validator constants,
and every example is run through the CLI so the page cannot drift from
what the commands print.
"""

import sys
import tempfile
from pathlib import Path

# Add parent directory to path to import palindate
sys.path.insert(0, str(Path(__file__).parent.parent))

import click  # noqa: E402
import typer  # noqa: E402
from typer.testing import CliRunner  # noqa: E402

from palindate.cli import app  # noqa: E402
from palindate.domain.models import DateIssue  # noqa: E402
from palindate.domain.parser import DATE_LENGTH, SEPARATOR, SEPARATOR_POSITIONS  # noqa: E402
from palindate.domain.validation import MAX_YEAR, MIN_YEAR  # noqa: E402

# Arguments for each documented run, per command.
# init is left out: running it would write a config file.
EXAMPLES: dict[str, list[list[str]]] = {
    "check": [["29/02/2024"], ["29/02/2023"]],
    "next": [["31/12/2024"], ["28/02/2024", "--days", "2"]],
    "palindrome": [["02/02/2020"], ["12/12/2021"]],
    "search": [["02/02/2020", "--count", "3"], ["02/02/2020", "--max-iterations", "10"]],
}


def date_format_section() -> list[str]:
    """Describe the DD/MM/YYYY contract every DATE argument follows."""
    positions = " and ".join(str(i + 1) for i in SEPARATOR_POSITIONS)
    lines = [
        "## Date format",
        "",
        f"Every `DATE` argument is exactly {DATE_LENGTH} characters: `DD{SEPARATOR}MM{SEPARATOR}YYYY`.",
        "",
        f"- `{SEPARATOR}` at positions {positions}, ASCII digits everywhere else",
        "- day and month are zero-padded (`02/02/2020`, not `2/2/2020`)",
        f"- years run from {MIN_YEAR} to {MAX_YEAR}",
        "- 29 February only exists in leap years (divisible by 4, centuries only when divisible by 400)",
        "",
        "A rejected date is reported with one of these reasons and exit code 1:",
        "",
        "| Reason | Message |",
        "|--------|---------|",
    ]
    for issue in DateIssue:
        lines.append(f"| `{issue.name}` | {issue.message} |")
    lines.append("")
    return lines


def parameter_lines(command: click.Command) -> list[str]:
    """List a command's arguments and options as markdown bullets."""
    lines = []
    for param in command.params:
        if isinstance(param, click.Argument):
            lines.append(f"- `{param.human_readable_name}` (required): date in DD/MM/YYYY format")
        elif isinstance(param, click.Option):
            flags = ", ".join(f"`{flag}`" for flag in [*param.opts, *param.secondary_opts])
            entry = f"- {flags}"
            if param.help:
                entry += f": {param.help}"
            if param.default is not None and param.default is not False:
                entry += f" (default: {param.default})"
            lines.append(entry)
    return lines


def run_example(runner: CliRunner, config_home: str, command_name: str, args: list[str]) -> list[str]:
    """Run one example and render the call with its output."""
    result = runner.invoke(app, [command_name, *args], env={"XDG_CONFIG_HOME": config_home})
    return [
        "```console",
        f"$ palindate {command_name} {' '.join(args)}",
        result.output.rstrip(),
        "```",
        f"Exit code: {result.exit_code}",
        "",
    ]


def command_section(runner: CliRunner, config_home: str, command_name: str, command: click.Command) -> list[str]:
    """Render one command: summary, parameters and example runs."""
    usage = " ".join(command.collect_usage_pieces(click.Context(command)))
    lines = [
        f"### {command_name}",
        "",
        (command.help or "").strip(),
        "",
        f"`palindate {command_name} {usage}`",
        "",
    ]

    params = parameter_lines(command)
    if params:
        lines.extend([*params, ""])

    examples = EXAMPLES.get(command_name, [])
    if examples:
        lines.extend(["**Examples:**", ""])
        for args in examples:
            lines.extend(run_example(runner, config_home, command_name, args))

    return lines


def generate_cli_reference() -> str:
    """Generate the complete CLI reference as markdown."""
    group = typer.main.get_command(app)
    assert isinstance(group, click.Group)

    lines = [
        "# palindate CLI reference",
        "",
        "Examples below were produced by running the commands with no config file,",
        "so `search` uses the built-in defaults (count 1, 100,000 days).",
        "",
        *date_format_section(),
        "## Commands",
        "",
    ]

    runner = CliRunner()
    # Empty config home so a user's own config cannot change the examples
    with tempfile.TemporaryDirectory() as config_home:
        for command_name in sorted(group.commands):
            lines.extend(command_section(runner, config_home, command_name, group.commands[command_name]))

    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "reference" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
