import sys
from typing import List, Optional, Tuple

import typer

from issue_handler.cli import CLI, StandardCLI
from issue_handler.globals.cli_config import CLIConfig
from issue_handler.issues import Severity

app = typer.Typer(help="Render compiler-style diagnostics for positions in source files.")


def _parse_highlights(values: Optional[List[str]]) -> List[Tuple[int, int]]:
    highlights = []
    for value in values or []:
        start, sep, end = value.partition(":")
        try:
            highlights.append((int(start), int(end) if sep else int(start)))
        except ValueError:
            raise typer.BadParameter(
                f"expected START:END, got {value!r}", param_hint="--highlight"
            ) from None
    return highlights


@app.command()
def show(
    file: str = typer.Argument(..., help="Path of the source file"),
    offset: int = typer.Argument(..., help="0-based offset of the diagnostic in the file"),
    message: str = typer.Argument(..., help="Message to display"),
    severity: Severity = typer.Option(Severity.ERROR, help="Severity of the diagnostic"),
    highlight: Optional[List[str]] = typer.Option(
        None, help="Offsets START:END to underline with tildes; may be repeated"
    ),
    color: Optional[bool] = typer.Option(
        None, "--color/--no-color", help="Force colored output on or off"
    ),
    quiet: bool = typer.Option(default=False, help="Render without printing anything"),
):
    """Render a diagnostic pointing at OFFSET in FILE.

    Colors and colorization can be configured in a .issuehandlerrc file in
    the current directory, one of its parents, or the home directory.

    Examples:
        Report an error:
            $ issue-handler show app.js 42 "Unexpected token"

        Report a warning with a highlighted range, without colors:
            $ issue-handler show app.js 42 "Unused variable" --severity warning \\
                --highlight 40:45 --no-color

    Exit codes: 0 for notes, 2 for warnings, 1 for errors or unusable input.
    """
    config = CLIConfig(
        file=file,
        offset=offset,
        message=message,
        severity=severity,
        highlights=_parse_highlights(highlight),
        colorize=color,
        quiet=quiet,
    )

    cli: CLI = StandardCLI(config)
    exit_code = cli.run()
    sys.exit(exit_code)


@app.command()
def line(
    file: str = typer.Argument(..., help="Path of the source file"),
    offset: int = typer.Argument(..., help="0-based offset in the file"),
):
    """Print the line of FILE that contains OFFSET."""
    cli = StandardCLI(CLIConfig(file=file, offset=offset))
    sys.exit(cli.print_line())
