from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from issue_handler.colors import default_policy, set_color_map
from issue_handler.globals.cli_config import CLIConfig
from issue_handler.globals.settings import Settings, load_settings
from issue_handler.issues import IssueList
from issue_handler.position import line_with_position
from issue_handler.reporters import create_reporter


class CLI(ABC):
    """Interface for CLI implementations."""

    @abstractmethod
    def run(self) -> int:
        """
        Run the CLI and return exit code.

        Returns:
            int: Exit code (0=notes only, 1=errors, 2=warnings only)
        """
        pass


class StandardCLI(CLI):
    """
    Standard CLI implementation.

    Renders a single diagnostic for a position in a file, styled according
    to the user's settings file and terminal.
    """

    def __init__(self, config: CLIConfig, settings: Optional[Settings] = None):
        """
        Initialize CLI with configuration and optional settings override.

        Args:
            config: CLI configuration (file, offset, message, severity, ...)
            settings: Rendering settings (defaults to the discovered settings file)
        """
        self.config = config
        self.settings = settings if settings is not None else load_settings()

    def run(self) -> int:
        """Render the configured diagnostic.

        Returns:
            int: Exit code indicating the severity rendered:
                - 0: Note
                - 1: Error, or the file/offset could not be used
                - 2: Warning
        """
        source = self._read_source(Path(self.config.file))
        if source is None:
            return 1

        issues = IssueList()
        try:
            issue = issues.add_issue(
                self.config.severity,
                source,
                self.config.file,
                self.config.offset,
                self.config.message,
            )
        except ValueError as e:
            print(f"Cannot place a diagnostic at offset {self.config.offset}: {e}")
            return 1

        for start, end in self.config.highlights:
            issue.add_highlight(start, end)

        if self.settings.colors:
            set_color_map(self.settings.colors)

        reporter = create_reporter(
            "silent" if self.config.quiet else "console",
            self.settings.resolve_colorize(self.config.colorize),
            default_policy(),
        )
        reporter.report(issues)

        return self._exit_code(issues)

    def print_line(self) -> int:
        """Print the source line containing the configured offset."""
        source = self._read_source(Path(self.config.file))
        if source is None:
            return 1

        try:
            print(line_with_position(source, self.config.offset))
        except ValueError as e:
            print(f"Cannot find a line at offset {self.config.offset}: {e}")
            return 1
        return 0

    def _exit_code(self, issues: IssueList) -> int:
        if issues.error_count:
            return 1
        if issues.warning_count:
            return 2
        return 0

    def _read_source(self, file_path: Path) -> Optional[str]:
        """Read the source file, printing a message if it cannot be read."""
        try:
            with open(file_path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError):
            print(f"File {file_path} is not accessible, does not exist, or is not UTF-8 text.")
            return None
