from abc import ABC, abstractmethod
from itertools import groupby
from typing import Callable, Dict, Iterable, Optional, Type

from issue_handler.colors import ColorPolicy
from issue_handler.issues import Issue

CARET = "^"
HIGHLIGHT = "~"


class Reporter(ABC):
    """Interface for turning a collection of issues into text."""

    def __init__(self, colorize: bool = True, policy: Optional[ColorPolicy] = None) -> None:
        """
        Args:
            colorize: Whether to style the output through the color policy
            policy: Color policy to use (defaults to a policy with the built-in styles)
        """
        self.colorize = colorize
        self.policy = policy or ColorPolicy()

    @abstractmethod
    def report(self, issues: Iterable[Issue]) -> str:
        """Render ``issues`` and return the text."""
        pass


class StandardReporter(Reporter):
    """
    Compiler-style reporter.

    Each issue renders as ``file:line:column: severity: message`` followed by
    its source line and a caret line, and a summary of warnings and errors
    closes the report.
    """

    def report(self, issues: Iterable[Issue]) -> str:
        issues = list(issues)
        if not issues:
            return ""

        output = ""
        warning_count = 0
        error_count = 0

        for issue in issues:
            if issue.is_warning:
                warning_count += 1
            elif issue.is_error:
                error_count += 1

            output += self.format_issue(issue)

        summary = format_summary(warning_count, error_count)
        if summary:
            output += "\n" + summary

        return output

    def format_issue(self, issue: Issue) -> str:
        """Format one issue as a three-line block."""
        info = issue.line_info
        separator = self._style("separator", ":")
        location = f"{info.line}:{info.column + 1}"
        severity = issue.severity.value
        message = issue.message[:1].lower() + issue.message[1:]

        return (
            f"{self._style('file', issue.file)}{separator}"
            f"{self._style('location', location)}{separator} "
            f"{self._style(severity, severity)}{separator} "
            f"{self._style('message', message)}\n"
            f"{self._style('source', issue.source)}\n"
            f"{self.format_caret_line(issue)}\n"
        )

    def format_caret_line(self, issue: Issue) -> str:
        """Build the marker line: tildes under highlights, a caret at the issue's column."""
        info = issue.line_info
        width = max(len(issue.source), info.column + 1)
        marks = [" "] * width

        for highlight in issue.highlighted_ranges:
            if (
                highlight.end <= info.line_start
                or highlight.start >= info.line_start + info.source_length
            ):
                continue
            start = max(highlight.start, info.line_start) - info.line_start
            end = min(highlight.end, info.line_end) - info.line_start
            for index in range(start, min(end, width)):
                marks[index] = HIGHLIGHT

        marks[info.column] = CARET

        line = ""
        for mark, run in groupby("".join(marks).rstrip(" ")):
            text = "".join(run)
            if mark == CARET:
                text = self._style("caret", text)
            elif mark == HIGHLIGHT:
                text = self._style("highlight", text)
            line += text

        return line

    def _style(self, role: str, text: str) -> str:
        return self.policy.colorize(role, text, self.colorize)


class ConsoleReporter(StandardReporter):
    """Standard reporter that also writes non-empty reports to a sink."""

    def __init__(
        self,
        colorize: bool = True,
        policy: Optional[ColorPolicy] = None,
        sink: Callable[[str], None] = print,
    ) -> None:
        super().__init__(colorize, policy)
        self.sink = sink

    def report(self, issues: Iterable[Issue]) -> str:
        output = super().report(issues)
        if output:
            self.sink(output)
        return output


class SilentReporter(Reporter):
    """Swallows all output."""

    def report(self, issues: Iterable[Issue]) -> str:
        return ""


REPORTERS: Dict[str, Type[Reporter]] = {
    "standard": StandardReporter,
    "console": ConsoleReporter,
    "silent": SilentReporter,
}


def create_reporter(
    kind: str = "standard", colorize: bool = True, policy: Optional[ColorPolicy] = None
) -> Reporter:
    """Select a reporter by name: "standard", "console" or "silent"."""
    try:
        reporter_class = REPORTERS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown reporter {kind!r}, expected one of: {', '.join(REPORTERS)}"
        ) from None
    return reporter_class(colorize, policy)


def format_summary(warning_count: int, error_count: int) -> str:
    """E.g. ``"1 warning and 2 errors generated."``; empty if there is nothing to count."""
    parts = []
    if warning_count > 0:
        parts.append(f"{warning_count} warning{'' if warning_count == 1 else 's'}")
    if error_count > 0:
        parts.append(f"{error_count} error{'' if error_count == 1 else 's'}")
    if not parts:
        return ""
    return " and ".join(parts) + " generated."
