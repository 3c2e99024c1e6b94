from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterator, List, Optional, Union

from issue_handler.domain_model.locations import as_location, as_source
from issue_handler.domain_model.primitives import HighlightRange, LineInfo
from issue_handler.position import extract_line, resolve, strip_location

if TYPE_CHECKING:
    from issue_handler.colors import ColorPolicy


class Severity(Enum):
    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Issue:
    """A note, warning or error tied to a position in a source text.

    Attributes:
        severity: How serious the issue is
        file: Path of the source; never checked, so it may be virtual, e.g. "<stdin>"
        message: Human-readable description, already formatted
        source: The right-trimmed physical line the issue points into
        line_info: Resolved position of the issue
        highlighted_ranges: Secondary spans drawn with tildes under the source line
    """

    severity: Severity
    file: str
    message: str
    source: str
    line_info: LineInfo
    highlighted_ranges: List[HighlightRange] = field(default_factory=list, compare=False)

    @classmethod
    def create(
        cls, source: Any, file: str, location: Any, message: str, severity: Severity
    ) -> "Issue":
        """Resolve ``location`` against ``source`` and build the issue.

        Args:
            source: The full source text, or ``{"line": <str>}`` / SourceLine
                when only the physical line is at hand.
            file: Path of the source.
            location: Anything :func:`as_location` accepts.
            message: The message to display.
            severity: The severity of the issue.

        Raises:
            TypeError: If source or location cannot be used.
            ValueError: If the location lies outside the source.
        """
        source = as_source(source)
        line_info = resolve(source, as_location(location, source))
        return cls(
            severity=severity,
            file=file,
            message=message or "",
            source=extract_line(source, line_info),
            line_info=line_info,
        )

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def is_note(self) -> bool:
        return self.severity is Severity.NOTE

    def add_highlight(
        self, start: Union[int, HighlightRange], end: Optional[int] = None
    ) -> "Issue":
        """Mark ``start``..``end`` (offsets into the source) with tildes when rendered.

        Ranges are not checked here; ranges that miss the issue's line are
        skipped when the issue is rendered.
        """
        if isinstance(start, HighlightRange):
            highlight = start
        else:
            highlight = HighlightRange(start, start if end is None else end)
        self.highlighted_ranges.append(highlight)
        return self


def is_issue(obj: Any) -> bool:
    return isinstance(obj, Issue)


class IssueList:
    """Ordered collection of issues found in one run."""

    def __init__(self) -> None:
        self._issues: List[Issue] = []

    @property
    def issues(self) -> List[Issue]:
        return self._issues

    def __iter__(self) -> Iterator[Issue]:
        return iter(self._issues)

    def __len__(self) -> int:
        return len(self._issues)

    def __getitem__(self, index: int) -> Issue:
        return self._issues[index]

    def add_issue(
        self, severity: Severity, source: Any, file: str, location: Any, message: str
    ) -> Issue:
        issue = Issue.create(source, file, location, message, severity)
        self._issues.append(issue)
        return issue

    def add_note(self, source: Any, file: str, location: Any, message: str) -> Issue:
        return self.add_issue(Severity.NOTE, source, file, location, message)

    def add_warning(self, source: Any, file: str, location: Any, message: str) -> Issue:
        return self.add_issue(Severity.WARNING, source, file, location, message)

    def add_error(self, source: Any, file: str, location: Any, message: str) -> Issue:
        return self.add_issue(Severity.ERROR, source, file, location, message)

    def add_parse_error(self, error: BaseException, source: Any, file: str) -> Issue:
        """Add an error for an exception raised by a parser.

        The exception must either carry ``pos`` and ``loc`` (line/column) or be
        a Python ``SyntaxError``. A trailing ``" (line:column)"`` is stripped
        from its message; like every message, it is shown lowercased when rendered.
        """
        message = getattr(error, "message", None)
        if not isinstance(message, str):
            message = error.msg if isinstance(error, SyntaxError) and error.msg else str(error)
        return self.add_error(source, file, error, strip_location(message))

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self._issues if issue.is_error)

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self._issues if issue.is_warning)

    def filter(self, predicate: Callable[[Issue], bool]) -> None:
        """Keep only the issues for which ``predicate`` is true, in order."""
        self._issues = [issue for issue in self._issues if predicate(issue)]

    def render(self, colorize: bool = True, policy: Optional["ColorPolicy"] = None) -> str:
        from issue_handler.reporters import StandardReporter

        return StandardReporter(colorize, policy).report(self)

    def log(self, colorize: bool = True, policy: Optional["ColorPolicy"] = None) -> str:
        from issue_handler.reporters import ConsoleReporter

        return ConsoleReporter(colorize, policy).report(self)
