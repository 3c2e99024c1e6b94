"""issue-handler: compiler-style diagnostics for source tooling.

This package collects notes, warnings and errors tied to positions in a source
text and renders them the way compilers do: ``file:line:column: severity:
message``, followed by the offending source line and a caret under the
position. It can be used both as a Python library and as a CLI tool.

Example:
    Library usage:
        from issue_handler import IssueList

        issues = IssueList()
        issues.add_error(source, "app.js", node, f"unknown identifier '{name}'")
        issues.add_warning(source, "app.js", 42, "unused variable").add_highlight(40, 45)
        print(issues.render(colorize=False))

    CLI usage:
        $ issue-handler show app.js 42 "Unexpected token"
        $ issue-handler line app.js 42
"""

from .colors import ColorPolicy, default_policy, reset_color_map, set_color_map
from .domain_model.locations import as_location
from .domain_model.primitives import (
    HighlightRange,
    LineInfo,
    LineLoc,
    NumericOffset,
    ResolvedLineColumn,
    SourceLine,
    SourcePosition,
    Span,
)
from .issues import Issue, IssueList, Severity, is_issue
from .position import find_line_end, line_with_position, resolve, strip_location
from .reporters import (
    ConsoleReporter,
    Reporter,
    SilentReporter,
    StandardReporter,
    create_reporter,
)

__all__ = [
    # Issues
    "Issue",
    "IssueList",
    "Severity",
    "is_issue",
    # Positions
    "HighlightRange",
    "LineInfo",
    "LineLoc",
    "NumericOffset",
    "ResolvedLineColumn",
    "SourceLine",
    "SourcePosition",
    "Span",
    "as_location",
    "find_line_end",
    "line_with_position",
    "resolve",
    "strip_location",
    # Rendering
    "ColorPolicy",
    "ConsoleReporter",
    "Reporter",
    "SilentReporter",
    "StandardReporter",
    "create_reporter",
    "default_policy",
    "reset_color_map",
    "set_color_map",
]
