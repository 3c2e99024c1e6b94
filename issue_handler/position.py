"""Position resolution for issues.

Turns a location (see :mod:`issue_handler.domain_model.primitives`) and the
source it points into, into a :class:`LineInfo`, and extracts the physical line
that is shown under a rendered diagnostic.

Typical usage:
    info = resolve("let x = 7;\\nlet 1y;", Span(15, 16))
    info.line, info.column    # (2, 4)
    line_with_position("let x = 7;\\nlet 1y;", 15)    # "let 1y;"
"""

import re
from typing import Tuple, Union

from issue_handler.domain_model.primitives import (
    LineInfo,
    LineLoc,
    Location,
    NumericOffset,
    ResolvedLineColumn,
    SourceLine,
    Span,
)

# \r\n must come first so it is consumed as a single break
LINE_BREAK = re.compile(r"\r\n?|\n|\u2028|\u2029")

_LOCATION_SUFFIX = re.compile(r"^(.+)\s+\(\d+:\d+\)\Z")

Source = Union[str, SourceLine]


def find_line_end(text: str, pos: int) -> int:
    """Return the index of the first line break at or after ``pos``, or ``len(text)``."""
    match = LINE_BREAK.search(text, pos)
    if match:
        return match.start()
    return len(text)


def get_line_info(source: str, offset: int) -> Tuple[int, int]:
    """Return the 1-based line and 0-based column of ``offset`` in ``source``."""
    line = 1
    line_start = 0
    for match in LINE_BREAK.finditer(source):
        # A break at (or straddling) offset belongs to the line it terminates
        if match.end() > offset:
            break
        line += 1
        line_start = match.end()
    return line, offset - line_start


def offset_of(source: str, line: int, column: int) -> int:
    """Inverse of :func:`get_line_info`: the offset of a 1-based line and 0-based column."""
    if line < 1:
        raise ValueError(f"line must be 1 or greater, got {line}")
    line_start = 0
    current = 1
    for match in LINE_BREAK.finditer(source):
        if current == line:
            break
        current += 1
        line_start = match.end()
    if current != line:
        raise ValueError(f"line {line} is past the end of the source")
    line_length = find_line_end(source, line_start) - line_start
    if not 0 <= column <= line_length:
        raise ValueError(f"column {column} is outside line {line} (length {line_length})")
    return line_start + column


def line_with_position(source: str, pos: int) -> str:
    """Return the right-trimmed physical line of ``source`` that contains ``pos``."""
    _check_offset(source, pos)
    _, column = get_line_info(source, pos)
    line_start = pos - column
    return source[line_start:find_line_end(source, pos)].rstrip()


def strip_location(text: str) -> str:
    """Strip a trailing ``" (line:column)"`` from a parser message, if there is one."""
    match = _LOCATION_SUFFIX.match(text)
    return match.group(1) if match else text


def resolve(source: Source, location: Location) -> LineInfo:
    """Resolve ``location`` against ``source``.

    Args:
        source: The full source text, or a SourceLine holding only the
            physical line the location points into.
        location: One of the location variants. A SourceLine source requires a
            variant that already carries its line and column.

    Returns:
        LineInfo: line, column and the boundaries of the physical line.

    Raises:
        TypeError: If source or location is of an unsupported type.
        ValueError: If the location lies outside the source, or its column
            runs past the end of its line.
    """
    if not isinstance(source, str) and not (
        isinstance(source, SourceLine) and isinstance(source.line, str)
    ):
        raise TypeError("source must be a string or a SourceLine")

    if isinstance(location, NumericOffset):
        location = Span(location.offset, location.offset)

    if isinstance(location, ResolvedLineColumn):
        line, column = location.line, location.column
    elif isinstance(location, LineLoc):
        line, column = location.loc_start.line, location.loc_start.column
    elif isinstance(location, Span):
        if isinstance(source, SourceLine):
            raise TypeError(
                "a source line can only be used with a location that carries its line and column"
            )
        line, column = get_line_info(source, location.start)
    else:
        raise TypeError(f"unsupported location type: {type(location).__name__}")

    line_start = location.start - column
    if line_start < 0:
        raise ValueError(
            f"column {column} is larger than the offset {location.start} it belongs to"
        )

    if isinstance(source, str):
        _check_offset(source, location.start)
        if not isinstance(location, Span) and LINE_BREAK.search(
            source, line_start, location.start
        ):
            raise ValueError(
                f"column {column} runs past the end of line {line} at offset {location.start}"
            )
        return LineInfo(
            line=line,
            column=column,
            line_start=line_start,
            line_end=find_line_end(source, location.start),
            source_length=len(source),
        )

    if column > len(source.line):
        raise ValueError(f"column {column} is past the end of the source line")
    line_end = line_start + len(source.line)
    return LineInfo(
        line=line,
        column=column,
        line_start=line_start,
        line_end=line_end,
        source_length=line_end,
    )


def extract_line(source: Source, info: LineInfo) -> str:
    """Return the right-trimmed text of the physical line described by ``info``."""
    if isinstance(source, SourceLine):
        return source.line.rstrip()
    return source[info.line_start:info.line_end].rstrip()


def _check_offset(source: str, offset: int) -> None:
    if not 0 <= offset <= len(source):
        raise ValueError(f"offset {offset} is outside the source (length {len(source)})")
