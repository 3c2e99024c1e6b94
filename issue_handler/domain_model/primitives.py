from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SourcePosition:
    """A line/column pair as reported by a parser (line 1-based, column 0-based)."""

    line: int
    column: int


@dataclass(frozen=True)
class LineInfo:
    """Normalized position of an issue within its source.

    Attributes:
        line: 1-based line number
        column: 0-based offset of the issue within its line
        line_start: offset of the first character of the physical line
        line_end: offset just past the last character of the line, line break excluded
        source_length: length of the source the position was resolved against
    """

    line: int
    column: int
    line_start: int
    line_end: int
    source_length: int


@dataclass(frozen=True)
class HighlightRange:
    """A secondary span marked with tildes under an issue's source line."""

    start: int
    end: int


@dataclass(frozen=True)
class NumericOffset:
    offset: int


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError(f"span end {self.end} is before its start {self.start}")


@dataclass(frozen=True)
class ResolvedLineColumn:
    """A span whose line and column were already computed by the host parser."""

    start: int
    end: int
    line: int
    column: int


@dataclass(frozen=True)
class LineLoc:
    """A span carrying a parser location of the form ``{start: {line, column}, end: ...}``."""

    start: int
    end: int
    loc_start: SourcePosition
    loc_end: SourcePosition


@dataclass(frozen=True)
class SourceLine:
    """Stands in for the full source when the caller already extracted the physical line."""

    line: str


Location = Union[NumericOffset, Span, ResolvedLineColumn, LineLoc]
