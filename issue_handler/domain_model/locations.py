"""Adapters from host-parser objects to the closed location union.

Parsers hand us all sorts of things to point at a position: bare offsets,
AST nodes with ``start``/``end``, nodes or exceptions carrying a ``loc``, or
Python's own ``SyntaxError``. These are inspected structurally once, here, and
everything past this module only deals with the variants defined in
:mod:`issue_handler.domain_model.primitives`.
"""

from collections.abc import Mapping
from typing import Any, Optional

from issue_handler.domain_model.primitives import (
    LineLoc,
    Location,
    NumericOffset,
    ResolvedLineColumn,
    SourceLine,
    SourcePosition,
    Span,
)
from issue_handler.position import Source, offset_of

_LOCATION_TYPES = (NumericOffset, Span, ResolvedLineColumn, LineLoc)


def as_source(value: Any) -> Source:
    """Accept a source string, a SourceLine or a ``{"line": <str>}`` mapping."""
    if isinstance(value, str):
        return value
    if isinstance(value, SourceLine) and isinstance(value.line, str):
        return value
    if isinstance(value, Mapping) and isinstance(value.get("line"), str):
        return SourceLine(value["line"])
    raise TypeError("source must be a string or { line: <string> }")


def as_location(value: Any, source: Optional[Source] = None) -> Location:
    """Normalize ``value`` into one of the location variants.

    Args:
        value: A location variant, an ``int`` offset, a mapping or object with
            ``start``/``end`` and optionally ``loc``, a parse exception with
            ``pos`` and ``loc``, or a Python ``SyntaxError``.
        source: Needed only for ``SyntaxError``, whose line/column has to be
            turned back into an offset.

    Raises:
        TypeError: If the value does not describe a position.
        ValueError: If a ``SyntaxError``'s line or column is not in ``source``.
    """
    if isinstance(value, _LOCATION_TYPES):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return NumericOffset(value)

    pos = _field(value, "pos")
    loc = _field(value, "loc")
    start = _field(value, "start")
    end = _field(value, "end")

    if loc is not None:
        if start is None:
            start = pos
        start = _offset(start, "start")
        end = start if end is None else _offset(end, "end")

        loc_start = _field(loc, "start")
        if loc_start is not None and _field(loc_start, "line") is not None:
            loc_end = _field(loc, "end")
            return LineLoc(
                start,
                end,
                _position(loc_start),
                _position(loc_end) if loc_end is not None else _position(loc_start),
            )
        line, column = _field(loc, "line"), _field(loc, "column")
        if line is None or column is None:
            raise TypeError("loc must carry line and column, or start: { line, column }")
        return ResolvedLineColumn(start, end, _offset(line, "line"), _offset(column, "column"))

    if start is not None:
        start = _offset(start, "start")
        return Span(start, start if end is None else _offset(end, "end"))

    if pos is not None:
        pos = _offset(pos, "pos")
        return Span(pos, pos)

    if isinstance(value, SyntaxError) and value.lineno is not None:
        return _from_syntax_error(value, source)

    raise TypeError(f"cannot use {type(value).__name__} as an issue location")


def _from_syntax_error(error: SyntaxError, source: Optional[Source]) -> Location:
    if not isinstance(source, str):
        raise TypeError("a SyntaxError location needs the full source text")
    # SyntaxError.offset is 1-based and may be missing
    column = max((error.offset or 1) - 1, 0)
    start = offset_of(source, error.lineno, column)
    return ResolvedLineColumn(start, start, error.lineno, column)


def _field(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


def _position(value: Any) -> SourcePosition:
    return SourcePosition(
        _offset(_field(value, "line"), "line"), _offset(_field(value, "column"), "column")
    )


def _offset(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    return value
