"""Color policy for rendered issues.

Every fragment of a rendered issue (file, separators, severity, message,
source line, caret and highlight marks) is styled through a role of a
:class:`ColorPolicy`. Styles are either plain callables ``str -> str`` or
dot-separated paths into the ANSI style registry, e.g. ``"bold.red"`` or
``"bgBlue.yellow"``.

Library code always receives a policy explicitly. The module-level
:func:`set_color_map` / :func:`reset_color_map` pair manages a process-wide
policy that only outermost entry points (like the CLI) should touch.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

StyleFunc = Callable[[str], str]

# name -> (open, close) SGR codes
STYLE_CODES: Dict[str, Tuple[int, int]] = {
    "reset": (0, 0),
    "bold": (1, 22),
    "dim": (2, 22),
    "italic": (3, 23),
    "underline": (4, 24),
    "inverse": (7, 27),
    "hidden": (8, 28),
    "strikethrough": (9, 29),
}

_COLOR_NAMES = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]

for _index, _name in enumerate(_COLOR_NAMES):
    _capitalized = _name.capitalize()
    STYLE_CODES[_name] = (30 + _index, 39)
    STYLE_CODES[f"{_name}Bright"] = (90 + _index, 39)
    STYLE_CODES[f"bg{_capitalized}"] = (40 + _index, 49)
    STYLE_CODES[f"bg{_capitalized}Bright"] = (100 + _index, 49)

STYLE_CODES.update(
    {
        "gray": (90, 39),
        "grey": (90, 39),
        "bgGray": (100, 49),
        "bgGrey": (100, 49),
    }
)

_SGR = re.compile(r"\x1b\[[0-9;]*m")


@dataclass(frozen=True)
class AnsiStyle:
    """A composition of registry styles, applied outermost first."""

    names: Tuple[str, ...]

    def __call__(self, text: str) -> str:
        if not text:
            return text
        codes = [STYLE_CODES[name] for name in self.names]
        opening = "".join(f"\033[{code[0]}m" for code in codes)
        closing = "".join(f"\033[{code[1]}m" for code in reversed(codes))
        return f"{opening}{text}{closing}"


ROLES = (
    "file",
    "location",
    "error",
    "warning",
    "note",
    "message",
    "separator",
    "source",
    "caret",
    "highlight",
)

DEFAULT_COLOR_MAP: Dict[str, Optional[str]] = {
    "file": "cyan.bold",
    "location": None,
    "error": "red.bold",
    "warning": "magenta.bold",
    "note": "yellow.bold",
    "message": "bold",
    "separator": "dim",
    "source": None,
    "caret": "green.bold",
    "highlight": "cyan",
}


def parse_style(style: Any) -> Optional[StyleFunc]:
    """Turn a style value into a style function.

    Args:
        style: ``None`` (no styling), a callable, or a dot-separated path of
            registry names such as ``"bold.red"``.

    Returns:
        The style function, or None for no styling.

    Raises:
        ValueError: If the value is neither None, callable, nor a valid path.
    """
    if style is None:
        return None
    if isinstance(style, str):
        names = tuple(style.split("."))
        unknown = [name for name in names if name not in STYLE_CODES]
        if unknown:
            raise ValueError(f"unknown style {unknown[0]!r} in {style!r}")
        return AnsiStyle(names)
    if callable(style):
        return style
    raise ValueError(f"invalid style value: {style!r}")


def strip_styles(text: str) -> str:
    """Remove ANSI SGR escape sequences from ``text``."""
    return _SGR.sub("", text)


class ColorPolicy:
    """Mapping from rendering roles to style functions.

    Starts from :data:`DEFAULT_COLOR_MAP`; ``overrides`` are applied on top
    with the same rules as :meth:`set_color_map`.
    """

    def __init__(self, overrides: Optional[Mapping] = None) -> None:
        self._styles: Dict[str, Optional[StyleFunc]] = {}
        self.reset_color_map()
        if overrides:
            self.set_color_map(overrides)

    def set_color_map(self, overrides: Mapping) -> None:
        """Reset to the defaults, then apply ``overrides``.

        Unknown roles and invalid styles are skipped, so a typo in a user's
        settings never breaks diagnostic output.
        """
        self.reset_color_map()

        for role, value in dict(overrides).items():
            if role not in self._styles:
                logger.debug(f"Ignoring unknown color role {role!r}")
                continue
            try:
                self._styles[role] = parse_style(value)
            except ValueError as e:
                logger.debug(f"Ignoring style for color role {role!r}: {e}")

    def reset_color_map(self) -> None:
        """Restore every role to its default style."""
        self._styles = {role: parse_style(style) for role, style in DEFAULT_COLOR_MAP.items()}

    def style_for(self, role: str) -> Optional[StyleFunc]:
        return self._styles.get(role)

    def colorize(self, role: str, text: str, enabled: bool = True) -> str:
        """Apply the style of ``role`` to ``text`` when styling is enabled."""
        style = self._styles.get(role)
        if not enabled or style is None:
            return text
        return style(text)


_process_policy = ColorPolicy()


def default_policy() -> ColorPolicy:
    """The process-wide policy used by outermost entry points."""
    return _process_policy


def set_color_map(overrides: Mapping) -> None:
    _process_policy.set_color_map(overrides)


def reset_color_map() -> None:
    _process_policy.reset_color_map()
