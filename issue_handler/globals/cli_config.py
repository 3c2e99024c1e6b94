from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from issue_handler.issues import Severity


@dataclass
class CLIConfig:
    """
    Configuration for CLI operations.

    Attributes:
        file: Path of the source file the diagnostic points into
        offset: Offset of the diagnostic within the file
        message: Message to display
        severity: Severity of the diagnostic
        highlights: Additional (start, end) ranges to mark with tildes
        colorize: Force colored output on or off, or None to use settings/terminal
        quiet: Render without printing anything
    """

    file: str
    offset: int
    message: str = ""
    severity: Severity = Severity.ERROR
    highlights: List[Tuple[int, int]] = field(default_factory=list)
    colorize: Optional[bool] = None
    quiet: bool = False
