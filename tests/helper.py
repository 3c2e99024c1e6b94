"""Source texts and parser stand-ins shared by the tests."""

from types import SimpleNamespace

# Offsets: line 1 is 0-9, line 2 is 11-21, line 3 is 23-33
SOURCE = "var a = 1;\nvar 1b = 2;\n  return c;\n"
FILE = "test.js"

# The "1" in "var 1b" on line 2
OFFSET = 15


class AcornSyntaxError(Exception):
    """Mimics the exceptions thrown by acorn-style parsers."""

    def __init__(self, message: str, pos: int, line: int, column: int):
        super().__init__(message)
        self.message = message
        self.pos = pos
        self.loc = SimpleNamespace(line=line, column=column)
