from typing import Optional


class HamlgenError(Exception):
    """Base class for errors raised while building or compiling a tree."""

    pass


class TemplateSyntaxError(HamlgenError):
    """Raised when a node expression or nesting is invalid."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class TreeFormatError(TemplateSyntaxError):
    """Raised when a tree description is structurally invalid."""

    pass
