"""
Exception hierarchy for the embedding generator.

Every failure is terminal for the invocation that raised it; nothing is
retried or recovered locally.
"""

from typing import List, Optional


class EmbedError(Exception):
    """Base exception for embedgen errors."""
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ConfigurationError(EmbedError):
    """Job arguments or request fields are missing or malformed."""
    def __init__(self, message: str, hints: Optional[List[str]] = None):
        super().__init__(message)
        self.hints = list(hints or [])

    def __str__(self) -> str:
        if not self.hints:
            return super().__str__()
        return super().__str__() + "\n  " + "\n  ".join(self.hints)


class InputReadError(EmbedError):
    """An input file is missing or unreadable."""
    pass


class OutputWriteError(EmbedError):
    """The generated header could not be written."""
    pass
