"""
Custom exceptions for the store and its command shell.
"""


class MalformedCommandError(ValueError):
    """
    Raised when a command line cannot be turned into a store operation.

    Covers unknown command names, wrong argument counts and oversized lines.
    The shell reports it for the offending line and keeps processing.
    """

    def __init__(self, line: str, reason: str):
        """
        Initialize malformed command error.

        Args:
            line: The raw input line, without the trailing newline.
            reason: Human readable description of what is wrong.
        """
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed command {line!r}: {reason}")
