"""Exceptions raised by the message parser."""


class MarkupError(Exception):
    """Base class for parser errors."""


class MarkupContractError(MarkupError):
    """Raised when a collaborator hands the merge engine malformed spans or runs.

    This signals a bug in a tokenizer or detector, never bad user input.
    """

    def __init__(self, message: str, start: int | None = None, end: int | None = None):
        super().__init__(message)
        self.start = start
        self.end = end


class ConfigError(MarkupError):
    """Raised when configuration from the environment is invalid."""
