"""
Ticket system exceptions.

Everything raised on purpose by the core derives from TicketSystemError so
callers at the edges (api_server.py) can tell domain errors from bugs.
"""

from typing import Optional


class TicketSystemError(Exception):
    """Base exception for all ticket system errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(TicketSystemError):
    """A submission field was empty or blank. No ticket was created."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"'{field}' must not be empty", {"field": field})


class SubmissionInProgressError(TicketSystemError):
    """A second submit was attempted while the previous one is still in flight."""

    def __init__(self):
        super().__init__("A ticket submission is already being processed")


class ConfigurationError(TicketSystemError):
    """The category registry is malformed."""
