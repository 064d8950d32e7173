"""Errors raised by the recording and standings use cases.

Callers tell "the request was wrong" (NotFoundError, ValidationError) apart
from "the system could not complete it" (StorageError and subclasses).
"""


class ScoreboardError(Exception):
    """Base class of every error this package raises on purpose."""


class NotFoundError(ScoreboardError):
    """A referenced event, team or player does not exist."""


class ValidationError(ScoreboardError):
    """The request does not fit the event it targets."""


class StorageError(ScoreboardError):
    """The store failed while serving the request."""


class RecordingError(StorageError):
    """A write transaction failed and was rolled back."""


class ConflictError(RecordingError):
    """A write transaction lost to a concurrent one at commit time."""
