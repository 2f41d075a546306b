"""Errors raised by the slot and pricing engine."""


class TurfError(Exception):
    """Base class for engine errors surfaced to API callers."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TurfError, ValueError):
    """Malformed time string, non-positive price or invalid pricing rule."""


class InvalidArgument(TurfError, ValueError):
    """A precondition of an engine operation was not met."""


__all__ = ["InvalidArgument", "TurfError", "ValidationError"]
