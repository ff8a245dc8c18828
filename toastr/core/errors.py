"""Custom exception hierarchy for Toastr."""


class ToastrError(Exception):
    """Base error type."""


class ConfigError(ToastrError):
    pass


class CommandNotFound(ToastrError):
    pass


class InvalidStateError(ToastrError, ValueError):
    """Raised when a channel is assigned a connection state it does not know."""
    pass
