"""Domain errors raised by validation and decoding."""


class StateDecodeError(ValueError):
    """Raised when a payload cannot be mapped onto the state tree."""


class ImportValidationError(ValueError):
    """Raised when an uploaded backup is rejected.

    The message is meant to be shown to the user as-is.
    """


__all__ = ["StateDecodeError", "ImportValidationError"]
