"""Exception hierarchy for format configuration."""


class KhronosError(Exception):
    """Base exception for format configuration errors.

    ``user_message`` is what the command line reports; ``internal()`` names
    the offending option text and is only logged. Syntax errors keep the
    lark exception in ``wrapped``.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidFormatError(KhronosError):
    """Raised when a format name or option string is invalid."""


class InvalidPrecisionError(KhronosError):
    """Raised when a precision is outside 0..9."""


class InvalidUnitError(KhronosError):
    """Raised when a unit token is unknown."""


class InvalidPatternError(KhronosError):
    """Raised when a custom timestamp pattern is unusable."""


class InvalidEpochError(KhronosError):
    """Raised when an epoch base timestamp cannot be parsed."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_FORMAT = "invalid format"
ERR_MSG_INVALID_PRECISION = "precision must be between .0 and .9"
ERR_MSG_INVALID_UNIT = "unit must be one of s, ms, us, ns"
ERR_MSG_INVALID_PATTERN = "invalid timestamp pattern"
ERR_MSG_INVALID_EPOCH = "epoch must be an ISO 8601 timestamp"
