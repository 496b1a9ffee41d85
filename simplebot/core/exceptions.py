"""Exceptions raised by the simplebot engine."""


class SimpleBotError(Exception):
    """Base class for simplebot errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ReferenceDataError(SimpleBotError):
    """Reference data could not be (re)loaded.

    Raised by ReferenceData.refresh() when the loader fails. The previously
    published snapshot stays live, so readers never see partial data.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)
