"""Error taxonomy for the sample scaffolding workflow."""


class SamplerError(Exception):
    """Base class for all errors surfaced to the user."""
    pass


class ConfigurationError(SamplerError):
    """Missing or invalid descriptor, or a missing account attribute."""
    pass


class NetworkError(SamplerError):
    """Clone, pull or API request failed."""
    pass


class DataError(SamplerError):
    """An API response did not have the expected shape."""
    pass


class UserCancelled(SamplerError):
    """The user aborted an interactive prompt."""

    def __init__(self, message: str = "Cancelled by user"):
        super().__init__(message)


class LockError(SamplerError):
    """Raised when unable to acquire a sample lock."""
    pass
