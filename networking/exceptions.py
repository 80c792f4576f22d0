"""
Custom exceptions for networking
"""

from enum import Enum


class NetworkErrorKind(str, Enum):
    """
    Classification of a failed request.

    Checked in declaration order: a call fails with the first kind that applies.
    """

    BAD_URL = "bad_url"
    REQUEST_FAILED = "request_failed"
    UNKNOWN = "unknown"
    DECODING_ERROR = "decoding_error"


class NetworkingError(Exception):
    """Base exception for all networking errors"""

    pass


class NetworkError(NetworkingError):
    """
    Raised when a request outcome is unwrapped and turns out to be a failure.

    Only the kind is carried. Transport and decode details stay in the logs.
    """

    def __init__(self, kind: NetworkErrorKind):
        self.kind = kind
        super().__init__(kind.value)


class DecodingError(NetworkingError):
    """Response body could not be decoded into the requested shape"""

    pass


class ConfigurationError(NetworkingError):
    """
    Raised when required configuration values are missing or invalid.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")
