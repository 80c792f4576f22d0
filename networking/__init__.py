"""Generic HTTP request helper returning typed values or classified errors."""

from .decoders import Decoder, JsonDecoder, ModelDecoder, decoder_for
from .exceptions import (
    ConfigurationError,
    DecodingError,
    NetworkError,
    NetworkErrorKind,
    NetworkingError,
)
from .executor import RequestExecutor, default_executor, execute
from .http_client import HttpClient, default_http_client
from .result import Failure, Outcome, Success

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Decoder",
    "DecodingError",
    "Failure",
    "HttpClient",
    "JsonDecoder",
    "ModelDecoder",
    "NetworkError",
    "NetworkErrorKind",
    "NetworkingError",
    "Outcome",
    "RequestExecutor",
    "Success",
    "decoder_for",
    "default_executor",
    "default_http_client",
    "execute",
]
