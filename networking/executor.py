"""
Request executor: one HTTP call, decoded into a caller-chosen shape.

execute() returns immediately. The transfer and decode run on a worker
thread and the outcome is delivered exactly once, both to the optional
on_complete callback and through the returned Future.
"""

import threading
from collections.abc import Callable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

import requests

from .config import Config, config
from .decoders import Decoder, decoder_for
from .exceptions import NetworkErrorKind
from .http_client import HttpClient, default_http_client, parse_url
from .logging_config import get_module_logger
from .result import Failure, Outcome, Success

logger = get_module_logger("executor")

OnComplete = Callable[[Outcome], Any]


class RequestExecutor:
    """
    Runs requests in the background and classifies every failure.

    Failures are reported as Failure(kind), never raised, in this order:
    bad URL, request failed, unknown (empty body), decoding error.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        config_obj: Config | None = None,
        max_workers: int | None = None,
    ):
        """
        Args:
            http_client: HTTP client for making requests (optional, uses the shared client)
            config_obj: Config object (optional, uses global config if None)
            max_workers: Worker thread count. Defaults to config value.
        """
        if http_client is None:
            http_client = default_http_client
        if config_obj is None:
            config_obj = config
        if max_workers is None:
            max_workers = int(config_obj.get_positive("executor.max_workers", 8))

        self.http_client = http_client
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="networking")

    def execute(
        self,
        url_string: str,
        shape: Any = Any,
        method: str = "GET",
        parameters: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        on_complete: OnComplete | None = None,
    ) -> "Future[Outcome]":
        """
        Send a request and decode its body into shape.

        Args:
            url_string: Target URL
            shape: Type to decode the JSON body into, or a Decoder (Any for raw JSON)
            method: HTTP method, sent verbatim
            parameters: Accepted for interface compatibility; not applied to the request
            headers: Header pairs added verbatim to the request
            on_complete: Called once with the outcome. Runs on a worker thread,
                except for a bad URL or a shut-down executor where it runs
                before execute() returns.

        Returns:
            Future resolving to Success(value) or Failure(kind). It is already
            running when returned, so it cannot be cancelled.

        Raises:
            pydantic.errors.PydanticSchemaGenerationError: If shape is not a
                type pydantic can validate (a programming error, not an outcome)
        """
        try:
            url = parse_url(url_string)
        except requests.exceptions.RequestException as e:
            logger.debug(f"Rejected URL {url_string!r}: {e}")
            return _resolved(Failure(NetworkErrorKind.BAD_URL), on_complete)

        decoder = decoder_for(shape)

        if parameters:
            logger.debug(f"Parameters not applied to {method} {url}: {sorted(parameters)}")

        request = requests.Request(method=method, url=url, headers=dict(headers or {}))

        future: Future[Outcome] = Future()
        future.set_running_or_notify_cancel()
        try:
            self._pool.submit(self._run, future, request, decoder, on_complete)
        except RuntimeError as e:
            logger.error(f"Request not dispatched: {e}")
            return _resolved(Failure(NetworkErrorKind.REQUEST_FAILED), on_complete)
        return future

    def fetch(
        self,
        url_string: str,
        shape: Any = Any,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """
        Blocking variant of execute().

        Args:
            timeout: Seconds to wait for the outcome (None waits indefinitely)

        Returns:
            The decoded value

        Raises:
            NetworkError: With the failure kind
            concurrent.futures.TimeoutError: If timeout elapses first
        """
        future = self.execute(url_string, shape=shape, method=method, headers=headers)
        return future.result(timeout=timeout).unwrap()

    def shutdown(self, wait: bool = True):
        """Stop accepting requests and release the worker threads."""
        self._pool.shutdown(wait=wait)

    def __enter__(self) -> "RequestExecutor":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()

    def _run(
        self,
        future: "Future[Outcome]",
        request: requests.Request,
        decoder: Decoder,
        on_complete: OnComplete | None,
    ):
        outcome = self._perform(request, decoder)
        _notify(on_complete, outcome)
        future.set_result(outcome)

    def _perform(self, request: requests.Request, decoder: Decoder) -> Outcome:
        try:
            response = self.http_client.send(request)
        except (requests.exceptions.RequestException, ValueError, OSError) as e:
            logger.error(f"Request failed with error: {e}")
            return Failure(NetworkErrorKind.REQUEST_FAILED)

        logger.debug(f"{request.method} {request.url} -> HTTP {response.status_code}")

        body = response.content
        if not body:
            return Failure(NetworkErrorKind.UNKNOWN)

        try:
            value = decoder.decode(body)
        except Exception as e:
            logger.debug(f"Could not decode response from {request.url}: {e}")
            return Failure(NetworkErrorKind.DECODING_ERROR)

        return Success(value)


def _notify(on_complete: OnComplete | None, outcome: Outcome):
    if on_complete is None:
        return
    try:
        on_complete(outcome)
    except Exception:
        logger.exception("Completion callback raised")


def _resolved(outcome: Outcome, on_complete: OnComplete | None) -> "Future[Outcome]":
    """Deliver an outcome on the caller thread and wrap it in a finished future"""
    _notify(on_complete, outcome)
    future: Future[Outcome] = Future()
    future.set_result(outcome)
    return future


_default_executor: RequestExecutor | None = None
_default_lock = threading.Lock()


def default_executor() -> RequestExecutor:
    """Process-wide executor backed by the shared HTTP client, created on first use."""
    global _default_executor
    with _default_lock:
        if _default_executor is None:
            _default_executor = RequestExecutor()
        return _default_executor


def execute(
    url_string: str,
    shape: Any = Any,
    method: str = "GET",
    parameters: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    on_complete: OnComplete | None = None,
) -> "Future[Outcome]":
    """Run RequestExecutor.execute() on the default executor."""
    return default_executor().execute(
        url_string,
        shape=shape,
        method=method,
        parameters=parameters,
        headers=headers,
        on_complete=on_complete,
    )
