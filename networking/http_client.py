"""HTTP client abstraction for dependency injection and testability."""

import requests

from .config import Config, config


class HttpClient:
    """
    HTTP client wrapper around a shared requests.Session.

    This abstraction enables:
    - Dependency injection for testing
    - Easy mocking in unit tests
    - Centralized HTTP configuration (timeout, default headers)
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        config_obj: Config | None = None,
    ):
        """
        Args:
            session: Session to send requests through (a new one is created if None)
            timeout: Request timeout in seconds. Defaults to config value.
            user_agent: Default User-Agent header. Defaults to config value.
            config_obj: Config object (optional, uses global config if None)
        """
        if config_obj is None:
            config_obj = config

        self.session = session if session is not None else requests.Session()
        self.timeout = timeout if timeout is not None else config_obj.get_positive("http.timeout", 30)

        if user_agent is None:
            user_agent = config_obj.get("http.user_agent")
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    def send(self, request: requests.Request) -> requests.Response:
        """
        Prepare and send a request through the session.

        Session headers are merged in, then per-request headers override them.

        Args:
            request: Unprepared request (method, url, headers)

        Returns:
            requests.Response object, whatever its status code
        """
        prepared = self.session.prepare_request(request)
        settings = self.session.merge_environment_settings(prepared.url, {}, None, None, None)
        return self.session.send(prepared, timeout=self.timeout, **settings)

    def close(self):
        """Close the underlying session and its connection pools."""
        self.session.close()


def parse_url(url_string: str) -> str:
    """
    Check that a string can be used as a request URL.

    Uses the same preparation requests applies when sending, so anything
    accepted here is what goes on the wire.

    Returns:
        The normalized URL

    Raises:
        requests.exceptions.RequestException: MissingSchema, InvalidURL, ...
    """
    prepared = requests.PreparedRequest()
    prepared.prepare_url(url_string, None)
    return prepared.url


# Process-wide client shared by every executor that isn't given its own
default_http_client = HttpClient()
