"""Base class for synchronous HTTP clients talking to tranco-list.eu."""

import logging
import platform

import httpx

from ..application.exceptions import ConfigurationError
from ..version import __version__


def default_user_agent() -> str:
    """Builds the `runtime client package` identification string."""
    return (
        f"python/{platform.python_version()} "
        f"python-httpx/{httpx.__version__} "
        f"tranco-rank/{__version__}"
    )


class BaseClient:
    """A base client that holds an HTTP client and the User-Agent header."""

    def __init__(self, client: httpx.Client, base_url: str, user_agent: str):
        """
        Initializes the base client.

        Args:
            client: An instance of httpx.Client.
            base_url: Scheme and host of the Tranco service.
            user_agent: The identification sent with every request.

        Raises:
            ConfigurationError: If the base URL or User-Agent is missing.
        """

        if not base_url:
            raise ConfigurationError(
                f"Base URL for {self.__class__.__name__} is missing. "
                f"Please check your config files."
            )
        if not user_agent:
            raise ConfigurationError(
                f"User-Agent for {self.__class__.__name__} is missing."
            )

        self.client = client
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def headers(self):
        return {"User-Agent": self.user_agent}
