"""HTTP implementation of the ListIdResolver port."""

import httpx
from pydantic import ValidationError

from ..application.domain import ListIdResolver
from ..application.exceptions import ResolutionError

from .api_models import DailyListIdQuery
from .base_client import BaseClient

_DAILY_LIST_ID_ENDPOINT = "/daily_list_id"

# Bodies the API sends with a 200 status when it has no list to offer.
_NULL_BODY = b"null"
_SERVER_ERROR_BODY = b"500 Internal Server Error"


class HttpListIdResolver(BaseClient, ListIdResolver):
    """A resolver that asks the Tranco API for the daily list id."""

    def __init__(self, client: httpx.Client, base_url: str, user_agent: str):
        """Initializes the resolver adapter."""
        super().__init__(client, base_url, user_agent)
        self.endpoint = self.base_url + _DAILY_LIST_ID_ENDPOINT

    def _build_params(self, date: str, include_subdomains: bool):
        """Validates user input and renders it as query parameters."""
        try:
            query = DailyListIdQuery(date=date, subdomains=include_subdomains)
        except ValidationError as e:
            raise ResolutionError(f"Invalid list date {date!r}: {e}") from e
        return query.to_params()

    def _execute_fetch(self, params) -> httpx.Response:
        """Executes the raw HTTP GET request."""
        try:
            return self.client.get(
                self.endpoint, params=params, headers=self.headers
            )
        except httpx.HTTPError as e:
            self.logger.error(
                f"Error sending request to {self.endpoint}: {e}"
            )
            raise ResolutionError(
                f"Failed to query {self.endpoint}: {e}"
            ) from e

    def _validate_and_extract(self, response: httpx.Response, date: str) -> str:
        """Checks the response status and body and extracts the list id."""

        if response.status_code != 200:
            self.logger.error(
                f"Request to {response.url} returned {response.status_code}"
            )
            raise ResolutionError(f"HTTP status code {response.status_code}")

        try:
            body = response.read()
        except httpx.HTTPError as e:
            raise ResolutionError(
                f"Failed to read response from {response.url}: {e}"
            ) from e

        if body == _NULL_BODY:
            self.logger.error(f"No list id for {date}, API returns null")
            raise ResolutionError(f"no list id for {date}, api returns null")

        if body == _SERVER_ERROR_BODY:
            self.logger.error(
                f"No list id for {date}, API returns 500 Internal Server Error"
            )
            raise ResolutionError(
                f"no list id for {date}, "
                f"api returns 500 Internal Server Error"
            )

        return response.text

    def resolve(self, date: str, include_subdomains: bool) -> str:
        """
        Orchestrates fetching and validating the id of a daily list.

        This method serves as the public contract fulfillment for the
        ListIdResolver port. Failures are surfaced immediately; there is no
        retry.

        Args:
            date: The list date, as `YYYY-MM-DD`.
            include_subdomains: Whether to ask for the FQDN list instead of
                the pay-level-domain list.

        Returns:
            The list id, exactly as sent by the server.

        Raises:
            ResolutionError: If the id cannot be obtained.
        """

        params = self._build_params(date, include_subdomains)
        self.logger.info(f"Fetching list id for {params}...")

        response = self._execute_fetch(params)
        list_id = self._validate_and_extract(response, date)

        self.logger.info(f"Resolved list id {list_id} for {date}")
        return list_id
