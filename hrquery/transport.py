"""HTTP transport used to execute built resource paths.

Request builders only need something that can GET a path; FitbitTransport
is the requests-based implementation that talks to the real API.
"""

import logging
from typing import Any
from typing import Protocol

import requests

import hrquery.auth


logger = logging.getLogger(__name__)


class HttpGetter(Protocol):
    """Anything able to GET a resource path and return the response body."""

    def get(self, path: str) -> Any:
        """Return the response body for path."""
        ...


class FitbitTransport:
    """Authenticated GET requests against the Fitbit Web API."""

    API_BASE_URL = 'https://api.fitbit.com'
    API_VERSION = '1'

    def __init__(self, auth: hrquery.auth.FitbitAuth, timeout: float = 30.0):
        """Initialize FitbitTransport.

        Args:
            auth: FitbitAuth instance with a loaded access token.
            timeout: Seconds to wait for the server before giving up.
        """
        self.auth = auth
        self.timeout = timeout

    def url_for(self, path: str) -> str:
        """Build the absolute URL for a resource path.

        Args:
            path: Resource path, with or without a leading slash.

        Returns:
            URL under the versioned API root.
        """
        return f'{self.API_BASE_URL}/{self.API_VERSION}/{path.lstrip("/")}'

    def get(self, path: str) -> Any:
        """GET a resource path relative to the versioned API root.

        Args:
            path: Resource path such as 'user/-/activities/heart/date/today/1d.json'.

        Returns:
            Decoded JSON response.

        Raises:
            ValueError: If access token is not available.
            requests.exceptions.HTTPError: If request fails.
        """
        if not self.auth.access_token:
            raise ValueError('No access token available. Please authenticate first.')

        headers = {
            'Authorization': f'Bearer {self.auth.access_token}',
            'Accept': 'application/json',
        }

        url = self.url_for(path)
        logger.debug('GET %s', url)

        response = requests.request(
            method='GET',
            url=url,
            headers=headers,
            timeout=self.timeout,
        )

        response.raise_for_status()
        return response.json()
