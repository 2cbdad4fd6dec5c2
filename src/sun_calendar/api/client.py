"""
Base HTTP client for the Open-Meteo APIs.

Handles HTTP requests, session management, and error logging.
"""

import logging
from typing import Dict, Any, Optional

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore


class APIClient:
    """Base client for JSON-over-HTTP APIs."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_retries: int = 0,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            timeout: Request timeout in seconds (None waits indefinitely)
            max_retries: Maximum number of retry attempts (0 disables retries)
            logger: Logger instance
        """
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self.session.headers.update({
            "Accept": "application/json"
        })

    def _make_request(
        self,
        method: str,
        url: str,
        **kwargs
    ) -> requests.Response:
        """
        Make HTTP request.

        Args:
            method: HTTP method (GET, POST, ...)
            url: Absolute URL
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            requests.exceptions.RequestException: On request failure or non-success status
        """
        self.logger.debug(f"{method} {url} params={kwargs.get('params')}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                **kwargs
            )
            response.raise_for_status()
            return response

        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: {method} {url} - {e}")
            raise

    def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make GET request.

        Args:
            url: Absolute URL
            params: Query parameters

        Returns:
            Decoded JSON response
        """
        response = self._make_request("GET", url, params=params)
        return response.json()

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
