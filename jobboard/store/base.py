"""Base record store client with shared HTTP handling."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import requests

from jobboard.domain.models import StoreRecord
from jobboard.logging import get_logger

from .exceptions import (
    StoreConfigurationError,
    StoreHTTPError,
    StoreResponseError,
    StoreTimeoutError,
)

logger = get_logger(__name__, component="store")


class BaseStoreClient(ABC):
    """Base class for record store clients.

    Subclasses implement the two read operations the job repository needs.
    Every HTTP call goes through ``_make_request`` so errors surface as
    ``StoreError`` subclasses with consistent log events.

    Attributes:
        timeout: HTTP request timeout in seconds
        user_agent: User-Agent header sent with every request
    """

    def __init__(self, timeout: int = 30, user_agent: str = "JobBoard/1.0") -> None:
        if not 5 <= timeout <= 300:
            raise StoreConfigurationError(
                f"Timeout must be between 5 and 300 seconds, got: {timeout}"
            )
        if not user_agent or not user_agent.strip():
            raise StoreConfigurationError("user_agent cannot be empty")

        self.timeout = timeout
        self.user_agent = user_agent.strip()

        self._session = requests.Session()
        self._session.headers.update({"User-Agent": self.user_agent})

    @abstractmethod
    def list_active_records(self) -> List[StoreRecord]:
        """Return every active job record, newest posted_date first.

        Raises:
            StoreError: On any transport or response failure
        """

    @abstractmethod
    def get_record(self, record_id: str) -> Optional[StoreRecord]:
        """Return one record by id, or None when the store has no such record.

        Raises:
            StoreError: On any failure other than "not found"
        """

    @abstractmethod
    def ping(self) -> None:
        """Issue the cheapest possible read against the store.

        Raises:
            StoreError: If the store cannot be reached or rejects the credentials
        """

    def close(self) -> None:
        """Release pooled HTTP connections."""
        self._session.close()

    def _make_request(
        self,
        url: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Any] = None,
    ) -> Dict[str, Any]:
        """Perform an HTTP request and decode the JSON object it returns.

        Args:
            url: URL to request
            method: HTTP method
            headers: Extra headers merged over the session defaults
            params: Query parameters (mapping or list of pairs)

        Returns:
            Decoded JSON object

        Raises:
            StoreHTTPError: On 4xx/5xx status or connection failure
            StoreTimeoutError: On request timeout
            StoreResponseError: When the body is not a JSON object
        """
        logger.debug(
            f"HTTP {method} request to {url}",
            extra={
                "event": "store.fetch.request",
                "method": method,
                "url": url,
                "timeout": self.timeout,
            },
        )

        try:
            response = self._session.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.warning(
                f"Request to {url} timed out after {self.timeout} seconds",
                extra={
                    "event": "store.fetch.retryable_error",
                    "error_type": "Timeout",
                    "url": url,
                    "timeout": self.timeout,
                },
            )
            raise StoreTimeoutError(
                f"Request to {url} timed out after {self.timeout} seconds", url=url
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(
                f"Request to {url} failed: {e}",
                extra={
                    "event": "store.fetch.error",
                    "error_type": type(e).__name__,
                    "url": url,
                },
            )
            raise StoreHTTPError(f"Request to {url} failed: {e}", status_code=0, url=url) from e

        if response.status_code >= 400:
            retryable = response.status_code >= 500 or response.status_code == 429
            logger.log(
                logging.WARNING if retryable else logging.ERROR,
                f"HTTP {response.status_code} error from {url}",
                extra={
                    "event": "store.fetch.retryable_error" if retryable else "store.fetch.error",
                    "status_code": response.status_code,
                    "url": url,
                },
            )
            raise StoreHTTPError(
                f"HTTP {response.status_code}: {response.reason}",
                status_code=response.status_code,
                url=url,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(
                f"Failed to parse JSON response from {url}",
                extra={"event": "store.fetch.error", "error_type": "JSONDecodeError", "url": url},
            )
            raise StoreResponseError(f"Failed to parse JSON response from {url}: {e}") from e

        if not isinstance(data, dict):
            raise StoreResponseError(
                f"Expected JSON object response, got {type(data).__name__}"
            )

        logger.debug(
            "HTTP request succeeded",
            extra={"event": "store.fetch.succeeded", "status_code": response.status_code, "url": url},
        )
        return data
