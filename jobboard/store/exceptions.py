"""Exceptions raised by record store clients."""


class StoreError(Exception):
    """Base class for record store failures.

    The job repository catches this and degrades to an empty result, so
    callers of the repository never see it.
    """


class StoreHTTPError(StoreError):
    """The store answered with a 4xx/5xx status, or the connection failed.

    ``status_code`` is 0 when no response was received at all.
    """

    def __init__(self, message: str, status_code: int, url: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class StoreTimeoutError(StoreError):
    """The store did not answer within the configured timeout."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class StoreResponseError(StoreError):
    """The store answered but the body was not the expected JSON shape."""


class StoreConfigurationError(StoreError):
    """The client was built with unusable settings (credentials, timeout)."""
