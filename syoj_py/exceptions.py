"""Error types raised by syoj_py."""

from typing import Optional


class SyojError(Exception):
    """Base class for every error surfaced to the user."""


class NetworkError(SyojError):
    """The request never produced an HTTP response (DNS, refused, timeout, TLS)."""


class StatusError(SyojError):
    """The judge answered, but not with what we asked for."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthError(StatusError):
    """Login was rejected by the judge."""


class InvalidCredentialsError(AuthError):
    """Stored credentials are missing a token or token id."""


class NotFoundError(StatusError):
    """No stored credentials, or the judge refused to return a problem."""


class SubmitError(StatusError):
    """The judge did not accept a submission."""


class ParseError(SyojError):
    """A credentials file or a response body has an unexpected shape."""


class StorageError(SyojError):
    """Reading, writing or removing the credentials file failed."""
