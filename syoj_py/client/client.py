"""SYOJ HTTP client."""

import json
import logging
from http.cookiejar import eff_request_host
from typing import Dict, Optional
from urllib.parse import quote
from urllib.request import Request

import requests

from .models import Problem, SubmissionRequest, SubmissionResponse
from ..config.credentials import Credentials
from ..config.settings import Settings
from ..exceptions import (
    AuthError,
    InvalidCredentialsError,
    NetworkError,
    NotFoundError,
    ParseError,
    SubmitError,
)


LOGIN_SUCCESS_MESSAGE = "Successfully logged in"
TOKEN_COOKIE = "Token"
TOKEN_ID_COOKIE = "TokenId"


class JudgeClient:
    """
    HTTP client for the SYOJ judge.

    Without credentials the client can only log in. With credentials it
    carries the Token/TokenId cookies on every request it makes.
    """

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        settings: Optional[Settings] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the client."""
        self.settings = settings or Settings()
        self.logger = logger or logging.getLogger(__name__)
        # the cookie jar files dotless hosts such as localhost under "<host>.local"
        _, self.cookie_host = eff_request_host(Request(self.settings.base_url))
        self.credentials = credentials

        self.session = requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})

        if credentials is not None:
            if not credentials.is_valid():
                raise InvalidCredentialsError(
                    "Saved credentials are incomplete (token or token id missing)"
                )
            self._seed_cookies(credentials)

    def __enter__(self) -> "JudgeClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _seed_cookies(self, credentials: Credentials) -> None:
        for name, value in (
            (TOKEN_COOKIE, credentials.token),
            (TOKEN_ID_COOKIE, credentials.token_id),
        ):
            self.session.cookies.set(name, value, domain=self.cookie_host, path="/")

    def _session_cookies(self) -> Dict[str, str]:
        """Cookies in the jar that apply to the judge host."""
        found = {}
        for cookie in self.session.cookies:
            domain = (cookie.domain or "").lstrip(".")
            if not domain or self.cookie_host == domain or self.cookie_host.endswith("." + domain):
                found[cookie.name] = cookie.value or ""
        return found

    def _require_credentials(self) -> None:
        if self.credentials is None or not self.credentials.is_valid():
            raise InvalidCredentialsError("Not logged in")

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        """Send a request; transport failures become NetworkError."""
        url = f"{self.settings.base_url}{path}"
        try:
            response = self.session.request(
                method, url, timeout=self.settings.timeout, **kwargs
            )
        except requests.RequestException as e:
            self.logger.debug("%s %s failed: %s", method, url, e)
            raise NetworkError(f"Request to {url} failed: {e}") from e

        self.logger.debug(
            "%s %s -> %s (%d bytes)",
            method,
            url,
            response.status_code,
            len(response.content or b""),
        )
        return response

    @staticmethod
    def _json(response: requests.Response, what: str):
        try:
            return json.loads(response.content.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ParseError(f"Malformed {what} response: {e}") from e

    def authenticate(self, email: str, password: str) -> Credentials:
        """
        Log in and return the session cookie pair the judge set.

        Success requires status 200 and the exact success message. A
        successful login without cookies yields empty fields, not an error.
        """
        self.session.cookies.clear()
        response = self._request(
            "POST", "/api/login", json={"email": email, "password": password}
        )

        message = ""
        try:
            body = self._json(response, "login")
        except ParseError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            message = body["message"]

        if response.status_code != 200 or message != LOGIN_SUCCESS_MESSAGE:
            self.logger.debug("Login rejected: %s %r", response.status_code, message)
            raise AuthError(
                f"Login failed with status {response.status_code}: {message}",
                status_code=response.status_code,
            )

        cookies = self._session_cookies()
        credentials = Credentials(
            token=cookies.get(TOKEN_COOKIE, ""),
            token_id=cookies.get(TOKEN_ID_COOKIE, ""),
        )
        self.logger.info("Login successful")
        if not credentials.is_valid():
            self.logger.debug("Login response did not set both session cookies")

        self.credentials = credentials
        return credentials

    def fetch_problem(self, problem_id: str) -> Problem:
        """Fetch a problem by its ID."""
        self._require_credentials()
        response = self._request("GET", f"/api/problems/{quote(problem_id, safe='')}")

        if response.status_code != 200:
            raise NotFoundError(
                f"Failed to fetch problem {problem_id} with status {response.status_code}",
                status_code=response.status_code,
            )

        problem = Problem.from_dict(self._json(response, "problem"))
        self.logger.debug("Fetched problem %s: %s", problem_id, problem.title)
        return problem

    def submit(self, code: str, language: str, problem_id: str) -> SubmissionResponse:
        """Submit source code for a problem."""
        for name, value in (("code", code), ("language", language), ("problem id", problem_id)):
            if not value:
                raise ValueError(f"{name} must not be empty")

        self._require_credentials()
        request = SubmissionRequest(problem_id=problem_id, code=code, language=language)
        response = self._request("POST", "/api/submit", json=request.to_dict())

        if response.status_code != 200:
            raise SubmitError(
                f"Submission failed with status {response.status_code}",
                status_code=response.status_code,
            )

        return SubmissionResponse.from_dict(self._json(response, "submission"))
