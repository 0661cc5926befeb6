"""Runtime settings for talking to the judge."""

import os
from dataclasses import dataclass


DEFAULT_BASE_URL = "https://syoj.org"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "syojctl/1.0"


@dataclass(frozen=True)
class Settings:
    """Where the judge lives and how long to wait for it."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = USER_AGENT

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings, honouring SYOJ_BASE_URL and SYOJ_TIMEOUT."""
        base_url = os.environ.get("SYOJ_BASE_URL", "").strip() or DEFAULT_BASE_URL
        if not base_url.startswith(("http://", "https://")):
            base_url = f"https://{base_url}"

        raw_timeout = os.environ.get("SYOJ_TIMEOUT", "").strip()
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"SYOJ_TIMEOUT must be a number, got {raw_timeout!r}")
            if timeout <= 0:
                raise ValueError(f"SYOJ_TIMEOUT must be positive, got {raw_timeout!r}")

        return cls(base_url=base_url.rstrip("/"), timeout=timeout)
