"""Credential storage ($XDG_CONFIG_HOME/syojctl/credentials.json)."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..exceptions import NotFoundError, ParseError, StorageError
from .paths import CREDENTIALS_FILE, config_home, search_config_file


FILE_MODE = 0o600


@dataclass(frozen=True)
class Credentials:
    """
    Session cookie pair issued by the judge after login.
    Both values are opaque and never inspected.
    """

    token: str = ""
    token_id: str = ""

    def is_valid(self) -> bool:
        """Check that both cookies are present."""
        return bool(self.token and self.token_id)

    def to_dict(self) -> dict:
        return {"token": self.token, "token_id": self.token_id}

    @classmethod
    def from_dict(cls, data: object) -> "Credentials":
        if not isinstance(data, dict):
            raise ParseError("credentials file must contain a JSON object")

        values = {}
        for key in ("token", "token_id"):
            value = data.get(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ParseError(f"credentials field {key!r} must be a string")
            values[key] = value
        return cls(**values)


class CredentialStore:
    """
    Saves, loads and deletes the single credentials file of the current user.
    Paths are resolved on every call; nothing is cached in memory.
    """

    def __init__(
        self,
        config_home: Optional[Path] = None,
        config_dirs: Optional[List[Path]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._config_home = config_home
        self._config_dirs = config_dirs
        self.logger = logger or logging.getLogger(__name__)

    @property
    def save_path(self) -> Path:
        """Where `save` writes."""
        return (self._config_home or config_home()) / CREDENTIALS_FILE

    def locate(self) -> Optional[Path]:
        """Find the credentials file in the XDG search path."""
        return search_config_file(
            CREDENTIALS_FILE, home=self._config_home, dirs=self._config_dirs
        )

    def save(self, credentials: Credentials) -> Path:
        """Write credentials, replacing any existing file."""
        path = self.save_path
        payload = json.dumps(credentials.to_dict(), separators=(",", ":"))

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            # O_CREAT only applies the mode to new files
            os.chmod(path, FILE_MODE)
        except OSError as e:
            raise StorageError(f"Failed to save credentials to {path}: {e}") from e

        self.logger.debug("Saved credentials to %s", path)
        return path

    def load(self) -> Credentials:
        """Read credentials from the first file found in the search path."""
        path = self.locate()
        if path is None:
            raise NotFoundError("No saved credentials found")

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to read credentials from {path}: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Malformed credentials file {path}: {e}") from e

        self.logger.debug("Loaded credentials from %s", path)
        return Credentials.from_dict(data)

    def delete(self) -> Path:
        """Remove the credentials file."""
        path = self.locate()
        if path is None:
            raise NotFoundError("No saved credentials found")

        try:
            path.unlink()
        except FileNotFoundError as e:
            raise NotFoundError("No saved credentials found") from e
        except OSError as e:
            raise StorageError(f"Failed to delete {path}: {e}") from e

        self.logger.debug("Deleted credentials file %s", path)
        return path
