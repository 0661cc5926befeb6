"""Configuration management."""

from .credentials import CredentialStore, Credentials
from .settings import Settings

__all__ = ["CredentialStore", "Credentials", "Settings"]
