"""syoj_py - CLI client for the SYOJ online judge."""

__version__ = "1.0.0"
