# errors.py
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a machine is built from settings it cannot accept."""
