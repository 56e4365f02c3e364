"""
Global configuration for the genesis wizard.

This module contains environment-specific settings read once at import time.
"""

import os
from pathlib import Path

WIZARD_HOME = Path(os.environ.get("GENESIS_WIZARD_HOME", "~/.genesis-wizard")).expanduser()
"""Directory holding one persisted session per network."""

_raw_fetch_timeout = os.environ.get("GENESIS_WIZARD_FETCH_TIMEOUT", "60")

# HTTP timeout in seconds when importing a remote genesis.
try:
    FETCH_TIMEOUT = float(_raw_fetch_timeout)
except ValueError as e:
    raise ValueError(
        f"Invalid GENESIS_WIZARD_FETCH_TIMEOUT environment variable: '{_raw_fetch_timeout}'. "
        "Expected a number of seconds."
    ) from e

if FETCH_TIMEOUT <= 0:
    raise ValueError(
        f"Invalid GENESIS_WIZARD_FETCH_TIMEOUT environment variable: '{_raw_fetch_timeout}'. "
        "The timeout must be positive."
    )
