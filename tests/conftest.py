"""Pytest configuration and shared fixtures."""

import os

from hypothesis import settings

if "GENESIS_WIZARD_HOME" not in os.environ:
    os.environ["GENESIS_WIZARD_HOME"] = os.path.join(os.path.dirname(__file__), ".wizard-home")

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
