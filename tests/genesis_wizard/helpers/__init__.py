"""Test helpers for genesis wizard unit tests."""

from .builders import FIXED_NOW, fixed_clock, make_address, make_clique_genesis
from .prompts import ScriptedPrompter

__all__ = [
    "FIXED_NOW",
    "ScriptedPrompter",
    "fixed_clock",
    "make_address",
    "make_clique_genesis",
]
