"""Operator prompting."""

from .base import Prompter
from .console import ConsolePrompter

__all__ = [
    "ConsolePrompter",
    "Prompter",
]
