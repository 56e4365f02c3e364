"""
Console prompter reading answers from standard input.

Invalid answers are reported through logging and asked again, so every
read method returns only once the operator typed something acceptable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from urllib.parse import urlsplit

from genesis_wizard.types import Address, parse_quantity

logger = logging.getLogger(__name__)

_YES = ("y", "yes")
_NO = ("n", "no")


class ConsolePrompter:
    """
    Prompter backed by `input()` and `print()`.

    Both callables are injectable so the prompter can be driven by
    other frontends or in tests.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._input = input_fn
        self._output = output_fn

    def say(self, text: str = "") -> None:
        self._output(text)

    def read(self) -> str:
        return self._input("> ").strip()

    def read_default_string(self, default: str) -> str:
        return self.read() or default

    def read_default_int(self, default: int, maximum: int | None = None) -> int:
        value = self._read_quantity(default, maximum, "integer")
        assert value is not None
        return value

    def read_default_big_int(
        self, default: int | None, maximum: int | None = None
    ) -> int | None:
        return self._read_quantity(default, maximum, "big integer")

    def _read_quantity(self, default: int | None, maximum: int | None, kind: str) -> int | None:
        while True:
            text = self.read()
            if not text:
                return default
            try:
                value = parse_quantity(text)
            except ValueError as e:
                logger.error("Invalid input, expected %s: %s", kind, e)
                continue
            if value < 0:
                logger.error("Invalid input, expected non-negative integer: %d", value)
                continue
            if maximum is not None and value > maximum:
                logger.error("Invalid input, %d exceeds the maximum of %d", value, maximum)
                continue
            return value

    def read_default_yes_no(self, default: bool) -> bool:
        while True:
            text = self.read().lower()
            if not text:
                return default
            if text in _YES:
                return True
            if text in _NO:
                return False
            logger.error("Invalid input, expected 'y', 'yes', 'n' or 'no': %r", text)

    def read_address(self) -> Address | None:
        while True:
            text = self.read()
            if not text:
                return None
            try:
                return Address(text)
            except ValueError as e:
                logger.error("Invalid address length or encoding, please retry: %s", e)

    def read_url(self) -> str:
        while True:
            text = self.read()
            if not text:
                logger.error("Location must not be empty")
                continue
            try:
                urlsplit(text)
            except ValueError as e:
                logger.error("Invalid location: %s", e)
                continue
            return text
