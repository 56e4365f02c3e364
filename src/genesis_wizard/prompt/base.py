"""Interface to the operator answering the wizard's questions."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from genesis_wizard.types import Address


@runtime_checkable
class Prompter(Protocol):
    """
    Source of operator answers.

    Every read blocks until an acceptable answer is given. Empty input
    selects the offered default where one exists.
    """

    def say(self, text: str = "") -> None:
        """Show a line of text to the operator."""
        ...

    def read(self) -> str:
        """Read one line of free text, stripped of surrounding whitespace."""
        ...

    def read_default_string(self, default: str) -> str:
        """Read a line of text, or `default` on empty input."""
        ...

    def read_default_int(self, default: int, maximum: int | None = None) -> int:
        """Read a non-negative integer up to `maximum`, or `default` on empty input."""
        ...

    def read_default_big_int(
        self, default: int | None, maximum: int | None = None
    ) -> int | None:
        """Read an arbitrary-precision non-negative integer, or `default` on empty input."""
        ...

    def read_default_yes_no(self, default: bool) -> bool:
        """Read a yes/no answer, or `default` on empty input."""
        ...

    def read_address(self) -> Address | None:
        """Read an account address. Empty input returns None and means "done"."""
        ...

    def read_url(self) -> str:
        """Read a URL or local file path."""
        ...
