"""Exception hierarchy for genesis construction, import and export."""

from __future__ import annotations


class GenesisWizardError(Exception):
    """
    Base exception for all genesis wizard errors.

    Every failure is terminal for the single operation in progress and is
    surfaced to the operator. Nothing is retried automatically.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class UserInputError(GenesisWizardError):
    """
    Raised when the operator picks a menu choice that does not exist.

    Attributes:
        choice: The raw text that was entered.
    """

    def __init__(self, message: str, *, choice: str | None = None) -> None:
        self.choice = choice
        super().__init__(message)


class TransportError(GenesisWizardError):
    """
    Raised when a genesis document cannot be retrieved.

    Covers unreadable local files, failed HTTP requests and
    unsupported location schemes.

    Attributes:
        location: The path or URL that was requested.
    """

    def __init__(self, location: str, detail: str) -> None:
        self.location = location
        self.detail = detail
        super().__init__(f"Failed to retrieve genesis from {location}: {detail}")


class FormatError(GenesisWizardError):
    """
    Raised when a document is not a valid genesis record.

    Attributes:
        location: Where the document came from (if known).
    """

    def __init__(self, detail: str, *, location: str | None = None) -> None:
        self.location = location
        self.detail = detail

        msg = f"Invalid genesis spec: {detail}"
        if location is not None:
            msg = f"Invalid genesis spec at {location}: {detail}"

        super().__init__(msg)


class PersistenceError(GenesisWizardError):
    """
    Raised when a genesis document cannot be written.

    Attributes:
        path: The file that could not be written.
    """

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to save genesis file {path}: {detail}")


class PreconditionError(GenesisWizardError):
    """Raised when an operation is refused because its precondition does not hold."""
