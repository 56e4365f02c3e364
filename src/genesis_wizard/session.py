"""
Session context.

A session is the state the wizard keeps for one network: the genesis record
being worked on and the services that depend on it. Components receive the
session explicitly, there is no module-level state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from genesis_wizard.genesis import Genesis, default_export_name, export_genesis, import_genesis
from genesis_wizard.types import PersistenceError, PreconditionError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Session:
    """Wizard state for a single network."""

    network: str
    """Name of the network. Used for file names."""

    workdir: Path
    """Directory the session is persisted in."""

    genesis: Genesis | None = None
    """The current genesis record, if one was built or imported."""

    services: set[str] = field(default_factory=set)
    """Names of deployed services that depend on the genesis."""

    @property
    def path(self) -> Path:
        """File the genesis record is persisted to."""
        return self.workdir / default_export_name(self.network)

    @classmethod
    def load(cls, network: str, workdir: Path) -> Session:
        """
        Open the session of `network`, restoring a previously persisted genesis.

        Raises:
            TransportError: If the persisted file exists but cannot be read.
            FormatError: If the persisted file is not a valid genesis.
        """
        session = cls(network=network, workdir=workdir)
        if session.path.exists():
            session.genesis = import_genesis(str(session.path))
        return session

    def flush(self) -> None:
        """
        Persist the session to disk.

        Raises:
            PersistenceError: If the working directory or file cannot be written.
        """
        try:
            self.workdir.mkdir(parents=True, exist_ok=True)
            if self.genesis is None:
                self.path.unlink(missing_ok=True)
                return
        except OSError as exc:
            raise PersistenceError(str(self.path), str(exc)) from exc
        export_genesis(self.genesis, self.path)


def reset_genesis(session: Session) -> None:
    """
    Destroy the session's genesis record.

    Raises:
        PreconditionError: If any dependent service is still active. The
            record is left untouched.
        PersistenceError: If the persisted file cannot be removed. The
            record is left untouched.
    """
    if session.services:
        raise PreconditionError(
            "Genesis reset requires all services and servers torn down "
            f"(active: {', '.join(sorted(session.services))})"
        )
    try:
        session.path.unlink(missing_ok=True)
    except OSError as exc:
        raise PersistenceError(str(session.path), str(exc)) from exc
    session.genesis = None
    logger.info("Genesis block destroyed")
