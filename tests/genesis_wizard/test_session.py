"""Tests for session persistence and genesis reset."""

from __future__ import annotations

from pathlib import Path

import pytest

from genesis_wizard.session import Session, reset_genesis
from genesis_wizard.types import FormatError, PersistenceError, PreconditionError
from tests.genesis_wizard.helpers import make_clique_genesis


class TestPersistence:
    """Saving and restoring a session."""

    def test_fresh_session_is_empty(self, tmp_path: Path) -> None:
        """A network never saved before has no genesis."""
        session = Session.load("devnet", tmp_path)

        assert session.genesis is None
        assert session.services == set()

    def test_flush_then_load(self, tmp_path: Path) -> None:
        """A flushed genesis is restored by the next load."""
        session = Session(network="devnet", workdir=tmp_path / "home")
        session.genesis = make_clique_genesis()

        session.flush()

        assert session.path == tmp_path / "home" / "devnet.json"
        assert Session.load("devnet", tmp_path / "home").genesis == session.genesis

    def test_corrupt_file_is_reported(self, tmp_path: Path) -> None:
        """A damaged persisted file is a format error on load."""
        (tmp_path / "devnet.json").write_text("not json")

        with pytest.raises(FormatError):
            Session.load("devnet", tmp_path)


class TestReset:
    """Destroying the genesis."""

    def test_removes_record_and_file(self, tmp_path: Path) -> None:
        """Reset clears the record and its persisted file."""
        session = Session(network="devnet", workdir=tmp_path, genesis=make_clique_genesis())
        session.flush()

        reset_genesis(session)

        assert session.genesis is None
        assert not session.path.exists()
        assert Session.load("devnet", tmp_path).genesis is None

    def test_refused_while_services_run(self, tmp_path: Path) -> None:
        """Active dependent services block the reset and leave everything in place."""
        genesis = make_clique_genesis()
        session = Session(
            network="devnet", workdir=tmp_path, genesis=genesis, services={"ethstats", "bootnode"}
        )
        session.flush()

        with pytest.raises(PreconditionError, match="bootnode, ethstats"):
            reset_genesis(session)

        assert session.genesis is genesis
        assert session.path.exists()

    def test_failed_removal_keeps_record(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """When the file cannot be removed, memory and disk keep agreeing."""
        genesis = make_clique_genesis()
        session = Session(network="devnet", workdir=tmp_path, genesis=genesis)
        session.flush()

        def refuse(self: Path, missing_ok: bool = False) -> None:
            raise PermissionError("read-only filesystem")

        monkeypatch.setattr(Path, "unlink", refuse)

        with pytest.raises(PersistenceError, match="read-only filesystem"):
            reset_genesis(session)

        monkeypatch.undo()
        assert session.genesis is genesis
        assert Session.load("devnet", tmp_path).genesis == genesis
