"""
Operator-facing genesis menus.

The wizard turns menu choices into genesis operations. Every failure is
reported through logging and leaves the session exactly as it was: nothing
is retried and nothing partial is stored.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable

import httpx

from genesis_wizard.builder import build_genesis
from genesis_wizard.genesis import default_export_name, edit_forks, export_genesis, import_genesis
from genesis_wizard.prompt import Prompter
from genesis_wizard.session import Session, reset_genesis
from genesis_wizard.types import GenesisWizardError, UserInputError

logger = logging.getLogger(__name__)


class Wizard:
    """Interactive genesis management for one session."""

    def __init__(
        self,
        session: Session,
        prompter: Prompter,
        *,
        now: Callable[[], float] = time.time,
        rng: random.Random | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.session = session
        self.prompter = prompter
        self._now = now
        self._rng = rng
        self._client = client

    def run(self) -> None:
        """Serve the main menu until input ends."""
        while True:
            try:
                self.main_menu()
            except EOFError:
                return

    def main_menu(self) -> None:
        """Offer the operations that apply to the current session."""
        say = self.prompter.say
        say()
        say("What would you like to do? (default = 1)")
        if self.session.genesis is None:
            say(" 1. Configure new genesis")
            say(" 2. Import existing genesis")
            actions = {"1": self.make_genesis, "2": self.import_genesis}
        else:
            say(" 1. Manage existing genesis")
            actions = {"1": self.manage_genesis}

        choice = self.prompter.read() or "1"
        action = actions.get(choice)
        if action is None:
            logger.error("That's not something I can do")
            return
        action()

    def make_genesis(self) -> None:
        """Build a new genesis record and store it in the session."""
        try:
            genesis = build_genesis(self.prompter, now=self._now, rng=self._rng)
        except UserInputError as e:
            logger.error("Genesis construction aborted: %s", e.message)
            return

        self.session.genesis = genesis
        self._flush()

    def import_genesis(self) -> None:
        """Replace the session's genesis with one read from a file or URL."""
        self.prompter.say()
        self.prompter.say("Where's the genesis file? (local file or http/https url)")
        location = self.prompter.read_url()

        try:
            genesis = import_genesis(location, client=self._client)
        except GenesisWizardError as e:
            logger.error(e.message)
            return

        self.session.genesis = genesis
        self._flush()

    def manage_genesis(self) -> None:
        """Modify, export or remove the existing genesis."""
        if self.session.genesis is None:
            logger.error("There is no genesis configured yet")
            return

        say = self.prompter.say
        say()
        say(" 1. Modify existing configurations")
        say(" 2. Export genesis configurations")
        say(" 3. Remove genesis configuration")

        choice = self.prompter.read()
        if choice == "1":
            self.session.genesis = edit_forks(self.session.genesis, self.prompter)
            self._flush()
        elif choice == "2":
            self.export_genesis()
        elif choice == "3":
            try:
                reset_genesis(self.session)
            except GenesisWizardError as e:
                logger.error(e.message)
        else:
            logger.error("That's not something I can do")

    def export_genesis(self) -> None:
        """Save the current genesis to a file of the operator's choosing."""
        genesis = self.session.genesis
        if genesis is None:
            logger.error("There is no genesis configured yet")
            return

        default = default_export_name(self.session.network)
        self.prompter.say()
        self.prompter.say(f"Which file to save the genesis into? (default = {default})")
        path = self.prompter.read_default_string(default)
        try:
            export_genesis(genesis, path)
        except GenesisWizardError as e:
            logger.error(e.message)

    def _flush(self) -> None:
        try:
            self.session.flush()
        except GenesisWizardError as e:
            logger.error("Failed to persist session: %s", e.message)
