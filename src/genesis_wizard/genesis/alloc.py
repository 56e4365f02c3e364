"""
Genesis allocation builder.

Three independent funding passes populate the genesis allocation:

1. Delegated-proof-of-authority self-voting signers, at the minimum voter
   balance, so each signer can meet its own voting threshold.
2. Operator-entered accounts, each at a large fixed balance.
3. Optionally every precompile address, at 1 wei, so clients that prune
   empty accounts never delete them.

Passes never remove entries. When two passes fund the same address the one
that runs last wins. Balances are replaced, never summed.
"""

from __future__ import annotations

import logging

from typing_extensions import Final

from genesis_wizard.prompt import Prompter
from genesis_wizard.types import Address, HexUint256

from .genesis import GenesisAccount, GenesisAlloc

logger = logging.getLogger(__name__)

PREFUND_BALANCE: Final = 1 << (256 - 7)
"""
Balance given to operator-entered accounts: 2^256 / 128.

Large enough to never run dry, small enough that many such accounts can
exist without any balance arithmetic overflowing 256 bits.
"""

PRECOMPILE_COUNT: Final = 256
"""Number of low addresses (0x00..00 to 0x00..ff) reserved for precompiles."""

PRECOMPILE_BALANCE: Final = 1
"""Balance keeping a precompile account non-empty."""


class AllocationBuilder:
    """Accumulates the genesis allocation across funding passes."""

    def __init__(self) -> None:
        self._accounts: GenesisAlloc = {}

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, address: object) -> bool:
        return address in self._accounts

    def fund(self, address: Address, balance: int) -> None:
        """Set the balance of `address`, replacing any earlier entry."""
        self._accounts[address] = GenesisAccount(balance=HexUint256(balance))

    def fund_signer(self, signer: Address, min_voter_balance: int) -> None:
        """Fund a self-voting signer with exactly the minimum voter balance."""
        self.fund(signer, min_voter_balance)

    def fund_precompiles(self) -> None:
        """Fund every precompile address with 1 wei."""
        for i in range(PRECOMPILE_COUNT):
            self.fund(Address.from_int(i), PRECOMPILE_BALANCE)

    def prompt_prefunded_accounts(self, prompter: Prompter) -> None:
        """Fund operator-entered accounts until an empty answer. Zero accounts is fine."""
        prompter.say()
        prompter.say("Which accounts should be pre-funded? (advisable at least one)")
        while (address := prompter.read_address()) is not None:
            self.fund(address, PREFUND_BALANCE)
            logger.debug("Pre-funded %s", address)

    def prompt_precompiles(self, prompter: Prompter) -> None:
        """Offer to fund the precompile addresses, defaulting to yes."""
        prompter.say()
        prompter.say(
            "Should the precompile-addresses (0x1 .. 0xff) be pre-funded with 1 wei? "
            "(advisable yes)"
        )
        if prompter.read_default_yes_no(True):
            self.fund_precompiles()

    def build(self) -> GenesisAlloc:
        """Return a snapshot of the allocation."""
        return dict(self._accounts)
