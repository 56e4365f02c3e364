"""
Consensus engine selection.

The operator picks one of three engines and answers the questions that
engine needs. The outcome fixes the genesis difficulty, the header
extra-data, and the engine sub-config of the chain config:

- Ethash (proof-of-work): default difficulty, 32 zero bytes of extra-data.
- Clique (proof-of-authority): difficulty 1, authority list in extra-data.
- Alien (delegated-proof-of-authority): difficulty 1, 97 zero bytes of
  extra-data, self-voting signers in the config and auto pre-funded.

Difficulty 1 on the authority engines is only used for fork tie-breaking.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from typing_extensions import Final

from genesis_wizard.chain.config import (
    ALIEN_DEFAULT_BLOCK_REWARD,
    ALIEN_DEFAULT_EPOCH,
    ALIEN_DEFAULT_GENESIS_DELAY_MINUTES,
    ALIEN_DEFAULT_MAX_SIGNER_COUNT,
    ALIEN_DEFAULT_MIN_VOTER_BALANCE,
    ALIEN_DEFAULT_PERIOD,
    CLIQUE_DEFAULT_EPOCH,
    CLIQUE_DEFAULT_PERIOD,
    WEI_PER_ETHER,
    AlienConfig,
    CliqueConfig,
    ConsensusConfig,
    EthashConfig,
)
from genesis_wizard.genesis.alloc import AllocationBuilder
from genesis_wizard.genesis.genesis import DEFAULT_DIFFICULTY
from genesis_wizard.prompt import Prompter
from genesis_wizard.types import Address, HexBytes, Uint64, Uint256, UserInputError

from .extra_data import ETHASH_EXTRA_DATA_LENGTH, encode_authorities, encode_voters

logger = logging.getLogger(__name__)

ETHASH_CHOICE: Final = "1"
CLIQUE_CHOICE: Final = "2"
ALIEN_CHOICE: Final = "3"

AUTHORITY_DIFFICULTY: Final = 1
"""Difficulty of authority-based genesis blocks."""

MAX_WHOLE_UNITS: Final = Uint256.MAX // WEI_PER_ETHER
"""Largest token amount, in whole units, whose wei value fits 256 bits."""


@dataclass(frozen=True, slots=True)
class ConsensusSetup:
    """Genesis fields decided by the consensus engine choice."""

    consensus: ConsensusConfig
    """Engine sub-config for the chain config."""

    difficulty: int
    """Genesis block difficulty."""

    extra_data: HexBytes
    """Genesis header extra-data."""


def read_addresses(
    prompter: Prompter,
    on_accept: Callable[[Address], None] | None = None,
) -> list[Address]:
    """
    Read a non-empty list of addresses.

    Prompts until the operator has entered at least one address and then
    answers with an empty line. Repeated addresses are ignored.

    Args:
        prompter: Source of the addresses.
        on_accept: Called with each newly accepted address, in entry order.

    Returns:
        The accepted addresses in entry order.
    """
    addresses: list[Address] = []
    while True:
        address = prompter.read_address()
        if address is None:
            if addresses:
                return addresses
            logger.warning("At least one account is required")
            continue
        if address in addresses:
            logger.warning("Account %s already entered, ignoring", address)
            continue
        addresses.append(address)
        if on_accept is not None:
            on_accept(address)


def configure_consensus(
    prompter: Prompter,
    alloc: AllocationBuilder,
    *,
    now: Callable[[], float] = time.time,
) -> ConsensusSetup:
    """
    Ask for the consensus engine and its parameters.

    An empty answer selects proof-of-authority. Delegated-proof-of-authority
    must be chosen explicitly.

    Args:
        prompter: Source of the operator's answers.
        alloc: Allocation receiving the self-voting signers of an alien chain.
        now: Clock used to derive the alien genesis timestamp.

    Raises:
        UserInputError: If the choice names no engine. Nothing is configured.
    """
    prompter.say()
    prompter.say("Which consensus engine to use? (default = clique)")
    prompter.say(" 1. Ethash - proof-of-work")
    prompter.say(" 2. Clique - proof-of-authority")
    prompter.say(" 3. Alien  - delegated-proof-of-authority")

    choice = prompter.read()
    if choice == ETHASH_CHOICE:
        return _configure_ethash()
    if choice in ("", CLIQUE_CHOICE):
        return _configure_clique(prompter)
    if choice == ALIEN_CHOICE:
        return _configure_alien(prompter, alloc, now)
    raise UserInputError(f"Invalid consensus engine choice: {choice!r}", choice=choice)


def _configure_ethash() -> ConsensusSetup:
    return ConsensusSetup(
        consensus=EthashConfig(),
        difficulty=DEFAULT_DIFFICULTY,
        extra_data=HexBytes(bytes(ETHASH_EXTRA_DATA_LENGTH)),
    )


def _configure_clique(prompter: Prompter) -> ConsensusSetup:
    prompter.say()
    prompter.say(f"How many seconds should blocks take? (default = {CLIQUE_DEFAULT_PERIOD})")
    period = prompter.read_default_int(CLIQUE_DEFAULT_PERIOD, maximum=Uint64.MAX)

    prompter.say()
    prompter.say("Which accounts are allowed to seal? (mandatory at least one)")
    signers = read_addresses(prompter)

    logger.info("Configured clique with %d signer(s), period %ds", len(signers), period)
    return ConsensusSetup(
        consensus=CliqueConfig(period=Uint64(period), epoch=Uint64(CLIQUE_DEFAULT_EPOCH)),
        difficulty=AUTHORITY_DIFFICULTY,
        extra_data=encode_authorities(signers),
    )


def _configure_alien(
    prompter: Prompter,
    alloc: AllocationBuilder,
    now: Callable[[], float],
) -> ConsensusSetup:
    prompter.say()
    prompter.say(f"How many seconds should blocks take? (default = {ALIEN_DEFAULT_PERIOD})")
    period = prompter.read_default_int(ALIEN_DEFAULT_PERIOD, maximum=Uint64.MAX)

    prompter.say()
    prompter.say(f"How many blocks create for one epoch? (default = {ALIEN_DEFAULT_EPOCH})")
    epoch = prompter.read_default_int(ALIEN_DEFAULT_EPOCH, maximum=Uint64.MAX)

    prompter.say()
    prompter.say(
        f"What is the max number of signers? (default = {ALIEN_DEFAULT_MAX_SIGNER_COUNT})"
    )
    max_signer_count = prompter.read_default_int(
        ALIEN_DEFAULT_MAX_SIGNER_COUNT, maximum=Uint64.MAX
    )

    prompter.say()
    prompter.say(
        "What is the minimum balance for a valid voter? "
        f"(default = {ALIEN_DEFAULT_MIN_VOTER_BALANCE} ETH)"
    )
    min_voter_balance = (
        prompter.read_default_int(ALIEN_DEFAULT_MIN_VOTER_BALANCE, maximum=MAX_WHOLE_UNITS)
        * WEI_PER_ETHER
    )

    prompter.say()
    prompter.say(
        f"How much reward does one block generate? (default = {ALIEN_DEFAULT_BLOCK_REWARD} ETH)"
    )
    block_reward = (
        prompter.read_default_int(ALIEN_DEFAULT_BLOCK_REWARD, maximum=MAX_WHOLE_UNITS)
        * WEI_PER_ETHER
    )

    prompter.say()
    prompter.say(
        "How many minutes delay to create the first block? "
        f"(default = {ALIEN_DEFAULT_GENESIS_DELAY_MINUTES} minutes)"
    )
    start = int(now())
    delay_minutes = prompter.read_default_int(
        ALIEN_DEFAULT_GENESIS_DELAY_MINUTES, maximum=(Uint64.MAX - start) // 60
    )
    genesis_timestamp = start + delay_minutes * 60

    # Each signer is funded as soon as it is entered.
    #
    # A signer without funds could never reach the minimum voter balance
    # and so could never vote for itself.
    prompter.say()
    prompter.say(
        "Which accounts vote for themselves to seal the block? "
        "(at least one, those accounts will be auto pre-funded)"
    )
    signers = read_addresses(
        prompter,
        on_accept=lambda signer: alloc.fund_signer(signer, min_voter_balance),
    )

    logger.info(
        "Configured alien with %d self-voting signer(s), period %ds", len(signers), period
    )
    return ConsensusSetup(
        consensus=AlienConfig(
            period=Uint64(period),
            epoch=Uint64(epoch),
            max_signer_count=Uint64(max_signer_count),
            min_voter_balance=Uint256(min_voter_balance),
            block_reward=Uint256(block_reward),
            genesis_timestamp=Uint64(genesis_timestamp),
            self_vote_signers=signers,
        ),
        difficulty=AUTHORITY_DIFFICULTY,
        extra_data=encode_voters(),
    )
