"""
Interactive genesis construction.

Drives the whole build: header defaults, consensus engine, pre-funded
accounts, precompiles and chain id. The record is assembled only after
every answer is in, so an aborted build never leaves a partial record.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable

from typing_extensions import Final

from genesis_wizard.chain import DEFAULT_FORK_SCHEDULE, ChainConfig
from genesis_wizard.consensus import configure_consensus
from genesis_wizard.genesis import DEFAULT_GAS_LIMIT, AllocationBuilder, Genesis
from genesis_wizard.prompt import Prompter
from genesis_wizard.types import HexUint64, HexUint256, Uint256

logger = logging.getLogger(__name__)

CHAIN_ID_RANGE: Final = 65536
"""Upper bound (exclusive) of the randomly suggested chain id."""


def build_genesis(
    prompter: Prompter,
    *,
    now: Callable[[], float] = time.time,
    rng: random.Random | None = None,
) -> Genesis:
    """
    Build a new genesis record from the operator's answers.

    Args:
        prompter: Source of the operator's answers.
        now: Clock for the genesis timestamp (injectable for tests).
        rng: Source of the suggested chain id (injectable for tests).

    Raises:
        UserInputError: If the consensus engine choice is invalid.
    """
    rng = rng or random.Random()
    timestamp = int(now())

    alloc = AllocationBuilder()
    setup = configure_consensus(prompter, alloc, now=now)

    # Consensus all set, just ask for initial funds and go.
    alloc.prompt_prefunded_accounts(prompter)
    alloc.prompt_precompiles(prompter)

    prompter.say()
    prompter.say("Specify your chain/network ID if you want an explicit one (default = random)")
    chain_id = prompter.read_default_int(rng.randrange(CHAIN_ID_RANGE), maximum=Uint256.MAX)

    genesis = Genesis(
        config=ChainConfig(
            chain_id=Uint256(chain_id),
            **DEFAULT_FORK_SCHEDULE,
            consensus=setup.consensus,
        ),
        timestamp=HexUint64(timestamp),
        extra_data=setup.extra_data,
        gas_limit=HexUint64(DEFAULT_GAS_LIMIT),
        difficulty=HexUint256(setup.difficulty),
        alloc=alloc.build(),
    )
    logger.info(
        "Configured new genesis block: engine=%s, chain_id=%d, accounts=%d",
        genesis.config.engine,
        chain_id,
        len(genesis.alloc),
    )
    return genesis
