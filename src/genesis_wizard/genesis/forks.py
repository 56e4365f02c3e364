"""Interactive editing of the fork activation schedule."""

from __future__ import annotations

import logging

from genesis_wizard.chain import FORK_BLOCKS
from genesis_wizard.prompt import Prompter
from genesis_wizard.types import Uint256

from .genesis import Genesis

logger = logging.getLogger(__name__)


def edit_forks(genesis: Genesis, prompter: Prompter) -> Genesis:
    """
    Ask for a new activation block for every fork.

    Each question offers the current block as its default, so an empty
    answer keeps it, including keeping an unscheduled fork unscheduled.
    An unscheduled Petersburg defaults to Constantinople's block, since
    Petersburg only undoes part of Constantinople.

    Returns:
        A new record carrying the updated chain config.
    """
    updates: dict[str, Uint256 | None] = {}
    for field_name, label in FORK_BLOCKS:
        current = updates.get(field_name, getattr(genesis.config, field_name))
        if field_name == "petersburg_block" and current is None:
            current = updates["constantinople_block"]

        prompter.say()
        prompter.say(f"Which block should {label} come into effect? (default = {current})")
        value = prompter.read_default_big_int(
            None if current is None else int(current), maximum=Uint256.MAX
        )
        updates[field_name] = None if value is None else Uint256(value)

    config = genesis.config.model_copy(update=updates)
    logger.info(
        "Chain configuration updated:\n\n%s\n",
        config.model_dump_json(by_alias=True, exclude_none=True, indent=2),
    )
    return genesis.model_copy(update={"config": config})
