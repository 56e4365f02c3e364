"""Specifications for chain and consensus parameters."""

from .config import (
    DEFAULT_FORK_SCHEDULE,
    ENGINES,
    FORK_BLOCKS,
    AlienConfig,
    ChainConfig,
    CliqueConfig,
    ConsensusConfig,
    EthashConfig,
)

__all__ = [
    "AlienConfig",
    "ChainConfig",
    "CliqueConfig",
    "ConsensusConfig",
    "DEFAULT_FORK_SCHEDULE",
    "ENGINES",
    "EthashConfig",
    "FORK_BLOCKS",
]
