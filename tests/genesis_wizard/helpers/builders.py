"""Factories for test genesis records and addresses."""

from __future__ import annotations

from genesis_wizard.chain import DEFAULT_FORK_SCHEDULE, ChainConfig, CliqueConfig
from genesis_wizard.consensus import encode_authorities
from genesis_wizard.genesis import Genesis, GenesisAccount
from genesis_wizard.types import Address, HexUint64, HexUint256, Uint64, Uint256

FIXED_NOW = 1_700_000_000.0
"""Clock value used wherever a test needs a deterministic "now"."""


def fixed_clock() -> float:
    """Deterministic clock for builders."""
    return FIXED_NOW


def make_address(byte: int) -> Address:
    """Address made of one repeated byte, e.g. 0xaaaa...aa."""
    return Address(bytes([byte]) * Address.LENGTH)


def make_clique_genesis(
    signers: list[Address] | None = None,
    balances: dict[Address, int] | None = None,
    chain_id: int = 1337,
) -> Genesis:
    """Small proof-of-authority genesis with the default fork schedule."""
    signers = signers if signers is not None else [make_address(0x11)]
    balances = balances or {}
    return Genesis(
        config=ChainConfig(
            chain_id=Uint256(chain_id),
            **DEFAULT_FORK_SCHEDULE,
            consensus=CliqueConfig(period=Uint64(15), epoch=Uint64(30000)),
        ),
        timestamp=HexUint64(int(FIXED_NOW)),
        extra_data=encode_authorities(signers),
        gas_limit=HexUint64(4_700_000),
        difficulty=HexUint256(1),
        alloc={
            address: GenesisAccount(balance=HexUint256(balance))
            for address, balance in balances.items()
        },
    )
