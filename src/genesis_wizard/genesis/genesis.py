"""
Genesis record.

The genesis record is the initial state every node of a network must agree
on byte for byte: header defaults, the chain configuration, and the
pre-funded account balances.

The JSON form follows the layout execution clients read:

    {
      "config": {"chainId": 1337, "homesteadBlock": 0, ..., "clique": {...}},
      "nonce": "0x0",
      "timestamp": "0x5e9d4b1c",
      "extraData": "0x0000...",
      "gasLimit": "0x47b760",
      "difficulty": "0x1",
      "alloc": {"<address hex>": {"balance": "0x..."}},
      ...
    }
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, SerializerFunctionWrapHandler, field_serializer, model_validator
from typing_extensions import Final

from genesis_wizard.chain import ChainConfig
from genesis_wizard.types import (
    Address,
    ClientDocumentModel,
    Hash,
    HexBytes,
    HexUint64,
    HexUint256,
)

DEFAULT_GAS_LIMIT: Final = 4_700_000
"""Gas limit of a freshly built genesis block."""

DEFAULT_DIFFICULTY: Final = 524_288
"""Difficulty of a freshly built genesis block. Authority engines override it."""


class GenesisAccount(ClientDocumentModel):
    """
    An account in the genesis state.

    Only the balance is set by the wizard. Code, storage and nonce are kept
    so that records imported from elsewhere survive a round trip.
    """

    code: HexBytes | None = None
    storage: dict[Hash, Hash] | None = None
    balance: HexUint256
    nonce: HexUint64 | None = None


GenesisAlloc = dict[Address, GenesisAccount]
"""Mapping of address to initial account state."""


class Genesis(ClientDocumentModel):
    """
    A complete genesis specification.

    Records are immutable. Any edit produces a new record that replaces
    the old one wholesale.
    """

    config: ChainConfig
    """Chain identifier, fork schedule and consensus engine parameters."""

    nonce: HexUint64 = HexUint64(0)
    timestamp: HexUint64
    """Creation time in seconds since the Unix epoch."""

    extra_data: HexBytes = HexBytes(b"")
    """Header extra-data, laid out as the consensus engine requires."""

    gas_limit: HexUint64
    difficulty: HexUint256
    mix_hash: Hash = Hash.zero()
    coinbase: Address = Address.zero()

    alloc: GenesisAlloc = Field(default_factory=dict)
    """Pre-funded accounts."""

    number: HexUint64 = HexUint64(0)
    gas_used: HexUint64 = HexUint64(0)
    parent_hash: Hash = Hash.zero()

    @model_validator(mode="after")
    def _require_consensus_engine(self) -> Genesis:
        """A genesis is complete only once a consensus engine has been chosen."""
        if self.config.consensus is None:
            raise ValueError(
                "genesis config must select exactly one consensus engine (ethash, clique, alien)"
            )
        return self

    @field_serializer("alloc", mode="wrap")
    def _sort_alloc(self, alloc: GenesisAlloc, handler: SerializerFunctionWrapHandler) -> Any:
        """Emit accounts sorted by address so identical records serialize identically."""
        return dict(sorted(handler(alloc).items()))

    def to_json(self) -> str:
        """Serialize to the indented JSON document clients consume."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)

    @classmethod
    def from_json(cls, content: str | bytes) -> Genesis:
        """
        Parse a genesis JSON document.

        Raises:
            pydantic.ValidationError: If the document is malformed or
                does not describe a complete genesis record.
        """
        return cls.model_validate_json(content)
