"""
Chain and Consensus Configuration Specification

This file defines the chain configuration embedded in a genesis record:
the chain identifier, the fork activation schedule, and the parameters of
the single consensus engine the network runs.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field, SerializerFunctionWrapHandler, model_serializer, model_validator
from typing_extensions import Final

from genesis_wizard.types import Address, ClientDocumentModel, StrictBaseModel, Uint64, Uint256

# --- Consensus Defaults ---

WEI_PER_ETHER: Final = 10**18
"""Scale applied to native token amounts entered in whole units."""

CLIQUE_DEFAULT_PERIOD: Final = 15
"""Default number of seconds between proof-of-authority blocks."""

CLIQUE_DEFAULT_EPOCH: Final = 30000
"""Number of blocks after which clique checkpoints and resets pending votes."""

ALIEN_DEFAULT_PERIOD: Final = 3
"""Default number of seconds between delegated-proof-of-authority blocks."""

ALIEN_DEFAULT_EPOCH: Final = 201600
"""Default number of blocks in one delegated-proof-of-authority epoch."""

ALIEN_DEFAULT_MAX_SIGNER_COUNT: Final = 21
"""Default maximum number of concurrent signers."""

ALIEN_DEFAULT_MIN_VOTER_BALANCE: Final = 1000
"""Default minimum balance, in whole units, an account needs to vote."""

ALIEN_DEFAULT_BLOCK_REWARD: Final = 10
"""Default reward, in whole units, for sealing one block."""

ALIEN_DEFAULT_GENESIS_DELAY_MINUTES: Final = 5
"""Default delay between building the genesis and the first block."""


class EthashConfig(StrictBaseModel):
    """Proof-of-work marker. The engine takes no parameters."""

    ENGINE: ClassVar[str] = "ethash"


class CliqueConfig(StrictBaseModel):
    """Proof-of-authority parameters."""

    ENGINE: ClassVar[str] = "clique"

    period: Uint64 = Uint64(CLIQUE_DEFAULT_PERIOD)
    """Number of seconds between blocks."""

    epoch: Uint64 = Uint64(CLIQUE_DEFAULT_EPOCH)
    """Epoch length to reset votes and checkpoint."""


class AlienConfig(StrictBaseModel):
    """
    Delegated-proof-of-authority parameters.

    Signer identities live here rather than in the header extra-data, so
    the extra-data of such a chain carries no addresses at all.
    """

    ENGINE: ClassVar[str] = "alien"

    period: Uint64
    """Number of seconds between blocks."""

    epoch: Uint64
    """Number of blocks after which votes are tallied and signers rotated."""

    max_signer_count: Uint64 = Field(alias="maxSignersCount")
    """Maximum number of signers sealing concurrently."""

    min_voter_balance: Uint256
    """Minimum balance, in wei, an account needs for its vote to count."""

    block_reward: Uint256
    """Reward, in wei, for sealing one block."""

    genesis_timestamp: Uint64
    """Unix time at which the first block may be sealed."""

    self_vote_signers: list[Address] = Field(default_factory=list, alias="signers")
    """Signers that vote for themselves at genesis, in entry order."""


ConsensusConfig = EthashConfig | CliqueConfig | AlienConfig
"""The consensus sub-config variants. Exactly one is set on a complete chain config."""

ENGINES: Final[dict[str, type[ConsensusConfig]]] = {
    EthashConfig.ENGINE: EthashConfig,
    CliqueConfig.ENGINE: CliqueConfig,
    AlienConfig.ENGINE: AlienConfig,
}
"""Engine sub-config classes keyed by their JSON key."""


class ChainConfig(ClientDocumentModel):
    """
    The chain configuration of a genesis record.

    Fork blocks left unset mean "never scheduled" and are omitted from the
    JSON form. They are distinct from 0, which activates the fork at genesis.

    In JSON the consensus engine appears under its own key (`ethash`,
    `clique` or `alien`). In Python it is the single `consensus` field.
    """

    chain_id: Uint256 | None = None
    """Network chain identifier used for replay protection."""

    homestead_block: Uint256 | None = None
    eip150_block: Uint256 | None = Field(default=None, alias="eip150Block")
    eip155_block: Uint256 | None = Field(default=None, alias="eip155Block")
    eip158_block: Uint256 | None = Field(default=None, alias="eip158Block")
    byzantium_block: Uint256 | None = None
    constantinople_block: Uint256 | None = None
    petersburg_block: Uint256 | None = None
    istanbul_block: Uint256 | None = None

    consensus: ConsensusConfig | None = None
    """Parameters of the consensus engine."""

    @model_validator(mode="before")
    @classmethod
    def _read_engine_key(cls, data: Any) -> Any:
        """Lift the engine keyed sub-object into the `consensus` field."""
        if not isinstance(data, dict):
            return data

        present = [name for name in ENGINES if name in data]
        if not present:
            return data
        if len(present) > 1 or "consensus" in data:
            raise ValueError(f"at most one consensus engine may be configured, got {present}")

        data = dict(data)
        name = present[0]
        data["consensus"] = ENGINES[name].model_validate(data.pop(name))
        return data

    @model_serializer(mode="wrap")
    def _write_engine_key(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        """Write the consensus parameters back under the engine's key."""
        data = handler(self)
        engine = data.pop("consensus", None)
        if self.consensus is not None:
            data[self.consensus.ENGINE] = engine
        return data

    @property
    def engine(self) -> str | None:
        """Name of the configured consensus engine, if any."""
        return None if self.consensus is None else self.consensus.ENGINE


FORK_BLOCKS: Final[tuple[tuple[str, str], ...]] = (
    ("homestead_block", "Homestead"),
    ("eip150_block", "EIP150 (Tangerine Whistle)"),
    ("eip155_block", "EIP155 (Spurious Dragon)"),
    ("eip158_block", "EIP158/161 (also Spurious Dragon)"),
    ("byzantium_block", "Byzantium"),
    ("constantinople_block", "Constantinople"),
    ("petersburg_block", "Petersburg"),
    ("istanbul_block", "Istanbul"),
)
"""Fork block fields in activation order, with the names shown to operators."""

DEFAULT_FORK_SCHEDULE: Final[dict[str, Uint256]] = {
    name: Uint256(index) for index, (name, _) in enumerate(FORK_BLOCKS)
}
"""
Fork schedule of a freshly built genesis.

Homestead at block 0, then each later fork one block after the previous one.
"""
