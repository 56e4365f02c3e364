"""End-to-end tests for interactive genesis construction."""

from __future__ import annotations

import random

import pytest

from genesis_wizard.builder import build_genesis
from genesis_wizard.chain import AlienConfig, CliqueConfig, EthashConfig
from genesis_wizard.consensus import decode_authorities
from genesis_wizard.genesis import DEFAULT_DIFFICULTY, DEFAULT_GAS_LIMIT, PREFUND_BALANCE
from genesis_wizard.types import Address, UserInputError
from tests.genesis_wizard.helpers import FIXED_NOW, ScriptedPrompter, fixed_clock, make_address

AA = "0x" + "aa" * 20
BB = "0x" + "bb" * 20
EE = "0x" + "ee" * 20
ONES = "0x" + "11" * 20


def _build(answers: list[str], seed: int = 0):
    prompter = ScriptedPrompter(answers)
    genesis = build_genesis(prompter, now=fixed_clock, rng=random.Random(seed))
    assert prompter.remaining == 0
    return genesis


class TestProofOfAuthority:
    """Clique genesis end to end."""

    def test_two_authorities_with_precompiles(self) -> None:
        """Authorities entered out of order are embedded sorted, precompiles funded."""
        genesis = _build(
            [
                "2",  # clique
                "",  # default period
                AA,
                ONES,
                "",  # done with signers
                "",  # no pre-funded accounts
                "",  # precompiles: default yes
                "",  # random chain id
            ]
        )

        assert len(genesis.extra_data) == 137
        assert genesis.extra_data[32:52] == make_address(0x11)
        assert genesis.extra_data[52:72] == make_address(0xAA)
        assert decode_authorities(genesis.extra_data) == [make_address(0x11), make_address(0xAA)]
        assert len(genesis.alloc) == 256
        assert all(account.balance == 1 for account in genesis.alloc.values())
        assert genesis.difficulty == 1
        assert isinstance(genesis.config.consensus, CliqueConfig)
        assert genesis.config.consensus.period == 15

    def test_header_defaults(self) -> None:
        """Timestamp, gas limit and fork schedule take their defaults."""
        genesis = _build(["", "", AA, "", "", "n", "1337"])

        assert genesis.timestamp == int(FIXED_NOW)
        assert genesis.gas_limit == DEFAULT_GAS_LIMIT
        assert genesis.config.chain_id == 1337
        assert genesis.config.homestead_block == 0
        assert genesis.config.istanbul_block == 7
        assert genesis.alloc == {}

    def test_random_chain_id(self) -> None:
        """Without an explicit answer the chain id is drawn from [0, 65536)."""
        genesis = _build(["", "", AA, "", "", "n", ""], seed=42)

        assert genesis.config.chain_id == random.Random(42).randrange(65536)

    def test_chain_id_beyond_256_bits_is_asked_again(self) -> None:
        """An unrepresentable chain id is rejected instead of crashing."""
        genesis = _build(["", "", AA, "", "", "n", str(2**256), "42"])

        assert genesis.config.chain_id == 42

    def test_prefunded_accounts(self) -> None:
        """Operator accounts are funded with 2^256 / 128."""
        genesis = _build(["2", "", AA, "", BB, EE, "", "n", ""])

        assert genesis.alloc[make_address(0xBB)].balance == PREFUND_BALANCE
        assert genesis.alloc[make_address(0xEE)].balance == PREFUND_BALANCE
        assert make_address(0xAA) not in genesis.alloc


class TestDelegatedProofOfAuthority:
    """Alien genesis end to end."""

    def test_single_signer_defaults(self) -> None:
        """The signer is funded with the minimum voter balance, extra-data has no addresses."""
        genesis = _build(
            [
                "3",  # alien
                "",  # period
                "",  # epoch
                "",  # max signers
                "",  # min voter balance
                "",  # block reward
                "",  # genesis delay
                BB,
                "",  # done with signers
                "",  # no pre-funded accounts
                "n",  # no precompiles
                "",  # random chain id
            ]
        )

        assert {address: account.balance for address, account in genesis.alloc.items()} == {
            make_address(0xBB): 1000 * 10**18
        }
        assert genesis.extra_data == bytes(97)
        assert genesis.difficulty == 1
        assert isinstance(genesis.config.consensus, AlienConfig)
        assert genesis.config.consensus.self_vote_signers == [make_address(0xBB)]

    def test_signer_re_entered_as_prefunded_account(self) -> None:
        """A signer entered again as an operator account ends with the operator balance."""
        genesis = _build(["3", "", "", "", "", "", "", BB, "", BB, "", "n", ""])

        assert genesis.alloc[make_address(0xBB)].balance == PREFUND_BALANCE

    def test_signers_survive_precompile_funding(self) -> None:
        """Precompiles add 256 entries without touching signer balances."""
        genesis = _build(["3", "", "", "", "", "", "", BB, "", "", "y", ""])

        assert len(genesis.alloc) == 257
        assert genesis.alloc[make_address(0xBB)].balance == 1000 * 10**18
        assert genesis.alloc[Address.from_int(0xFF)].balance == 1


class TestProofOfWork:
    """Ethash genesis end to end."""

    def test_ethash(self) -> None:
        """Proof-of-work keeps the default difficulty."""
        genesis = _build(["1", "", "n", "99"])

        assert isinstance(genesis.config.consensus, EthashConfig)
        assert genesis.difficulty == DEFAULT_DIFFICULTY
        assert genesis.extra_data == bytes(32)
        assert genesis.config.chain_id == 99


class TestInvalidChoice:
    """Aborted builds."""

    def test_invalid_engine_aborts_before_any_other_question(self) -> None:
        """An unknown engine raises and asks nothing further."""
        prompter = ScriptedPrompter(["9", "", AA, "", "", "", ""])

        with pytest.raises(UserInputError):
            build_genesis(prompter, now=fixed_clock)

        assert prompter.remaining == 6
