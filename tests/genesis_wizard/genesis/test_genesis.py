"""Tests for the Genesis record model."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from genesis_wizard.chain import CliqueConfig
from genesis_wizard.genesis import Genesis, GenesisAccount
from genesis_wizard.types import Hash, HexBytes, HexUint64
from tests.genesis_wizard.helpers import make_address, make_clique_genesis

SAMPLE_DOCUMENT = {
    "config": {
        "chainId": 1337,
        "homesteadBlock": 0,
        "eip150Block": 0,
        "eip155Block": 0,
        "eip158Block": 0,
        "byzantiumBlock": 0,
        "constantinopleBlock": 0,
        "petersburgBlock": 0,
        "clique": {"period": 5, "epoch": 30000},
    },
    "timestamp": "0x5e9d4b1c",
    "extraData": "0x" + "00" * 32 + "11" * 20 + "00" * 65,
    "gasLimit": "0x47b760",
    "difficulty": "0x1",
    "alloc": {
        "11" * 20: {"balance": hex(2**249)},
        "0x" + "22" * 20: {"balance": "1000"},
    },
}


class TestSerialization:
    """JSON form of a record."""

    def test_field_order_and_encodings(self) -> None:
        """Header fields use client key names, hex quantities and prefixed extra-data."""
        genesis = make_clique_genesis(balances={make_address(0xAA): 5})

        data = json.loads(genesis.to_json())

        assert list(data) == [
            "config",
            "nonce",
            "timestamp",
            "extraData",
            "gasLimit",
            "difficulty",
            "mixHash",
            "coinbase",
            "alloc",
            "number",
            "gasUsed",
            "parentHash",
        ]
        assert data["gasLimit"] == "0x47b760"
        assert data["difficulty"] == "0x1"
        assert data["extraData"].startswith("0x")
        assert data["alloc"] == {"aa" * 20: {"balance": "0x5"}}

    def test_output_is_indented(self) -> None:
        """Exported JSON is pretty-printed with two spaces."""
        assert make_clique_genesis().to_json().startswith('{\n  "config": {\n    "chainId"')

    def test_alloc_is_sorted_regardless_of_insertion(self) -> None:
        """Identical records serialize identically whatever the funding order."""
        first = make_clique_genesis(balances={make_address(0xBB): 1, make_address(0x01): 2})
        second = make_clique_genesis(balances={make_address(0x01): 2, make_address(0xBB): 1})

        assert first.to_json() == second.to_json()
        assert list(json.loads(first.to_json())["alloc"]) == ["01" * 20, "bb" * 20]

    def test_round_trip(self) -> None:
        """Parsing an exported record gives back an equal record."""
        genesis = make_clique_genesis(balances={make_address(0xAA): 2**249})

        restored = Genesis.from_json(genesis.to_json())

        assert restored == genesis
        assert restored.to_json() == genesis.to_json()


class TestParsing:
    """Reading documents produced by other tools."""

    def test_sample_document(self) -> None:
        """Hex and decimal balances, prefixed and bare keys are all accepted."""
        genesis = Genesis.from_json(json.dumps(SAMPLE_DOCUMENT))

        assert genesis.timestamp == 0x5E9D4B1C
        assert genesis.difficulty == 1
        assert genesis.config.chain_id == 1337
        assert genesis.config.istanbul_block is None
        assert isinstance(genesis.config.consensus, CliqueConfig)
        assert genesis.alloc[make_address(0x11)].balance == 2**249
        assert genesis.alloc[make_address(0x22)].balance == 1000
        assert genesis.mix_hash == Hash.zero()
        assert genesis.nonce == HexUint64(0)

    def test_optional_account_fields(self) -> None:
        """Code, storage and nonce survive a round trip and are omitted when unset."""
        document = dict(SAMPLE_DOCUMENT)
        document["alloc"] = {
            "33" * 20: {
                "code": "0x6000",
                "storage": {"0x" + "00" * 32: "0x" + "00" * 31 + "01"},
                "balance": "0x0",
                "nonce": "0x1",
            }
        }

        genesis = Genesis.from_json(json.dumps(document))
        account = genesis.alloc[make_address(0x33)]

        assert account.code == HexBytes("0x6000")
        assert account.nonce == 1
        assert json.loads(genesis.to_json())["alloc"]["33" * 20]["nonce"] == "0x1"
        plain = make_clique_genesis(balances={make_address(0x44): 1})
        assert json.loads(plain.to_json())["alloc"]["44" * 20] == {"balance": "0x1"}

    def test_missing_engine_is_rejected(self) -> None:
        """A record is only complete once an engine is chosen."""
        document = dict(SAMPLE_DOCUMENT)
        document["config"] = {"chainId": 1}

        with pytest.raises(ValidationError, match="exactly one consensus engine"):
            Genesis.from_json(json.dumps(document))

    def test_negative_balance_is_rejected(self) -> None:
        """Balances are unsigned."""
        document = dict(SAMPLE_DOCUMENT)
        document["alloc"] = {"11" * 20: {"balance": "-1"}}

        with pytest.raises(ValidationError):
            Genesis.from_json(json.dumps(document))

    def test_malformed_json_is_rejected(self) -> None:
        """Broken JSON surfaces as a validation error."""
        with pytest.raises(ValidationError):
            Genesis.from_json('{"config": ')


class TestImmutability:
    """Records are replaced, never edited."""

    def test_frozen(self) -> None:
        """Assigning a field raises."""
        genesis = make_clique_genesis()

        with pytest.raises(ValidationError):
            genesis.difficulty = 5  # type: ignore[misc]

    def test_accounts_are_frozen(self) -> None:
        """Account balances cannot be edited in place."""
        account = GenesisAccount(balance=1)  # type: ignore[arg-type]

        with pytest.raises(ValidationError):
            account.balance = 2  # type: ignore[misc]
