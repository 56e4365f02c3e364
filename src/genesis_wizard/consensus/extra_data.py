"""
Header extra-data codec.

Proof-of-authority chains embed the initial signer set in the genesis
header's extra-data field with a fixed layout:

    +----------------+---------------------------+------------------+
    | vanity (32 B)  | signer addresses (20 B n) | seal (65 B)      |
    +----------------+---------------------------+------------------+

- The vanity region is free-form and left zeroed at genesis.
- Signers are sorted by their raw bytes. Clients that build a genesis from
  the same signer set must produce byte-identical headers, so entry order
  cannot leak into the encoding.
- The seal region is reserved for a block signature. Genesis is never
  sealed, so it stays zeroed.

Delegated-proof-of-authority keeps its signers in the chain config, so its
extra-data is the same layout with no addresses: exactly 97 zero bytes.
"""

from __future__ import annotations

from collections.abc import Iterable

from typing_extensions import Final

from genesis_wizard.types import Address, FormatError, HexBytes

EXTRA_VANITY: Final = 32
"""Bytes reserved at the front for signer vanity data."""

EXTRA_SEAL: Final = 65
"""Bytes reserved at the end for a secp256k1 seal signature."""

ETHASH_EXTRA_DATA_LENGTH: Final = 32
"""Length of the all-zero extra-data of a proof-of-work genesis."""


def encode_authorities(authorities: Iterable[Address]) -> HexBytes:
    """
    Encode an authority list into proof-of-authority extra-data.

    Args:
        authorities: Signer addresses in any order.

    Returns:
        `32 + 20 * n + 65` bytes with the addresses in ascending byte order.
    """
    signers = sorted(authorities)
    return HexBytes(bytes(EXTRA_VANITY) + b"".join(signers) + bytes(EXTRA_SEAL))


def encode_voters() -> HexBytes:
    """
    Encode delegated-proof-of-authority extra-data.

    Voter identities are carried by the chain config, so the buffer is the
    authority layout with an empty address region.
    """
    return encode_authorities([])


def decode_authorities(extra_data: bytes) -> list[Address]:
    """
    Recover the sorted authority list from proof-of-authority extra-data.

    Raises:
        FormatError: If the buffer is shorter than the fixed regions or the
            address region is not a whole number of addresses.
    """
    signers_length = len(extra_data) - EXTRA_VANITY - EXTRA_SEAL
    if signers_length < 0:
        raise FormatError(
            f"extra-data of {len(extra_data)} bytes is shorter than "
            f"the {EXTRA_VANITY + EXTRA_SEAL} reserved bytes"
        )
    if signers_length % Address.LENGTH != 0:
        raise FormatError(
            f"signer region of {signers_length} bytes is not a multiple of {Address.LENGTH}"
        )

    region = extra_data[EXTRA_VANITY : EXTRA_VANITY + signers_length]
    return [
        Address(region[offset : offset + Address.LENGTH])
        for offset in range(0, signers_length, Address.LENGTH)
    ]
