"""Consensus engine configuration and header extra-data encoding."""

from .configurator import ConsensusSetup, configure_consensus, read_addresses
from .extra_data import decode_authorities, encode_authorities, encode_voters

__all__ = [
    "ConsensusSetup",
    "configure_consensus",
    "decode_authorities",
    "encode_authorities",
    "encode_voters",
    "read_addresses",
]
