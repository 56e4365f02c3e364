"""Reusable type definitions for genesis records."""

from .base import CamelModel, ClientDocumentModel, StrictBaseModel
from .byte_arrays import Address, BaseBytes, Hash, HexBytes
from .exceptions import (
    FormatError,
    GenesisWizardError,
    PersistenceError,
    PreconditionError,
    TransportError,
    UserInputError,
)
from .uint import BaseUint, HexUint64, HexUint256, Uint64, Uint256, parse_quantity

__all__ = [
    # Core types
    "Address",
    "BaseBytes",
    "BaseUint",
    "CamelModel",
    "ClientDocumentModel",
    "Hash",
    "HexBytes",
    "HexUint64",
    "HexUint256",
    "StrictBaseModel",
    "Uint64",
    "Uint256",
    "parse_quantity",
    # Exceptions
    "GenesisWizardError",
    "UserInputError",
    "TransportError",
    "FormatError",
    "PersistenceError",
    "PreconditionError",
]
