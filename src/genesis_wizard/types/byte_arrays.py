"""
Byte array types used by genesis records.

This module provides:

- BaseBytes subclasses of a fixed length (`Address`, `Hash`).
- `HexBytes`: a variable-length byte string.

All of them accept raw bytes or hex strings (with or without a '0x' prefix),
which is how they appear in genesis JSON documents.
"""

from __future__ import annotations

from typing import Any, ClassVar, SupportsIndex

from Crypto.Hash import keccak
from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce raw bytes or a hex string to immutable bytes.

    Raises:
      ValueError if the string is not valid hex.
      TypeError for any other input type.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        text = value.strip()
        if text[:2] in ("0x", "0X"):
            text = text[2:]
        # bytes.fromhex handles empty string and validates hex characters
        return bytes.fromhex(text)
    raise TypeError(f"Expected bytes or hex string, got {type(value).__name__}")


class BaseBytes(bytes):
    """
    A base class for fixed-length byte types that inherits from `bytes`.

    Subclasses set:
      - `LENGTH`: exact number of bytes the instance must contain.

    Instances are immutable byte objects with strict length checking.
    Ordering is the plain lexicographic byte ordering inherited from `bytes`.
    """

    LENGTH: ClassVar[int]
    """The exact number of bytes (overridden by subclasses)."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create and validate a new instance.

        Raises:
            ValueError: If the resulting byte length differs from `LENGTH`.
        """
        if not hasattr(cls, "LENGTH"):
            raise TypeError(f"{cls.__name__} must define LENGTH")

        b = _coerce_to_bytes(value)
        if len(b) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} expects exactly {cls.LENGTH} bytes, got {len(b)}")
        return super().__new__(cls, b)

    @classmethod
    def zero(cls) -> Self:
        """Create a new instance filled with zero bytes."""
        return cls(b"\x00" * cls.LENGTH)

    @classmethod
    def from_int(cls, value: int) -> Self:
        """Create an instance holding `value` as a left-padded big-endian number."""
        return cls(value.to_bytes(cls.LENGTH, "big"))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        Both Python and JSON inputs go through the class constructor, so hex
        strings are accepted everywhere. Serialization emits bare hex, the
        "unprefixed" convention clients use for alloc keys.
        """

        def validate(value: Any) -> BaseBytes:
            if isinstance(value, cls):
                return value
            try:
                return cls(value)
            except TypeError as e:
                raise ValueError(str(e)) from e

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda x: x.hex()),
        )

    def __repr__(self) -> str:
        """Return a string representation of the bytes."""
        tname = type(self).__name__
        return f"{tname}({self.hex()})"

    def hex(self, sep: str | bytes | None = None, bytes_per_sep: SupportsIndex = 1) -> str:
        """Return the hexadecimal string representation of the underlying bytes."""
        return bytes(self).hex() if sep is None else bytes(self).hex(sep, bytes_per_sep)


class Address(BaseBytes):
    """A 20-byte account address."""

    LENGTH = 20

    def checksum(self) -> str:
        """
        Render the address in EIP-55 mixed-case checksum form.

        Each hex letter is upper-cased when the matching nibble of the
        keccak-256 hash of the lowercase hex string is 8 or more.
        """
        lower = self.hex()
        digest = keccak.new(digest_bits=256, data=lower.encode("ascii")).hexdigest()
        return "0x" + "".join(
            char.upper() if int(nibble, 16) >= 8 else char
            for char, nibble in zip(lower, digest, strict=False)
        )

    def __str__(self) -> str:
        return self.checksum()


class Hash(BaseBytes):
    """A 32-byte hash."""

    LENGTH = 32


class HexBytes(bytes):
    """
    A variable-length byte string serialized as `0x`-prefixed hex.

    Used for the header extra-data field and contract code.
    """

    def __new__(cls, value: Any = b"") -> Self:
        return super().__new__(cls, _coerce_to_bytes(value))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> HexBytes:
            if isinstance(value, cls):
                return value
            try:
                return cls(value)
            except TypeError as e:
                raise ValueError(str(e)) from e

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda x: "0x" + x.hex()
            ),
        )

    def __repr__(self) -> str:
        return f"HexBytes(0x{self.hex()})"
