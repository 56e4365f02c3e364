"""
Unsigned integer types for genesis records.

Genesis documents mix two encodings of the same numbers:

- JSON numbers (chain id, fork blocks, engine parameters).
- `0x`-prefixed hex quantities (timestamp, gas limit, difficulty, balances).

Both families accept either encoding on input, plus decimal strings,
and only differ in how they serialize.
"""

from __future__ import annotations

from typing import Any, ClassVar, SupportsInt

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


def parse_quantity(text: str) -> int:
    """
    Parse a decimal or `0x`-prefixed hexadecimal string.

    Raises:
        ValueError: If the text is not a number in either base.
    """
    text = text.strip()
    if text[:2] in ("0x", "0X"):
        digits = text[2:]
        if not digits:
            raise ValueError(f"Empty hex quantity: {text!r}")
        return int(digits, 16)
    return int(text, 10)


class BaseUint(int):
    """A base class for custom unsigned integer types that inherits from `int`."""

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    HEX: ClassVar[bool] = False
    """Whether the value serializes as a hex quantity instead of a JSON number."""

    MAX: ClassVar[int]
    """Largest representable value, 2**BITS - 1 (derived from BITS)."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.MAX = 2**cls.BITS - 1

    def __new__(cls, value: SupportsInt | str) -> Self:
        """
        Create and validate a new Uint instance.

        Raises:
            TypeError: If `value` is a bool, a float or raw bytes.
            OverflowError: If `value` is outside the allowed range [0, 2**BITS - 1].
        """
        # bool is an int subclass, float truncates and int() parses bytes as text.
        if isinstance(value, (bool, float, bytes, bytearray)):
            raise TypeError(f"{cls.__name__} cannot be created from {type(value).__name__}")
        int_value = parse_quantity(value) if isinstance(value, str) else int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            """Pydantic validation function that calls the class constructor."""
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        def serialize(instance: BaseUint) -> int | str:
            return hex(instance) if cls.HEX else int(instance)

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(serialize),
        )

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        """Return the informal, user-friendly string representation."""
        return str(int(self))


class Uint64(BaseUint):
    """A 64-bit unsigned integer serialized as a JSON number."""

    BITS = 64


class Uint256(BaseUint):
    """A 256-bit unsigned integer serialized as a JSON number."""

    BITS = 256


class HexUint64(BaseUint):
    """A 64-bit unsigned integer serialized as a hex quantity."""

    BITS = 64
    HEX = True


class HexUint256(BaseUint):
    """A 256-bit unsigned integer serialized as a hex quantity."""

    BITS = 256
    HEX = True
