"""Reusable, strict base models for genesis records."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    A base model that converts field names to camel case when serializing.

    For example, the field name `gas_limit` in a Python model will be
    represented as `gasLimit` when it is serialized to JSON.

    This matches the key naming every execution client uses in genesis files.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )


class StrictBaseModel(CamelModel):
    """A strict, immutable pydantic base model."""

    model_config = CamelModel.model_config | {
        "extra": "forbid",
        "frozen": True,
        "strict": True,
    }


class ClientDocumentModel(StrictBaseModel):
    """
    A strict model for documents written by execution clients.

    Known fields are validated as strictly as anywhere else. Keys the model
    does not declare are kept as-is and written back out, so documents from
    newer clients survive an import/export round trip.
    """

    model_config = StrictBaseModel.model_config | {"extra": "allow"}
