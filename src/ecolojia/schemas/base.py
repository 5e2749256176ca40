"""Base schema configuration for all Pydantic models.

This module provides centralized base classes with consistent configuration.
All API and analysis schemas should inherit from the appropriate base class.

Usage:
    - APIRequest: For incoming API request bodies
    - APIResponse: For outgoing API response bodies
    - AnalysisModel: For immutable values produced by the scoring engine
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Private base schema with common configuration.

    Do not use directly - inherit from one of the public subclasses.
    """

    model_config = ConfigDict(
        # Alias configuration for camelCase serialization
        alias_generator=to_camel,
        populate_by_name=True,  # Accept both snake_case and camelCase
        # Serialization settings
        ser_json_timedelta="float",
        use_enum_values=True,
        # Validation settings
        validate_default=True,
        validate_assignment=True,
        # Always serialize to camelCase
        serialize_by_alias=True,
    )


class APIRequest(_BaseSchema):
    """Base class for incoming API request schemas.

    Configured to ignore extra fields - clients may send additional
    properties that we don't recognize, and that's okay.
    """

    model_config = ConfigDict(
        extra="ignore",
    )


class APIResponse(_BaseSchema):
    """Base class for outgoing API response schemas.

    Configured to forbid extra fields - we should only return
    properties that are explicitly defined in the schema.
    """

    model_config = ConfigDict(
        extra="forbid",
    )


class AnalysisModel(APIResponse):
    """Base class for values returned by the analyzers.

    Frozen: a result is built once per analysis call and never mutated.
    """

    model_config = ConfigDict(
        frozen=True,
    )
