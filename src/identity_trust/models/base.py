"""Base Pydantic model configuration for identity trust payloads.

Payload models inherit from IdentityTrustBaseModel so they share:
- Immutability (frozen=True), matching the immutable level types they carry
- Strict validation (extra="forbid") to catch typos and invalid fields
- Flexible field naming (populate_by_name=True) for alias support
"""

from pydantic import BaseModel, ConfigDict


class IdentityTrustBaseModel(BaseModel):
    """Base model for payloads embedding trust levels.

    Example:
        >>> class Claims(IdentityTrustBaseModel):
        ...     sub: str
        >>> Claims(sub="user-1").sub
        'user-1'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        # Validate default values so defaults go through the token validators
        validate_default=True,
        json_schema_extra={
            "additionalProperties": False,
        },
    )
