"""Annotated Pydantic field types for the trust level enums.

Trust and groups trust fields are strict: a token outside the closed set
fails validation. AAL fields accept any input and normalize unrecognized
tokens to ``AALevel.UNKNOWN``. All three serialize to their canonical token
in JSON mode.
"""

from typing import Annotated, Any

import structlog
from pydantic import BeforeValidator, PlainSerializer

from identity_trust.aal import AALevel
from identity_trust.groups_trust import GroupsTrust
from identity_trust.ordering import OrderedEnum
from identity_trust.trust import Trust

logger = structlog.stdlib.get_logger(__name__)


def _coerce_trust(value: Any) -> Trust:
    if isinstance(value, Trust):
        return value
    return Trust.parse(value)


def _coerce_groups_trust(value: Any) -> GroupsTrust:
    if isinstance(value, GroupsTrust):
        return value
    return GroupsTrust.parse(value)


def _coerce_aal(value: Any) -> AALevel:
    if isinstance(value, AALevel):
        return value
    level = AALevel.from_str(value)
    if level is AALevel.UNKNOWN and value and value != AALevel.UNKNOWN.value:
        logger.debug("aal.token_unrecognized", token=value)
    return level


def _serialize_token(value: OrderedEnum) -> str:
    return value.as_str()


TrustField = Annotated[
    Trust,
    BeforeValidator(_coerce_trust),
    PlainSerializer(_serialize_token, return_type=str, when_used="json"),
]
"""Trust level carried as its lowercase token."""

GroupsTrustField = Annotated[
    GroupsTrust,
    BeforeValidator(_coerce_groups_trust),
    PlainSerializer(_serialize_token, return_type=str, when_used="json"),
]
"""Groups trust level carried as its lowercase token ("" reads as none)."""

AALevelField = Annotated[
    AALevel,
    BeforeValidator(_coerce_aal),
    PlainSerializer(_serialize_token, return_type=str, when_used="json"),
]
"""Authenticator assurance level carried as its uppercase token."""
