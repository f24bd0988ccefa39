"""Pydantic integration for the trust level enums."""

from identity_trust.models.base import IdentityTrustBaseModel
from identity_trust.models.fields import AALevelField, GroupsTrustField, TrustField
from identity_trust.models.scope import TrustScope

__all__ = [
    "AALevelField",
    "GroupsTrustField",
    "IdentityTrustBaseModel",
    "TrustField",
    "TrustScope",
]
