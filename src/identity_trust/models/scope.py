"""Trust scope payload exchanged with the wider identity system."""

from pydantic import Field

from identity_trust.aal import AALevel
from identity_trust.groups_trust import GroupsTrust
from identity_trust.models.base import IdentityTrustBaseModel
from identity_trust.models.fields import AALevelField, GroupsTrustField, TrustField


class TrustScope(IdentityTrustBaseModel):
    """The levels attached to an authenticated caller.

    Attributes:
        trust: Caller trust level
        groups_trust: Group-management trust level, ``none`` when absent
        aal: Authenticator assurance level, ``UNKNOWN`` when absent or unrecognized

    Example:
        >>> scope = TrustScope.model_validate_json('{"trust": "staff", "aal": "HIGH"}')
        >>> scope.groups_trust
        <GroupsTrust.NONE: 'none'>
        >>> scope.model_dump_json()
        '{"trust":"staff","groups_trust":"none","aal":"HIGH"}'
    """

    trust: TrustField = Field(..., description="Caller trust level")
    groups_trust: GroupsTrustField = Field(
        default=GroupsTrust.NONE, description="Group-management trust level"
    )
    aal: AALevelField = Field(default=AALevel.UNKNOWN, description="Authenticator assurance level")
