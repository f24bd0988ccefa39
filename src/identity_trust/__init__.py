"""Ordered trust classifications for authorization gating.

Exports the three level enums and their error taxonomy:

- ``Trust``: caller trust levels, parsed strictly from lowercase tokens
- ``GroupsTrust``: group-management trust levels ("" parses as ``NONE``)
- ``AALevel``: authenticator assurance levels, unrecognized tokens become ``UNKNOWN``
"""

from identity_trust.aal import AALevel
from identity_trust.errors import (
    AALevelError,
    AALevelTooLowError,
    GroupsTrustError,
    GroupsTrustLevelTooLowError,
    IdentityTrustError,
    InvalidGroupsTrustLevelError,
    InvalidTrustLevelError,
    TrustError,
    TrustLevelTooLowError,
)
from identity_trust.groups_trust import GroupsTrust
from identity_trust.trust import Trust

__all__ = [
    "AALevel",
    "AALevelError",
    "AALevelTooLowError",
    "GroupsTrust",
    "GroupsTrustError",
    "GroupsTrustLevelTooLowError",
    "IdentityTrustError",
    "InvalidGroupsTrustLevelError",
    "InvalidTrustLevelError",
    "Trust",
    "TrustError",
    "TrustLevelTooLowError",
]
