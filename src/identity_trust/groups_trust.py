"""Group-management trust levels."""

from __future__ import annotations

from identity_trust.errors import InvalidGroupsTrustLevelError
from identity_trust.ordering import OrderedEnum


class GroupsTrust(OrderedEnum):
    """Privilege tier within group-management operations.

    Ordered ``NONE < CREATOR < ADMIN``. An empty token means no special
    group trust and parses to ``NONE``.
    """

    NONE = "none"
    CREATOR = "creator"
    ADMIN = "admin"

    @classmethod
    def parse(cls, token: str) -> GroupsTrust:
        """Parse a canonical lowercase token; ``""`` is accepted as ``NONE``.

        Raises:
            InvalidGroupsTrustLevelError: If the token names no groups trust level.
        """
        member = _BY_TOKEN.get(token) if isinstance(token, str) else None
        if member is None:
            raise InvalidGroupsTrustLevelError(token)
        return member


_BY_TOKEN: dict[str, GroupsTrust] = {member.value: member for member in GroupsTrust}
_BY_TOKEN[""] = GroupsTrust.NONE
