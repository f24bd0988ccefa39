"""Caller trust levels."""

from __future__ import annotations

from identity_trust.errors import InvalidTrustLevelError
from identity_trust.ordering import OrderedEnum


class Trust(OrderedEnum):
    """Authenticated-identity privilege tier used for authorization gating.

    Ordered ``PUBLIC < AUTHENTICATED < VOUCHED < NDAED < STAFF``.

    Example:
        >>> Trust.parse("ndaed") >= Trust.PUBLIC
        True
        >>> Trust.STAFF.as_str()
        'staff'
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    VOUCHED = "vouched"
    NDAED = "ndaed"
    STAFF = "staff"

    @classmethod
    def parse(cls, token: str) -> Trust:
        """Parse a canonical lowercase token.

        Matching is exact: the token is not lowercased first, so ``"Staff"``
        is rejected.

        Raises:
            InvalidTrustLevelError: If the token names no trust level.
        """
        member = _BY_TOKEN.get(token) if isinstance(token, str) else None
        if member is None:
            raise InvalidTrustLevelError(token)
        return member


_BY_TOKEN: dict[str, Trust] = {member.value: member for member in Trust}
