"""Authenticator assurance levels."""

from __future__ import annotations

from typing import Any

from identity_trust.ordering import OrderedEnum


class AALevel(OrderedEnum):
    """Strength of the authentication mechanism, independent of identity trust.

    Ordered ``UNKNOWN < LOW < MEDIUM < HIGH < MAXIMUM``. Conversion from a
    string never fails: anything unrecognized becomes ``UNKNOWN``.

    Example:
        >>> AALevel.from_str("HIGH") > AALevel.LOW
        True
        >>> AALevel.from_str("high")
        <AALevel.UNKNOWN: 'UNKNOWN'>
    """

    UNKNOWN = "UNKNOWN"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    MAXIMUM = "MAXIMUM"

    @classmethod
    def from_str(cls, token: Any) -> AALevel:
        """Convert an uppercase token, falling back to ``UNKNOWN``.

        Matching is case sensitive; ``"low"`` is ``UNKNOWN``.
        """
        if not isinstance(token, str):
            return cls.UNKNOWN
        return _BY_TOKEN.get(token, cls.UNKNOWN)

    @classmethod
    def _missing_(cls, value: object) -> AALevel:
        return cls.from_str(value)


_BY_TOKEN: dict[str, AALevel] = {member.value: member for member in AALevel}
