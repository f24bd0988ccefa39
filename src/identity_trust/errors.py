"""Identity Trust Error Taxonomy.

One closed error family per classification. Each family has a kind raised
when a token is not recognized during parsing, and a kind reserved for
callers that enforce a minimum level. The reserved kinds are never raised
by this package.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from identity_trust.ordering import OrderedEnum


class IdentityTrustError(Exception):
    """Base exception for all identity trust errors.

    Attributes:
        code: Error code following the ``<family>:level/<kind>`` pattern
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{code, message, details}`` dict."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


def _too_low_details(
    required: OrderedEnum | None,
    actual: OrderedEnum | None,
    details: dict[str, Any] | None,
) -> dict[str, Any]:
    details_dict: dict[str, Any] = {}
    if required is not None:
        details_dict["required"] = required.as_str()
    if actual is not None:
        details_dict["actual"] = actual.as_str()
    if details:
        details_dict.update(details)
    return details_dict


class TrustError(IdentityTrustError):
    """Base class for :class:`~identity_trust.trust.Trust` errors."""


class InvalidTrustLevelError(TrustError, ValueError):
    """Raised when a token does not name a trust level.

    Attributes:
        token: The rejected input
    """

    def __init__(self, token: Any, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="trust:level/invalid",
            message=f"Invalid trust level: {token!r}",
            details={"token": token, **(details or {})},
        )
        self.token = token


class TrustLevelTooLowError(TrustError):
    """Signals a valid trust level below the caller's required minimum."""

    def __init__(
        self,
        required: OrderedEnum | None = None,
        actual: OrderedEnum | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="trust:level/too_low",
            message="More trust required",
            details=_too_low_details(required, actual, details),
        )
        self.required = required
        self.actual = actual


class GroupsTrustError(IdentityTrustError):
    """Base class for :class:`~identity_trust.groups_trust.GroupsTrust` errors."""


class InvalidGroupsTrustLevelError(GroupsTrustError, ValueError):
    """Raised when a token does not name a groups trust level.

    Attributes:
        token: The rejected input
    """

    def __init__(self, token: Any, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="groups_trust:level/invalid",
            message=f"Invalid groups trust level: {token!r}",
            details={"token": token, **(details or {})},
        )
        self.token = token


class GroupsTrustLevelTooLowError(GroupsTrustError):
    """Signals a valid groups trust level below the caller's required minimum."""

    def __init__(
        self,
        required: OrderedEnum | None = None,
        actual: OrderedEnum | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="groups_trust:level/too_low",
            message="More groups trust required",
            details=_too_low_details(required, actual, details),
        )
        self.required = required
        self.actual = actual


class AALevelError(IdentityTrustError):
    """Base class for :class:`~identity_trust.aal.AALevel` errors.

    AAL conversion cannot fail, so the family has no parse-failure kind.
    """


class AALevelTooLowError(AALevelError):
    """Signals an assurance level below the caller's required minimum."""

    def __init__(
        self,
        required: OrderedEnum | None = None,
        actual: OrderedEnum | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="aal:level/too_low",
            message="More assurance required",
            details=_too_low_details(required, actual, details),
        )
        self.required = required
        self.actual = actual
