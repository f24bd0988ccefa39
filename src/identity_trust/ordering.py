"""Enum base class whose members compare by declaration order."""

from __future__ import annotations

from enum import Enum
from typing import Any


class OrderedEnum(Enum):
    """Closed set of named levels with a total order.

    Members declared first compare as lower. Values are the canonical string
    tokens; the rank used for ordering never leaves this class.

    Comparing against anything other than a member of the same enum raises
    ``TypeError``, so a level is never ordered against a plain string.

    Example:
        >>> class Size(OrderedEnum):
        ...     SMALL = "small"
        ...     LARGE = "large"
        >>> Size.SMALL < Size.LARGE
        True
        >>> str(Size.LARGE)
        'large'
    """

    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() >= other._rank()

    def __str__(self) -> str:
        return self.as_str()

    def as_str(self) -> str:
        """Return the canonical token for this level."""
        return str(self.value)

    @classmethod
    def tokens(cls) -> tuple[str, ...]:
        """Return every canonical token, lowest level first."""
        return tuple(member.as_str() for member in cls)
