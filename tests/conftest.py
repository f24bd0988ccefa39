"""Shared pytest fixtures for identity trust tests."""

from __future__ import annotations

import pytest

from identity_trust import Trust

TRUST_SCENARIO_TOKENS = ["staff", "ndaed", "vouched", "authenticated", "public", "bogus"]


@pytest.fixture
def trust_tokens() -> tuple[str, ...]:
    """Canonical trust tokens, lowest level first."""
    return Trust.tokens()


@pytest.fixture
def scenario_tokens() -> list[str]:
    """Tokens parsed in the mixed success/failure trust scenario."""
    return list(TRUST_SCENARIO_TOKENS)
