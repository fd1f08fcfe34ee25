"""Shared test fixtures."""

import pytest

from tests.stubs import FakeClock, StubUpstream


@pytest.fixture
def stub() -> StubUpstream:
    return StubUpstream()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
