from __future__ import annotations

import pytest

from fakes import Outbox, FakeProvider


@pytest.fixture
def outbox() -> Outbox:
    return Outbox()


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()
