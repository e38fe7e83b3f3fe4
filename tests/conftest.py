"""Shared test fixtures."""

from __future__ import annotations

import pytest

from turbosms.config import TurboSMSConfig
from turbosms.transport.mock import MockTurboSMSTransport


@pytest.fixture
def config() -> TurboSMSConfig:
    return TurboSMSConfig(login="shop", password="secret", sender="Shop")


@pytest.fixture
def transport() -> MockTurboSMSTransport:
    return MockTurboSMSTransport()
