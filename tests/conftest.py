"""Pytest configuration and fixtures."""

import pytest

from console_bank.config import BankConfig
from console_bank.core.services.banking_service import BankingService

STRONG_PASSWORD = "Passw0rd!"


@pytest.fixture
def config() -> BankConfig:
    return BankConfig()


@pytest.fixture
def banking(config) -> BankingService:
    """Fresh banking service with no users."""
    return BankingService(config)


@pytest.fixture
def alice(banking) -> BankingService:
    """Banking service with alice registered and logged in."""
    assert banking.register("alice", STRONG_PASSWORD)['success']
    assert banking.login("alice", STRONG_PASSWORD)['success']
    return banking
