"""Shared fixtures: fresh mock models per test, asyncio for anyio tests."""

from __future__ import annotations

import pytest

from bazaar.testing.mock_model import MockModel, mock_model


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def categories():
    """A fresh category double with every chain method installed."""
    return mock_model(MockModel("categories"))


@pytest.fixture
def products():
    """A fresh product double with every chain method installed."""
    return mock_model(MockModel("products"))
