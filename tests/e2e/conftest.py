"""E2E test configuration: live Webflow API credentials."""

from __future__ import annotations

import pytest


@pytest.fixture
def live_token(request) -> str:
    token = request.config.getoption("--webflow-token")
    if not token:
        pytest.skip("Live Webflow token not provided")
    return token


@pytest.fixture
def live_collection(request) -> str:
    collection = request.config.getoption("--webflow-collection")
    if not collection:
        pytest.skip("Live Webflow collection ID not provided")
    return collection
