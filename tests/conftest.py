"""
Pytest configuration and shared fixtures for MatchEngine SDK testing.

Provides a client configuration and a recording session factory that
stands in for ``requests.Session``.
"""

import pytest

from matchengine.core.config_manager import ClientConfig

from .fixtures.http_doubles import RecordingTransport


# Configuration Fixtures
@pytest.fixture
def client_config():
    """Client configuration pointing at a test host"""
    return ClientConfig(
        base_url="https://api.test.matchengine.de/",
        api_token="test-token-123",
        stripe_publishable_key="pk_test_123",
        timeout_ms=5000,
    )


@pytest.fixture
def transport():
    """Recording session factory with no queued responses"""
    return RecordingTransport()


def pytest_configure(config):
    """Configure custom pytest markers"""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )


# Test Collection Hooks
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on file location"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
