"""Shared test fixtures."""

import pytest
import structlog

from stripe_fake import FakeClientConfig, FakeStripeClient


@pytest.fixture(autouse=True)
def configure_structlog():
    """Configure structlog for testing."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@pytest.fixture
def client() -> FakeStripeClient:
    """Create an empty fake client."""
    return FakeStripeClient()


@pytest.fixture
def customer_client() -> FakeStripeClient:
    """Create a fake client with a customers.create fixture."""
    return FakeStripeClient({"customers.create": {"id": "cus_test"}})


@pytest.fixture
def test_config() -> FakeClientConfig:
    """Create a test config with a non-placeholder test key."""
    return FakeClientConfig(api_key="sk_test_fake123456789")
