"""pytest integration: a fresh fake_stripe client per test."""

import pytest

from .client import FakeStripeClient


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "stripe_fixtures(mapping): fixtures pre-registered on the fake_stripe client",
    )


@pytest.fixture
def fake_stripe(request: pytest.FixtureRequest) -> FakeStripeClient:
    """Create a FakeStripeClient, seeded from any stripe_fixtures markers.

    Markers closer to the test win over ones applied to its class or module.
    """
    client = FakeStripeClient()
    markers = list(request.node.iter_markers("stripe_fixtures"))
    for marker in reversed(markers):
        mapping = marker.args[0] if marker.args else marker.kwargs
        client.fake_many(mapping)
    return client
