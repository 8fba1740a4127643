"""
    stripe-fake - In-memory test double for the Stripe Python SDK.

    Registers canned responses per "<service>.<operation>" key, records every
    call, and returns StripeObjects just like stripe.StripeClient would.

Example usage:
    from stripe_fake import FakeStripeClient, StripeMethod, fixtures

    client = FakeStripeClient({
        StripeMethod.CUSTOMERS_CREATE: fixtures.customer(id="cus_42"),
        "prices.*": fixtures.price(),
    })

    # Hand the client to the code under test instead of stripe.StripeClient
    customer = client.customers.create({"email": "user@example.com"})
    assert customer.id == "cus_42"

    # Inspect what was sent
    client.assert_called("customers.create", times=1, params={"email": "user@example.com"})
"""

from . import fixtures
from .assertions import (
    assert_called,
    assert_called_times,
    assert_called_with,
    assert_not_called,
    assert_nothing_called,
)
from .binding import StripeClientFactory, make_client
from .client import FakeStripeClient
from .coercion import OBJECT_TYPE_PREFIXES, coerce_response, infer_object_type, to_remote_object
from .config import FakeClientConfig
from .exceptions import (
    FakeAssertionError,
    FakeNotRegistered,
    InvalidMethodKeyError,
    StripeFakeConfigError,
    StripeFakeError,
)
from .fixtures import DynamicFixture, Fixture, StaticFixture, as_fixture
from .methods import StripeMethod, method_key, split_method_key
from .recorder import CallRecorder
from .resolver import FixtureTable, wildcard_to_regex
from .service import FakeStripeOperation, FakeStripeService, normalize_arguments
from .version import __version__

__all__ = [
    # Client
    "FakeStripeClient",
    "FakeStripeService",
    "FakeStripeOperation",
    "make_client",
    "StripeClientFactory",
    # Config
    "FakeClientConfig",
    # Exceptions
    "StripeFakeError",
    "FakeNotRegistered",
    "FakeAssertionError",
    "InvalidMethodKeyError",
    "StripeFakeConfigError",
    # Method keys
    "StripeMethod",
    "method_key",
    "split_method_key",
    # Fixtures
    "fixtures",
    "Fixture",
    "StaticFixture",
    "DynamicFixture",
    "as_fixture",
    "FixtureTable",
    "wildcard_to_regex",
    # Recording
    "CallRecorder",
    "normalize_arguments",
    # Coercion
    "OBJECT_TYPE_PREFIXES",
    "coerce_response",
    "infer_object_type",
    "to_remote_object",
    # Assertions
    "assert_called",
    "assert_called_times",
    "assert_called_with",
    "assert_not_called",
    "assert_nothing_called",
    # Version
    "__version__",
]
