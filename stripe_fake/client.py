"""
Fake Stripe client implementation.

In-memory stand-in for stripe.StripeClient. Calls made through its services
are recorded and answered from registered fixtures instead of the network.
"""

import threading
from collections.abc import Mapping
from enum import Enum
from typing import Any

import structlog

from . import assertions
from .coercion import coerce_response
from .config import FakeClientConfig
from .methods import method_key
from .recorder import CallRecorder
from .resolver import FixtureTable
from .service import FakeStripeService

logger = structlog.get_logger(__name__)


class FakeStripeClient:
    """Fake Stripe client for testing.

    Example:
        client = FakeStripeClient({
            "customers.create": {"id": "cus_123", "email": "test@example.com"},
            "customers.*": lambda params: {"id": params.get("id", "cus_any")},
        })

        customer = client.customers.create({"email": "test@example.com"})
        assert customer.id == "cus_123"
        assert client.call_count("customers.create") == 1
        assert client.get_call("customers.create") == {"email": "test@example.com"}

    Instances are safe to share between threads, but each test should use
    its own instance.
    """

    def __init__(
        self,
        fixtures: Mapping[str | Enum, Any] | None = None,
        config: FakeClientConfig | None = None,
    ) -> None:
        """Initialize the fake client.

        Args:
            fixtures: Method key (or StripeMethod) -> response mapping
            config: FakeClientConfig; defaults to the placeholder test key
        """
        self.config = config or FakeClientConfig()
        self._lock = threading.RLock()
        self._fixtures = FixtureTable(fixtures)
        self._recorder = CallRecorder()

        logger.debug(
            "fake_stripe_client_initialized",
            fixture_count=len(self._fixtures),
            record_calls=self.config.record_calls,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(fixtures={self._fixtures.keys()!r})"

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def fixtures(self) -> list[str]:
        """Registered method keys, in registration order."""
        with self._lock:
            return self._fixtures.keys()

    # Registration

    def fake(self, method: str | Enum, response: Any) -> "FakeStripeClient":
        """Register (or overwrite) the response for one method key."""
        with self._lock:
            self._fixtures.set(method, response)
        return self

    def fake_many(self, fixtures: Mapping[str | Enum, Any]) -> "FakeStripeClient":
        """Register several responses; later keys overwrite earlier ones."""
        with self._lock:
            self._fixtures.update(fixtures)
        return self

    # Dispatch

    def service(self, name: str) -> FakeStripeService:
        """Get a fake service proxy, e.g. client.service("customers")."""
        return FakeStripeService(name, self)

    def resolve_fake(self, method: str | Enum, params: Mapping[str, Any] | None = None) -> Any:
        """Record a call and answer it from the matching fixture.

        The call is recorded before lookup, so calls that raise
        FakeNotRegistered still show up in the call log.
        """
        key = method_key(method)
        call_params = dict(params or {})

        with self._lock:
            if self.config.record_calls:
                self._recorder.record(key, call_params)
            fixture = self._fixtures.resolve(key)

        return coerce_response(
            fixture,
            call_params,
            api_key=self.config.api_key,
            stripe_version=self.config.stripe_version,
        )

    def __getattr__(self, name: str) -> FakeStripeService:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.service(name)

    # Inspection

    def recorded(self) -> dict[str, list[dict[str, Any]]]:
        with self._lock:
            return self._recorder.all()

    def was_called(self, method: str | Enum) -> bool:
        with self._lock:
            return self._recorder.was_called(method_key(method))

    def call_count(self, method: str | Enum) -> int:
        with self._lock:
            return self._recorder.count(method_key(method))

    def calls(self, method: str | Enum) -> list[dict[str, Any]]:
        with self._lock:
            return self._recorder.calls(method_key(method))

    def get_call(self, method: str | Enum, index: int = 0) -> dict[str, Any] | None:
        """Params of the index-th call to method, or None if it was not made."""
        with self._lock:
            return self._recorder.get(method_key(method), index)

    def clear_recorded(self) -> None:
        """Forget all recorded calls; registered fixtures are kept."""
        with self._lock:
            self._recorder.clear()

    # Assertions

    def assert_called(
        self,
        method: str | Enum,
        times: int | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        assertions.assert_called(self, method, times=times, params=params)

    def assert_not_called(self, method: str | Enum) -> None:
        assertions.assert_not_called(self, method)

    def assert_nothing_called(self) -> None:
        assertions.assert_nothing_called(self)
