"""
Client construction for dependency injection.

Code under test should receive its Stripe client as an argument. make_client
builds either the real stripe.StripeClient or a FakeStripeClient from one
config, so the same wiring serves production and tests.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Protocol

import stripe
import structlog

from .client import FakeStripeClient
from .config import FakeClientConfig
from .exceptions import StripeFakeConfigError

logger = structlog.get_logger(__name__)


class StripeClientFactory(Protocol):
    """Callable returning an object with the client.<service>.<operation>(...) shape."""

    def __call__(
        self,
        config: FakeClientConfig,
        fixtures: Mapping[str | Enum, Any] | None = None,
    ) -> Any: ...


def make_client(
    config: FakeClientConfig,
    fixtures: Mapping[str | Enum, Any] | None = None,
) -> Any:
    """Build a fake client when config.fake is set or fixtures are given, else a real one."""
    if config.fake or fixtures is not None:
        logger.info("stripe_client_selected", fake=True)
        return FakeStripeClient(fixtures, config=config)

    if config.is_placeholder_key:
        raise StripeFakeConfigError(
            "Refusing to build a real StripeClient with the placeholder fake api_key",
            details={"fake": config.fake},
        )

    logger.info("stripe_client_selected", fake=False, is_test_mode=config.is_test_mode)
    if config.stripe_version:
        return stripe.StripeClient(config.api_key, stripe_version=config.stripe_version)
    return stripe.StripeClient(config.api_key)
