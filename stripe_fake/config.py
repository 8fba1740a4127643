"""
Fake Stripe client configuration.

Standalone configuration with no app-specific dependencies.
"""

import os
from dataclasses import dataclass

from .exceptions import StripeFakeConfigError

DEFAULT_FAKE_API_KEY = "sk_test_fake"

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


@dataclass
class FakeClientConfig:
    """Configuration for the fake Stripe client.

    Args:
        api_key: Key handed to constructed StripeObjects; test mode only while fake is set
        stripe_version: API version stamped on constructed StripeObjects
        record_calls: Whether dispatched calls are written to the call log
        fake: Whether make_client() should build a fake instead of a real client
    """

    api_key: str = DEFAULT_FAKE_API_KEY
    stripe_version: str | None = None
    record_calls: bool = True
    fake: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.api_key:
            raise StripeFakeConfigError("api_key is required")

        if not self.api_key.startswith(("sk_live_", "sk_test_", "rk_live_", "rk_test_")):
            raise StripeFakeConfigError(
                "api_key must be a valid Stripe secret key (sk_*) or restricted key (rk_*)"
            )

        if self.fake and not self.is_test_mode:
            raise StripeFakeConfigError(
                "fake clients only accept test mode keys (sk_test_* or rk_test_*)",
                details={"fake": self.fake},
            )

    @property
    def is_test_mode(self) -> bool:
        """Check if using test mode API key."""
        return "_test_" in self.api_key

    @property
    def is_placeholder_key(self) -> bool:
        """Check if the key is the built-in placeholder rather than a real test key."""
        return self.api_key == DEFAULT_FAKE_API_KEY

    @classmethod
    def from_env(cls, prefix: str = "STRIPE_FAKE_") -> "FakeClientConfig":
        """Build a config from environment variables.

        Reads {prefix}API_KEY, {prefix}STRIPE_VERSION, {prefix}RECORD_CALLS
        and {prefix}FAKE. Unset variables keep their defaults.
        """
        kwargs: dict = {}

        api_key = os.environ.get(f"{prefix}API_KEY")
        if api_key is not None:
            kwargs["api_key"] = api_key

        stripe_version = os.environ.get(f"{prefix}STRIPE_VERSION")
        if stripe_version:
            kwargs["stripe_version"] = stripe_version

        for field_name in ("record_calls", "fake"):
            raw = os.environ.get(f"{prefix}{field_name.upper()}")
            if raw is not None:
                kwargs[field_name] = _parse_bool(f"{prefix}{field_name.upper()}", raw)

        return cls(**kwargs)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise StripeFakeConfigError(
        f"{name} must be a boolean, got {raw!r}",
        details={"variable": name, "value": raw},
    )
