"""
Fixture values and canned Stripe API payloads.

A fixture is either static (returned for every call) or dynamic (built from
the call's params). The factory functions below produce plain dicts shaped
like real Stripe API responses, for use as static fixtures or as the return
value of dynamic ones.
"""

import time
import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

Params = dict[str, Any]


@dataclass(frozen=True)
class StaticFixture:
    """Fixture returned as-is (after coercion) for every call."""

    value: Any


@dataclass(frozen=True)
class DynamicFixture:
    """Fixture computed from the params of each call."""

    func: Callable[[Params], Any]

    def __call__(self, params: Params) -> Any:
        return self.func(params)


Fixture = Union[StaticFixture, DynamicFixture]


def as_fixture(value: Any) -> Fixture:
    """Wrap a raw registration value in the matching fixture variant."""
    if isinstance(value, (StaticFixture, DynamicFixture)):
        return value
    if callable(value) and not isinstance(value, Mapping):
        return DynamicFixture(value)
    return StaticFixture(value)


# Factory functions for canned API payloads


def _random_id(length: int = 24) -> str:
    return uuid.uuid4().hex[:length]


def _list_envelope(url: str, data: list[Any] | None, overrides: dict[str, Any]) -> dict[str, Any]:
    return {
        "object": "list",
        "data": list(data or []),
        "has_more": False,
        "url": url,
        **overrides,
    }


def customer(**overrides: Any) -> dict[str, Any]:
    """Create a customer payload."""
    return {
        "id": f"cus_{_random_id()}",
        "object": "customer",
        "address": None,
        "balance": 0,
        "created": int(time.time()),
        "currency": "usd",
        "default_source": None,
        "delinquent": False,
        "description": "Test Customer",
        "discount": None,
        "email": "test@example.com",
        "invoice_prefix": _random_id(8).upper(),
        "invoice_settings": {
            "custom_fields": None,
            "default_payment_method": None,
            "footer": None,
            "rendering_options": None,
        },
        "livemode": False,
        "metadata": {},
        "name": "Test Customer",
        "phone": None,
        "preferred_locales": [],
        "shipping": None,
        "tax_exempt": "none",
        "test_clock": None,
        **overrides,
    }


def customer_list(customers: list[Any] | None = None, **overrides: Any) -> dict[str, Any]:
    """Wrap customer payloads in a list envelope."""
    return _list_envelope("/v1/customers", customers, overrides)


def product(**overrides: Any) -> dict[str, Any]:
    """Create a product payload."""
    now = int(time.time())
    return {
        "id": f"prod_{_random_id()}",
        "object": "product",
        "active": True,
        "attributes": [],
        "created": now,
        "default_price": None,
        "description": "Test Product",
        "images": [],
        "livemode": False,
        "metadata": {},
        "name": "Test Product",
        "package_dimensions": None,
        "shippable": None,
        "statement_descriptor": None,
        "tax_code": None,
        "type": "service",
        "unit_label": None,
        "updated": now,
        "url": None,
        **overrides,
    }


def product_list(products: list[Any] | None = None, **overrides: Any) -> dict[str, Any]:
    """Wrap product payloads in a list envelope."""
    return _list_envelope("/v1/products", products, overrides)


def price(**overrides: Any) -> dict[str, Any]:
    """Create a recurring price payload ($10.00 / month by default)."""
    return {
        "id": f"price_{_random_id()}",
        "object": "price",
        "active": True,
        "billing_scheme": "per_unit",
        "created": int(time.time()),
        "currency": "usd",
        "custom_unit_amount": None,
        "livemode": False,
        "lookup_key": None,
        "metadata": {},
        "nickname": None,
        "product": f"prod_{_random_id()}",
        "recurring": {
            "aggregate_usage": None,
            "interval": "month",
            "interval_count": 1,
            "trial_period_days": None,
            "usage_type": "licensed",
        },
        "tax_behavior": "unspecified",
        "tiers_mode": None,
        "transform_quantity": None,
        "type": "recurring",
        "unit_amount": 1000,
        "unit_amount_decimal": "1000",
        **overrides,
    }


def price_list(prices: list[Any] | None = None, **overrides: Any) -> dict[str, Any]:
    """Wrap price payloads in a list envelope."""
    return _list_envelope("/v1/prices", prices, overrides)


def subscription(**overrides: Any) -> dict[str, Any]:
    """Create an active subscription payload with a single item."""
    now = int(time.time())
    subscription_id = overrides.get("id", f"sub_{_random_id()}")
    return {
        "id": subscription_id,
        "object": "subscription",
        "application": None,
        "application_fee_percent": None,
        "automatic_tax": {"enabled": False},
        "billing_cycle_anchor": now,
        "billing_cycle_anchor_config": None,
        "billing_thresholds": None,
        "cancel_at": None,
        "cancel_at_period_end": False,
        "canceled_at": None,
        "cancellation_details": {"comment": None, "feedback": None, "reason": None},
        "collection_method": "charge_automatically",
        "created": now,
        "currency": "usd",
        "current_period_end": now + 30 * 24 * 60 * 60,
        "current_period_start": now,
        "customer": f"cus_{_random_id()}",
        "days_until_due": None,
        "default_payment_method": None,
        "default_source": None,
        "default_tax_rates": [],
        "description": None,
        "discount": None,
        "ended_at": None,
        "items": _list_envelope(
            "/v1/subscription_items",
            [
                {
                    "id": f"si_{_random_id()}",
                    "object": "subscription_item",
                    "billing_thresholds": None,
                    "created": now,
                    "metadata": {},
                    "price": price(),
                    "quantity": 1,
                    "subscription": subscription_id,
                    "tax_rates": [],
                }
            ],
            {},
        ),
        "latest_invoice": None,
        "livemode": False,
        "metadata": {},
        "pause_collection": None,
        "payment_settings": {
            "payment_method_options": None,
            "payment_method_types": None,
            "save_default_payment_method": "off",
        },
        "pending_setup_intent": None,
        "pending_update": None,
        "proration_behavior": "create_prorations",
        "schedule": None,
        "start_date": now,
        "status": "active",
        "test_clock": None,
        "trial_end": None,
        "trial_settings": {"end_behavior": {"missing_payment_method": "create_invoice"}},
        "trial_start": None,
        **overrides,
    }


def subscription_list(subscriptions: list[Any] | None = None, **overrides: Any) -> dict[str, Any]:
    """Wrap subscription payloads in a list envelope."""
    return _list_envelope("/v1/subscriptions", subscriptions, overrides)


def subscription_schedule(**overrides: Any) -> dict[str, Any]:
    """Create a not-yet-started subscription schedule with one month-long phase."""
    now = int(time.time())
    return {
        "id": f"sub_sched_{_random_id()}",
        "object": "subscription_schedule",
        "canceled_at": None,
        "completed_at": None,
        "created": now,
        "customer": f"cus_{_random_id()}",
        "default_settings": {
            "application_fee_percent": None,
            "automatic_tax": {"enabled": False},
            "billing_cycle_anchor": "automatic",
            "billing_thresholds": None,
            "collection_method": "charge_automatically",
            "default_payment_method": None,
            "description": None,
            "invoice_settings": {"days_until_due": None, "issuer": None},
            "on_behalf_of": None,
            "transfer_data": None,
        },
        "end_behavior": "release",
        "livemode": False,
        "metadata": {},
        "phases": [
            {
                "add_invoice_items": [],
                "currency": "usd",
                "default_tax_rates": [],
                "discounts": [],
                "end_date": now + 30 * 24 * 60 * 60,
                "items": [
                    {
                        "metadata": {},
                        "price": f"price_{_random_id()}",
                        "quantity": 1,
                        "tax_rates": [],
                    }
                ],
                "metadata": {},
                "proration_behavior": "create_prorations",
                "start_date": now,
            }
        ],
        "released_at": None,
        "released_subscription": None,
        "status": "not_started",
        "subscription": None,
        "test_clock": None,
        **overrides,
    }


def subscription_schedule_list(
    schedules: list[Any] | None = None, **overrides: Any
) -> dict[str, Any]:
    """Wrap subscription schedule payloads in a list envelope."""
    return _list_envelope("/v1/subscription_schedules", schedules, overrides)


def bank_account(**overrides: Any) -> dict[str, Any]:
    """Create a verified US bank account payload."""
    return {
        "id": f"ba_{_random_id()}",
        "object": "bank_account",
        "account_holder_name": "Test Account",
        "account_holder_type": "individual",
        "account_type": "checking",
        "bank_name": "STRIPE TEST BANK",
        "country": "US",
        "currency": "usd",
        "customer": f"cus_{_random_id()}",
        "fingerprint": _random_id(16),
        "last4": "6789",
        "metadata": {},
        "routing_number": "110000000",
        "status": "verified",
        **overrides,
    }


def financial_connections_account(**overrides: Any) -> dict[str, Any]:
    """Create an active Financial Connections account payload."""
    now = int(time.time())
    return {
        "id": f"fca_{_random_id()}",
        "object": "financial_connections.account",
        "account_holder": {"customer": f"cus_{_random_id()}", "type": "customer"},
        "balance": {"as_of": now, "current": {"usd": 10000}, "type": "cash"},
        "balance_refresh": None,
        "category": "cash",
        "created": now,
        "display_name": "Test Bank Account",
        "institution_name": "Test Bank",
        "last4": "6789",
        "livemode": False,
        "ownership": None,
        "permissions": ["balances", "transactions"],
        "status": "active",
        "subcategory": "checking",
        "supported_payment_method_types": ["us_bank_account"],
        **overrides,
    }


def deleted(id: str, object: str = "customer") -> dict[str, Any]:
    """Create the payload Stripe returns for a deleted object."""
    return {"id": id, "object": object, "deleted": True}


def error(
    type: str = "card_error",
    message: str = "Your card was declined.",
    code: str = "card_declined",
) -> dict[str, Any]:
    """Create an API error body."""
    return {"error": {"type": type, "message": message, "code": code}}
