"""
Response coercion.

Turns fixture values into the StripeObject values a real StripeClient would
return, so code under test can use attribute access (customer.email) and
key access (customer["email"]) alike.
"""

import copy
from collections.abc import Mapping
from typing import Any

import stripe

from .config import DEFAULT_FAKE_API_KEY
from .fixtures import DynamicFixture, Fixture, Params

# Object type inferred from the id prefix (the part before the first "_")
OBJECT_TYPE_PREFIXES: dict[str, str] = {
    "cus": "customer",
    "sub": "subscription",
    "prod": "product",
    "price": "price",
    "ba": "bank_account",
    "pm": "payment_method",
    "pi": "payment_intent",
    "seti": "setup_intent",
    "in": "invoice",
    "ch": "charge",
    "re": "refund",
    "si": "subscription_item",
    "fca": "financial_connections.account",
    "we": "webhook_endpoint",
}

UNKNOWN_OBJECT_TYPE = "unknown"


def infer_object_type(object_id: str) -> str:
    """Infer a Stripe object type from an id such as "cus_123"."""
    prefix = object_id.split("_", 1)[0]
    return OBJECT_TYPE_PREFIXES.get(prefix, UNKNOWN_OBJECT_TYPE)


def to_remote_object(
    data: Mapping[str, Any],
    api_key: str = DEFAULT_FAKE_API_KEY,
    stripe_version: str | None = None,
) -> stripe.StripeObject:
    """Convert a mapping into a StripeObject, tagging its object type if missing."""
    values = dict(data)

    object_id = values.get("id")
    if "object" not in values and isinstance(object_id, str) and object_id:
        values["object"] = infer_object_type(object_id)

    return stripe.StripeObject.construct_from(values, api_key, stripe_version=stripe_version)


def coerce_response(
    fixture: Fixture,
    params: Params,
    api_key: str = DEFAULT_FAKE_API_KEY,
    stripe_version: str | None = None,
) -> Any:
    """Evaluate a fixture against the call params and shape the result.

    Mappings become StripeObjects and static StripeObjects are copied, so
    every call gets a fresh value. Anything else (including whatever a
    dynamic fixture returns that is not a mapping) is passed through.
    Exceptions raised by dynamic fixtures propagate unchanged.
    """
    if isinstance(fixture, DynamicFixture):
        value = fixture(params)
        if isinstance(value, stripe.StripeObject):
            return value
    else:
        value = fixture.value
        if isinstance(value, stripe.StripeObject):
            return copy.deepcopy(value)

    if isinstance(value, Mapping):
        return to_remote_object(value, api_key=api_key, stripe_version=stripe_version)

    return value
