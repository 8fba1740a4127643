"""
Method keys for faked Stripe calls.

A method key is "<service>.<operation>" using the attribute names of the
stripe SDK's StripeClient services, e.g. client.payment_methods.attach(...)
is recorded as "payment_methods.attach".
"""

from enum import Enum

from .exceptions import InvalidMethodKeyError


class StripeMethod(str, Enum):
    """Well-known method keys, usable anywhere a key string is accepted."""

    # Customers
    CUSTOMERS_CREATE = "customers.create"
    CUSTOMERS_RETRIEVE = "customers.retrieve"
    CUSTOMERS_UPDATE = "customers.update"
    CUSTOMERS_DELETE = "customers.delete"
    CUSTOMERS_ALL = "customers.all"
    CUSTOMERS_SEARCH = "customers.search"

    # Products
    PRODUCTS_CREATE = "products.create"
    PRODUCTS_RETRIEVE = "products.retrieve"
    PRODUCTS_UPDATE = "products.update"
    PRODUCTS_DELETE = "products.delete"
    PRODUCTS_ALL = "products.all"
    PRODUCTS_SEARCH = "products.search"

    # Prices
    PRICES_CREATE = "prices.create"
    PRICES_RETRIEVE = "prices.retrieve"
    PRICES_UPDATE = "prices.update"
    PRICES_ALL = "prices.all"
    PRICES_SEARCH = "prices.search"

    # Subscriptions
    SUBSCRIPTIONS_CREATE = "subscriptions.create"
    SUBSCRIPTIONS_RETRIEVE = "subscriptions.retrieve"
    SUBSCRIPTIONS_UPDATE = "subscriptions.update"
    SUBSCRIPTIONS_DELETE = "subscriptions.delete"
    SUBSCRIPTIONS_ALL = "subscriptions.all"
    SUBSCRIPTIONS_SEARCH = "subscriptions.search"
    SUBSCRIPTIONS_CANCEL = "subscriptions.cancel"

    # Subscription schedules
    SUBSCRIPTION_SCHEDULES_CREATE = "subscription_schedules.create"
    SUBSCRIPTION_SCHEDULES_RETRIEVE = "subscription_schedules.retrieve"
    SUBSCRIPTION_SCHEDULES_UPDATE = "subscription_schedules.update"
    SUBSCRIPTION_SCHEDULES_CANCEL = "subscription_schedules.cancel"
    SUBSCRIPTION_SCHEDULES_RELEASE = "subscription_schedules.release"
    SUBSCRIPTION_SCHEDULES_ALL = "subscription_schedules.all"

    # Payment methods
    PAYMENT_METHODS_CREATE = "payment_methods.create"
    PAYMENT_METHODS_RETRIEVE = "payment_methods.retrieve"
    PAYMENT_METHODS_UPDATE = "payment_methods.update"
    PAYMENT_METHODS_ATTACH = "payment_methods.attach"
    PAYMENT_METHODS_DETACH = "payment_methods.detach"
    PAYMENT_METHODS_ALL = "payment_methods.all"

    # Invoices
    INVOICES_CREATE = "invoices.create"
    INVOICES_RETRIEVE = "invoices.retrieve"
    INVOICES_UPDATE = "invoices.update"
    INVOICES_DELETE = "invoices.delete"
    INVOICES_ALL = "invoices.all"
    INVOICES_FINALIZE = "invoices.finalize_invoice"
    INVOICES_PAY = "invoices.pay"
    INVOICES_SEND = "invoices.send_invoice"

    # Charges
    CHARGES_CREATE = "charges.create"
    CHARGES_RETRIEVE = "charges.retrieve"
    CHARGES_UPDATE = "charges.update"
    CHARGES_ALL = "charges.all"
    CHARGES_CAPTURE = "charges.capture"

    # Refunds
    REFUNDS_CREATE = "refunds.create"
    REFUNDS_RETRIEVE = "refunds.retrieve"
    REFUNDS_UPDATE = "refunds.update"
    REFUNDS_ALL = "refunds.all"

    # Any operation on a service
    CUSTOMERS_ANY = "customers.*"
    PRODUCTS_ANY = "products.*"
    PRICES_ANY = "prices.*"
    SUBSCRIPTIONS_ANY = "subscriptions.*"
    SUBSCRIPTION_SCHEDULES_ANY = "subscription_schedules.*"
    PAYMENT_METHODS_ANY = "payment_methods.*"
    INVOICES_ANY = "invoices.*"
    CHARGES_ANY = "charges.*"
    REFUNDS_ANY = "refunds.*"


def method_key(method: str | Enum) -> str:
    """Normalize an enum member or string into a plain method key string."""
    if isinstance(method, Enum):
        return str(method.value)
    return str(method)


def split_method_key(method: str | Enum) -> tuple[str, str]:
    """Split a method key into (service, operation)."""
    key = method_key(method)
    service, sep, operation = key.partition(".")
    if not sep or not service or not operation:
        raise InvalidMethodKeyError(
            f"Invalid Stripe method key [{key}], expected \"<service>.<operation>\"",
            details={"method": key},
        )
    return service, operation
