"""Tests for fixture variants and payload factories."""

from stripe_fake import FakeStripeClient, fixtures
from stripe_fake.fixtures import DynamicFixture, StaticFixture, as_fixture


class TestAsFixture:
    """Tests for wrapping raw values."""

    def test_mapping_is_static(self):
        """Test mappings become static fixtures."""
        assert as_fixture({"id": "cus_1"}) == StaticFixture({"id": "cus_1"})

    def test_callable_is_dynamic(self):
        """Test callables become dynamic fixtures."""

        def build(params):
            return params

        fixture = as_fixture(build)
        assert isinstance(fixture, DynamicFixture)
        assert fixture({"a": 1}) == {"a": 1}

    def test_existing_fixture_passthrough(self):
        """Test already-wrapped values are kept."""
        fixture = StaticFixture(lambda params: params)
        assert as_fixture(fixture) is fixture

    def test_static_callable_is_returned_not_called(self):
        """Test a StaticFixture can hand back a callable untouched."""

        def handler(params):
            raise AssertionError("should not be called")

        client = FakeStripeClient({"webhooks.handler": StaticFixture(handler)})
        assert client.webhooks.handler() is handler


class TestFactories:
    """Tests for canned payload factories."""

    def test_customer_defaults(self):
        """Test customer factory with defaults."""
        customer = fixtures.customer()

        assert customer["id"].startswith("cus_")
        assert customer["object"] == "customer"
        assert customer["email"] == "test@example.com"

    def test_customer_overrides(self):
        """Test overrides replace top-level keys."""
        customer = fixtures.customer(id="cus_custom", email="custom@test.com")

        assert customer["id"] == "cus_custom"
        assert customer["email"] == "custom@test.com"

    def test_ids_are_unique(self):
        """Test each call gets a new id."""
        assert fixtures.product()["id"] != fixtures.product()["id"]

    def test_price(self):
        """Test price factory."""
        price = fixtures.price(unit_amount=9900)

        assert price["id"].startswith("price_")
        assert price["unit_amount"] == 9900
        assert price["recurring"]["interval"] == "month"

    def test_subscription_items_reference_subscription(self):
        """Test subscription items point back at their subscription."""
        subscription = fixtures.subscription(id="sub_123", status="trialing")

        assert subscription["status"] == "trialing"
        assert subscription["items"]["object"] == "list"
        assert subscription["items"]["data"][0]["subscription"] == "sub_123"

    def test_list_envelope(self):
        """Test list helpers wrap items."""
        listing = fixtures.customer_list([fixtures.customer()], has_more=True)

        assert listing["object"] == "list"
        assert len(listing["data"]) == 1
        assert listing["has_more"] is True
        assert listing["url"] == "/v1/customers"

    def test_other_payloads(self):
        """Test the remaining factories carry their object tags."""
        assert fixtures.bank_account()["object"] == "bank_account"
        assert fixtures.financial_connections_account()["id"].startswith("fca_")
        assert fixtures.subscription_schedule()["status"] == "not_started"
        assert fixtures.subscription_schedule_list()["url"] == "/v1/subscription_schedules"
        assert fixtures.product_list()["data"] == []
        assert fixtures.price_list()["url"] == "/v1/prices"
        assert fixtures.subscription_list()["url"] == "/v1/subscriptions"

    def test_deleted_and_error(self):
        """Test deleted and error payloads."""
        assert fixtures.deleted("prod_1", object="product") == {
            "id": "prod_1",
            "object": "product",
            "deleted": True,
        }
        assert fixtures.error()["error"]["code"] == "card_declined"

    def test_factory_output_through_client(self):
        """Test factory payloads come back as nested StripeObjects."""
        client = FakeStripeClient({"subscriptions.retrieve": fixtures.subscription(id="sub_1")})

        subscription = client.subscriptions.retrieve("sub_1")

        assert subscription.object == "subscription"
        assert subscription["items"].data[0].price.object == "price"
