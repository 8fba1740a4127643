"""Tests for response coercion."""

import pytest
import stripe

from stripe_fake.coercion import coerce_response, infer_object_type, to_remote_object
from stripe_fake.fixtures import DynamicFixture, StaticFixture


class TestInferObjectType:
    """Tests for id-prefix inference."""

    @pytest.mark.parametrize(
        "object_id, expected",
        [
            ("cus_1", "customer"),
            ("sub_1", "subscription"),
            ("prod_1", "product"),
            ("price_1", "price"),
            ("ba_1", "bank_account"),
            ("sub_sched_1", "subscription"),
            ("xx_1", "unknown"),
            ("cus", "customer"),
        ],
    )
    def test_prefixes(self, object_id, expected):
        """Test the prefix before the first underscore picks the type."""
        assert infer_object_type(object_id) == expected


class TestToRemoteObject:
    """Tests for mapping -> StripeObject conversion."""

    def test_infers_missing_object(self):
        """Test a customer id tags the object as a customer."""
        result = to_remote_object({"id": "cus_1"})

        assert isinstance(result, stripe.StripeObject)
        assert result.object == "customer"

    def test_unknown_prefix(self):
        """Test an unknown prefix tags the object as unknown."""
        assert to_remote_object({"id": "xx_1"}).object == "unknown"

    def test_existing_object_kept(self):
        """Test an explicit object tag is not overwritten."""
        result = to_remote_object({"id": "cus_1", "object": "test_helpers.test_clock"})
        assert result.object == "test_helpers.test_clock"

    def test_no_id_no_tag(self):
        """Test no tag is added without a usable id."""
        assert "object" not in to_remote_object({"name": "x"})
        assert "object" not in to_remote_object({"id": 123})

    def test_fields_are_attributes(self):
        """Test every field is reachable by attribute and key."""
        result = to_remote_object({"id": "cus_1", "email": "a@b.com", "metadata": {"plan": "pro"}})

        assert result.email == "a@b.com"
        assert result["email"] == "a@b.com"
        assert result.metadata.plan == "pro"

    def test_input_not_mutated(self):
        """Test the source mapping is left untouched."""
        data = {"id": "cus_1"}
        to_remote_object(data)
        assert data == {"id": "cus_1"}


class TestCoerceResponse:
    """Tests for fixture evaluation."""

    def test_static_mapping(self):
        """Test static mappings become StripeObjects."""
        result = coerce_response(StaticFixture({"id": "prod_1"}), {})
        assert result.object == "product"

    def test_static_non_mapping_passthrough(self):
        """Test other static values are returned as-is."""
        sentinel = object()
        assert coerce_response(StaticFixture(sentinel), {}) is sentinel
        assert coerce_response(StaticFixture(None), {}) is None

    def test_static_stripe_object_is_copied(self):
        """Test a static StripeObject is handed out as a fresh copy per call."""
        existing = stripe.StripeObject.construct_from({"id": "cus_1", "object": "customer"}, "sk_test_fake")
        fixture = StaticFixture(existing)

        first = coerce_response(fixture, {})
        first["email"] = "leaked@example.com"
        second = coerce_response(fixture, {})

        assert first is not existing
        assert second is not first
        assert second.id == "cus_1"
        assert "email" not in second
        assert "email" not in existing

    def test_dynamic_stripe_object_passthrough(self):
        """Test StripeObjects built by a dynamic fixture are returned unchanged."""
        built = stripe.StripeObject.construct_from({"id": "cus_1"}, "sk_test_fake")
        assert coerce_response(DynamicFixture(lambda params: built), {}) is built

    def test_dynamic_mapping(self):
        """Test dynamic mappings are coerced after evaluation."""
        fixture = DynamicFixture(lambda params: {"id": params["id"]})

        result = coerce_response(fixture, {"id": "sub_9"})
        assert result.id == "sub_9"
        assert result.object == "subscription"

    def test_dynamic_non_mapping_passthrough(self):
        """Test dynamic results that are not mappings are returned unchanged."""
        fixture = DynamicFixture(lambda params: ["a", "b"])
        assert coerce_response(fixture, {}) == ["a", "b"]

    def test_dynamic_error_propagates(self):
        """Test dynamic fixture errors are not wrapped."""

        def boom(params):
            raise ValueError("simulated outage")

        with pytest.raises(ValueError, match="simulated outage"):
            coerce_response(DynamicFixture(boom), {})
