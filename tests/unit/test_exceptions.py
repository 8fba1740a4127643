"""Tests for the exception hierarchy."""

from stripe_fake.exceptions import (
    FakeAssertionError,
    FakeNotRegistered,
    InvalidMethodKeyError,
    StripeFakeError,
)


class TestExceptions:
    """Tests for exception details and serialization."""

    def test_fake_not_registered(self):
        """Test the message names the key and suggests a fix."""
        error = FakeNotRegistered("products.retrieve")

        assert isinstance(error, StripeFakeError)
        assert isinstance(error, LookupError)
        assert error.method == "products.retrieve"
        assert "[products.retrieve]" in str(error)
        assert 'client.fake("products.retrieve", {...})' in str(error)

    def test_to_dict(self):
        """Test serialization."""
        error = FakeNotRegistered("customers.create")

        assert error.to_dict() == {
            "error": "FakeNotRegistered",
            "message": error.message,
            "details": {"method": "customers.create"},
        }

    def test_repr(self):
        """Test repr carries message and details."""
        error = InvalidMethodKeyError("bad key", details={"method": "x"})
        assert repr(error) == "InvalidMethodKeyError('bad key', details={'method': 'x'})"

    def test_bases(self):
        """Test builtin bases for callers that catch them."""
        assert issubclass(InvalidMethodKeyError, ValueError)
        assert issubclass(FakeAssertionError, AssertionError)
