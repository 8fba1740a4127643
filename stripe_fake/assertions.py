"""
Assertion helpers over a FakeStripeClient's recorded calls.

Failures raise FakeAssertionError (an AssertionError), so pytest reports
them as ordinary assertion failures.
"""

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from .exceptions import FakeAssertionError
from .methods import method_key

if TYPE_CHECKING:
    from .client import FakeStripeClient


def _describe(calls: list[dict[str, Any]]) -> str:
    if not calls:
        return "no calls were recorded"
    lines = [f"  [{index}] {params!r}" for index, params in enumerate(calls)]
    return "recorded calls:\n" + "\n".join(lines)


def assert_called(
    client: "FakeStripeClient",
    method: str | Enum,
    times: int | None = None,
    params: Mapping[str, Any] | None = None,
) -> None:
    """Assert method was called, optionally exactly `times` times and/or with `params`."""
    key = method_key(method)
    calls = client.calls(key)

    if not calls:
        raise FakeAssertionError(
            f"Expected Stripe method [{key}] to be called, but it was not.",
            details={"method": key, "recorded": sorted(client.recorded())},
        )

    if times is not None:
        assert_called_times(client, key, times)

    if params is not None:
        assert_called_with(client, key, params)


def assert_called_times(client: "FakeStripeClient", method: str | Enum, times: int) -> None:
    key = method_key(method)
    calls = client.calls(key)
    if len(calls) != times:
        raise FakeAssertionError(
            f"Expected Stripe method [{key}] to be called {times} time(s), "
            f"but it was called {len(calls)} time(s); {_describe(calls)}",
            details={"method": key, "expected": times, "actual": len(calls)},
        )


def assert_called_with(
    client: "FakeStripeClient",
    method: str | Enum,
    params: Mapping[str, Any],
    index: int | None = None,
) -> None:
    """Assert a call to method had exactly `params`.

    Without an index any recorded call may match; with one, only that call.
    """
    key = method_key(method)
    expected = dict(params)

    if index is not None:
        actual = client.get_call(key, index)
        if actual != expected:
            raise FakeAssertionError(
                f"Expected call [{index}] to Stripe method [{key}] to have params "
                f"{expected!r}, got {actual!r}",
                details={"method": key, "index": index, "expected": expected, "actual": actual},
            )
        return

    calls = client.calls(key)
    if expected not in calls:
        raise FakeAssertionError(
            f"Expected Stripe method [{key}] to be called with {expected!r}; {_describe(calls)}",
            details={"method": key, "expected": expected, "calls": calls},
        )


def assert_not_called(client: "FakeStripeClient", method: str | Enum) -> None:
    key = method_key(method)
    calls = client.calls(key)
    if calls:
        raise FakeAssertionError(
            f"Expected Stripe method [{key}] not to be called, "
            f"but it was called {len(calls)} time(s); {_describe(calls)}",
            details={"method": key, "actual": len(calls)},
        )


def assert_nothing_called(client: "FakeStripeClient") -> None:
    recorded = {method: calls for method, calls in client.recorded().items() if calls}
    if recorded:
        raise FakeAssertionError(
            f"Expected no Stripe calls, but these were made: {sorted(recorded)}",
            details={"recorded": recorded},
        )
