"""
Fake Stripe service proxy.

Stands in for one StripeClient service (client.customers, client.prices, ...)
and funnels every call shape into FakeStripeClient.resolve_fake(key, params).
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .client import FakeStripeClient

ASYNC_SUFFIX = "_async"

_UNSET = object()


def normalize_arguments(args: tuple[Any, ...]) -> dict[str, Any]:
    """Reduce positional call arguments to a single params dict.

    ()                 -> {}
    (params,)          -> params
    (id,)              -> {"id": id}
    (id, params, ...)  -> params with "id" set to id
    """
    if not args:
        return {}

    if len(args) == 1:
        (only,) = args
        if isinstance(only, Mapping):
            return dict(only)
        return {"id": only}

    first, second = args[0], args[1]
    params = dict(second) if isinstance(second, Mapping) else {}
    if first is not None:
        params["id"] = first
    return params


class FakeStripeService:
    """A faked StripeClient service bound to one FakeStripeClient.

    Any attribute is an operation: service.cancel("sub_123") dispatches
    "<service>.cancel", and service.accounts.retrieve(...) dispatches
    "<service>.accounts.retrieve". Attributes ending in "_async" return
    coroutine functions that dispatch the same operation.
    """

    def __init__(self, name: str, client: "FakeStripeClient"):
        self.name = name
        self.client = client

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"

    def call(self, operation: str, *args: Any, params: Any = _UNSET, options: Any = None) -> Any:
        """Dispatch an arbitrary operation on this service.

        params may be passed by keyword as the stripe SDK does; options
        (request options such as idempotency keys) are accepted and ignored.
        """
        if params is not _UNSET:
            args = args + (params if params is not None else {},)
        return self._dispatch(operation, normalize_arguments(args))

    def _dispatch(self, operation: str, params: dict[str, Any]) -> Any:
        return self.client.resolve_fake(f"{self.name}.{operation}", params)

    def _call_with_id(self, operation: str, id: str, params: Mapping[str, Any] | None) -> Any:
        # The positional id routes the call but is not merged into explicit params.
        if not params:
            return self.call(operation, id)
        return self._dispatch(operation, dict(params))

    def all(self, params: Mapping[str, Any] | None = None, options: Any = None) -> Any:
        return self.call("all", params or {})

    def create(self, params: Mapping[str, Any] | None = None, options: Any = None) -> Any:
        return self.call("create", params or {})

    def search(self, params: Mapping[str, Any] | None = None, options: Any = None) -> Any:
        return self.call("search", params or {})

    def retrieve(self, id: str, params: Mapping[str, Any] | None = None, options: Any = None) -> Any:
        return self._call_with_id("retrieve", id, params)

    def update(self, id: str, params: Mapping[str, Any] | None = None, options: Any = None) -> Any:
        return self._call_with_id("update", id, params)

    def delete(self, id: str, params: Mapping[str, Any] | None = None, options: Any = None) -> Any:
        return self._call_with_id("delete", id, params)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)

        if name.endswith(ASYNC_SUFFIX) and len(name) > len(ASYNC_SUFFIX):
            sync_operation = getattr(self, name[: -len(ASYNC_SUFFIX)])

            async def operation_async(*args: Any, **kwargs: Any) -> Any:
                return sync_operation(*args, **kwargs)

            operation_async.__name__ = name
            return operation_async

        return FakeStripeOperation(self, name)


class FakeStripeOperation(FakeStripeService):
    """An operation on a service that is also a nested service.

    Calling it dispatches "<service>.<operation>"; attribute access descends
    into a nested namespace, so client.financial_connections.accounts.retrieve(...)
    dispatches "financial_connections.accounts.retrieve".
    """

    def __init__(self, parent: FakeStripeService, operation: str):
        super().__init__(f"{parent.name}.{operation}", parent.client)
        self.parent = parent
        self.operation = operation

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.parent.call(self.operation, *args, **kwargs)
