"""
Call recorder.

Keeps an ordered log of the params each faked method was called with.
"""

from collections.abc import Mapping
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


class CallRecorder:
    """Per-client log of method key -> params of each call, in call order."""

    def __init__(self) -> None:
        self._calls: dict[str, list[dict[str, Any]]] = {}

    def record(self, method: str, params: Mapping[str, Any]) -> None:
        """Append a copy of params to the log for method."""
        calls = self._calls.setdefault(method, [])
        calls.append(dict(params))
        logger.debug("fake_call_recorded", method=method, count=len(calls))

    def calls(self, method: str) -> list[dict[str, Any]]:
        """All recorded params for method, oldest first."""
        return [dict(params) for params in self._calls.get(method, [])]

    def count(self, method: str) -> int:
        return len(self._calls.get(method, []))

    def was_called(self, method: str) -> bool:
        return self.count(method) > 0

    def get(self, method: str, index: int = 0) -> dict[str, Any] | None:
        """Params of the index-th call to method, or None if there is no such call."""
        calls = self._calls.get(method, [])
        if index < 0 or index >= len(calls):
            return None
        return dict(calls[index])

    def all(self) -> dict[str, list[dict[str, Any]]]:
        return {method: [dict(params) for params in calls] for method, calls in self._calls.items()}

    def clear(self) -> None:
        self._calls.clear()
        logger.debug("fake_recorded_cleared")

    def __len__(self) -> int:
        return sum(len(calls) for calls in self._calls.values())
