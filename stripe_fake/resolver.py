"""
Fixture table and resolution.

Lookup order for a method key:
    1. exact key
    2. first wildcard key (in registration order) whose pattern matches
    3. FakeNotRegistered
"""

import re
from collections.abc import Iterator, Mapping
from enum import Enum
from functools import lru_cache
from typing import Any

import structlog

from .exceptions import FakeNotRegistered
from .fixtures import Fixture, as_fixture
from .methods import method_key, split_method_key

logger = structlog.get_logger(__name__)

WILDCARD = "*"


@lru_cache(maxsize=256)
def wildcard_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a wildcard key; "*" matches any run of characters, the rest is literal."""
    escaped = re.escape(pattern).replace(re.escape(WILDCARD), ".*")
    return re.compile(f"^{escaped}$")


def is_wildcard(key: str) -> bool:
    return WILDCARD in key


class FixtureTable:
    """Registered fixtures keyed by plain method key strings."""

    def __init__(self, fixtures: Mapping[str | Enum, Any] | None = None) -> None:
        self._fixtures: dict[str, Fixture] = {}
        if fixtures:
            self.update(fixtures)

    def set(self, method: str | Enum, value: Any) -> str:
        """Register (or overwrite) the fixture for a method key. Returns the key."""
        key = method_key(method)
        if not is_wildcard(key):
            split_method_key(key)
        self._fixtures[key] = as_fixture(value)
        logger.debug("fake_registered", method=key, wildcard=is_wildcard(key))
        return key

    def update(self, fixtures: Mapping[str | Enum, Any]) -> None:
        for method, value in fixtures.items():
            self.set(method, value)

    def resolve(self, method: str) -> Fixture:
        """Find the fixture for method, raising FakeNotRegistered if none matches."""
        fixture = self._fixtures.get(method)
        if fixture is not None:
            logger.debug("fake_resolved", method=method, match="exact")
            return fixture

        for pattern, candidate in self._fixtures.items():
            if is_wildcard(pattern) and wildcard_to_regex(pattern).match(method):
                logger.debug("fake_resolved", method=method, match="wildcard", pattern=pattern)
                return candidate

        logger.warning("fake_not_registered", method=method)
        raise FakeNotRegistered(method)

    def keys(self) -> list[str]:
        return list(self._fixtures)

    def __contains__(self, method: object) -> bool:
        if isinstance(method, Enum):
            method = method.value
        return method in self._fixtures

    def __len__(self) -> int:
        return len(self._fixtures)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._fixtures))
