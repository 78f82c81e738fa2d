"""Bind calculators to seam identities within one context."""

import logging
from collections.abc import Callable
from typing import Any

from seamstubs.stubs.models import StubKey

logger = logging.getLogger(__name__)


class SeamBinder:
    """Which calculator answers each stubbed seam."""

    def __init__(self):
        self._calculators: dict[StubKey, Callable[..., Any]] = {}

    def bind(
        self, owner: str, name: str, arity: int, calculator: Callable[..., Any]
    ) -> StubKey:
        """Route calls to seam ``owner.name/arity`` to ``calculator``.

        Rebinding a key replaces the previous calculator.
        """
        key = StubKey(owner, name, arity)
        if key in self._calculators:
            logger.debug(f"Rebinding {key.describe()}")
        self._calculators[key] = calculator
        return key

    def calculator_for(self, key: StubKey) -> Callable[..., Any] | None:
        return self._calculators.get(key)

    def is_bound(self, owner: str, name: str) -> bool:
        """True if any arity of ``owner.name`` has a calculator."""
        return any(k.owner == owner and k.name == name for k in self._calculators)

    def clear(self) -> None:
        self._calculators.clear()

    def __len__(self) -> int:
        return len(self._calculators)
