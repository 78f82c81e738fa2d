"""Per-context storage of registered stubs."""

import logging
from typing import Any

from seamstubs.errors import NoMatchingStub, NoStubsRegistered, StreamExhausted
from seamstubs.stubs.matcher import matches, same_specs
from seamstubs.stubs.models import Mode, StubEntry, StubKey

logger = logging.getLogger(__name__)


class StubStore:
    """Stub entries, grouped by seam key, in registration order."""

    def __init__(self):
        self._stubs: dict[StubKey, list[StubEntry]] = {}

    def add_stub(self, key: StubKey, arg_specs, mode: Mode, payload: Any) -> None:
        """Register a stub for a seam.

        An entry whose argument specs are the same as ``arg_specs`` (see
        ``same_spec``) is replaced where it stands, so it keeps its place in
        the lookup order. Otherwise the new entry goes to the end.

        Args:
            key: The seam the stub answers for
            arg_specs: One literal or predicate per parameter position
            mode: Mode.RETURN or Mode.STREAM
            payload: The value to return, or the values to stream
        """
        arg_specs = tuple(arg_specs)
        if mode is Mode.STREAM:
            payload = list(payload)
            if not payload:
                logger.warning(
                    f"Empty stream registered for {key.describe()}; "
                    "the first matching call will fail"
                )
        entry = StubEntry(arg_specs=arg_specs, mode=mode, payload=payload)

        entries = self._stubs.setdefault(key, [])
        for index, old in enumerate(entries):
            if same_specs(old.arg_specs, arg_specs):
                entries[index] = entry
                logger.debug(f"Replaced stub #{index} for {key.describe()}")
                return

        entries.append(entry)
        logger.debug(
            f"Added {mode.value} stub #{len(entries) - 1} for {key.describe()}"
        )

    def consume_stub(self, key: StubKey, actual_args) -> Any:
        """Produce the stubbed value for a concrete call.

        Entries are tried oldest first; the first match wins.

        Args:
            key: The seam that was called
            actual_args: The positional arguments of the call

        Returns:
            The payload of a RETURN entry, or the next value of a STREAM entry

        Raises:
            NoStubsRegistered: If nothing was ever registered for the key
            NoMatchingStub: If no entry matches the arguments
            StreamExhausted: If the matching stream has no values left
        """
        actual_args = list(actual_args)
        entries = self._stubs.get(key)
        if entries is None:
            raise NoStubsRegistered(key)

        for entry in entries:
            if not matches(entry.arg_specs, actual_args):
                continue
            if entry.mode is Mode.RETURN:
                logger.debug(f"Stubbed return for {key.describe_call(actual_args)}")
                return entry.payload
            if not entry.payload:
                raise StreamExhausted(key, actual_args)
            value = entry.payload[0]
            entry.payload = entry.payload[1:]
            logger.debug(
                f"Streamed value for {key.describe_call(actual_args)}, "
                f"{len(entry.payload)} left"
            )
            return value

        raise NoMatchingStub(key, actual_args)

    def entries(self, key: StubKey) -> list[StubEntry]:
        """Copy of the entries registered for ``key``, in lookup order."""
        return list(self._stubs.get(key, []))

    def keys(self) -> list[StubKey]:
        return list(self._stubs)

    def clear(self) -> None:
        self._stubs.clear()

    def __contains__(self, key) -> bool:
        return key in self._stubs

    def __len__(self) -> int:
        return len(self._stubs)


def add_stub(key: StubKey, arg_specs, mode: Mode, payload: Any) -> None:
    """Register a stub in the current context's store."""
    from seamstubs.context import current_context

    current_context().store.add_stub(key, arg_specs, mode, payload)


def consume_stub(key: StubKey, actual_args) -> Any:
    """Look up a stubbed value in the current context's store."""
    from seamstubs.context import current_context

    return current_context().store.consume_stub(key, actual_args)
