"""Trace registry - resolves an environment variable into enabled trace flags."""

import logging
import os
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Iterator, List

from .config import ALL_TOKEN
from .logging.trace import TraceFlag

logger = logging.getLogger('trace-control')


class RegistryState(Enum):
    """Lifecycle of a registry."""
    ACCEPTING = "accepting"
    FINALIZED = "finalized"


@dataclass
class TraceEntry:
    """A registered (name, flag) pair."""
    name: str
    flag: TraceFlag


def split_tokens(value: str) -> List[str]:
    """Split a trace list on commas.

    No trimming and no collapsing: ``""`` gives ``[""]`` and ``"a,,b,"``
    gives ``["a", "", "b", ""]``.
    """
    return value.split(",")


class TraceRegistry:
    """Collects trace flags at start-up and enables them from the environment.

    Usage:
        registry = TraceRegistry()
        registry.register("http", http_trace)
        registry.register("channel", channel_trace)
        registry.initialize("GRPC_TRACE")

    ``initialize`` consumes the registered entries: afterwards the registry is
    empty and finalized. Entries registered later are only resolved by another
    ``initialize`` call.
    """

    def __init__(self):
        self._entries: Deque[TraceEntry] = deque()
        self.state = RegistryState.ACCEPTING

    @property
    def finalized(self) -> bool:
        return self.state is RegistryState.FINALIZED

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TraceEntry]:
        return iter(self._entries)

    def names(self) -> List[str]:
        """Registered names, most recent first."""
        return [entry.name for entry in self._entries]

    def register(self, name: str, flag: TraceFlag):
        """Register a flag under a name and reset it to disabled.

        The same name may be registered more than once; every flag
        registered under it is enabled when the name is listed.
        """
        flag.enabled = False
        self._entries.appendleft(TraceEntry(name=name, flag=flag))

    def parse(self, value: str) -> List[str]:
        """Enable flags named in a comma-separated trace list.

        Returns the tokens that matched no registered name, in order.
        Unmatched tokens are logged and do not stop processing.
        """
        unknown = []
        for token in split_tokens(value):
            if token == ALL_TOKEN:
                for entry in self._entries:
                    entry.flag.enabled = True
                continue

            found = False
            for entry in self._entries:
                if entry.name == token:
                    entry.flag.enabled = True
                    found = True
            if not found:
                logger.error(f"Unknown trace var: '{token}'")
                unknown.append(token)
        return unknown

    def initialize(self, env_var: str) -> List[str]:
        """Resolve ``env_var`` against the registered flags, then clear them.

        A missing variable leaves every flag disabled. The registry is
        emptied either way. Returns the unmatched tokens, already logged.
        """
        unknown = []
        value = os.environ.get(env_var)
        if value is not None:
            unknown = self.parse(value)
        else:
            logger.debug(f"{env_var} not set, {len(self._entries)} trace flags left disabled")

        self._entries.clear()
        self.state = RegistryState.FINALIZED
        return unknown
