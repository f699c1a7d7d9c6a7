"""Trace flags and flag-gated trace output."""

import sys
from dataclasses import dataclass


@dataclass
class TraceFlag:
    """A named on/off switch for one subsystem's trace output.

    The flag is owned by the subsystem that declares it. A registry only
    keeps a reference and flips ``enabled`` during initialization.
    """
    name: str
    enabled: bool = False

    def __bool__(self) -> bool:
        return self.enabled

    def enable(self):
        self.enabled = True

    def disable(self):
        self.enabled = False

    def log(self, event: str, detail: str = ""):
        """Print a trace line to stderr if the flag is enabled."""
        if not self.enabled:
            return
        print(f"[{self.name}] {event:15s} {detail}".rstrip(), file=sys.stderr, flush=True)
