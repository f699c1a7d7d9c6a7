"""CLI commands for Trace Control."""

import argparse
import logging
import os
from typing import Dict, List, Optional

from pydantic import BaseModel

from .__version__ import __version__
from .config import LOG_LEVEL, TRACE_ENV_VAR
from .logging import TraceFlag
from .registry import TraceRegistry


class TraceReport(BaseModel):
    env_var: str
    value: Optional[str] = None
    flags: Dict[str, bool] = {}
    unknown: List[str] = []


def resolve(env_var: str, names: List[str]) -> TraceReport:
    """Register one flag per name and resolve them against ``env_var``."""
    registry = TraceRegistry()
    flags = {}
    for name in names:
        flag = flags.setdefault(name, TraceFlag(name))
        registry.register(name, flag)

    unknown = registry.initialize(env_var)

    return TraceReport(
        env_var=env_var,
        value=os.environ.get(env_var),
        flags={name: flag.enabled for name, flag in flags.items()},
        unknown=unknown,
    )


def show_version():
    """Show version information."""
    print(f"trace-control {__version__}")


def configure_logging(level: str = LOG_LEVEL):
    numeric = logging.getLevelName(level)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format="%(name)s: %(levelname)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Trace Control - show which trace flags an environment variable enables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
The variable holds a comma-separated list of flag names, or "all".
Names are case-sensitive and are not trimmed.

Examples:
  GRPC_TRACE=http,channel trace-control http channel tcp
  GRPC_TRACE=all trace-control --json http channel
  MY_TRACE=api trace-control --env MY_TRACE api db

Default variable: {TRACE_ENV_VAR} (override with TRACE_CONTROL_ENV_VAR)
"""
    )
    parser.add_argument("names", nargs="*", help="Flag names to register")
    parser.add_argument("--env", default=TRACE_ENV_VAR, help=f"Variable to read (default: {TRACE_ENV_VAR})")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--version", action="store_true", help="Show version")
    args = parser.parse_args(argv)

    if args.version:
        show_version()
        return 0

    configure_logging()
    report = resolve(args.env, args.names)

    if args.json:
        print(report.model_dump_json(indent=2))
        return 0

    shown = report.value if report.value is not None else "(unset)"
    print(f"{report.env_var}={shown}")
    for name, enabled in report.flags.items():
        mark = "✓" if enabled else " "
        print(f"  {mark} {name}")
    if report.unknown:
        print(f"Unknown: {', '.join(repr(t) for t in report.unknown)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
