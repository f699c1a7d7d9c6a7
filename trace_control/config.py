"""Configuration for Trace Control."""

import os

# Environment variable holding the comma-separated trace list
TRACE_ENV_VAR = os.getenv("TRACE_CONTROL_ENV_VAR", "GRPC_TRACE")

# Sentinel token that enables every registered flag
ALL_TOKEN = "all"

# Logging
LOG_LEVEL = os.getenv("TRACE_CONTROL_LOG_LEVEL", "WARNING").upper()
