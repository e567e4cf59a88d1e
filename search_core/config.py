# search_core/config.py
from __future__ import annotations

import logging
import os
from typing import Optional

# ---- Tunables (overridable via environment variables) -----------------------
LOG_LEVEL = os.getenv("SEARCH_LOG_LEVEL", "WARNING")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return int(raw)


def trace_memory() -> bool:
    """Whether MeasuredRun should record peak memory with tracemalloc (SEARCH_TRACE_MEMORY)."""
    return _env_flag("SEARCH_TRACE_MEMORY", True)


def max_expansions() -> Optional[int]:
    """Default expansion budget for the algorithm functions (SEARCH_MAX_EXPANSIONS), None if unbounded."""
    return _env_int("SEARCH_MAX_EXPANSIONS")


def configure_logging(level: Optional[str] = None) -> None:
    """Console logging for scripts and benchmarks. The library itself never calls this."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
