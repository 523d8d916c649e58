#!/usr/bin/env python3
"""
Runtime configuration.

Each option is read from the environment first and can be overridden on the
command line with --name=value:

- ORTHOSTAR_MOVE_COST     / --cost=N      base orthogonal step cost (10)
- ORTHOSTAR_TURN_PENALTY  / --penalty=N   direction-change penalty (off)
- ORTHOSTAR_LOG_LEVEL     / --log=LEVEL   logging level (WARNING)
"""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

DEFAULT_MOVE_COST = 10          # per orthogonal step
DEFAULT_TURN_PENALTY = 5        # used when a penalty is switched on without a value
LOG_FORMAT = "%(asctime)s - %(levelname)s: %(message)s"

MAP_DIR = Path(__file__).resolve().parent / "maps"  # shipped as package data


def resolve_option(name: str, env: str, default: Optional[str] = None,
                   argv: Optional[List[str]] = None) -> Optional[str]:
    value = os.getenv(env, default)
    for arg in (sys.argv[1:] if argv is None else argv):
        if arg.startswith(f"--{name}="):
            value = arg.split("=", 1)[1]
    return value


def resolve_move_cost(argv: Optional[List[str]] = None, default: int = DEFAULT_MOVE_COST) -> int:
    raw = resolve_option("cost", "ORTHOSTAR_MOVE_COST", str(default), argv)
    cost = int(raw)
    if cost <= 0:
        raise ValueError(f"move cost must be positive, got {cost}")
    return cost


def resolve_turn_penalty(argv: Optional[List[str]] = None, default: Optional[int] = None) -> Optional[int]:
    """None (or 0) means the penalty variant is off."""
    raw = resolve_option("penalty", "ORTHOSTAR_TURN_PENALTY", None if default is None else str(default), argv)
    if raw is None or raw == "":
        return None
    penalty = int(raw)
    if penalty < 0:
        raise ValueError(f"turn penalty must not be negative, got {penalty}")
    return penalty or None


def setup_logging(argv: Optional[List[str]] = None) -> None:
    level = resolve_option("log", "ORTHOSTAR_LOG_LEVEL", "WARNING", argv).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format=LOG_FORMAT)
