from __future__ import annotations

import os
import random
from typing import Dict

import numpy as np


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


# Trace output is off unless FENWICK_VERBOSE is set; flip at runtime via
# ``fenwick_tree.common.constants.VERBOSE = True``.
VERBOSE: bool = _env_flag("FENWICK_VERBOSE")

# Additive identity used when a tree is built without an explicit ``zero``.
DEFAULT_ZERO: int = 0

DEFAULT_SEED: int = 1337

RNG_SEEDS: Dict[str, int] = {
    "tests": DEFAULT_SEED,
}


def seed_everywhere(seed: int) -> None:
    """Seed all supported RNG backends deterministically."""
    random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    np.random.seed(seed)


__all__ = [
    "VERBOSE",
    "DEFAULT_ZERO",
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
]
