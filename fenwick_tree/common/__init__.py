from fenwick_tree.common.constants import (
    DEFAULT_SEED,
    DEFAULT_ZERO,
    RNG_SEEDS,
    seed_everywhere,
)
from fenwick_tree.common.verbose import log

__all__ = [
    "DEFAULT_SEED",
    "DEFAULT_ZERO",
    "RNG_SEEDS",
    "seed_everywhere",
    "log",
]
