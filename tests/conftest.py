from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from fenwick_tree import FenwickTree
from fenwick_tree.common.constants import RNG_SEEDS, seed_everywhere


TEST_SEED = RNG_SEEDS.get("tests", 1337)
seed_everywhere(TEST_SEED)

settings.register_profile(
    "ci",
    max_examples=80,
    deadline=None,
    derandomize=True,
    print_blob=True,
    suppress_health_check=(
        HealthCheck.filter_too_much,
        HealthCheck.too_slow,
    ),
)
settings.load_profile("ci")


def pytest_configure(config: pytest.Config) -> None:  # pragma: no cover
    config.addinivalue_line("markers", "slow: mark test as slow")


@pytest.fixture(scope="session")
def tol() -> float:
    return 1e-9


@pytest.fixture
def scenario_tree():
    """``with_len(5)`` with ``add(i, i)`` for every ``i``."""
    tree = FenwickTree.with_len(5)
    for i in range(5):
        tree.add(i, i)
    return tree
