from __future__ import annotations

from fenwick_tree.common import constants


def log(*args, **kwargs) -> None:  # pragma: no cover
    if constants.VERBOSE:
        print("[fenwick_tree]", *args, **kwargs)


__all__ = ["log"]
