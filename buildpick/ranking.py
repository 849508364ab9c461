"""Similarity ranking of discovered executables."""

from __future__ import annotations

import os
from typing import Iterable, List

from .models import ExecutableCandidate


def edit_distance(left: str, right: str) -> int:
    """Levenshtein distance with unit cost for insert, delete and substitute."""
    if left == right:
        return 0
    if not left:
        return len(right)
    if not right:
        return len(left)

    previous = list(range(len(right) + 1))
    for i, left_char in enumerate(left, start=1):
        current = [i]
        for j, right_char in enumerate(right, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (left_char != right_char),
                )
            )
        previous = current
    return previous[-1]


def rank_candidates(reference: str, paths: Iterable[str]) -> List[ExecutableCandidate]:
    """Pair each path with the distance of its basename to ``reference``.

    The result is sorted by distance; ``sorted`` is stable, so equally
    distant paths keep their discovery order.
    """
    candidates = [
        ExecutableCandidate(path=path, distance=edit_distance(reference, os.path.basename(path)))
        for path in paths
    ]
    return sorted(candidates, key=lambda candidate: candidate.distance)


__all__ = ["edit_distance", "rank_candidates"]
