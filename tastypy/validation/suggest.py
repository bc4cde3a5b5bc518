"""Fuzzy "did you mean" matching."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_MAX_DISTANCE = 3


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance with unit-cost insert, delete and substitute."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def find_similar(unknown: str, candidates: Iterable[str], max_distance: int = DEFAULT_MAX_DISTANCE) -> str | None:
    """Closest candidate within `max_distance`, compared case-insensitively.

    Candidates whose length differs by more than `max_distance` are skipped.
    The first candidate wins a tie.
    """
    needle = unknown.lower()
    best: str | None = None
    best_distance = max_distance + 1
    for candidate in candidates:
        if abs(len(candidate) - len(unknown)) > max_distance:
            continue
        distance = levenshtein_distance(needle, candidate.lower())
        if distance < best_distance:
            best = candidate
            best_distance = distance
    return best
