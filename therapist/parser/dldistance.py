# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Damerau-Levenshtein distance, used to suggest a command when the user mistypes one.

Insertions, deletions, substitutions and transpositions of adjacent units each cost
one. Strings can be compared code point by code point (`dldistance`) or byte by byte
(`damerau_levenshtein_distance_bytes`); the two differ for multi-byte text:

    >>> dldistance("αlpha", "alpha")
    1
    >>> damerau_levenshtein_distance_bytes("αlpha", "alpha")
    2
"""
from __future__ import annotations

from typing import Hashable, Sequence


def damerau_levenshtein_distance(
    a: Sequence[Hashable], b: Sequence[Hashable]
) -> int:
    """
    Compute the Damerau-Levenshtein distance between two sequences.

    Uses the full dynamic programming table, O(len(a) * len(b)) in time and space.
    The table carries an extra "infinite" row and column so that a transposition
    with a unit that has not been seen yet is never the cheapest option.

    Args:
        a: First sequence of comparable units.
        b: Second sequence of comparable units.

    Returns:
        int: The (non-negative) edit distance.
    """
    infinite = len(a) + len(b)

    # (len(a) + 2) x (len(b) + 2)
    matrix = [[infinite] * (len(b) + 2), [infinite, *range(len(b) + 1)]]
    for row in range(1, len(a) + 1):
        matrix.append([infinite, row] + [0] * len(b))

    # Last row in which each unit of `a` was seen; 0 is the infinite row
    last_row: dict[Hashable, int] = {}

    for row in range(1, len(a) + 1):
        unit_a = a[row - 1]
        last_match_col = 0

        for col in range(1, len(b) + 1):
            unit_b = b[col - 1]
            last_matching_row = last_row.get(unit_b, 0)
            cost = 0 if unit_a == unit_b else 1

            matrix[row + 1][col + 1] = min(
                matrix[row][col] + cost,
                matrix[row + 1][col] + 1,
                matrix[row][col + 1] + 1,
                matrix[last_matching_row][last_match_col]
                + (row - last_matching_row - 1)
                + 1
                + (col - last_match_col - 1),
            )

            if cost == 0:
                last_match_col = col

        last_row[unit_a] = row

    return matrix[len(a) + 1][len(b) + 1]


def damerau_levenshtein_distance_bytes(
    a: str, b: str, ignore_case: bool = True
) -> int:
    """Distance between two strings compared as UTF-8 bytes."""
    if ignore_case:
        a, b = a.lower(), b.lower()
    return damerau_levenshtein_distance(a.encode("utf-8"), b.encode("utf-8"))


def dldistance(a: str, b: str, ignore_case: bool = True) -> int:
    """Distance between two strings compared code point by code point."""
    if ignore_case:
        a, b = a.lower(), b.lower()
    return damerau_levenshtein_distance(a, b)


def closest(word: str, candidates: Sequence[str]) -> tuple[str | None, int]:
    """
    Return the candidate nearest to `word` and its distance.

    The candidate is None when there are no candidates or when several are
    equally near.
    """
    best: str | None = None
    best_distance = -1
    tied = False
    for candidate in candidates:
        distance = dldistance(word, candidate)
        if best_distance < 0 or distance < best_distance:
            best, best_distance, tied = candidate, distance, False
        elif distance == best_distance:
            tied = True
    return (None if tied else best), best_distance
