"""Longest strictly increasing subsequence, computed with the patience algorithm."""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Sequence


def longest_increasing_subsequence(seq: Sequence[Any]) -> list[int]:
    """Return the indices of a longest strictly increasing subsequence of ``seq``.

    Elements are placed on "stacks" left to right; only the top of each stack is
    kept, and for every element we remember the top of the stack to its left at
    the time it was placed. Following those back-pointers from the top of the
    right-most stack reconstructs the subsequence.
    """
    if not seq:
        return []

    # top_values[i] == seq[top_indices[i]]; the values form an increasing sequence.
    top_values: list[Any] = []
    top_indices: list[int] = []
    back_pointers: dict[int, int] = {}

    for elem_idx, elem in enumerate(seq):
        stack_idx = bisect_left(top_values, elem)
        if stack_idx == len(top_values):
            top_values.append(elem)
            top_indices.append(elem_idx)
        else:
            top_values[stack_idx] = elem
            top_indices[stack_idx] = elem_idx
        if stack_idx > 0:
            back_pointers[elem_idx] = top_indices[stack_idx - 1]

    result: list[int] = []
    idx: int | None = top_indices[-1]
    while idx is not None:
        result.append(idx)
        idx = back_pointers.get(idx)
    result.reverse()
    return result