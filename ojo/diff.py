"""Line-based diffs using the patience strategy on lines unique to both inputs."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import takewhile
from typing import Hashable, Sequence, Union

from .lis import longest_increasing_subsequence


@dataclass(frozen=True, slots=True)
class New:
    """A line introduced in the second file; ``index`` is its line number there."""

    index: int


@dataclass(frozen=True, slots=True)
class Delete:
    """A line of the first file that was deleted; ``index`` is its line number there."""

    index: int


@dataclass(frozen=True, slots=True)
class Keep:
    """A line present in both files, at ``a_index`` in the first and ``b_index`` in the second."""

    a_index: int
    b_index: int


LineDiff = Union[New, Delete, Keep]


def _prefix_len(a: Sequence, b: Sequence) -> int:
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(a, b)))


def _suffix_len(a: Sequence, b: Sequence) -> int:
    return sum(
        1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(reversed(a), reversed(b)))
    )


def _match_ends(a: Sequence, b: Sequence) -> tuple[int, Sequence, Sequence, int]:
    """Split off the common prefix and suffix, returning (prefix_len, a_mid, b_mid, suffix_len)."""
    pref_len = _prefix_len(a, b)
    suff_len = _suffix_len(a[pref_len:], b[pref_len:])
    a_mid = a[pref_len : len(a) - suff_len]
    b_mid = b[pref_len : len(b) - suff_len]
    return pref_len, a_mid, b_mid, suff_len


def _unique_lines(lines: Sequence[Hashable]) -> dict[Hashable, int]:
    """Map every line that occurs exactly once to its index."""
    first_index: dict[Hashable, int] = {}
    counts: dict[Hashable, int] = {}
    for idx, line in enumerate(lines):
        first_index.setdefault(line, idx)
        counts[line] = counts.get(line, 0) + 1
    return {line: first_index[line] for line, count in counts.items() if count == 1}


def diff_ends(a: Sequence, a_offset: int, b: Sequence, b_offset: int) -> list[LineDiff]:
    """Diff by matching only the common prefix and suffix; everything between changes.

    The offsets are added to the line numbers, so that ``a`` and ``b`` may be
    slices of larger files.
    """
    pref_len, a_mid, b_mid, suff_len = _match_ends(a, b)
    result: list[LineDiff] = [Keep(a_offset + i, b_offset + i) for i in range(pref_len)]
    result.extend(Delete(a_offset + pref_len + i) for i in range(len(a_mid)))
    result.extend(New(b_offset + pref_len + i) for i in range(len(b_mid)))
    result.extend(
        Keep(a_offset + pref_len + len(a_mid) + i, b_offset + pref_len + len(b_mid) + i)
        for i in range(suff_len)
    )
    return result


def diff(a: Sequence[Hashable], b: Sequence[Hashable]) -> list[LineDiff]:
    """Compute a diff turning ``a`` into ``b``."""
    a = list(a)
    b = list(b)
    pref_len, a_mid, b_mid, suff_len = _match_ends(a, b)
    a_unique = _unique_lines(a_mid)
    b_unique = _unique_lines(b_mid)

    # Pairs (index in b, index in a) of lines unique to both files, sorted by
    # the index in a; an increasing subsequence then follows b's order too.
    both_unique = sorted(
        ((b_unique[line], a_idx) for line, a_idx in a_unique.items() if line in b_unique),
        key=lambda pair: pair[1],
    )

    result: list[LineDiff] = [Keep(i, i) for i in range(pref_len)]

    prev_a = prev_b = 0
    for i in longest_increasing_subsequence(both_unique):
        next_b, next_a = both_unique[i]
        result.extend(
            diff_ends(
                a_mid[prev_a:next_a], pref_len + prev_a, b_mid[prev_b:next_b], pref_len + prev_b
            )
        )
        prev_a, prev_b = next_a, next_b

    result.extend(
        diff_ends(a_mid[prev_a:], pref_len + prev_a, b_mid[prev_b:], pref_len + prev_b)
    )
    result.extend(
        Keep(len(a) - suff_len + i, len(b) - suff_len + i) for i in range(suff_len)
    )
    return result