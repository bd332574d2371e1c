"""
selection_sort.py — Selection Sort
===================================
Generator-based selection sort.  Yields a Step at:
  1. Each (current minimum, candidate) comparison
  2. A new minimum found  →  single-index COMPARING highlight
  3. Minimum differs from i  →  SWAPPING, then the swapped array
  4. Position i confirmed  →  append to SORTED

The last index is sorted by elimination and gets one closing frame.
"""

from typing import Generator, List, Sequence

from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                    # 0
    "    for i in 0 .. n-2:",                    # 1
    "        min ← i",                           # 2
    "        for j in i+1 .. n-1:",              # 3
    "            if a[j] < a[min]: min ← j",     # 4
    "        if min ≠ i: swap(a[i], a[min])",    # 5
    "        mark a[i] sorted",                  # 6
    "    mark a[n-1] sorted",                    # 7
]


def selection_sort(values: Sequence[int]) -> List[Step]:
    """Return the full selection sort trace for `values` (which is not modified)."""
    return list(_selection_sort(values))


def _selection_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    if not values:
        return

    sb = StepBuilder(values)
    a  = sb.array
    n  = len(a)

    for i in range(n - 1):
        min_idx = i

        for j in range(i + 1, n):
            yield sb.build(
                comparing=(min_idx, j),
                line=4,
                explanation=f"Compare current minimum a[{min_idx}] = {a[min_idx]} with a[{j}] = {a[j]}.",
            )

            if a[j] < a[min_idx]:
                min_idx = j
                yield sb.build(
                    comparing=(min_idx,),
                    line=4,
                    explanation=f"New minimum found: {a[min_idx]} at index {min_idx}.",
                )

        if min_idx != i:
            yield sb.build(
                swapping=(i, min_idx),
                line=5,
                explanation=f"Swap the minimum {a[min_idx]} into position {i}.",
            )
            sb.swap(i, min_idx)
            yield sb.build(line=5, explanation=f"Swapped. {a[i]} now sits at index {i}.")

        sb.mark_sorted(i)
        yield sb.build(line=6, explanation=f"Index {i} holds the {_ordinal(i + 1)} smallest value: sorted.")

    sb.mark_sorted(n - 1)
    yield sb.build(line=7, explanation="Only one element is left, so it is already in place.")


def _ordinal(k: int) -> str:
    if 10 <= k % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(k % 10, "th")
    return f"{k}{suffix}"
