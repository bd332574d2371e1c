"""
insertion_sort.py — Insertion Sort
===================================
Generator-based insertion sort.  The sorted prefix starts as [0]: a
one-element prefix is sorted by definition, so index 0 is confirmed
before any comparison happens.

For each later index i:
  1. "Intent" frame comparing i with its left neighbour
  2. While the left value is bigger than the key: compare, mark the
     shift as SWAPPING, copy the value one slot right
  3. Drop the key into the gap and append i to SORTED

Note the shift is a copy, not a true swap; the key is written once at
the end of the inner loop.
"""

from typing import Generator, List, Sequence

from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                    # 0
    "    mark a[0] sorted",                      # 1
    "    for i in 1 .. n-1:",                    # 2
    "        key ← a[i];  j ← i - 1",            # 3
    "        while j ≥ 0 and a[j] > key:",       # 4
    "            a[j+1] ← a[j]",                 # 5
    "            j ← j - 1",                     # 6
    "        a[j+1] ← key",                      # 7
    "        mark a[i] sorted",                  # 8
]


def insertion_sort(values: Sequence[int]) -> List[Step]:
    """Return the full insertion sort trace for `values` (which is not modified)."""
    return list(_insertion_sort(values))


def _insertion_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    if not values:
        return

    sb = StepBuilder(values, sorted_indices=[0])
    a  = sb.array
    n  = len(a)

    yield sb.build(line=1, explanation="A single element is already sorted: index 0 starts the sorted prefix.")

    for i in range(1, n):
        key = a[i]
        j   = i - 1

        yield sb.build(
            comparing=(i, j),
            line=3,
            explanation=f"Pick key a[{i}] = {key} and compare it with the sorted prefix, starting at index {j}.",
        )

        while j >= 0 and a[j] > key:
            yield sb.build(
                comparing=(i, j),
                line=4,
                explanation=f"a[{j}] = {a[j]} > key {key}: it has to move right.",
            )
            yield sb.build(
                swapping=(j, j + 1),
                line=5,
                explanation=f"Shift {a[j]} from index {j} to index {j + 1}.",
            )
            a[j + 1] = a[j]
            j -= 1

            if j >= 0:
                yield sb.build(
                    comparing=(i, j),
                    line=6,
                    explanation=f"Move left: compare the key with a[{j}] = {a[j]}.",
                )

        a[j + 1] = key
        sb.mark_sorted(i)
        yield sb.build(
            line=8,
            explanation=f"Insert key {key} at index {j + 1}. The first {i + 1} elements are now in order.",
        )
