"""
bubble_sort.py — Bubble Sort
=============================
Generator-based bubble sort.  Yields a Step at every meaningful event:
  1. Compare an adjacent pair  →  mark both COMPARING
  2. Pair out of order  →  mark both SWAPPING, then show the swapped array
  3. End of a pass  →  the largest unsorted value has bubbled to the end,
     prepend its index to SORTED

Runs exactly n outer passes; the last one trivially confirms index 0.
"""

from typing import Generator, List, Sequence

from algorithms.step import Step, StepBuilder


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                       # 0
    "    n ← len(a)",                            # 1
    "    for i in 0 .. n-1:",                    # 2
    "        for j in 0 .. n-i-2:",              # 3
    "            if a[j] > a[j+1]:",             # 4
    "                swap(a[j], a[j+1])",        # 5
    "        mark a[n-i-1] sorted",              # 6
]


def bubble_sort(values: Sequence[int]) -> List[Step]:
    """Return the full bubble sort trace for `values` (which is not modified)."""
    return list(_bubble_sort(values))


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def _bubble_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    sb = StepBuilder(values)
    a  = sb.array
    n  = len(a)

    for i in range(n):
        for j in range(n - i - 1):
            yield sb.build(
                comparing=(j, j + 1),
                line=4,
                explanation=f"Compare a[{j}] = {a[j]} with its neighbour a[{j + 1}] = {a[j + 1]}.",
            )

            if a[j] > a[j + 1]:
                yield sb.build(
                    swapping=(j, j + 1),
                    line=5,
                    explanation=f"{a[j]} > {a[j + 1]}: out of order, swap them.",
                )
                sb.swap(j, j + 1)
                yield sb.build(line=5, explanation=f"Swapped. {a[j + 1]} moves one slot to the right.")

        last = n - i - 1
        sb.mark_sorted(last, first=True)
        yield sb.build(
            line=6,
            explanation=(
                f"Pass {i + 1} complete: the largest unsorted value ({a[last]}) "
                f"has bubbled up to index {last}."
            ),
        )
